"""SVG document → icon tree.

Parses one SVG file with lxml and returns its root ``<svg>`` as a TreeNode.
"""

from __future__ import annotations

import logging

from lxml import etree

from icontree.models.tree_node import TreeNode
from icontree.svg.tree import element_tag, elements_to_tree, written_attribute_order

logger = logging.getLogger(__name__)


class IconConversionError(ValueError):
    """An SVG file could not be turned into an icon tree."""


class SvgParseError(IconConversionError):
    """The input is not well-formed XML."""


class MissingSvgRootError(IconConversionError):
    """The document element is not ``<svg>``."""


def _parser() -> etree.XMLParser:
    # Text is already decoded: the bytes handed over are always UTF-8, whatever
    # the XML declaration says. No entity expansion or network access.
    return etree.XMLParser(encoding="utf-8", resolve_entities=False, no_network=True, huge_tree=False)


def parse_svg_root(svg_text: str) -> etree._Element:
    """Parse ``svg_text`` and return its ``<svg>`` document element."""
    return _parse(svg_text.encode("utf-8"))


def _parse(data: bytes) -> etree._Element:
    try:
        root = etree.fromstring(data, _parser())
    except etree.XMLSyntaxError as e:
        raise SvgParseError(f"Malformed SVG: {e}") from e

    tag = element_tag(root)
    if tag != "svg":
        raise MissingSvgRootError(f"Expected <svg> document element, found <{tag}>")
    return root


def convert_icon(svg_text: str, multi_color: bool = False) -> TreeNode:
    """Convert one SVG document into exactly one TreeNode (tag ``svg``)."""
    data = svg_text.encode("utf-8")
    root = _parse(data)
    tree = elements_to_tree([root], multi_color, written_attribute_order(data, root))
    logger.debug("Converted <svg> with %d top-level children", len(tree[0].child or ()))
    return tree[0]
