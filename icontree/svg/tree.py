"""Element → tree conversion.

Turns parsed lxml elements into TreeNode values, recursively:

    <g><path d="M0 0"/></g>  →  TreeNode(tag="g", child=(TreeNode(tag="path", attr={"d": "M0 0"}),))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from xml.parsers import expat

from lxml import etree

from icontree.models.tree_node import TreeNode
from icontree.svg.attributes import normalize_attributes

logger = logging.getLogger(__name__)

XML_NS = "http://www.w3.org/XML/1998/namespace"

# Embedded CSS has no meaning in a structured icon tree
SKIP_TAGS = frozenset({"style"})

AttributeOrder = Mapping[etree._Element, Sequence[str]]


def qualified_name(clark: str, nsmap: dict[str | None, str]) -> str:
    """Turn ``{uri}local`` back into its written ``prefix:local`` form."""
    if not clark.startswith("{"):
        return clark
    uri, local = clark[1:].split("}", 1)
    if uri == XML_NS:
        return f"xml:{local}"
    for prefix, ns in nsmap.items():
        if ns == uri and prefix:
            return f"{prefix}:{local}"
    return local


def element_tag(element: etree._Element) -> str:
    """Written tag name; default-namespace elements come back unprefixed."""
    local = etree.QName(element).localname
    return f"{element.prefix}:{local}" if element.prefix else local


def written_attribute_order(data: bytes, root: etree._Element) -> dict[etree._Element, list[str]]:
    """Attribute names per element exactly as written, namespace declarations in place.

    lxml keeps ``xmlns`` declarations apart from ordinary attributes, so the
    written order is read from a non-namespace-aware expat pass over the same
    bytes. Returns an empty mapping when the two parses disagree on elements.
    """
    names: list[list[str]] = []
    parser = expat.ParserCreate(encoding="utf-8")
    parser.ordered_attributes = True
    parser.StartElementHandler = lambda tag, attrs: names.append(attrs[0::2])
    try:
        parser.Parse(data, True)
    except expat.ExpatError as e:
        logger.debug("No written attribute order: %s", e)
        return {}

    elements = [e for e in root.iter() if isinstance(e.tag, str)]
    if len(elements) != len(names):
        logger.debug("No written attribute order: %d elements vs %d start tags", len(elements), len(names))
        return {}
    return dict(zip(elements, names))


def raw_attributes(element: etree._Element, order: Sequence[str] | None = None) -> dict[str, str]:
    """Attributes as written, namespace declarations included (``xmlns``, ``xmlns:xlink``).

    With ``order`` (names as written) the result follows it; otherwise
    declarations come first.
    """
    attrs: dict[str, str] = {}

    parent = element.getparent()
    inherited = parent.nsmap if parent is not None else {}
    for prefix, uri in element.nsmap.items():
        if inherited.get(prefix) != uri:
            attrs["xmlns" if prefix is None else f"xmlns:{prefix}"] = uri

    for name, value in element.attrib.items():
        attrs[qualified_name(name, element.nsmap)] = value

    if order:
        ordered = {name: attrs[name] for name in order if name in attrs}
        ordered.update(attrs)
        return ordered
    return attrs


def elements_to_tree(
    elements: Iterable[etree._Element],
    multi_color: bool = False,
    attr_order: AttributeOrder | None = None,
) -> list[TreeNode]:
    """Convert sibling elements into TreeNodes, preserving document order.

    Comments and processing instructions (no string tag) and ``<style>`` are
    skipped along with their subtrees.
    """
    attr_order = attr_order or {}
    nodes: list[TreeNode] = []
    for element in elements:
        if not isinstance(element.tag, str):
            continue
        tag = element_tag(element)
        if tag in SKIP_TAGS:
            continue

        children = elements_to_tree(element, multi_color, attr_order) if len(element) else []
        attrs = raw_attributes(element, attr_order.get(element))
        nodes.append(
            TreeNode(
                tag=tag,
                attr=normalize_attributes(attrs, tag, multi_color),
                child=tuple(children) or None,
            )
        )
    return nodes
