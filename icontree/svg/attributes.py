"""Attribute normalization — raw SVG attributes → canonical camelCase mapping."""

from __future__ import annotations

from collections.abc import Mapping

from icontree.utils.naming import camel_case

# Styling classes only mean something next to the source stylesheet
DROP_ATTRS = frozenset({"class"})

# Container / sizing metadata, dropped on the root <svg> only
ROOT_DROP_ATTRS = frozenset({"xmlns", "xmlns:xlink", "xml:space", "width", "height"})


def normalize_attributes(
    attrs: Mapping[str, str] | None,
    tag: str,
    multi_color: bool = False,
) -> dict[str, str] | None:
    """Filter and rename one element's attributes.

    Keys are written-form names (``fill-opacity``, ``xlink:href``); the result
    uses camelCase keys in source order. ``fill`` survives only when it is
    ``"none"`` or the icon set is multi-color. Returns None when nothing is left.
    """
    if not attrs:
        return None

    dropped = DROP_ATTRS | ROOT_DROP_ATTRS if tag == "svg" else DROP_ATTRS

    result: dict[str, str] = {}
    for name, value in attrs.items():
        if name in dropped:
            continue
        key = camel_case(name)
        if key == "fill" and not (value == "none" or multi_color):
            continue
        result[key] = value

    return result or None
