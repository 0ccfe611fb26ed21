"""icontree — SVG icon sets converted into structured, serializable icon trees."""

from icontree.models.icon_set import IconContent, IconSet
from icontree.models.tree_node import TreeNode
from icontree.svg.converter import (
    IconConversionError,
    MissingSvgRootError,
    SvgParseError,
    convert_icon,
)

__all__ = [
    "IconContent",
    "IconSet",
    "TreeNode",
    "convert_icon",
    "IconConversionError",
    "SvgParseError",
    "MissingSvgRootError",
]
