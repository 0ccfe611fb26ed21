"""Tests for SVG document → icon tree conversion."""

from __future__ import annotations

import json

import pytest

from tests.conftest import (
    FEATHER_SVG,
    FILL_NONE_SVG,
    MALFORMED_SVG,
    MULTI_COLOR_SVG,
    NESTED_NS_SVG,
    NOT_SVG,
    SIMPLE_SVG,
    XLINK_SVG,
)

from icontree.models.tree_node import TreeNode
from icontree.svg.converter import IconConversionError, MissingSvgRootError, SvgParseError, convert_icon


def test_simple_single_color():
    tree = convert_icon(SIMPLE_SVG, multi_color=False)
    assert tree == TreeNode(tag="svg", child=(TreeNode(tag="path", attr={"d": "M1 2"}),))
    assert tree.attr is None
    assert tree.child[0].child is None


def test_simple_multi_color():
    tree = convert_icon(SIMPLE_SVG, multi_color=True)
    assert tree.child[0].attr == {"fill": "#fff", "d": "M1 2"}


def test_fill_none_kept_in_single_color():
    tree = convert_icon(FILL_NONE_SVG)
    assert tree.child[0].tag == "g"
    assert tree.child[0].child[0].attr == {"fill": "none", "d": "M0 0"}


def test_json_shape():
    data = json.loads(convert_icon(SIMPLE_SVG).to_json())
    assert data == {"tag": "svg", "child": [{"tag": "path", "attr": {"d": "M1 2"}}]}


def test_feather_icon():
    tree = convert_icon(FEATHER_SVG)
    assert tree.tag == "svg"
    assert tree.attr == {
        "viewBox": "0 0 24 24",
        "fill": "none",
        "stroke": "currentColor",
        "strokeWidth": "2",
        "strokeLinecap": "round",
        "strokeLinejoin": "round",
    }
    assert [c.tag for c in tree.child] == ["circle", "path", "line", "line"]
    assert tree.child[2].attr == {"x1": "9", "y1": "9", "x2": "9.01", "y2": "9"}


def test_namespaced_document():
    tree = convert_icon(XLINK_SVG)
    assert tree.attr == {"viewBox": "0 0 48 48"}
    assert [c.tag for c in tree.child] == ["defs", "use", "rect"]
    assert tree.child[1].attr == {"xlinkHref": "#p", "fillOpacity": ".5"}
    # Sizing is only stripped on the root
    assert tree.child[2].attr == {"width": "10", "height": "12", "x": "2", "y": "3"}


def test_nested_namespace_declarations_kept():
    tree = convert_icon(NESTED_NS_SVG)
    g = tree.child[0]
    assert g.attr == {"xmlnsXlink": "http://www.w3.org/1999/xlink", "xmlSpace": "preserve"}
    assert g.child[0].attr == {"xlinkHref": "#a"}


def test_multi_color_keeps_all_fills():
    tree = convert_icon(MULTI_COLOR_SVG, multi_color=True)
    assert [c.attr["fill"] for c in tree.child] == ["#FFA000", "#FFCA28"]
    assert tree.attr == {"viewBox": "0 0 48 48", "enableBackground": "new 0 0 48 48"}


def test_no_class_anywhere():
    for svg in (SIMPLE_SVG, FEATHER_SVG, XLINK_SVG):
        for node in convert_icon(svg).iter_nodes():
            assert "class" not in (node.attr or {})


def test_conversion_is_deterministic():
    assert convert_icon(XLINK_SVG) == convert_icon(XLINK_SVG)
    assert convert_icon(XLINK_SVG).to_json() == convert_icon(XLINK_SVG).to_json()


def test_malformed_svg():
    with pytest.raises(SvgParseError):
        convert_icon(MALFORMED_SVG)


def test_empty_input():
    with pytest.raises(SvgParseError):
        convert_icon("")


def test_missing_svg_root():
    with pytest.raises(MissingSvgRootError):
        convert_icon(NOT_SVG)


def test_errors_are_value_errors():
    assert issubclass(SvgParseError, IconConversionError)
    assert issubclass(MissingSvgRootError, ValueError)


def test_nested_svg_is_a_child():
    tree = convert_icon('<svg><svg width="5"><path d="M0 0"/></svg></svg>')
    inner = tree.child[0]
    assert inner.tag == "svg"
    # The tag is svg, so sizing is dropped here too
    assert inner.attr is None


def test_declared_encoding_does_not_garble_decoded_text():
    svg = '<?xml version="1.0" encoding="ISO-8859-1"?><svg><path d="M0 0" aria-label="é"/></svg>'
    assert convert_icon(svg).child[0].attr == {"d": "M0 0", "ariaLabel": "é"}


def test_namespace_redeclaration_keeps_written_order():
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg">'
        '<g id="a" xmlns:xlink="http://www.w3.org/1999/xlink" opacity=".5"/>'
        "</svg>"
    )
    g = convert_icon(svg).child[0]
    assert list(g.attr) == ["id", "xmlnsXlink", "opacity"]
