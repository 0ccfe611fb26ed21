"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from icontree.models.icon_set import IconContent, IconSet, prefixed


# Sample SVGs

SIMPLE_SVG = '<svg width="24" height="24"><path class="x" fill="#fff" d="M1 2"/></svg>'

FILL_NONE_SVG = '<svg><g><path fill="none" d="M0 0"/></g></svg>'

FEATHER_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round" class="feather feather-smile">
  <circle cx="12" cy="12" r="10"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
  <line x1="9" y1="9" x2="9.01" y2="9"/>
  <line x1="15" y1="9" x2="15.01" y2="9"/>
</svg>'''

XLINK_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<!-- Generator: Sketch -->
<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" xml:space="preserve" width="48" height="48" viewBox="0 0 48 48">
  <style>.a { fill: red; }</style>
  <defs>
    <path id="p" d="M0 0h10v10H0z"/>
  </defs>
  <use xlink:href="#p" fill-opacity=".5" class="a"/>
  <rect width="10" height="12" x="2" y="3" fill="#f00"/>
</svg>'''

MULTI_COLOR_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 48 48" enable-background="new 0 0 48 48">
  <path fill="#FFA000" d="M40,12H22l-4-4H8c-2.2,0-4,1.8-4,4v8h40v-4C44,13.8,42.2,12,40,12z"/>
  <path fill="#FFCA28" d="M40,12H8c-2.2,0-4,1.8-4,4v20c0,2.2,1.8,4,4,4h32c2.2,0,4-1.8,4-4V16C44,13.8,42.2,12,40,12z"/>
</svg>'''

NESTED_NS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">
  <g xmlns:xlink="http://www.w3.org/1999/xlink" xml:space="preserve">
    <use xlink:href="#a"/>
  </g>
</svg>'''

MALFORMED_SVG = '<svg><path d="M0 0"></svg>'

NOT_SVG = '<html><body/></html>'


def write_svg(path: Path, svg: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(svg, encoding="utf-8")
    return path


@pytest.fixture
def icons_root(tmp_path: Path) -> Path:
    """A small icon tree: ``regular`` and ``filled`` overlap on ``arrow-left``."""
    root = tmp_path / "icons"
    write_svg(root / "regular" / "arrow-left.svg", FEATHER_SVG)
    write_svg(root / "regular" / "home.svg", SIMPLE_SVG)
    write_svg(root / "filled" / "arrow-left.svg", MULTI_COLOR_SVG)
    write_svg(root / "filled" / "star.svg", MULTI_COLOR_SVG)
    return root


@pytest.fixture
def overlapping_set() -> IconSet:
    return IconSet(
        id="tc",
        name="Test Icons",
        project_url="https://example.com/icons",
        license="MIT",
        license_url="https://opensource.org/licenses/MIT",
        contents=(
            IconContent(files="regular/*.svg", formatter=prefixed("Tc")),
            IconContent(files="filled/*.svg", multi_color=True, formatter=prefixed("Tc")),
        ),
    )
