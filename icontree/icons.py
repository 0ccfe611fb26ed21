"""Icon set catalog.

Content globs are relative to ``settings.icons_root`` (an installed
``node_modules`` tree by default). Contents are listed in priority order:
when two contents yield the same exported name, the first one wins.
"""

from __future__ import annotations

from icontree.models.icon_set import IconContent, IconSet, prefixed

ICON_SETS: tuple[IconSet, ...] = (
    IconSet(
        id="fa",
        name="Font Awesome",
        project_url="https://fontawesome.com/",
        license="CC BY 4.0 License",
        license_url="https://creativecommons.org/licenses/by/4.0/",
        contents=(
            IconContent(files="@fortawesome/fontawesome-free/svgs/brands/*.svg", formatter=prefixed("Fa")),
            IconContent(files="@fortawesome/fontawesome-free/svgs/solid/*.svg", formatter=prefixed("Fa")),
            IconContent(files="@fortawesome/fontawesome-free/svgs/regular/*.svg", formatter=prefixed("FaReg")),
        ),
    ),
    IconSet(
        id="io5",
        name="Ionicons 5",
        project_url="https://ionicons.com/",
        license="MIT",
        license_url="https://github.com/ionic-team/ionicons/blob/master/LICENSE",
        contents=(IconContent(files="ionicons/dist/svg/*.svg", formatter=prefixed("Io")),),
    ),
    IconSet(
        id="fi",
        name="Feather",
        project_url="https://feathericons.com/",
        license="MIT",
        license_url="https://github.com/feathericons/feather/blob/master/LICENSE",
        contents=(IconContent(files="feather-icons/dist/icons/*.svg", formatter=prefixed("Fi")),),
    ),
    IconSet(
        id="go",
        name="Github Octicons icons",
        project_url="https://octicons.github.com/",
        license="MIT",
        license_url="https://github.com/primer/octicons/blob/master/LICENSE",
        contents=(
            IconContent(files="@primer/octicons/build/svg/*-16.svg", formatter=prefixed("Go", strip_suffix="16")),
            IconContent(files="@primer/octicons/build/svg/*-24.svg", formatter=prefixed("Go", strip_suffix="24")),
        ),
    ),
    IconSet(
        id="fc",
        name="Flat Color Icons",
        project_url="https://icons8.github.io/flat-color-icons/",
        license="MIT",
        license_url="https://opensource.org/licenses/MIT",
        contents=(
            IconContent(files="flat-color-icons/svg/*.svg", multi_color=True, formatter=prefixed("Fc")),
        ),
    ),
    IconSet(
        id="bs",
        name="Bootstrap Icons",
        project_url="https://github.com/twbs/icons",
        license="MIT",
        license_url="https://opensource.org/licenses/MIT",
        contents=(IconContent(files="bootstrap-icons/icons/*.svg", formatter=prefixed("Bs")),),
    ),
    IconSet(
        id="ri",
        name="Remix Icon",
        project_url="https://github.com/Remix-Design/RemixIcon",
        license="Apache License Version 2.0",
        license_url="http://www.apache.org/licenses/",
        contents=(IconContent(files="remixicon/icons/*/*.svg", formatter=prefixed("Ri")),),
    ),
    IconSet(
        id="hi",
        name="Heroicons",
        project_url="https://heroicons.com/",
        license="MIT",
        license_url="https://opensource.org/licenses/MIT",
        contents=(
            IconContent(files="heroicons/24/solid/*.svg", formatter=prefixed("Hi")),
            IconContent(files="heroicons/24/outline/*.svg", formatter=prefixed("HiOutline")),
        ),
    ),
)


def get_icon_sets(only: list[str] | None = None) -> list[IconSet]:
    """Catalog entries, optionally restricted to ``only`` ids (catalog order kept)."""
    if not only:
        return list(ICON_SETS)

    known = {s.id for s in ICON_SETS}
    unknown = sorted(set(only) - known)
    if unknown:
        raise ValueError(f"Unknown icon set id(s): {', '.join(unknown)}")
    return [s for s in ICON_SETS if s.id in only]
