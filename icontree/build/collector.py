"""Icon collection with per-set name deduplication.

An icon set is often assembled from overlapping sources (brands + solid,
16px + 24px variants). Names are derived from file names before anything is
read, and the first content to produce a name wins; later files mapping to the
same name are skipped without being read or converted.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from pathlib import Path

from icontree.build.files import FileSource
from icontree.models.icon_set import IconContent, IconSet
from icontree.models.tree_node import TreeNode
from icontree.svg.converter import convert_icon
from icontree.utils.naming import pascal_case

logger = logging.getLogger(__name__)


class IconNameError(ValueError):
    """A file name yields no usable export name."""


def icon_name(path: str | Path, content: IconContent) -> str:
    """Exported name for ``path``: PascalCase base name, then the content formatter."""
    return content.format_name(pascal_case(Path(path).stem))


class DedupCollector:
    """Yields ``(name, tree)`` for every unique icon of an icon set."""

    def __init__(self, source: FileSource) -> None:
        self.source = source

    async def collect(self, icon_set: IconSet) -> AsyncIterator[tuple[str, TreeNode]]:
        """Walk contents and files in order; read/parse errors propagate and end the walk."""
        seen: set[str] = set()

        for content in icon_set.contents:
            files = await self.source.resolve(content.files)
            logger.info("%s %d", icon_set.id, len(files))

            for path in files:
                name = icon_name(path, content)
                if not name:
                    raise IconNameError(f"{icon_set.id}: no export name derivable from {path}")
                if name in seen:
                    logger.debug("%s: skipping %s, %s already exported", icon_set.id, path, name)
                    continue

                svg_text = await self.source.read_text(path)
                tree = convert_icon(svg_text, content.multi_color)
                seen.add(name)
                yield name, tree
