"""Filesystem collaborators — output directories, glob resolution, SVG reads."""

from __future__ import annotations

import asyncio
import glob
import logging
from pathlib import Path

import aiofiles

from icontree.models.icon_set import IconSet

logger = logging.getLogger(__name__)


class FileSource:
    """Resolves content globs under ``root`` and reads matched files."""

    def __init__(self, root: str | Path = ".") -> None:
        self.root = Path(root)

    def _glob(self, pattern: str) -> list[Path]:
        # Only the pattern is a glob; the root is taken literally. An absolute
        # pattern ignores root_dir and replaces the root when joined.
        matches = (self.root / m for m in glob.glob(pattern, root_dir=self.root, recursive=True))
        return sorted(m for m in matches if m.is_file())

    async def resolve(self, pattern: str) -> list[Path]:
        """Sorted files matching ``pattern``."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._glob, pattern)

    async def read_text(self, path: Path) -> str:
        async with aiofiles.open(path, "r", encoding="utf-8") as f:
            return await f.read()


def init_dirs(dist: Path, icon_sets: list[IconSet]) -> None:
    """Create ``dist/<id>`` for every icon set; existing directories are left alone."""
    dist.mkdir(parents=True, exist_ok=True)
    for icon_set in icon_sets:
        try:
            (dist / icon_set.id).mkdir()
        except FileExistsError:
            logger.debug("Output directory %s already exists", dist / icon_set.id)
