"""Build orchestrator — output dirs, LICENSE, then one module per icon set.

Everything runs sequentially. The first error aborts the whole build; modules
already appended to stay on disk as written.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from icontree.build.collector import DedupCollector
from icontree.build.emitter import ModuleEmitter
from icontree.build.files import FileSource, init_dirs
from icontree.build.license import write_license
from icontree.config import Settings
from icontree.models.icon_set import IconSet

logger = logging.getLogger(__name__)


async def write_icon_module(icon_set: IconSet, collector: DedupCollector, emitter: ModuleEmitter) -> int:
    """Emit every unique icon of ``icon_set``; returns the number exported."""
    count = 0
    async for name, tree in collector.collect(icon_set):
        await emitter.emit(icon_set.id, name, tree)
        count += 1
    logger.info("%s: %d icons -> %s", icon_set.id, count, emitter.module_path(icon_set.id))
    return count


async def build(icon_sets: list[IconSet], settings: Settings) -> dict[str, int]:
    start = time.perf_counter()
    dist = Path(settings.dist_dir)

    init_dirs(dist, icon_sets)
    await write_license(settings.license_header, dist / settings.license_file, icon_sets)

    collector = DedupCollector(FileSource(settings.icons_root))
    emitter = ModuleEmitter(dist, settings.module_format)

    counts: dict[str, int] = {}
    for icon_set in icon_sets:
        counts[icon_set.id] = await write_icon_module(icon_set, collector, emitter)

    logger.info(
        "Built %d icon sets (%d icons) in %.0fms",
        len(counts),
        sum(counts.values()),
        (time.perf_counter() - start) * 1000,
    )
    return counts
