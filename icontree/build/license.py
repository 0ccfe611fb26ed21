"""Aggregate LICENSE: fixed header followed by one entry per icon set."""

from __future__ import annotations

from pathlib import Path

import aiofiles

from icontree.models.icon_set import IconSet


def license_entries(icon_sets: list[IconSet]) -> str:
    """``<name> - <url>`` / ``License: ...`` pairs, blank line between sets."""
    return "\n\n".join("\n".join(s.license_lines) for s in icon_sets) + "\n"


async def write_license(header: str | Path, dest: str | Path, icon_sets: list[IconSet]) -> None:
    async with aiofiles.open(header, "r", encoding="utf-8") as f:
        header_text = await f.read()

    async with aiofiles.open(dest, "w", encoding="utf-8") as f:
        await f.write(header_text)
        await f.write(license_entries(icon_sets))
