"""Module emitter — appends one export line per icon to the icon set module."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import aiofiles

from icontree.models.tree_node import TreeNode

ModuleFormat = Literal["esm", "python"]

MODULE_FILES: dict[str, str] = {
    "esm": "index.js",
    "python": "__init__.py",
}


def format_export(name: str, node: TreeNode, module_format: ModuleFormat = "esm") -> str:
    """One export line, e.g. ``export const FaBeer = {"tag":"svg",...};``."""
    data = node.to_json()
    if module_format == "esm":
        return f"export const {name} = {data};\n"
    if module_format == "python":
        # Only strings, dicts and lists: the JSON text is also a Python literal
        return f"{name} = {data}\n"
    raise ValueError(f"Unknown module format: {module_format}")


class ModuleEmitter:
    def __init__(self, dist: str | Path, module_format: ModuleFormat = "esm") -> None:
        if module_format not in MODULE_FILES:
            raise ValueError(f"Unknown module format: {module_format}")
        self.dist = Path(dist)
        self.module_format = module_format

    def module_path(self, icon_set_id: str) -> Path:
        return self.dist / icon_set_id / MODULE_FILES[self.module_format]

    async def emit(self, icon_set_id: str, name: str, node: TreeNode) -> None:
        async with aiofiles.open(self.module_path(icon_set_id), "a", encoding="utf-8") as f:
            await f.write(format_export(name, node, self.module_format))
