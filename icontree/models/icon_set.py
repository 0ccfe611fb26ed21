"""Icon set descriptors — where the SVGs of a set live and how they are named."""

from __future__ import annotations

from typing import Callable

from pydantic import BaseModel, ConfigDict, Field


class IconContent(BaseModel):
    """One source of SVG files feeding an icon set."""

    model_config = ConfigDict(frozen=True)

    files: str = Field(..., description="Glob pattern, relative to the icons root unless absolute")
    multi_color: bool = Field(default=False, description="Keep explicit fill colors")
    formatter: Callable[[str], str] | None = Field(
        default=None,
        description="Post-processes the PascalCase file name into the exported name",
    )

    def format_name(self, pascal_name: str) -> str:
        if self.formatter is None:
            return pascal_name
        return self.formatter(pascal_name) or pascal_name


class IconSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    project_url: str
    license: str
    license_url: str
    contents: tuple[IconContent, ...] = ()

    @property
    def license_lines(self) -> list[str]:
        return [
            f"{self.name} - {self.project_url}",
            f"License: {self.license} {self.license_url}",
        ]


def prefixed(prefix: str, strip_suffix: str = "") -> Callable[[str], str]:
    """Formatter that prepends ``prefix`` and drops a trailing ``strip_suffix``."""

    def _format(name: str) -> str:
        if strip_suffix and name.endswith(strip_suffix):
            name = name[: -len(strip_suffix)]
        return f"{prefix}{name}"

    return _format
