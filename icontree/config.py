"""Build configuration from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Where content globs are resolved
    icons_root: str = "node_modules"
    # Output: one directory per icon set plus the aggregate LICENSE
    dist_dir: str = "."
    license_header: str = "LICENSE_HEADER"
    license_file: str = "LICENSE"

    module_format: Literal["esm", "python"] = "esm"
    log_level: str = "info"

    model_config = {"env_prefix": "ICONTREE_", "env_file": ".env", "env_file_encoding": "utf-8"}
