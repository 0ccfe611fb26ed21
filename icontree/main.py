"""Command line entry point: ``python -m icontree`` / ``icontree``."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

from icontree.config import Settings

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert SVG icon sets into icon-tree modules")
    parser.add_argument("--icons-root", help="Directory the content globs are resolved against")
    parser.add_argument("--dist", help="Output directory")
    parser.add_argument("--format", choices=["esm", "python"], help="Generated module format")
    parser.add_argument("--log-level", help="Logging level (debug, info, ...)")
    parser.add_argument("--only", nargs="+", metavar="ID", help="Build only these icon set ids")
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> Settings:
    overrides = {
        "icons_root": args.icons_root,
        "dist_dir": args.dist,
        "module_format": args.format,
        "log_level": args.log_level,
    }
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    from icontree.build.runner import build
    from icontree.icons import get_icon_sets

    try:
        settings = load_settings(args)
        logging.getLogger().setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
        icon_sets = get_icon_sets(args.only)
        asyncio.run(build(icon_sets, settings))
    except Exception:
        logger.exception("Build failed")
        return 1

    logger.info("done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
