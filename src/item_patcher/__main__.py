"""
Command line entry point for item_patcher.
Usage: python -m item_patcher <database.json> [--items-dir DIR]

Runs a full patch against a JSON dump of the host tables and reports what
would be loaded. Nothing is written back; saving is the host's job.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import __version__
from .database import HostDatabase
from .patching import ItemPatchService
from .settings import AppSettings, ConfigError
from .utils.logging_config import PACKAGE_LOGGER, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="item-patcher",
        description="Apply custom item configs to a dump of the host database.",
    )
    parser.add_argument("database", nargs="?", type=Path, help="JSON dump of the host tables")
    parser.add_argument("--items-dir", type=Path, help="directory of item config fragments")
    parser.add_argument("--exclude", help="skip config files whose name contains this")
    parser.add_argument("--debug", action="store_true", help="trace every patch step")
    parser.add_argument("--no-quests", action="store_true", help="skip the fixed quest patches")
    parser.add_argument("--settings-file", type=Path, help="INI settings file to use")
    parser.add_argument("--profile", default="default", help="settings profile name")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main command line entry point."""
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(f"{PACKAGE_LOGGER}.main")

    settings = AppSettings(profile=args.profile, settings_file=args.settings_file)
    # Command line values apply to this run only
    overrides: Dict[str, Any] = {}
    if args.database:
        overrides["database_path"] = args.database
    if args.items_dir:
        overrides["items_dir"] = args.items_dir
    if args.exclude:
        overrides["exclude_pattern"] = args.exclude
    if args.debug:
        overrides["debug"] = True
    if args.no_quests:
        overrides["quest_patch_enabled"] = False
    settings.override(**overrides)

    setup_logging(settings)
    logger.info(f"Configuration loaded from {settings.get_settings_file_path()}")

    validation = settings.validate()
    for warning in validation.warnings:
        logger.warning(f"  {warning}")
    if not validation.is_valid:
        logger.error("Configuration validation failed:")
        for error in validation.errors:
            logger.error(f"  {error}")
        return 1

    if not settings.database_path:
        logger.error("No database dump given")
        return 1

    try:
        database = HostDatabase.from_file(settings.database_path)
        report = ItemPatchService(database, settings=settings).run()
    except ConfigError as e:
        logger.error(f"Could not load configuration: {e}")
        return 1

    logger.info(
        f"Added {len(report.added)} items, {len(report.failed)} failed, "
        f"{report.quests_modified} quests modified"
    )
    return 0 if report.success else 1


if __name__ == "__main__":
    sys.exit(main())
