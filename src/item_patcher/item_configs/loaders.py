"""
File loaders for custom item configs.

Reads every fragment in the items directory with orjson and merges them
into one config keyed by item id.
"""

import logging
from pathlib import Path
from typing import Dict, List

import orjson

from ..settings.types import ConfigError
from ..settings.patching import DEFAULT_EXCLUDE_PATTERN
from .models import RawConfigMap, ItemDescriptor


class ItemConfigLoader:
    """Loads and merges item config fragments from one directory."""

    def __init__(self, exclude_pattern: str = DEFAULT_EXCLUDE_PATTERN):
        self.exclude_pattern = exclude_pattern
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.logger.debug("ItemConfigLoader initialized")

    @staticmethod
    def read_config_file(json_file: Path) -> RawConfigMap:
        """Read one fragment file mapping item id -> item config.

        Args:
            json_file: Path to the JSON fragment

        Returns:
            The parsed mapping

        Raises:
            ConfigError: If the file cannot be read, is malformed, or is not an object
        """
        try:
            with json_file.open("rb") as f:  # orjson works with bytes
                data = orjson.loads(f.read())
        except (OSError, orjson.JSONDecodeError) as e:
            raise ConfigError(f"Error reading item config {json_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(
                f"Item config {json_file} must map item ids to configs, got {type(data).__name__}"
            )
        return data

    def list_config_files(self, items_dir: Path) -> List[Path]:
        """Return fragment files in ascending file-name order, exclusions removed."""
        files = sorted(
            (p for p in items_dir.glob("*.json") if p.is_file()),
            key=lambda p: p.name,
        )
        kept: List[Path] = []
        for path in files:
            if self.exclude_pattern and self.exclude_pattern in path.name:
                self.logger.debug(f"Skipping excluded config file: {path.name}")
                continue
            kept.append(path)
        return kept

    def load_combined(self, items_dir: Path) -> RawConfigMap:
        """Merge all fragments into one mapping.

        A later file replaces an earlier file's config for the same id as a
        whole; configs are not deep-merged.

        Raises:
            ConfigError: If the directory is missing or any fragment is malformed
        """
        if not items_dir.is_dir():
            raise ConfigError(f"Items directory does not exist: {items_dir}")

        config_files = self.list_config_files(items_dir)
        if not config_files:
            self.logger.warning(f"No item config files found in {items_dir}")

        combined: RawConfigMap = {}
        for config_file in config_files:
            fragment = self.read_config_file(config_file)
            for item_id in fragment:
                if item_id in combined:
                    self.logger.debug(
                        f"Item '{item_id}' redefined by {config_file.name}, replacing earlier config"
                    )
            combined.update(fragment)
            self.logger.debug(f"Loaded {len(fragment)} item configs from {config_file.name}")

        self.logger.info(
            f"Loaded {len(combined)} item configs from {len(config_files)} files"
        )
        return combined

    def load_descriptors(self, items_dir: Path) -> Dict[str, ItemDescriptor]:
        """Load, merge and parse every fragment into item descriptors."""
        combined = self.load_combined(items_dir)
        descriptors: Dict[str, ItemDescriptor] = {}
        for item_id, data in combined.items():
            if not isinstance(data, dict):
                raise ConfigError(f"Config for item '{item_id}' is not an object")
            descriptors[item_id] = ItemDescriptor.from_dict(item_id, data)
        return descriptors
