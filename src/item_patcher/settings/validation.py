"""
Settings validation system for item_patcher.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        items_dir = self.settings.items_dir
        if items_dir:
            if not items_dir.is_dir():
                errors.append(f"Items directory does not exist: {items_dir}")
            elif not any(items_dir.glob("*.json")):
                warnings.append(f"Items directory has no JSON files: {items_dir}")
        else:
            warnings.append("Items directory not set")

        database_path = self.settings.database_path
        if database_path and not database_path.is_file():
            errors.append(f"Database dump does not exist: {database_path}")

        if not self.settings.exclude_pattern:
            warnings.append("Exclude pattern is empty, every JSON file will be loaded")

        logger.debug(f"Validation finished: {len(errors)} errors, {len(warnings)} warnings")
        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
