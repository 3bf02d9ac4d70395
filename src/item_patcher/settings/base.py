"""
Shared QSettings access for the settings subsystems.
"""

from typing import Any, Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class SettingsGroup:
    """Base for one settings subsystem stored under ``<group>/<name>`` keys.

    INI-backed QSettings hands every value back as a string, so readers
    coerce explicitly instead of trusting the stored type. Overrides shadow
    stored values for the lifetime of the instance and are never written.
    """

    group = ""

    def __init__(self, settings: "QSettings"):
        self.settings = settings
        self._overrides: Dict[str, Any] = {}

    def _key(self, name: str) -> str:
        return f"{self.group}/{name}"

    def _value(self, name: str, default: Any) -> Any:
        if name in self._overrides:
            return self._overrides[name]
        return self.settings.value(self._key(name), default)

    def _get_str(self, name: str, default: str = "") -> str:
        value = self._value(name, default)
        return str(value) if value is not None else default

    def _get_bool(self, name: str, default: bool = False) -> bool:
        value = self._value(name, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _set(self, name: str, value: Any) -> None:
        """Store a value and flush it to the backing store."""
        self._overrides.pop(name, None)
        self.settings.setValue(self._key(name), value)
        self.settings.sync()

    def override(self, name: str, value: Any) -> None:
        """Use ``value`` for ``name`` in this process only."""
        self._overrides[name] = value
