"""Basic unit tests for item_patcher settings and logging."""

import logging
from pathlib import Path

import pytest


class TestSettingsInitialization:
    """Test settings initialization and basic operations."""

    def test_app_settings_init(self, tmp_path: Path) -> None:
        """Test AppSettings can be initialized from an INI file."""
        from item_patcher.settings import AppSettings

        settings_obj = AppSettings(settings_file=tmp_path / "settings.ini")
        assert settings_obj is not None
        assert settings_obj.version == "1.0"

    def test_defaults(self, tmp_path: Path) -> None:
        """Test defaults of a fresh profile."""
        from item_patcher.settings import AppSettings, DEFAULT_EXCLUDE_PATTERN

        settings_obj = AppSettings(settings_file=tmp_path / "settings.ini")
        assert settings_obj.items_dir is None
        assert settings_obj.debug is False
        assert settings_obj.exclude_pattern == DEFAULT_EXCLUDE_PATTERN
        assert settings_obj.quest_patch_enabled is True
        assert settings_obj.logging.console_logging is True

    def test_values_persist_in_profile(self, tmp_path: Path) -> None:
        """Test values survive a reload of the same INI file and profile."""
        from item_patcher.settings import AppSettings

        ini = tmp_path / "settings.ini"
        first = AppSettings(profile="server", settings_file=ini)
        first.items_dir = tmp_path
        first.debug = True
        first.quest_patch_enabled = False

        second = AppSettings(profile="server", settings_file=ini)
        assert second.items_dir == tmp_path
        assert second.debug is True
        assert second.quest_patch_enabled is False

        other = AppSettings(profile="other", settings_file=ini)
        assert other.items_dir is None

    def test_invalid_log_level_is_ignored(self, tmp_path: Path) -> None:
        """Test an unknown console level keeps the previous one."""
        from item_patcher.settings import AppSettings

        settings_obj = AppSettings(settings_file=tmp_path / "settings.ini")
        settings_obj.logging.console_log_level = "warning"
        settings_obj.logging.console_log_level = "LOUD"
        assert settings_obj.logging.console_log_level == "WARNING"

    def test_app_settings_validation(self, tmp_path: Path) -> None:
        """Test validation flags a missing items directory as an error."""
        from item_patcher.settings import AppSettings

        settings_obj = AppSettings(settings_file=tmp_path / "settings.ini")
        validation = settings_obj.validate()
        assert validation.is_valid
        assert "Items directory not set" in validation.warnings

        settings_obj.items_dir = tmp_path / "missing"
        validation = settings_obj.validate()
        assert not validation.is_valid
        assert any("does not exist" in error for error in validation.errors)

    def test_overrides_are_not_stored(self, tmp_path: Path) -> None:
        """Test run overrides shadow stored values without being written."""
        from item_patcher.settings import AppSettings

        ini = tmp_path / "settings.ini"
        settings_obj = AppSettings(settings_file=ini)
        settings_obj.override(quest_patch_enabled=False, debug=True, items_dir=tmp_path)
        assert settings_obj.quest_patch_enabled is False
        assert settings_obj.debug is True
        assert settings_obj.items_dir == tmp_path

        reloaded = AppSettings(settings_file=ini)
        assert reloaded.quest_patch_enabled is True
        assert reloaded.debug is False
        assert reloaded.items_dir is None

    def test_unknown_override_is_rejected(self, tmp_path: Path) -> None:
        """Test only known settings can be overridden."""
        from item_patcher.settings import AppSettings

        settings_obj = AppSettings(settings_file=tmp_path / "settings.ini")
        with pytest.raises(ValueError):
            settings_obj.override(console_colors=False)

    def test_validation_warns_on_empty_items_dir(self, tmp_path: Path) -> None:
        """Test an items directory without JSON files is only a warning."""
        from item_patcher.settings import AppSettings

        items_dir = tmp_path / "items"
        items_dir.mkdir()
        settings_obj = AppSettings(settings_file=tmp_path / "settings.ini")
        settings_obj.items_dir = items_dir

        validation = settings_obj.validate()
        assert validation.is_valid
        assert any("no JSON files" in warning for warning in validation.warnings)


class TestUtilsLogging:
    """Test logging configuration."""

    def test_logging_setup_with_settings(self, tmp_path: Path) -> None:
        """Test logging setup follows the debug switch."""
        from item_patcher.utils.logging_config import setup_logging
        from item_patcher.settings import AppSettings

        settings_obj = AppSettings(settings_file=tmp_path / "settings.ini")
        logger = logging.getLogger("item_patcher")
        try:
            setup_logging(settings=settings_obj)
            assert logger.level == logging.INFO
            assert len(logger.handlers) == 1

            settings_obj.debug = True
            setup_logging(settings=settings_obj)
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 1
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

    def test_file_logging_writes_csv(self, tmp_path: Path, monkeypatch) -> None:
        """Test file logging creates the CSV log under the working directory."""
        from item_patcher.utils.logging_config import setup_logging
        from item_patcher.settings import AppSettings

        monkeypatch.chdir(tmp_path)
        settings_obj = AppSettings(settings_file=tmp_path / "settings.ini")
        settings_obj.logging.console_logging = False
        settings_obj.logging.file_logging = True
        logger = logging.getLogger("item_patcher")
        try:
            setup_logging(settings=settings_obj)
            assert len(logger.handlers) == 1
            logger.warning("written to file")
            logger.handlers[0].flush()
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
            logger.setLevel(logging.NOTSET)

        log_text = (tmp_path / "logs" / "item_patcher.csv").read_text(encoding="utf-8")
        assert '"written to file"' in log_text

    def test_csv_formatter_escapes_quotes(self) -> None:
        """Test CSV formatter doubles quotes in messages."""
        from item_patcher.utils.logging_config import CSVFormatter

        record = logging.LogRecord(
            "item_patcher.test", logging.WARNING, __file__, 10, 'bad "value"', None, None
        )
        line = CSVFormatter().format(record)
        assert line.endswith('"bad ""value"""')
        assert ";WARNING ;" in line
        assert line.count(";") == 4
        assert '"item_patcher.test";"10";' in line
