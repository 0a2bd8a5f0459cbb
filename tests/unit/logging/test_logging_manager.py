"""
Unit tests for LoggingConfig and LoggingManager.
"""

import logging
import logging.handlers

import pytest
from rich.logging import RichHandler

from taurus_config.logging import (
    LoggingConfig,
    LoggingManager,
    StructuredFormatter,
    configure_logging,
    create_default_config,
    level_from_verbosity,
    logging_manager,
)


@pytest.mark.unit
class TestLoggingConfig:

    def test_defaults(self):
        config = create_default_config()

        assert config.level == logging.WARNING
        assert config.format_type == "console"
        assert config.output == ["console"]
        assert config.service_name == "taurus-config"

    def test_string_level(self):
        assert LoggingConfig(level="debug").level == logging.DEBUG

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown log format"):
            LoggingConfig(format_type="xml")

    @pytest.mark.parametrize("verbose,base,expected", [
        (0, "WARNING", logging.WARNING),
        (1, "WARNING", logging.INFO),
        (2, "WARNING", logging.DEBUG),
        (5, logging.WARNING, logging.DEBUG),
        (1, "DEBUG", logging.DEBUG),
        (0, "ERROR", logging.ERROR),
    ])
    def test_level_from_verbosity(self, verbose, base, expected):
        assert level_from_verbosity(verbose, base) == expected


@pytest.mark.unit
class TestLoggingManager:

    def setup_method(self):
        self._root_level = logging.getLogger().level
        self._package_level = logging.getLogger("taurus_config").level

    def teardown_method(self):
        for handler in list(logging_manager.handlers):
            logging.getLogger().removeHandler(handler)
            handler.close()
        logging_manager.handlers.clear()
        logging.getLogger().setLevel(self._root_level)
        logging.getLogger("taurus_config").setLevel(self._package_level)

    def test_singleton(self):
        assert LoggingManager() is LoggingManager()
        assert LoggingManager() is logging_manager

    def test_console_handler(self):
        configure_logging(LoggingConfig(level=logging.INFO))

        assert len(logging_manager.handlers) == 1
        handler = logging_manager.handlers[0]
        assert handler in logging.getLogger().handlers
        assert handler.level == logging.INFO
        assert logging.getLogger("taurus_config").level == logging.INFO

    def test_json_handler(self):
        configure_logging(LoggingConfig(format_type="json"))
        assert isinstance(logging_manager.handlers[0].formatter, StructuredFormatter)

    def test_rich_handler(self):
        configure_logging(LoggingConfig(format_type="rich"))
        assert isinstance(logging_manager.handlers[0], RichHandler)

    def test_file_handler(self, temp_dir):
        log_file = temp_dir / "logs" / "app.log"
        configure_logging(LoggingConfig(output=["console", "file"], file_path=log_file))

        assert len(logging_manager.handlers) == 2
        assert isinstance(logging_manager.handlers[1], logging.handlers.RotatingFileHandler)
        assert log_file.parent.exists()

    def test_reconfigure_replaces_own_handlers_only(self):
        foreign = logging.NullHandler()
        logging.getLogger().addHandler(foreign)
        try:
            configure_logging(LoggingConfig())
            configure_logging(LoggingConfig())

            assert len(logging_manager.handlers) == 1
            assert foreign in logging.getLogger().handlers
        finally:
            logging.getLogger().removeHandler(foreign)

    def test_get_logger(self):
        assert logging_manager.get_logger("taurus_config.x") is logging.getLogger("taurus_config.x")
