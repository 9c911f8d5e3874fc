"""
Tests for logging helpers.
"""

import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from password_renderer.utils.logger import configure_logging, get_logger, set_log_level
from password_renderer.utils.rich_logger import RichLogger, setup_rich_logging


class TestStandardLogging:
    """Test cases for the logging module helpers."""

    def test_get_logger(self):
        logger = get_logger("password_renderer.test")

        assert logger.name == "password_renderer.test"

    @pytest.mark.parametrize("name", ["", None])
    def test_get_logger_rejects_empty_name(self, name):
        with pytest.raises(ValueError):
            get_logger(name)

    def test_configure_logging(self):
        logger = configure_logging("DEBUG", logger_name="password_renderer.configured")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_configure_logging_invalid_level(self):
        with pytest.raises(ValueError):
            configure_logging("LOUD")

    def test_set_log_level_updates_handlers(self):
        logger = configure_logging("INFO", logger_name="password_renderer.levels")

        set_log_level("error", logger_name="password_renderer.levels")

        assert logger.level == logging.ERROR
        assert all(handler.level == logging.ERROR for handler in logger.handlers)

    def test_render_logs_column_plan(self, caplog, render_context, sample_records):
        from password_renderer import PasswordTable, render_password_table

        with caplog.at_level(logging.DEBUG, logger="password_renderer"):
            render_password_table(render_context, PasswordTable(), sample_records)

        assert any("Planned 6 columns" in record.getMessage() for record in caplog.records)


class TestRichLogging:
    """Test cases for rich logging."""

    def test_rich_logger_writes_to_console(self):
        console = Console(record=True, width=120)
        rich_logger = RichLogger("password_renderer.rich", "INFO", console=console)

        rich_logger.info("table rendered")

        assert isinstance(rich_logger.logger.handlers[0], RichHandler)
        assert "table rendered" in console.export_text()

    def test_rich_table(self):
        console = Console(record=True, width=120)

        RichLogger("password_renderer.rich_table", console=console).table("Plan", {"columns": 6})

        output = console.export_text()
        assert "Plan" in output
        assert "columns" in output

    def test_setup_rich_logging_installs_root_handler(self):
        handler = setup_rich_logging("WARNING", console=Console(record=True))

        assert logging.getLogger().handlers == [handler]
        assert logging.getLogger().level == logging.WARNING
