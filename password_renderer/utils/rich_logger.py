"""
Rich logging for the password renderer.

Provides colorful console logging using the rich library.
"""

import logging
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table


def _rich_handler(console: Console) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


class RichLogger:
    """
    Logger with rich formatting and colors.
    """

    def __init__(self, name: str = "password_renderer", level: str = "INFO",
                 console: Optional[Console] = None):
        """
        Initialize rich logger.

        Args:
            name: Logger name
            level: Log level
            console: Console to print to, a new stderr console when omitted
        """
        self.name = name
        self.level = level
        self.console = console or Console(stderr=True)

        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        self.logger.handlers.clear()
        self.logger.addHandler(_rich_handler(self.console))

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(message, **kwargs)

    def table(self, title: str, data: Dict[str, Any]):
        """Display data in a rich table."""
        table = Table(title=title)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="magenta")

        for key, value in data.items():
            table.add_row(str(key), str(value))

        self.console.print(table)


def setup_rich_logging(level: str = "INFO", console: Optional[Console] = None) -> RichHandler:
    """
    Route the root logger through a rich handler.

    Args:
        level: Log level
        console: Console to print to, a new stderr console when omitted

    Returns:
        The installed handler
    """
    handler = _rich_handler(console or Console(stderr=True))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    return handler
