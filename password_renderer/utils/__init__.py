"""Helper utilities: HTML escaping, logging and shared enumerations."""

from .enums import CaptureLevel
from .escaping import HtmlWriter, encode_attribute, encode_text
from .logger import configure_logging, get_logger, set_log_level

__all__ = [
    "CaptureLevel",
    "HtmlWriter",
    "configure_logging",
    "encode_attribute",
    "encode_text",
    "get_logger",
    "set_log_level",
]
