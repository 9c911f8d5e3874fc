"""Rendering package providing HTML output for passwords and password tables."""

from .password_renderer import write_password
from .password_table_renderer import PasswordTableRenderer, write_password_table

__all__ = [
    "PasswordTableRenderer",
    "write_password",
    "write_password_table",
]
