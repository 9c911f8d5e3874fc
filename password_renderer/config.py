"""Configuration for the password table renderer."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class PasswordTableConfig:
    """
    Markup constants used when rendering password tables.

    Attributes:
        table_css_class: ``class`` attribute of the ``<table>`` element.
        header_css_class: ``class`` attribute of the caption cell.
        body_css_class: ``class`` attribute of the trailing body cell.
        site_label: Heading of the site column.
        username_label: Heading of the username column.
        password_label: Heading of the password column.
        secret_question_label: Heading of the secret question column.
        secret_answer_label: Heading of the secret answer column.
        broken_link_template: Label of links whose document could not be
            captured, formatted with ``path``.
        show_batch_ordinal: Whether links into the current batch get a
            ``<sup>[n]</sup>`` marker.
    """

    table_css_class: str = "thinTable passwordTable"
    header_css_class: str = "passwordTableHeader"
    body_css_class: str = "passwordTableBody"
    site_label: str = "Site"
    username_label: str = "Username"
    password_label: str = "Password"
    secret_question_label: str = "Secret Question"
    secret_answer_label: str = "Secret Answer"
    broken_link_template: str = "¿{path}?"
    show_batch_ordinal: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PasswordTableConfig":
        """
        Build a configuration from a plain mapping.

        Args:
            data: Option names and values, all optional

        Returns:
            PasswordTableConfig instance

        Raises:
            ConfigurationError: On unknown option names or wrongly typed values
        """
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigurationError("Unknown configuration options", ", ".join(unknown))

        values: Dict[str, Any] = {}
        for name, value in data.items():
            expected = bool if name == "show_batch_ordinal" else str
            if not isinstance(value, expected):
                raise ConfigurationError(
                    f"Invalid value for {name}",
                    f"expected {expected.__name__}, got {type(value).__name__}",
                )
            values[name] = value
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> "PasswordTableConfig":
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
