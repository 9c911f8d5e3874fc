"""Common enumerations used across the password renderer."""

from __future__ import annotations

from enum import Enum


class CaptureLevel(str, Enum):
    """How much of a referenced document the host pipeline should capture."""

    PAGE = "page"
    META = "meta"
