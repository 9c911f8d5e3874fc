"""
Models module for password tables.

This module contains the immutable value classes a password table is
rendered from, along with the document references its links point at.
"""

from .document import Document, DocumentRef, Element
from .password import CustomField, PasswordRecord
from .password_table import PasswordTable

__all__ = [
    "CustomField",
    "Document",
    "DocumentRef",
    "Element",
    "PasswordRecord",
    "PasswordTable",
]
