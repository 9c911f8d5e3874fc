"""Custom exceptions for the password table renderer."""

from typing import Any, Optional


class PasswordRendererError(Exception):
    """Base exception for password renderer errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(PasswordRendererError):
    """Exception raised for invalid renderer configuration."""

    pass


class RenderingError(PasswordRendererError):
    """Exception raised during table rendering."""

    pass


class LinkError(RenderingError):
    """Exception raised when a cross-reference cannot be linked."""

    def __init__(self, message: str, document: Any = None, element: Optional[str] = None):
        details = None
        if document is not None:
            details = f"{document}#{element}" if element else str(document)
        super().__init__(message, details)
        self.document = document
        self.element = element


class ElementNotFoundError(LinkError):
    """Exception raised when a linked element id is missing from the target document."""

    def __init__(self, document: Any, element: str):
        super().__init__(f"Element not found in target document: {element}", document, element)


class GeneratedIdLinkError(LinkError):
    """Exception raised when a link targets a system-generated element id."""

    def __init__(self, document: Any, element: str):
        super().__init__(
            "Not allowed to link to a generated element id, "
            f"set an explicit id on the target element: {element}",
            document,
            element,
        )
