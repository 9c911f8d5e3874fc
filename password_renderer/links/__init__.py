"""Cross-reference links from custom field values to other documents."""

from .link_resolver import BrokenLink, LinkResolver, LinkResult

__all__ = ["BrokenLink", "LinkResolver", "LinkResult"]
