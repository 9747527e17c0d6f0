#!/usr/bin/env python3
"""
Exception hierarchy for the item type codecs.
"""


class GBaseError(Exception):
    """Base class for every error raised by the gbase codecs."""


class UnknownAttributeTypeError(GBaseError, LookupError):
    """An attribute type name is not present in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown attribute type: {name!r}")
        self.name = name


class ItemTypeParseError(GBaseError, ValueError):
    """An item type element could not be turned into its object form."""


class ExtensionError(GBaseError):
    """Misuse of the extension writer, e.g. closing an element never opened."""


__all__ = [
    "GBaseError",
    "UnknownAttributeTypeError",
    "ItemTypeParseError",
    "ExtensionError",
]
