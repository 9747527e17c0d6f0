#!/usr/bin/env python3
"""
Types module for the gbase item type codecs.
Centralized type definitions organized by domain.
"""

# Public types export
from .base import XmlValue

from .gbase import (
    ExtensionKind,
    ItemTypeName, AttributeName, TypeName
)

from .xml import (
    ContextStack, ElementAttributes
)

from .errors import (
    GBaseError, UnknownAttributeTypeError, ItemTypeParseError, ExtensionError
)

from .protocols import (
    XmlElement, ExtensionElement
)

__all__ = [
    # Base types
    'XmlValue',

    # Google Base types
    'ExtensionKind',
    'ItemTypeName', 'AttributeName', 'TypeName',

    # XML types
    'ContextStack', 'ElementAttributes',

    # Errors
    'GBaseError', 'UnknownAttributeTypeError', 'ItemTypeParseError', 'ExtensionError',

    # Protocols
    'XmlElement', 'ExtensionElement'
]
