#!/usr/bin/env python3
"""
Google Base metadata types and enums.
"""

from typing import NewType
from enum import Enum

# ---------- Type aliases for item type metadata ----------
ItemTypeName = NewType('ItemTypeName', str)
AttributeName = NewType('AttributeName', str)
TypeName = NewType('TypeName', str)

# ---------- Enums for extension elements ----------
class ExtensionKind(Enum):
    """Closed set of extension element kinds found on an item types entry."""
    ITEM_TYPE = "item_type"
    ATTRIBUTES = "attributes"
    OTHER = "other"
