#!/usr/bin/env python3
"""
Object form of the gm:attributes and gm:item_type tags of an item types
feed entry.

This is a restricted view over the entry's extension list: it owns no
state and looks only for the ITEM_TYPE and ATTRIBUTES kinds.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from gbase_types import ExtensionKind, ItemTypeName
from .extensions import ExtensionList
from .item_type_attributes import AttributeId, ItemTypeAttributes
from .metadata_item_type import MetadataItemType

NO_ATTRIBUTES: Tuple[AttributeId, ...] = ()


class ItemTypeDefinition:
    def __init__(self, extensions: ExtensionList) -> None:
        self.extensions = extensions

    @property
    def item_type(self) -> Optional[ItemTypeName]:
        """Item type name, None when the entry has no gm:item_type."""
        extension = self.extensions.find_first(ExtensionKind.ITEM_TYPE)
        return None if extension is None else extension.name

    @item_type.setter
    def item_type(self, value: Optional[str]) -> None:
        if value is None:
            self.extensions.remove(ExtensionKind.ITEM_TYPE)
        else:
            self.extensions.replace_or_insert(
                ExtensionKind.ITEM_TYPE, MetadataItemType(ItemTypeName(value))
            )

    @property
    def attributes(self) -> Tuple[AttributeId, ...]:
        """Attributes defined for the item type, empty when there are none."""
        extension = self.extensions.find_first(ExtensionKind.ATTRIBUTES)
        return NO_ATTRIBUTES if extension is None else extension.attributes

    @attributes.setter
    def attributes(self, value: Optional[Sequence[AttributeId]]) -> None:
        # No attributes is written as no gm:attributes element at all
        if not value:
            self.extensions.remove(ExtensionKind.ATTRIBUTES)
        else:
            self.extensions.replace_or_insert(
                ExtensionKind.ATTRIBUTES, ItemTypeAttributes(value)
            )

    def __repr__(self) -> str:
        return f"ItemTypeDefinition(item_type={self.item_type!r}, attributes={list(self.attributes)!r})"


__all__ = ["ItemTypeDefinition", "NO_ATTRIBUTES"]
