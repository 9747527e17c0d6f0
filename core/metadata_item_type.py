#!/usr/bin/env python3
"""
Object form of a gm:item_type tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from lxml import etree

from gbase_types import ExtensionKind, ItemTypeName
from utils.xml import inner_text


@dataclass(frozen=True)
class MetadataItemType:
    name: ItemTypeName
    kind: ClassVar[ExtensionKind] = ExtensionKind.ITEM_TYPE

    @classmethod
    def parse(cls, node: etree._Element) -> "MetadataItemType":
        """Name is the full text content of node, untrimmed."""
        return cls(ItemTypeName(inner_text(node)))

    def save(self, writer) -> None:
        writer.start_element(writer.config.item_type_local)
        writer.write_string(self.name)
        writer.end_element()


__all__ = ["MetadataItemType"]
