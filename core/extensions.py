#!/usr/bin/env python3
"""
Ordered extension list of a feed entry, keyed by ExtensionKind.

Known gm: elements are parsed into their object form; anything else is
kept as a RawExtension and written back unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, Iterable, Iterator, List, Optional, Tuple

from lxml import etree

from gbase_types import ExtensionElement, ExtensionKind
from meta import DEFAULT_META, GmMetaModel
from types_profiles.registry import AttributeTypeRegistry, get_default_registry
from .item_type_attributes import ItemTypeAttributes
from .metadata_item_type import MetadataItemType

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class RawExtension:
    """An element this package does not model, kept verbatim."""
    element: etree._Element
    kind: ClassVar[ExtensionKind] = ExtensionKind.OTHER

    @property
    def tag(self) -> str:
        return self.element.tag

    def save(self, writer) -> None:
        writer.write_raw(self.element)


class ExtensionList:
    def __init__(self, elements: Optional[Iterable[ExtensionElement]] = None) -> None:
        self._elements: List[ExtensionElement] = list(elements or [])

    def find_first(self, kind: ExtensionKind) -> Optional[ExtensionElement]:
        for element in self._elements:
            if element.kind is kind:
                return element
        return None

    def replace_or_insert(self, kind: ExtensionKind, element: ExtensionElement) -> None:
        """Put element at the position of the first one of kind, dropping the rest."""
        if element.kind is not kind:
            raise ValueError(f"Element of kind {element.kind.name} cannot replace {kind.name}")
        kept: List[ExtensionElement] = []
        placed = False
        for existing in self._elements:
            if existing.kind is kind:
                if not placed:
                    kept.append(element)
                    placed = True
                continue
            kept.append(existing)
        if not placed:
            kept.append(element)
        self._elements[:] = kept

    def remove(self, kind: ExtensionKind) -> int:
        before = len(self._elements)
        self._elements[:] = [e for e in self._elements if e.kind is not kind]
        return before - len(self._elements)

    def append(self, element: ExtensionElement) -> None:
        self._elements.append(element)

    def of_kind(self, kind: ExtensionKind) -> List[ExtensionElement]:
        return [e for e in self._elements if e.kind is kind]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[ExtensionElement]:
        return iter(self._elements)

    def __getitem__(self, index: int) -> ExtensionElement:
        return self._elements[index]

    def __repr__(self) -> str:
        return f"ExtensionList({self._elements!r})"

    @classmethod
    def parse(cls, entry: etree._Element,
              registry: Optional[AttributeTypeRegistry] = None,
              gm_model: Optional[GmMetaModel] = None) -> "ExtensionList":
        """Collect the extensions among the direct element children of entry."""
        if registry is None:
            registry = get_default_registry()
        gm_model = gm_model or DEFAULT_META.gm
        parsers: Dict[str, Callable[[etree._Element], ExtensionElement]] = {
            gm_model.item_type_tag: MetadataItemType.parse,
            gm_model.attributes_tag: lambda node: ItemTypeAttributes.parse(node, registry, gm_model),
        }
        elements: List[ExtensionElement] = []
        for child in entry:
            if not isinstance(child.tag, str):
                continue
            parser = parsers.get(child.tag)
            if parser is None:
                elements.append(RawExtension(child))
            else:
                elements.append(parser(child))
        logger.debug(f"Parsed {len(elements)} extension(s) from <{entry.tag}>")
        return cls(elements)

    def save(self, writer) -> None:
        for element in self._elements:
            element.save(writer)

    def kinds(self) -> Tuple[ExtensionKind, ...]:
        return tuple(e.kind for e in self._elements)


__all__ = ["RawExtension", "ExtensionList"]
