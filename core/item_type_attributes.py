#!/usr/bin/env python3
"""
Object form of the gm:attributes tag in an item types feed entry.

<gm:attributes>
  <gm:attribute name="price" type="floatUnit"/>
  <gm:attribute name="label"/>
</gm:attributes>

Usually reached through ItemTypeDefinition rather than directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, List, Optional, Sequence, Tuple

from lxml import etree

from gbase_types import AttributeName, ExtensionKind, ItemTypeParseError, UnknownAttributeTypeError
from meta import DEFAULT_META, GmMetaModel
from types_profiles.registry import AttributeType, AttributeTypeRegistry, get_default_registry
from utils.xml import local_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttributeId:
    """Attribute name and, optionally, its type."""
    name: AttributeName
    type: Optional[AttributeType] = None


class ItemTypeAttributes:
    kind: ClassVar[ExtensionKind] = ExtensionKind.ATTRIBUTES

    def __init__(self, attributes: Sequence[AttributeId]) -> None:
        if attributes is None:
            raise ValueError("attributes must not be None")
        self._attributes: Tuple[AttributeId, ...] = tuple(attributes)

    @property
    def attributes(self) -> Tuple[AttributeId, ...]:
        """Declared attributes, in document order, duplicates kept."""
        return self._attributes

    @classmethod
    def parse(cls, node: etree._Element,
              registry: Optional[AttributeTypeRegistry] = None,
              gm_model: Optional[GmMetaModel] = None) -> "ItemTypeAttributes":
        """Build from a <gm:attributes> node.

        Only direct children named "attribute" count; anything else is
        skipped. A child without a name, or with a type the registry does
        not know, raises ItemTypeParseError.
        """
        if registry is None:
            registry = get_default_registry()
        gm_model = gm_model or DEFAULT_META.gm
        attribute_ids: List[AttributeId] = []
        for child in node:
            if local_name(child) != gm_model.attribute_local:
                if local_name(child) is not None:
                    logger.debug(f"Skipping <{child.tag}> inside <{node.tag}>")
                continue
            name = child.get("name")
            if name is None:
                raise ItemTypeParseError(
                    f"<{gm_model.attribute_local}> without a name attribute (line {child.sourceline})"
                )
            type_name = child.get("type")
            attr_type: Optional[AttributeType] = None
            if type_name is not None:
                try:
                    attr_type = registry.for_name(type_name)
                except UnknownAttributeTypeError as e:
                    raise ItemTypeParseError(
                        f"Attribute '{name}' has unknown type '{type_name}'"
                    ) from e
            attribute_ids.append(AttributeId(AttributeName(name), attr_type))
        logger.debug(f"Parsed {len(attribute_ids)} attribute(s)")
        return cls(attribute_ids)

    def save(self, writer) -> None:
        """Generate the XML representation through a GmWriter."""
        gm = writer.config
        writer.start_element(gm.attributes_local)
        for attribute_id in self._attributes:
            attrs = {"name": attribute_id.name}
            if attribute_id.type is not None:
                attrs["type"] = attribute_id.type.name
            writer.write_element(gm.attribute_local, attrs)
        writer.end_element()

    def __len__(self) -> int:
        return len(self._attributes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemTypeAttributes):
            return NotImplemented
        return self._attributes == other._attributes

    def __hash__(self) -> int:
        return hash(self._attributes)

    def __repr__(self) -> str:
        return f"ItemTypeAttributes({list(self._attributes)!r})"


__all__ = ["AttributeId", "ItemTypeAttributes"]
