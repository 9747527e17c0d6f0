from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Optional, Any, Iterator
import json
import logging
import os

import yaml

from gbase_types.errors import UnknownAttributeTypeError
from gbase_types import TypeName

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "gbase.json")


@dataclass(frozen=True)
class AttributeType:
    name: TypeName
    supertype: Optional["AttributeType"] = None

    def is_supertype_of(self, other: "AttributeType") -> bool:
        """True if other is this type or derives from it."""
        current: Optional[AttributeType] = other
        while current is not None:
            if current.name == self.name:
                return True
            current = current.supertype
        return False

    def __str__(self) -> str:
        return self.name


class AttributeTypeRegistry:
    def __init__(self, profiles: Optional[List[Dict[str, Any]]] = None) -> None:
        self.types: Dict[str, AttributeType] = {}
        if profiles:
            for prof in profiles:
                self._merge_profile(prof)

    def _merge_profile(self, profile: Dict[str, Any]) -> None:
        for entry in profile.get("types", []):
            if isinstance(entry, str):
                self.register(entry)
            else:
                self.register(entry["name"], entry.get("supertype"))

    def register(self, name: str, supertype: Optional[str] = None) -> AttributeType:
        parent = self.for_name(supertype) if supertype else None
        existing = self.types.get(name)
        if existing is not None and existing.supertype == parent:
            return existing
        if existing is not None:
            logger.warning(f"Redefining attribute type '{name}'")
        attr_type = AttributeType(TypeName(name), parent)
        self.types[name] = attr_type
        return attr_type

    def for_name(self, name: str) -> AttributeType:
        try:
            return self.types[name]
        except KeyError:
            raise UnknownAttributeTypeError(name) from None

    def names(self) -> List[str]:
        return list(self.types)

    def __contains__(self, name: object) -> bool:
        return name in self.types

    def __iter__(self) -> Iterator[AttributeType]:
        return iter(self.types.values())

    def __len__(self) -> int:
        return len(self.types)


def _load_single_profile(path: str) -> Dict[str, Any]:
    with open(path, 'r', encoding='utf-8') as f:
        if path.lower().endswith(('.yml', '.yaml')):
            return yaml.safe_load(f) or {}
        return json.load(f)


def load_profiles(paths: List[str]) -> AttributeTypeRegistry:
    profiles: List[Dict[str, Any]] = []
    for p in paths:
        if not p:
            continue
        if not os.path.isfile(p):
            raise FileNotFoundError(f"Attribute type profile file not found: {p}")
        profiles.append(_load_single_profile(p))
    return AttributeTypeRegistry(profiles)


@lru_cache(maxsize=None)
def get_default_registry() -> AttributeTypeRegistry:
    return load_profiles([DEFAULT_PROFILE])
