from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, List

from types_profiles.registry import (
    AttributeTypeRegistry, DEFAULT_PROFILE, get_default_registry, load_profiles
)


@dataclass
class CodecConfig:
    # Output settings
    encoding: str = "utf-8"
    xml_declaration: bool = False

    # Attribute type lookup
    use_default_profile: bool = True
    types_profiles: Optional[List[str]] = field(default=None)


DEFAULT_CONFIG = CodecConfig()


def build_registry(config: Optional[CodecConfig] = None) -> AttributeTypeRegistry:
    """Registry used to resolve gm:attribute type tokens under config."""
    config = config or DEFAULT_CONFIG
    if not config.types_profiles:
        if config.use_default_profile:
            return get_default_registry()
        return AttributeTypeRegistry()
    paths: List[str] = []
    if config.use_default_profile:
        paths.append(DEFAULT_PROFILE)
    paths.extend(config.types_profiles)
    return load_profiles(paths)


__all__ = [
    "CodecConfig",
    "DEFAULT_CONFIG",
    "build_registry",
]
