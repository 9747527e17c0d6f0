#!/usr/bin/env python3
"""
Protocols for the gbase codecs.
"""

from typing import Optional, Any, Protocol
from .gbase import ExtensionKind

# ---------- Protocol definitions ----------
class XmlElement(Protocol):
    """Protocol for XML element context."""
    def __enter__(self) -> 'XmlElement': ...
    def __exit__(self, exc_type: Optional[type], exc_val: Optional[Exception], exc_tb: Optional[Any]) -> None: ...


class ExtensionElement(Protocol):
    """Anything that can live in an entry's extension list."""
    kind: ExtensionKind

    def save(self, writer: Any) -> None: ...
