#!/usr/bin/env python3
"""
XML writer types for the gbase codecs.
"""

from typing import List, Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from .protocols import XmlElement

# ---------- Type aliases for XML ----------
ContextStack = List['XmlElement']
ElementAttributes = Dict[str, str]
