#!/usr/bin/env python3
"""
Base types shared by the gbase codecs.
"""

from typing import Union

# ---------- Common type aliases ----------
XmlValue = Union[str, int, float, bool, None]
