from __future__ import annotations

from typing import Any, Optional

from lxml import etree

from gbase_types import XmlValue


def xml_text(v: XmlValue) -> str:
    return "" if v is None else str(v)


def local_name(node: Any) -> Optional[str]:
    """Unqualified tag name of an element, None for comments and PIs."""
    if not isinstance(node.tag, str):
        return None
    return etree.QName(node).localname


def inner_text(node: etree._Element) -> str:
    """All descendant text of node concatenated, untrimmed."""
    return str(node.xpath("string()"))


__all__ = ["xml_text", "local_name", "inner_text"]
