from typing import Any, Optional
import copy
import io
import logging
from lxml import etree

from utils.xml import xml_text
from meta import GmMetaModel, DEFAULT_META
from app.config import CodecConfig, DEFAULT_CONFIG

from gbase_types import ContextStack, ElementAttributes, ExtensionError

# Setup logger
logger = logging.getLogger(__name__)

class GmWriter:
    """Streams gm: metadata elements into an lxml incremental writer."""

    def __init__(self, xf: etree.xmlfile, gm_model: Optional[GmMetaModel] = None) -> None:
        self.xf: etree.xmlfile = xf
        self._ctx_stack: ContextStack = []

        # Use provided model or default
        if gm_model is None:
            gm_model = DEFAULT_META.gm
        self.config: GmMetaModel = gm_model

    @property
    def depth(self) -> int:
        return len(self._ctx_stack)

    def start_element(self, local: str, attrs: Optional[ElementAttributes] = None) -> None:
        """Open <gm:local> with the given XML attributes."""
        ctx: etree._Element = self.xf.element(
            self.config.tag(local),
            attrib={k: xml_text(v) for k, v in (attrs or {}).items()},
            nsmap=self.config.gm_nsmap,
        )
        ctx.__enter__()
        self._ctx_stack.append(ctx)

    def start_foreign_element(self, tag: str, nsmap: Optional[dict] = None) -> None:
        """Open an element outside the gm namespace, e.g. an Atom entry."""
        ctx: etree._Element = self.xf.element(tag, nsmap=nsmap)
        ctx.__enter__()
        self._ctx_stack.append(ctx)

    def end_element(self) -> None:
        if not self._ctx_stack:
            raise ExtensionError("end_element() called with no open element")
        ctx: etree._Element = self._ctx_stack.pop()
        ctx.__exit__(None, None, None)

    def write_string(self, text: str) -> None:
        if text:
            self.xf.write(text)

    def write_element(self, local: str, attrs: Optional[ElementAttributes] = None,
                      text: Optional[str] = None) -> None:
        """Write a complete, childless <gm:local> element."""
        el: etree._Element = etree.Element(
            self.config.tag(local),
            attrib={k: xml_text(v) for k, v in (attrs or {}).items()},
            nsmap=self.config.gm_nsmap,
        )
        if text is not None:
            el.text = text
        self.xf.write(el)

    def write_raw(self, element: etree._Element) -> None:
        # Copy so the written subtree loses its tail and parent
        el = copy.deepcopy(element)
        el.tail = None
        self.xf.write(el)

    def close(self) -> None:
        """Close every element still open."""
        if self._ctx_stack:
            logger.debug(f"Closing {len(self._ctx_stack)} open element(s)")
        while self._ctx_stack:
            ctx: etree._Element = self._ctx_stack.pop()
            ctx.__exit__(None, None, None)


def render(obj: Any, config: Optional[CodecConfig] = None,
           gm_model: Optional[GmMetaModel] = None) -> bytes:
    """Serialize one object exposing save(writer) as a standalone document."""
    config = config or DEFAULT_CONFIG
    buf = io.BytesIO()
    with etree.xmlfile(buf, encoding=config.encoding) as xf:
        if config.xml_declaration:
            xf.write_declaration()
        writer = GmWriter(xf, gm_model)
        obj.save(writer)
        writer.close()
    return buf.getvalue()


def render_entry(extensions: Any, config: Optional[CodecConfig] = None,
                 gm_model: Optional[GmMetaModel] = None) -> bytes:
    """Serialize an extension list wrapped in an Atom <entry>."""
    config = config or DEFAULT_CONFIG
    gm_model = gm_model or DEFAULT_META.gm
    buf = io.BytesIO()
    with etree.xmlfile(buf, encoding=config.encoding) as xf:
        if config.xml_declaration:
            xf.write_declaration()
        writer = GmWriter(xf, gm_model)
        writer.start_foreign_element(gm_model.entry_tag, nsmap=gm_model.entry_nsmap)
        extensions.save(writer)
        writer.close()
    return buf.getvalue()


__all__ = ["GmWriter", "render", "render_entry"]
