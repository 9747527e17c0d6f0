from dataclasses import dataclass
from typing import Dict

Namespace = str
Prefix = str
Tag = str


@dataclass
class GmMetaModel:
    gm_ns: Namespace = "http://base.google.com/ns-metadata/1.0"
    gm_prefix: Prefix = "gm"
    g_ns: Namespace = "http://base.google.com/ns/1.0"
    atom_ns: Namespace = "http://www.w3.org/2005/Atom"

    item_type_local: str = "item_type"
    attributes_local: str = "attributes"
    attribute_local: str = "attribute"

    def tag(self, local: str) -> Tag:
        return f"{{{self.gm_ns}}}{local}"

    @property
    def item_type_tag(self) -> Tag:
        return self.tag(self.item_type_local)

    @property
    def attributes_tag(self) -> Tag:
        return self.tag(self.attributes_local)

    @property
    def attribute_tag(self) -> Tag:
        return self.tag(self.attribute_local)

    @property
    def entry_tag(self) -> Tag:
        return f"{{{self.atom_ns}}}entry"

    @property
    def gm_nsmap(self) -> Dict[str, Namespace]:
        return {self.gm_prefix: self.gm_ns}

    @property
    def entry_nsmap(self) -> Dict[str, Namespace]:
        return {"atom": self.atom_ns, self.gm_prefix: self.gm_ns}
