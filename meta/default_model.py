from dataclasses import dataclass
from .gm_meta import GmMetaModel


@dataclass
class MetaBundle:
    gm: GmMetaModel


DEFAULT_META = MetaBundle(gm=GmMetaModel())
