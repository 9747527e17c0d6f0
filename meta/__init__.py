from .gm_meta import GmMetaModel
from .default_model import DEFAULT_META

__all__ = [
    "GmMetaModel",
    "DEFAULT_META",
]
