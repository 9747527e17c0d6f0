#!/usr/bin/env python3
"""
Core item type codecs.

Importing the package also puts the project root on sys.path so the
sibling top-level packages resolve when run from a checkout.
"""

import sys
from pathlib import Path

# Single point of path configuration
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

# Re-export commonly used core components
from .item_type_attributes import AttributeId, ItemTypeAttributes
from .metadata_item_type import MetadataItemType
from .extensions import ExtensionList, RawExtension
from .item_type_definition import ItemTypeDefinition

__all__ = [
    'AttributeId', 'ItemTypeAttributes', 'MetadataItemType',
    'ExtensionList', 'RawExtension', 'ItemTypeDefinition'
]
