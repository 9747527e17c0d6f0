import logging
import os
import sys

import pytest

# Ensure project root is first on sys.path so the local top-level packages are used
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from utils.logging_config import configure_logging  # noqa: E402

configure_logging(logging.DEBUG)


@pytest.fixture
def registry():
    from types_profiles.registry import get_default_registry
    return get_default_registry()


@pytest.fixture
def extensions():
    from core.extensions import ExtensionList
    return ExtensionList()
