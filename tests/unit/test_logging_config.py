#!/usr/bin/env python3
"""
Tests for logging setup
"""

import logging

from utils.logging_config import configure_logging


def test_configure_named_logger_once():
    logger = configure_logging(logging.WARNING, logger_name="gbase.test")
    configure_logging(logging.DEBUG, logger_name="gbase.test")
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_skipped_child_is_logged(caplog, registry):
    from lxml import etree
    from core.item_type_attributes import ItemTypeAttributes

    node = etree.fromstring(
        '<gm:attributes xmlns:gm="http://base.google.com/ns-metadata/1.0"><gm:note/></gm:attributes>'
    )
    with caplog.at_level(logging.DEBUG, logger="core.item_type_attributes"):
        ItemTypeAttributes.parse(node, registry)
    assert any("Skipping" in r.getMessage() for r in caplog.records)
