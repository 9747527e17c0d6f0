#!/usr/bin/env python3
"""
Tests for the ItemTypeDefinition view over an extension list
"""

from lxml import etree

from core.extensions import ExtensionList, RawExtension
from core.item_type_attributes import AttributeId, ItemTypeAttributes
from core.item_type_definition import ItemTypeDefinition
from core.metadata_item_type import MetadataItemType
from gbase_types import ExtensionKind
from gen.gm.writer import render_entry

GM_NS = "http://base.google.com/ns-metadata/1.0"


class TestDefaults:

    def test_absent_elements(self, extensions):
        definition = ItemTypeDefinition(extensions)
        assert definition.item_type is None
        assert definition.attributes == ()

    def test_unrelated_extensions_ignored(self):
        definition = ItemTypeDefinition(ExtensionList([RawExtension(etree.Element("title"))]))
        assert definition.item_type is None
        assert definition.attributes == ()

    def test_explicit_empty_attributes_element_reads_as_empty(self):
        definition = ItemTypeDefinition(ExtensionList([ItemTypeAttributes([])]))
        assert definition.attributes == ()

    def test_empty_item_type_name_is_not_absent(self):
        definition = ItemTypeDefinition(ExtensionList([MetadataItemType("")]))
        assert definition.item_type == ""


class TestItemType:

    def test_reads_backing_list(self):
        assert ItemTypeDefinition(ExtensionList([MetadataItemType("Jobs")])).item_type == "Jobs"

    def test_set_twice_keeps_one(self, extensions):
        definition = ItemTypeDefinition(extensions)
        definition.item_type = "Products"
        definition.item_type = "Jobs"
        found = extensions.of_kind(ExtensionKind.ITEM_TYPE)
        assert len(found) == 1
        assert found[0].name == "Jobs"
        assert definition.item_type == "Jobs"

    def test_set_replaces_instance(self):
        original = MetadataItemType("Products")
        exts = ExtensionList([original])
        ItemTypeDefinition(exts).item_type = "Jobs"
        assert original.name == "Products"
        assert exts[0] is not original

    def test_set_none_removes(self):
        exts = ExtensionList([MetadataItemType("Products"), RawExtension(etree.Element("title"))])
        definition = ItemTypeDefinition(exts)
        definition.item_type = None
        assert definition.item_type is None
        assert exts.kinds() == (ExtensionKind.OTHER,)

    def test_set_none_when_absent(self, extensions):
        ItemTypeDefinition(extensions).item_type = None
        assert len(extensions) == 0


class TestAttributes:

    def test_set_and_get(self, extensions, registry):
        ids = [AttributeId("price", registry.for_name("floatUnit")), AttributeId("label")]
        definition = ItemTypeDefinition(extensions)
        definition.attributes = ids
        assert definition.attributes == tuple(ids)
        assert len(extensions) == 1

    def test_set_twice_keeps_one(self, extensions):
        definition = ItemTypeDefinition(extensions)
        definition.attributes = [AttributeId("a")]
        definition.attributes = [AttributeId("b")]
        assert len(extensions.of_kind(ExtensionKind.ATTRIBUTES)) == 1
        assert definition.attributes == (AttributeId("b"),)

    def test_set_empty_removes_existing(self):
        exts = ExtensionList([MetadataItemType("Jobs"), ItemTypeAttributes([AttributeId("a")])])
        ItemTypeDefinition(exts).attributes = []
        assert len(exts) == 1
        assert exts.find_first(ExtensionKind.ATTRIBUTES) is None

    def test_set_empty_when_absent_leaves_list(self):
        exts = ExtensionList([MetadataItemType("Jobs")])
        ItemTypeDefinition(exts).attributes = []
        assert len(exts) == 1

    def test_set_none_removes(self):
        exts = ExtensionList([ItemTypeAttributes([AttributeId("a")])])
        definition = ItemTypeDefinition(exts)
        definition.attributes = None
        assert len(exts) == 0
        assert definition.attributes == ()

    def test_caller_list_mutation_does_not_leak(self, extensions):
        ids = [AttributeId("a")]
        definition = ItemTypeDefinition(extensions)
        definition.attributes = ids
        ids.append(AttributeId("b"))
        assert definition.attributes == (AttributeId("a"),)


class TestSerialization:

    def test_definition_written_through_entry(self, extensions, registry):
        definition = ItemTypeDefinition(extensions)
        definition.item_type = "Products"
        definition.attributes = [AttributeId("price", registry.for_name("floatUnit"))]
        root = etree.fromstring(render_entry(extensions))
        assert root.find(f"{{{GM_NS}}}item_type").text == "Products"
        attribute = root.find(f"{{{GM_NS}}}attributes/{{{GM_NS}}}attribute")
        assert attribute.get("name") == "price"
        assert attribute.get("type") == "floatUnit"

        reparsed = ItemTypeDefinition(ExtensionList.parse(root, registry))
        assert reparsed.item_type == "Products"
        assert reparsed.attributes == definition.attributes

    def test_no_attributes_element_when_cleared(self, extensions):
        definition = ItemTypeDefinition(extensions)
        definition.item_type = "Jobs"
        definition.attributes = []
        root = etree.fromstring(render_entry(extensions))
        assert root.find(f"{{{GM_NS}}}attributes") is None
