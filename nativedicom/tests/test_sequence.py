# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""Unit tests for the nativedicom.sequence module."""

from xml.etree.ElementTree import Element, fromstring, tostring

import pytest

from nativedicom.dataelem import DicomAttribute, values_attribute
from nativedicom.dataset import DicomDataSet
from nativedicom.errors import ShapeMismatchError
from nativedicom.sequence import Item
from nativedicom.valuerep import ValueKind


NESTED = (
    '<DicomAttribute tag="0040A730" vr="SQ" keyword="ContentSequence">'
    '<Item number="1">'
    '<DicomAttribute tag="0040A040" vr="CS" keyword="ValueType">'
    '<Value number="1">CONTAINER</Value>'
    '</DicomAttribute>'
    '<DicomAttribute tag="0040A730" vr="SQ" keyword="ContentSequence">'
    '<Item number="1">'
    '<DicomAttribute tag="0040A160" vr="UT" keyword="TextValue">'
    '<Value number="1">No abnormality</Value>'
    '</DicomAttribute>'
    '</Item>'
    '</DicomAttribute>'
    '</Item>'
    '</DicomAttribute>'
)


class TestItem:
    def test_default(self):
        item = Item(1)
        assert 1 == item.number
        assert isinstance(item.dataset, DicomDataSet)
        assert 0 == len(item.dataset)
        assert ValueKind.ITEM == item.kind

    def test_init_from_attributes(self):
        item = Item(2, [values_attribute(0x0040A010, "CS", ["CONTAINS"])])
        assert [0x0040A010] == item.dataset.keys()

    def test_init_from_dataset(self):
        ds = DicomDataSet()
        assert Item(1, ds).dataset is ds

    def test_bad_number_raises(self):
        with pytest.raises(ShapeMismatchError):
            Item(0)
        with pytest.raises(ShapeMismatchError):
            Item.from_xml(fromstring('<Item/>'))
        with pytest.raises(ShapeMismatchError):
            Item.from_xml(fromstring('<Item number="x"/>'))

    def test_wrong_element_raises(self):
        with pytest.raises(ShapeMismatchError):
            Item.from_xml(fromstring('<Value number="1"/>'))

    def test_empty_item(self):
        item = Item.from_xml(fromstring('<Item number="3"/>'))
        assert Item(3) == item

    def test_repr(self):
        assert "<Item 1, 0 attribute(s)>" == repr(Item(1))


class TestNestedSequence:
    def test_parse_depth_two(self):
        """Test sequences nest through items"""
        elem = DicomAttribute.from_xml(fromstring(NESTED))
        outer = elem.get_items()
        assert 1 == len(outer)
        assert "CONTAINER" == outer[0].dataset[0x0040A040].extract_value()

        inner_seq = outer[0].dataset[0x0040A730]
        assert ValueKind.ITEM == inner_seq.value_kind
        inner = inner_seq.get_items()
        assert 1 == len(inner)
        text = inner[0].dataset.get_attribute_by_tag("0040A160")
        assert "No abnormality" == text.extract_value()

    def test_serialize_same_shape(self):
        """Test the nested structure is written back unchanged"""
        elem = DicomAttribute.from_xml(fromstring(NESTED))
        parent = Element("NativeDicomModel")
        elem.to_xml(parent)
        assert NESTED.encode("ascii") == tostring(parent[0])

    def test_round_trip(self):
        elem = DicomAttribute.from_xml(fromstring(NESTED))
        parent = Element("NativeDicomModel")
        assert elem == DicomAttribute.from_xml(elem.to_xml(parent))
