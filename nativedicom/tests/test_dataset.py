# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""Unit tests for the nativedicom.dataset module."""

from xml.etree.ElementTree import Element, fromstring

import pytest

from nativedicom.dataelem import DicomAttribute, values_attribute
from nativedicom.dataset import DicomDataSet
from nativedicom.errors import DuplicateTagError
from nativedicom.sequence import Item
from nativedicom.valuerep import Value


def make_dataset():
    return DicomDataSet([
        values_attribute(0x00100020, "LO", ["12345"], "PatientID"),
        values_attribute(0x00080020, "DA", ["20210315"], "StudyDate"),
        DicomAttribute(0x00091010, "LO", private_creator="ACME 1.1",
                       value=[Value(1, "private")]),
        DicomAttribute(0x0040A730, "SQ", "ContentSequence", value=[
            Item(1, [
                values_attribute(0x0040A010, "CS", ["CONTAINS"]),
                DicomAttribute(0x00091010, "LO", private_creator="ACME 1.1"),
            ]),
            Item(2, [values_attribute(0x0040A010, "CS", ["HAS PROPERTIES"])]),
        ]),
    ])


class TestDicomDataSet:
    def test_duplicate_tag_raises(self):
        """Test two attributes with one tag can't be in a dataset"""
        with pytest.raises(DuplicateTagError, match=r"\(0010, 0020\)"):
            DicomDataSet([
                DicomAttribute(0x00100020, "LO"),
                DicomAttribute("00100020", "SH"),
            ])

    def test_duplicate_tag_in_document_raises(self):
        """Test a duplicate tag aborts the whole parse"""
        xml = (
            '<NativeDicomModel>'
            '<DicomAttribute tag="00100020" vr="LO"/>'
            '<DicomAttribute tag="00100010" vr="PN"/>'
            '<DicomAttribute tag="00100020" vr="LO"/>'
            '</NativeDicomModel>'
        )
        with pytest.raises(DuplicateTagError):
            DicomDataSet.from_xml(fromstring(xml))

    def test_same_tag_in_items_allowed(self):
        """Test tags only need to be unique within one dataset"""
        ds = make_dataset()
        assert 0x00091010 in ds
        items = ds[0x0040A730].get_items()
        assert 0x00091010 in items[0].dataset

    def test_non_attribute_raises(self):
        with pytest.raises(TypeError):
            DicomDataSet([Value(1, "a")])

    def test_get_attribute_by_tag(self):
        """Test lookup returns the exact attribute for every tag"""
        attributes = [
            DicomAttribute(0x00100020, "LO"),
            DicomAttribute(0x00100010, "PN"),
            DicomAttribute(0x7FE00010, "OW"),
        ]
        ds = DicomDataSet(attributes)
        for attribute in attributes:
            assert ds.get_attribute_by_tag(attribute.tag) is attribute

        assert ds.get_attribute_by_tag("7FE00010") is attributes[2]
        assert ds.get_attribute_by_tag((0x0010, 0x0010)) is attributes[1]
        assert ds.get_attribute_by_tag(0x00100030) is None
        assert ds.get_attribute_by_tag("00080020") is None

    def test_get_attribute_by_tag_invalid(self):
        with pytest.raises(ValueError):
            DicomDataSet().get_attribute_by_tag("PatientID")

    def test_get(self):
        ds = make_dataset()
        assert "PatientID" == ds.get("00100020").keyword
        assert ds.get(0x00100030) is None
        assert "default" == ds.get(0x00100030, "default")

    def test_getitem(self):
        ds = make_dataset()
        assert "StudyDate" == ds[0x00080020].keyword
        with pytest.raises(KeyError):
            ds[0x00100030]

    def test_contains(self):
        ds = make_dataset()
        assert 0x00100020 in ds
        assert "00100020" in ds
        assert (0x0010, 0x0020) in ds
        assert 0x00100030 not in ds
        assert "PatientID" not in ds

    def test_order(self):
        """Test attributes keep the order given, not tag order"""
        ds = make_dataset()
        assert [0x00100020, 0x00080020, 0x00091010, 0x0040A730] == ds.keys()
        assert [a.tag for a in ds] == ds.keys()
        assert 4 == len(ds)
        assert tuple(ds) == ds.attributes

    def test_to_xml_order(self):
        """Test attributes are written in the stored order"""
        parent = Element("NativeDicomModel")
        make_dataset().to_xml(parent)
        assert (
            ["00100020", "00080020", "00091010", "0040A730"]
            == [child.get("tag") for child in parent]
        )

    def test_empty(self):
        ds = DicomDataSet()
        assert 0 == len(ds)
        parent = Element("Item")
        ds.to_xml(parent)
        assert 0 == len(parent)
        assert DicomDataSet() == DicomDataSet.from_xml(parent)

    def test_equality(self):
        assert make_dataset() == make_dataset()
        assert not make_dataset() != make_dataset()
        reordered = DicomDataSet(reversed(make_dataset().attributes))
        assert make_dataset() != reordered
        assert make_dataset() != make_dataset().attributes

    def test_iterall(self):
        """Test iterall recurses into items"""
        tags = [a.tag for a in make_dataset().iterall()]
        assert [
            0x00100020, 0x00080020, 0x00091010, 0x0040A730,
            0x0040A010, 0x00091010, 0x0040A010,
        ] == tags

    def test_walk(self):
        """Test walk visits each attribute with its own dataset"""
        seen = []

        def callback(ds, attribute):
            seen.append((len(ds), attribute.tag))

        make_dataset().walk(callback)
        assert [
            (4, 0x00100020), (4, 0x00080020), (4, 0x00091010),
            (4, 0x0040A730), (2, 0x0040A010), (2, 0x00091010),
            (1, 0x0040A010),
        ] == seen

        seen.clear()
        make_dataset().walk(callback, recursive=False)
        assert 4 == len(seen)

    def test_walk_exception_has_tag(self):
        def callback(ds, attribute):
            raise ValueError("bad attribute")

        with pytest.raises(ValueError, match=r"With tag \(0010, 0020\)"):
            make_dataset().walk(callback)

    def test_without_private_tags(self):
        """Test private attributes are dropped at every level"""
        ds = make_dataset()
        public = ds.without_private_tags()
        assert not any(a.is_private for a in public.iterall())
        assert [0x00100020, 0x00080020, 0x0040A730] == public.keys()
        items = public[0x0040A730].get_items()
        assert [1, 2] == [item.number for item in items]
        assert [0x0040A010] == items[0].dataset.keys()
        # source dataset is unchanged
        assert 0x00091010 in ds

    def test_str(self):
        out = str(make_dataset())
        assert "(0010, 0020) PatientID" in out
        assert "(0040, a730)  ContentSequence   2 item(s) ---- " in out
        assert "   (0040, a010)" in out
        assert "---------" in out

    def test_top(self):
        out = make_dataset().top()
        assert "ContentSequence   2 item(s)" in out
        assert "(0040, a010)" not in out

    def test_repr(self):
        assert "<DicomDataSet, 4 attribute(s)>" == repr(make_dataset())
