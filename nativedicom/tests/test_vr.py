# Copyright 2026 nativedicom authors. See LICENSE file for details.
"""Unit tests for the nativedicom.vr module."""

import pytest

from nativedicom.vr import FLOAT_VR, INT_VR, STANDARD_VR, VR, is_valid_vr


def test_vr_count():
    assert 34 == len(STANDARD_VR)
    assert 34 == len(VR)


def test_str():
    assert "DS" == str(VR.DS)
    assert "DS" == VR.DS
    assert VR.US is VR("US")


@pytest.mark.parametrize("vr", ["DS", "SQ", "UV", "OV", VR.PN])
def test_valid(vr):
    assert is_valid_vr(vr)


@pytest.mark.parametrize("vr", ["XX", "ID", "ds", "", None, 1, "OB or OW"])
def test_invalid(vr):
    assert not is_valid_vr(vr)


def test_numeric_groups():
    """Test the float and int groups are disjoint standard VRs"""
    assert not FLOAT_VR & INT_VR
    assert FLOAT_VR <= STANDARD_VR
    assert INT_VR <= STANDARD_VR
    assert VR.DS in FLOAT_VR
    assert VR.US in INT_VR
    assert VR.IS not in INT_VR
