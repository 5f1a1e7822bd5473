# tests/test_address.py

import pytest
from shield_core.address import AddressKind, classify, is_valid_shielded, is_transparent, is_shielded


def test_classify_prefixes():
    assert classify("zs1qqq") == AddressKind.SHIELDED
    assert classify("ztestsapling1abc") == AddressKind.SHIELDED
    assert classify("t1abc") == AddressKind.TRANSPARENT
    assert classify("bc1qxyz") == AddressKind.UNKNOWN
    assert classify("") == AddressKind.UNKNOWN
    assert classify(None) == AddressKind.UNKNOWN


def test_classify_is_not_validation():
    # a two-char "z" string routes as shielded but is not a valid recipient
    assert classify("z1") == AddressKind.SHIELDED
    assert not is_valid_shielded("z1")


@pytest.mark.parametrize("prefix", ["z", "zt"])
@pytest.mark.parametrize("length,expected", [(69, False), (70, True), (78, True), (80, True), (81, False)])
def test_shielded_length_bounds(prefix, length, expected):
    addr = prefix + "a" * (length - len(prefix))
    assert len(addr) == length
    assert is_valid_shielded(addr) is expected


def test_invalid_shielded_inputs():
    assert not is_valid_shielded("")
    assert not is_valid_shielded("t" + "a" * 74)
    assert not is_valid_shielded("Z" + "a" * 74)


def test_is_transparent():
    assert is_transparent("t1abc")
    assert not is_transparent("zs1abc")
    assert not is_transparent("")


def test_is_shielded_matches_classify():
    assert is_shielded("zs1abc")
    assert not is_shielded("t1abc")
