"""Tests for the class classifier and the reserved address detector."""

import pytest

from snet.ip.core import Class, ReservedAddress, classify, detect_reserved


@pytest.mark.parametrize("address,expected", [
    (0x00000000, Class.A),
    (0x7FFFFFFF, Class.A),
    (0x80000000, Class.B),
    (0xBFFFFFFF, Class.B),
    (0xC0000000, Class.C),
    (0xDFFFFFFF, Class.C),
    (0xE0000000, Class.D),
    (0xEFFFFFFF, Class.D),
    (0xF0000000, Class.E),
    (0xFFFFFFFF, Class.E),
])
def test_classify_boundaries(address, expected):
    assert classify(address) is expected


@pytest.mark.parametrize("first_octet", range(256))
def test_exactly_one_class_matches(first_octet):
    for low in (0x000000, 0x123456, 0xFFFFFF):
        address = first_octet << 24 | low
        matches = [c for c in Class if address & c.mask == c.pattern]
        assert len(matches) == 1
        assert classify(address) is matches[0]


def test_network_bits():
    assert Class.A.network_bits == 8
    assert Class.B.network_bits == 16
    assert Class.C.network_bits == 24
    assert Class.D.network_bits is None
    assert Class.E.network_bits is None


def test_class_labels():
    assert [str(c) for c in Class] == [
        "class A network",
        "class B network",
        "class C network",
        "class D network",
        "class E network",
    ]


@pytest.mark.parametrize("address,expected", [
    (0x7F000000, ReservedAddress.LOOPBACK),
    (0x7F000001, ReservedAddress.LOOPBACK),
    (0x7FFFFFFF, ReservedAddress.LOOPBACK),
    (0xFFFFFFFF, ReservedAddress.LOCAL_BROADCAST),
    (0x7EFFFFFF, None),
    (0x80000000, None),
    (0xFFFFFFFE, None),
    (0x00000000, None),
])
def test_detect_reserved(address, expected):
    assert detect_reserved(address) is expected


def test_reserved_labels():
    assert str(ReservedAddress.LOOPBACK) == "loopback"
    assert str(ReservedAddress.LOCAL_BROADCAST) == "local broadcast"
