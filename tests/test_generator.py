import os
from unittest import mock

import pytest

from nacos_kit.generator import (
    Generator,
    default_hw_addr,
    new_v1,
    new_v2,
    new_v3,
    new_v4,
    new_v5,
)
from nacos_kit.uuidkit import (
    NAMESPACE_DNS,
    NAMESPACE_URL,
    Domain,
    UUIDError,
    Variant,
    Version,
    from_string,
)

FAKE_HW = b"\x02\x00\x00\x00\x00\x01"


class FaultyReader:
    def __init__(self, read_to_fail=0):
        self.calls = 0
        self.read_to_fail = read_to_fail

    def __call__(self, size):
        self.calls += 1
        if self.calls - 1 == self.read_to_fail:
            raise OSError("io: reader is faulty")
        return os.urandom(size)


def _no_hw():
    raise UUIDError("uuid: no hw address found")


def test_new_v1():
    u1 = new_v1()
    assert u1.version() == Version.V1
    assert u1.variant() == Variant.RFC4122
    u2 = new_v1()
    assert u1 != u2


def test_new_v1_epoch_stale():
    g = Generator(epoch_func=lambda: 0, hw_addr_func=lambda: FAKE_HW, rand=os.urandom)
    u1 = g.new_v1()
    u2 = g.new_v1()
    assert u1 != u2
    assert bytes(u1)[:8] == bytes(u2)[:8]


def test_new_v1_unix_epoch_timestamp():
    g = Generator(epoch_func=lambda: 0, hw_addr_func=lambda: FAKE_HW, rand=os.urandom)
    u = g.new_v1()
    assert str(u).startswith("13814000-1dd2-11b2-")
    assert bytes(u)[10:] == FAKE_HW


def test_new_v1_faulty_rand():
    g = Generator(hw_addr_func=lambda: FAKE_HW, rand=FaultyReader())
    with pytest.raises(OSError):
        g.new_v1()


def test_new_v1_missing_network_interfaces():
    g = Generator(hw_addr_func=_no_hw, rand=os.urandom)
    u = g.new_v1()
    assert u.version() == Version.V1
    assert bytes(u)[10] & 0x01 == 0x01


def test_new_v1_missing_net_interfaces_and_faulty_rand():
    g = Generator(hw_addr_func=_no_hw, rand=FaultyReader(read_to_fail=1))
    with pytest.raises(OSError):
        g.new_v1()


def test_new_v2():
    u1 = new_v2(Domain.PERSON)
    assert u1.version() == Version.V2
    assert u1.variant() == Variant.RFC4122

    u2 = new_v2(Domain.GROUP)
    assert u2.version() == Version.V2
    assert u2.variant() == Variant.RFC4122

    u3 = new_v2(Domain.ORG)
    assert u3.version() == Version.V2
    assert u3.variant() == Variant.RFC4122


@pytest.mark.parametrize("domain", list(Domain))
def test_new_v2_stores_domain(domain):
    g = Generator(hw_addr_func=lambda: FAKE_HW)
    u = g.new_v2(domain)
    assert bytes(u)[9] == int(domain)
    assert bytes(u)[10:] == FAKE_HW


def test_new_v2_faulty_rand():
    g = Generator(hw_addr_func=lambda: FAKE_HW, rand=FaultyReader())
    with pytest.raises(OSError):
        g.new_v2(Domain.PERSON)


def test_new_v3():
    u1 = new_v3(NAMESPACE_DNS, "www.example.com")
    assert u1.version() == Version.V3
    assert u1.variant() == Variant.RFC4122
    assert str(u1) == "5df41881-3aed-3515-88a7-2f4a814cf09e"

    u2 = new_v3(NAMESPACE_DNS, "example.com")
    assert u2 != u1
    u3 = new_v3(NAMESPACE_DNS, "example.com")
    assert u3 == u2
    u4 = new_v3(NAMESPACE_URL, "example.com")
    assert u4 != u3


def test_new_v4():
    u1 = new_v4()
    assert u1.version() == Version.V4
    assert u1.variant() == Variant.RFC4122
    u2 = new_v4()
    assert u1 != u2


def test_new_v4_faulty_rand():
    g = Generator(hw_addr_func=lambda: FAKE_HW, rand=FaultyReader())
    with pytest.raises(OSError):
        g.new_v4()


def test_new_v4_partial_read():
    g = Generator(hw_addr_func=lambda: FAKE_HW, rand=lambda n: os.urandom(1))
    u = g.new_v4()
    assert bytes(u).count(0) < 10
    assert u.version() == Version.V4


def test_new_v4_exhausted_rand():
    g = Generator(hw_addr_func=lambda: FAKE_HW, rand=lambda n: b"")
    with pytest.raises(UUIDError):
        g.new_v4()


def test_new_v4_fixed_rand():
    g = Generator(hw_addr_func=lambda: FAKE_HW, rand=lambda n: b"\xff" * n)
    assert str(g.new_v4()) == "ffffffff-ffff-4fff-bfff-ffffffffffff"


def test_new_v5():
    u1 = new_v5(NAMESPACE_DNS, "www.example.com")
    assert u1.version() == Version.V5
    assert u1.variant() == Variant.RFC4122
    assert str(u1) == "2ed6657d-e927-568b-95e1-2665a8aea6a2"

    u2 = new_v5(NAMESPACE_DNS, "example.com")
    assert u2 != u1
    u3 = new_v5(NAMESPACE_DNS, "example.com")
    assert u3 == u2
    u4 = new_v5(NAMESPACE_URL, "example.com")
    assert u4 != u3


def test_generated_uuid_round_trips():
    u = new_v4()
    assert from_string(str(u)) == u
    assert u.version() == Version.V4


def test_default_hw_addr_real_node():
    with mock.patch("uuid.getnode", return_value=0x020000000001):
        assert default_hw_addr() == FAKE_HW


def test_default_hw_addr_random_node_rejected():
    with mock.patch("uuid.getnode", return_value=0x010000000001):
        with pytest.raises(UUIDError):
            default_hw_addr()