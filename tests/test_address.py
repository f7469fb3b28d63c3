from ipaddress import IPv4Address, IPv6Address

import pytest

from enetlite.address import (
    SocketAddress,
    SocketAddressV4,
    SocketAddressV6,
    UnitAddress,
)


def test_unit_address_is_always_same():
    a, b = UnitAddress(), UnitAddress()
    assert a.same(b) is True
    assert a.same_host(b) is True
    assert a.is_broadcast() is False


def test_unit_address_port_and_ip():
    unit = UnitAddress()
    assert unit.port() == 0
    assert unit.address() == IPv4Address("0.0.0.0")


def test_v4_same_host_ignores_port():
    a = SocketAddressV4("10.0.0.1", 1000)
    b = SocketAddressV4("10.0.0.1", 2000)
    assert a.same_host(b)
    assert not a.same(b)


def test_v4_same_requires_ip_and_port():
    a = SocketAddressV4("10.0.0.1", 1000)
    assert a.same(SocketAddressV4(IPv4Address("10.0.0.1"), 1000))
    assert not a.same_host(SocketAddressV4("10.0.0.2", 1000))


def test_v4_broadcast_detection():
    assert SocketAddressV4("255.255.255.255", 5).is_broadcast()
    assert not SocketAddressV4("10.0.0.255", 5).is_broadcast()


def test_v4_port_and_address_report_unspecified():
    addr = SocketAddressV4("10.0.0.1", 6060)
    assert addr.port() == 0
    assert addr.address() == IPv4Address("0.0.0.0")


def test_v4_rejects_ipv6_text():
    with pytest.raises(ValueError):
        SocketAddressV4("::1", 1)


def test_v6_address_and_port():
    addr = SocketAddressV6("::1", 6060)
    assert addr.address() == IPv6Address("::1")
    assert addr.port() == 0
    assert addr.is_broadcast() is False


def test_v6_same_considers_scope():
    a = SocketAddressV6("fe80::1", 1, scope_id=1)
    b = SocketAddressV6("fe80::1", 1, scope_id=2)
    assert a.same_host(b)
    assert not a.same(b)


def test_socket_address_reports_port_and_ip():
    addr = SocketAddress("127.0.0.1", 6060)
    assert addr.port() == 6060
    assert addr.address() == IPv4Address("127.0.0.1")


def test_socket_address_v6_ip():
    addr = SocketAddress("::1", 6060)
    assert addr.address() == IPv6Address("::1")
    assert addr.is_broadcast() is False


def test_socket_address_broadcast_only_v4():
    assert SocketAddress("255.255.255.255", 1).is_broadcast()
    assert not SocketAddress("127.0.0.1", 1).is_broadcast()


def test_socket_address_same_and_same_host():
    a = SocketAddress("127.0.0.1", 6060)
    b = SocketAddress("127.0.0.1", 6061)
    assert a.same_host(b)
    assert not a.same(b)
    assert a.same(SocketAddress("127.0.0.1", 6060))


@pytest.mark.parametrize("port", [-1, 65536])
def test_invalid_port_raises(port):
    with pytest.raises(ValueError):
        SocketAddress("127.0.0.1", port)


def test_invalid_ip_raises():
    with pytest.raises(ValueError):
        SocketAddress("not an ip", 1)