"""Address types usable as peer addresses by a host's socket."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address

_UNSPECIFIED_V4 = IPv4Address("0.0.0.0")
_BROADCAST_V4 = IPv4Address("255.255.255.255")


def _check_port(port: int) -> int:
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"port out of range: {port}")
    return port


@dataclass(frozen=True)
class UnitAddress:
    """An address for transports with exactly one remote end."""

    def same_host(self, other: UnitAddress) -> bool:
        """Every unit address refers to the same host."""
        return isinstance(other, UnitAddress)

    def same(self, other: UnitAddress) -> bool:
        """Every unit address is the same address."""
        return isinstance(other, UnitAddress)

    def is_broadcast(self) -> bool:
        """A unit address is never a broadcast address."""
        return False

    def port(self) -> int:
        """Unit addresses carry no port; always 0."""
        return 0

    def address(self) -> IPv4Address:
        """Unit addresses carry no IP; the unspecified IPv4 address."""
        return _UNSPECIFIED_V4


@dataclass(frozen=True)
class SocketAddressV4:
    """An IPv4 address and port."""

    ip: IPv4Address
    port_number: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "ip", IPv4Address(self.ip))
        _check_port(self.port_number)

    def same_host(self, other: SocketAddressV4) -> bool:
        """True if both addresses share an IP."""
        return self.ip == other.ip

    def same(self, other: SocketAddressV4) -> bool:
        """True if IP and port are both equal."""
        return self == other

    def is_broadcast(self) -> bool:
        """True for the limited IPv4 broadcast address."""
        return self.ip == _BROADCAST_V4

    def port(self) -> int:
        """Always 0 for this address kind."""
        return 0

    def address(self) -> IPv4Address:
        """Always the unspecified IPv4 address for this address kind."""
        return _UNSPECIFIED_V4


@dataclass(frozen=True)
class SocketAddressV6:
    """An IPv6 address and port, with flow information and scope id."""

    ip: IPv6Address
    port_number: int = 0
    flowinfo: int = 0
    scope_id: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "ip", IPv6Address(self.ip))
        _check_port(self.port_number)

    def same_host(self, other: SocketAddressV6) -> bool:
        """True if both addresses share an IP."""
        return self.ip == other.ip

    def same(self, other: SocketAddressV6) -> bool:
        """True if every component is equal."""
        return self == other

    def is_broadcast(self) -> bool:
        """IPv6 has no broadcast address."""
        return False

    def port(self) -> int:
        """Always 0 for this address kind."""
        return 0

    def address(self) -> IPv6Address:
        """The IPv6 address."""
        return self.ip


@dataclass(frozen=True)
class SocketAddress:
    """An IPv4 or IPv6 address with a port."""

    ip: IPv4Address | IPv6Address
    port_number: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "ip", ipaddress.ip_address(self.ip))
        _check_port(self.port_number)

    def same_host(self, other: SocketAddress) -> bool:
        """True if both addresses share an IP."""
        return self.ip == other.ip

    def same(self, other: SocketAddress) -> bool:
        """True if IP and port are both equal."""
        return self == other

    def is_broadcast(self) -> bool:
        """True only for the limited IPv4 broadcast address."""
        return isinstance(self.ip, IPv4Address) and self.ip == _BROADCAST_V4

    def port(self) -> int:
        """The port number."""
        return self.port_number

    def address(self) -> IPv4Address | IPv6Address:
        """The IP address."""
        return self.ip