"""Packets: data with delivery flags and a reference count."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional, Union


class PacketFlag(enum.IntFlag):
    """Delivery flags attached to a packet."""

    RELIABLE = 1
    UNSEQUENCED = 2
    NO_ALLOCATE = 4
    UNRELIABLE_FRAGMENT = 8
    SENT = 256


Buffer = Union[bytes, bytearray, memoryview]


@dataclass(eq=False)
class Packet:
    """A block of data queued for, or received from, a peer."""

    data: Buffer
    flags: PacketFlag = PacketFlag(0)
    reference_count: int = 0
    free_callback: Optional[Callable[["Packet"], None]] = None
    user_data: Any = None

    def __post_init__(self) -> None:
        self.flags = PacketFlag(self.flags)

    @property
    def data_length(self) -> int:
        return len(self.data)

    def destroy(self) -> None:
        """Run the free callback and release owned data."""
        if self.free_callback is not None:
            self.free_callback(self)
        if not self.flags & PacketFlag.NO_ALLOCATE:
            self.data = bytearray()


def create_packet(data: Buffer | int | None, flags: int = 0) -> Packet:
    """Create a packet.

    ``data`` is copied unless NO_ALLOCATE is set, in which case the given
    buffer is used as is. An int gives a zero-filled buffer of that length.
    """
    flags = PacketFlag(flags)
    if flags & PacketFlag.NO_ALLOCATE:
        if isinstance(data, int):
            raise TypeError("NO_ALLOCATE needs a buffer, not a length")
        buffer: Buffer = b"" if data is None else data
    elif data is None:
        buffer = bytearray()
    elif isinstance(data, int):
        if data < 0:
            raise ValueError(f"negative packet length: {data}")
        buffer = bytearray(data)
    else:
        buffer = bytearray(data)
    return Packet(data=buffer, flags=flags)