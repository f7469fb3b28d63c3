"""Events reported by servicing a host."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from enetlite.packet import Packet


class EventType(enum.IntEnum):
    """What happened to a peer."""

    NONE = 0
    CONNECT = 1
    DISCONNECT = 2
    RECEIVE = 3


@dataclass
class Event:
    """An event: its kind, the peer involved, and any data or packet."""

    type: EventType = EventType.NONE
    peer: Any = None
    channel_id: int = 0
    data: int = 0
    packet: Optional["Packet"] = None

    def __post_init__(self) -> None:
        self.type = EventType(self.type)
        if not 0 <= self.channel_id <= 0xFF:
            raise ValueError(f"channel id out of range: {self.channel_id}")
        if not 0 <= self.data <= 0xFFFFFFFF:
            raise ValueError(f"event data out of range: {self.data}")