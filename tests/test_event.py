import pytest

from enetlite.event import Event, EventType
from enetlite.packet import create_packet


def test_default_event_is_none():
    event = Event()
    assert event.type is EventType.NONE
    assert event.peer is None
    assert event.packet is None
    assert event.channel_id == 0
    assert event.data == 0


def test_integer_type_is_coerced():
    assert Event(type=3).type is EventType.RECEIVE
    assert Event(type=1).type is EventType.CONNECT
    assert Event(type=2).type is EventType.DISCONNECT


def test_unknown_type_raises():
    with pytest.raises(ValueError):
        Event(type=7)


def test_receive_event_holds_packet():
    packet = create_packet(b"hello world", 1)
    peer = object()
    event = Event(EventType.RECEIVE, peer=peer, channel_id=1, packet=packet)
    assert event.packet is packet
    assert event.peer is peer
    assert event.channel_id == 1


@pytest.mark.parametrize("channel_id", [-1, 256])
def test_channel_id_out_of_range(channel_id):
    with pytest.raises(ValueError):
        Event(EventType.RECEIVE, channel_id=channel_id)


def test_channel_id_upper_bound_accepted():
    assert Event(EventType.RECEIVE, channel_id=0xFF).channel_id == 0xFF


@pytest.mark.parametrize("data", [-1, 2**32])
def test_data_out_of_range(data):
    with pytest.raises(ValueError):
        Event(EventType.CONNECT, data=data)


def test_disconnect_data_kept():
    event = Event(EventType.DISCONNECT, data=32)
    assert event.data == 32
    assert event.type is EventType.DISCONNECT