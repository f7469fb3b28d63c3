import pytest
from hypothesis import given
from hypothesis import strategies as st

from enetlite.packet import Packet, PacketFlag, create_packet


def test_create_copies_data():
    source = bytearray(b"hello world")
    packet = create_packet(source, PacketFlag.RELIABLE)
    source[0] = ord("j")
    assert bytes(packet.data) == b"hello world"
    assert packet.data_length == len(b"hello world")


def test_new_packet_has_no_references():
    packet = create_packet(b"abc", 0)
    assert packet.reference_count == 0
    assert packet.free_callback is None
    assert packet.user_data is None


def test_no_allocate_shares_buffer():
    source = bytearray(b"shared")
    packet = create_packet(source, PacketFlag.NO_ALLOCATE)
    assert packet.data is source


def test_no_allocate_with_length_raises():
    with pytest.raises(TypeError):
        create_packet(8, PacketFlag.NO_ALLOCATE)


def test_length_gives_zeroed_buffer():
    packet = create_packet(5, 0)
    assert packet.data == bytearray(5)
    assert packet.data_length == 5


def test_negative_length_raises():
    with pytest.raises(ValueError):
        create_packet(-1, 0)


def test_none_gives_empty_data():
    packet = create_packet(None, 0)
    assert packet.data_length == 0


def test_flags_are_coerced():
    packet = create_packet(b"x", 1)
    assert packet.flags is PacketFlag.RELIABLE
    assert packet.flags & PacketFlag.RELIABLE


def test_destroy_calls_callback_with_packet():
    seen = []
    packet = create_packet(b"data", 0)
    packet.free_callback = seen.append
    packet.destroy()
    assert seen == [packet]


def test_destroy_releases_owned_data():
    packet = create_packet(b"data", PacketFlag.RELIABLE)
    packet.destroy()
    assert packet.data_length == 0


def test_destroy_keeps_borrowed_data():
    source = bytearray(b"borrowed")
    packet = create_packet(source, PacketFlag.NO_ALLOCATE)
    packet.destroy()
    assert packet.data is source
    assert source == bytearray(b"borrowed")


def test_direct_construction_coerces_flags():
    packet = Packet(bytearray(b"z"), flags=2)
    assert packet.flags is PacketFlag.UNSEQUENCED


@given(st.binary())
def test_data_round_trip(payload):
    packet = create_packet(payload, PacketFlag.RELIABLE)
    assert bytes(packet.data) == payload
    assert packet.data_length == len(payload)