# enetlite

Pure-Python building blocks of the ENet reliable UDP protocol. It has no
dependencies outside the standard library.

## Modules

- `enetlite.address` has the address types that identify peers. Each one has
  `same_host`, `same`, `is_broadcast`, `port` and `address`.
  - `UnitAddress` is for a transport with a single remote end. Every unit
    address is the same as every other. It is never a broadcast address. Its
    port is 0 and its IP is `0.0.0.0`.
  - `SocketAddress` holds an IPv4 or IPv6 `ip` and a `port_number`. `port()`
    and `address()` return them. Only `255.255.255.255` counts as broadcast.
  - `SocketAddressV4` holds an IPv4 `ip` and a `port_number`. It is broadcast
    for `255.255.255.255`. `port()` always returns 0 and `address()` always
    returns `0.0.0.0`.
  - `SocketAddressV6` holds `ip`, `port_number`, `flowinfo` and `scope_id`. It
    is never broadcast. `port()` returns 0 and `address()` returns the IP.
  - All four validate their inputs: a port outside 0–65535 raises
    `ValueError`.
- `enetlite.linkedlist` is an intrusive, circular, doubly linked list with a
  sentinel node.
  - `ListNode` holds an optional `value`.
  - `LinkedList` has `clear`, `begin`, `end`, `is_empty`, iteration and
    `len()`.
  - The module-level functions are `insert(position, node)`, `remove(node)`
    and `move(position, first, last)`. `move` splices an inclusive run of
    nodes in before `position`.
- `enetlite.packet` has `PacketFlag` (`RELIABLE`, `UNSEQUENCED`,
  `NO_ALLOCATE`, `UNRELIABLE_FRAGMENT`, `SENT`), the `Packet` dataclass and
  `create_packet(data, flags)`.
  - `create_packet` copies `data`. The exception is `NO_ALLOCATE`, which makes
    it use the buffer as given.
  - An integer `data` gives a zero-filled buffer of that length.
  - `Packet.destroy()` runs the packet's `free_callback`, if there is one. It
    then drops the data unless `NO_ALLOCATE` is set.
- `enetlite.event` has `EventType` (`NONE`, `CONNECT`, `DISCONNECT`,
  `RECEIVE`) and the `Event` dataclass, which holds a peer, a channel id, a
  32-bit data value and an optional packet.
- `enetlite.rng` has `HostRandom`, a deterministic 32-bit generator for
  connection ids.
  - `next()` advances it, and iterating over it yields values forever.
  - Without a seed, it seeds itself from its identity and the current time.
- `enetlite.symbols` has `Symbol` and `SymbolTable`, the fixed-capacity
  (4096 symbols) context model behind the range coder.
- `enetlite.encoder` has `compress(symbols, buffers, in_limit, out_limit)`.
- `enetlite.rangecoder` has `decompress(symbols, data, out_limit)` and
  `RangeCoder`. A `RangeCoder` owns a symbol table and offers `compress` and
  `decompress`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from enetlite.rangecoder import RangeCoder

coder = RangeCoder()
payload = b"hello world, hello world, hello world"
packed = coder.compress([payload], len(payload), 4096)
assert coder.decompress(packed, len(payload)) == payload
```

`compress` returns `b""` in two cases: when there is nothing to compress, and
when the output would not fit in `out_limit`. `decompress` returns `b""` in
three cases: when the input is empty, when it is malformed, and when it
decodes to more than `out_limit` bytes.

```python
from enetlite.packet import PacketFlag, create_packet

packet = create_packet(b"ping", PacketFlag.RELIABLE)
assert packet.data_length == 4
```

## What this package does not do

The package provides pieces for an ENet-style transport, not the transport
itself. It has none of the following:

- a host or peer objects
- sockets or a network service loop
- protocol command encoding
- reliable delivery or bandwidth throttling
- a command-line program

It cannot send or receive anything over a network on its own.