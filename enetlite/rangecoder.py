"""Decoding half of the adaptive range coder, and the coder object a host uses."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple, Optional, Union

from enetlite.encoder import _rescale_root, _rescale_subcontext
from enetlite.encoder import compress as _compress
from enetlite.symbols import (
    CONTEXT_SYMBOL_DELTA,
    CONTEXT_SYMBOL_MINIMUM,
    RANGE_CODER_BOTTOM,
    RANGE_CODER_TOP,
    SUBCONTEXT_ESCAPE_DELTA,
    SUBCONTEXT_ORDER,
    SUBCONTEXT_SYMBOL_DELTA,
    SymbolTable,
)

Buffer = Union[bytes, bytearray, memoryview]

_U8 = 0xFF
_U16 = 0xFFFF
_U32 = 0xFFFFFFFF


class _Corrupt(Exception):
    """Raised internally when the input cannot be a valid encoding."""


class _Decoded(NamedTuple):
    index: int
    under: int
    count: int


class _Decoder:
    __slots__ = ("low", "code", "range", "data", "pos")

    def __init__(self, data: bytes) -> None:
        self.low = 0
        self.range = _U32
        self.data = data
        self.pos = 0
        self.code = 0
        for shift in (24, 16, 8, 0):
            self.code |= self._next_byte() << shift

    def _next_byte(self) -> int:
        if self.pos < len(self.data):
            byte = self.data[self.pos]
            self.pos += 1
            return byte
        return 0

    def target(self, total: int) -> int:
        if total == 0:
            raise _Corrupt
        self.range //= total
        if self.range == 0:
            raise _Corrupt
        return (((self.code - self.low) & _U32) // self.range) & _U16

    def decode(self, start: int, count: int) -> None:
        self.low = (self.low + start * self.range) & _U32
        self.range = (self.range * count) & _U32
        while True:
            if self.low ^ ((self.low + self.range) & _U32) >= RANGE_CODER_TOP:
                if self.range >= RANGE_CODER_BOTTOM:
                    return
                self.range = (-self.low) & (RANGE_CODER_BOTTOM - 1)
            self.code = ((self.code << 8) & _U32) | self._next_byte()
            self.range = (self.range << 8) & _U32
            self.low = (self.low << 8) & _U32


def _find_in_subcontext(symbols: SymbolTable, context: int, code: int) -> _Decoded:
    """Locate the symbol whose interval holds ``code`` in a subcontext."""
    index = symbols[context].symbols
    if not index:
        raise _Corrupt
    under = 0
    while True:
        node = symbols[index]
        after = (under + node.under) & _U16
        before = node.count
        if code >= after:
            under = (under + node.under) & _U16
            if not node.right:
                raise _Corrupt
            index = node.right
        elif code < after - before:
            node.under = (node.under + SUBCONTEXT_SYMBOL_DELTA) & _U16
            if not node.left:
                raise _Corrupt
            index = node.left
        else:
            count = node.count
            node.under = (node.under + SUBCONTEXT_SYMBOL_DELTA) & _U16
            node.count = (node.count + SUBCONTEXT_SYMBOL_DELTA) & _U8
            return _Decoded(index, (after - before) & _U16, count)


def _find_in_root(symbols: SymbolTable, root: int, code: int) -> _Decoded:
    """Locate or create the root symbol whose interval holds ``code``."""
    root_symbol = symbols[root]
    if not root_symbol.symbols:
        value = (code // CONTEXT_SYMBOL_MINIMUM) & _U8
        under = (code - code % CONTEXT_SYMBOL_MINIMUM) & _U16
        created = symbols.new_symbol(value, CONTEXT_SYMBOL_DELTA)
        root_symbol.symbols = created
        return _Decoded(created, under, CONTEXT_SYMBOL_MINIMUM)
    under = 0
    index = root_symbol.symbols
    while True:
        node = symbols[index]
        after = (
            under + node.under + (node.value + 1) * CONTEXT_SYMBOL_MINIMUM
        ) & _U16
        before = (node.count + CONTEXT_SYMBOL_MINIMUM) & _U16
        if code >= after:
            under = (under + node.under) & _U16
            if node.right:
                index = node.right
                continue
            value = (node.value + 1 + (code - after) // CONTEXT_SYMBOL_MINIMUM) & _U8
            new_under = (code - (code - after) % CONTEXT_SYMBOL_MINIMUM) & _U16
            created = symbols.new_symbol(value, CONTEXT_SYMBOL_DELTA)
            node.right = created
            return _Decoded(created, new_under, CONTEXT_SYMBOL_MINIMUM)
        if code < after - before:
            node.under = (node.under + CONTEXT_SYMBOL_DELTA) & _U16
            if node.left:
                index = node.left
                continue
            gap = after - before - code - 1
            value = (node.value - 1 - gap // CONTEXT_SYMBOL_MINIMUM) & _U8
            new_under = (code - gap % CONTEXT_SYMBOL_MINIMUM) & _U16
            created = symbols.new_symbol(value, CONTEXT_SYMBOL_DELTA)
            node.left = created
            return _Decoded(created, new_under, CONTEXT_SYMBOL_MINIMUM)
        count = (CONTEXT_SYMBOL_MINIMUM + node.count) & _U16
        node.under = (node.under + CONTEXT_SYMBOL_DELTA) & _U16
        node.count = (node.count + CONTEXT_SYMBOL_DELTA) & _U8
        return _Decoded(index, (after - before) & _U16, count)


def decompress(symbols: SymbolTable, data: Buffer, out_limit: int) -> bytes:
    """Decompress ``data`` using ``symbols`` as the model.

    The table is reset first. Returns the decoded bytes, or ``b""`` when the
    input is empty, malformed, or decodes to more than ``out_limit`` bytes.
    """
    data = bytes(data)
    if not data:
        return b""
    root = symbols.reset()
    predicted = 0
    order = 0
    decoder = _Decoder(data)
    out = bytearray()

    try:
        while True:
            value = 0
            bottom = 0
            parent_slot: Optional[int] = None
            subcontext = predicted
            found_in_subcontext = False

            while subcontext != root:
                context = symbols[subcontext]
                total = context.total
                if 0 < context.escapes < total:
                    code = decoder.target(total)
                    if code < context.escapes:
                        decoder.decode(0, context.escapes)
                    else:
                        hit = _find_in_subcontext(symbols, subcontext, code - context.escapes)
                        value = symbols[hit.index].value
                        bottom = hit.index
                        decoder.decode(context.escapes + hit.under, hit.count)
                        context.total = (context.total + SUBCONTEXT_SYMBOL_DELTA) & _U16
                        if (
                            hit.count > 0xFF - 2 * SUBCONTEXT_SYMBOL_DELTA
                            or context.total > RANGE_CODER_BOTTOM - 0x100
                        ):
                            _rescale_subcontext(symbols, subcontext)
                        found_in_subcontext = True
                        break
                subcontext = context.parent

            if not found_in_subcontext:
                root_symbol = symbols[root]
                code = decoder.target(root_symbol.total)
                if code < root_symbol.escapes:
                    decoder.decode(0, root_symbol.escapes)
                    break
                hit = _find_in_root(symbols, root, code - root_symbol.escapes)
                value = symbols[hit.index].value
                bottom = hit.index
                decoder.decode(root_symbol.escapes + hit.under, hit.count)
                root_symbol.total = (root_symbol.total + CONTEXT_SYMBOL_DELTA) & _U16
                if (
                    hit.count > 0xFF - 2 * CONTEXT_SYMBOL_DELTA + CONTEXT_SYMBOL_MINIMUM
                    or root_symbol.total > RANGE_CODER_BOTTOM - 0x100
                ):
                    _rescale_root(symbols, root)

            patch = predicted
            while patch != subcontext:
                found = symbols.find_or_insert(patch, value, SUBCONTEXT_SYMBOL_DELTA)
                if parent_slot is None:
                    predicted = found.index
                else:
                    symbols[parent_slot].parent = found.index
                parent_slot = found.index
                context = symbols[patch]
                if found.count <= 0:
                    context.escapes = (context.escapes + SUBCONTEXT_ESCAPE_DELTA) & _U16
                    context.total = (context.total + SUBCONTEXT_ESCAPE_DELTA) & _U16
                context.total = (context.total + SUBCONTEXT_SYMBOL_DELTA) & _U16
                if (
                    found.count > 0xFF - 2 * SUBCONTEXT_SYMBOL_DELTA
                    or context.total > RANGE_CODER_BOTTOM - 0x100
                ):
                    _rescale_subcontext(symbols, patch)
                patch = context.parent

            if parent_slot is None:
                predicted = bottom
            else:
                symbols[parent_slot].parent = bottom

            if len(out) >= out_limit:
                return b""
            out.append(value)

            if order >= SUBCONTEXT_ORDER:
                predicted = symbols[predicted].parent
            else:
                order += 1
            if symbols.is_full():
                root = symbols.reset()
                predicted = 0
                order = 0
    except (_Corrupt, IndexError):
        return b""
    return bytes(out)


class RangeCoder:
    """An adaptive range coder that owns its symbol table."""

    def __init__(self) -> None:
        self._symbols = SymbolTable()

    def compress(self, buffers: Sequence[Buffer], in_limit: int, out_limit: int) -> bytes:
        """Compress the buffers; ``b""`` if nothing fits within ``out_limit``."""
        return _compress(self._symbols, buffers, in_limit, out_limit)

    def decompress(self, data: Buffer, out_limit: int) -> bytes:
        """Decompress ``data``; ``b""`` if it is malformed or exceeds ``out_limit``."""
        return decompress(self._symbols, data, out_limit)

    def __repr__(self) -> str:
        return "RangeCoder()"