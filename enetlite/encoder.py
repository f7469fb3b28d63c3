"""Encoding half of the adaptive range coder."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional, Union

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


class _OutputFull(Exception):
    """Raised internally when the output limit is reached."""


def _input_bytes(buffers: Sequence[Buffer]) -> Iterator[int]:
    """Yield every input byte across the buffers.

    An empty buffer after the first reads as a single zero byte, as the
    coder steps once past the end of each buffer it moves on to.
    """
    first, *rest = buffers
    yield from bytes(first)
    for buffer in rest:
        data = bytes(buffer)
        if data:
            yield from data
        else:
            yield 0


class _Encoder:
    __slots__ = ("low", "range", "out", "out_limit")

    def __init__(self, out_limit: int) -> None:
        self.low = 0
        self.range = _U32
        self.out = bytearray()
        self.out_limit = out_limit

    def _emit(self) -> None:
        if len(self.out) >= self.out_limit:
            raise _OutputFull
        self.out.append((self.low >> 24) & _U8)

    def encode(self, start: int, count: int, total: int) -> None:
        self.range //= total
        self.low = (self.low + start * self.range) & _U32
        self.range = (self.range * count) & _U32
        while True:
            if self.low ^ ((self.low + self.range) & _U32) >= RANGE_CODER_TOP:
                if self.range >= RANGE_CODER_BOTTOM:
                    return
                self.range = (-self.low) & (RANGE_CODER_BOTTOM - 1)
            self._emit()
            self.range = (self.range << 8) & _U32
            self.low = (self.low << 8) & _U32

    def flush(self) -> bytes:
        while self.low:
            self._emit()
            self.low = (self.low << 8) & _U32
        return bytes(self.out)


def _rescale_subcontext(symbols: SymbolTable, index: int) -> None:
    context = symbols[index]
    context.total = symbols.rescale(context.symbols) if context.symbols else 0
    context.escapes = context.escapes - (context.escapes >> 1)
    context.total = (context.total + context.escapes) & _U16


def _rescale_root(symbols: SymbolTable, index: int) -> None:
    root = symbols[index]
    root.total = symbols.rescale(root.symbols) if root.symbols else 0
    root.escapes = root.escapes - (root.escapes >> 1)
    root.total = (root.total + root.escapes + 256 * CONTEXT_SYMBOL_MINIMUM) & _U16


def compress(
    symbols: SymbolTable,
    buffers: Sequence[Buffer],
    in_limit: int,
    out_limit: int,
) -> bytes:
    """Compress the concatenation of ``buffers`` using ``symbols`` as the model.

    The table is reset first. Returns the compressed bytes, or ``b""`` when
    there is nothing to compress or the result would exceed ``out_limit``.
    """
    if not buffers or in_limit <= 0:
        return b""
    encoder = _Encoder(out_limit)
    root = symbols.reset()
    predicted = 0
    order = 0

    try:
        for value in _input_bytes(buffers):
            parent_slot: Optional[int] = None

            def link(index: int) -> None:
                nonlocal predicted
                if parent_slot is None:
                    predicted = index
                else:
                    symbols[parent_slot].parent = index

            subcontext = predicted
            coded = False
            while subcontext != root:
                found = symbols.find_or_insert(subcontext, value, SUBCONTEXT_SYMBOL_DELTA)
                link(found.index)
                parent_slot = found.index
                context = symbols[subcontext]
                total = context.total
                if found.count > 0:
                    encoder.encode(context.escapes + found.under, found.count, total)
                else:
                    if 0 < context.escapes < total:
                        encoder.encode(0, context.escapes, total)
                    context.escapes = (context.escapes + SUBCONTEXT_ESCAPE_DELTA) & _U16
                    context.total = (context.total + SUBCONTEXT_ESCAPE_DELTA) & _U16
                context.total = (context.total + SUBCONTEXT_SYMBOL_DELTA) & _U16
                if (
                    found.count > 0xFF - 2 * SUBCONTEXT_SYMBOL_DELTA
                    or context.total > RANGE_CODER_BOTTOM - 0x100
                ):
                    _rescale_subcontext(symbols, subcontext)
                if found.count > 0:
                    coded = True
                    break
                subcontext = context.parent

            if not coded:
                found = symbols.find_or_insert(root, value, CONTEXT_SYMBOL_DELTA)
                under = (value * CONTEXT_SYMBOL_MINIMUM + found.under) & _U16
                count = (CONTEXT_SYMBOL_MINIMUM + found.count) & _U16
                link(found.index)
                root_symbol = symbols[root]
                encoder.encode(root_symbol.escapes + under, count, root_symbol.total)
                root_symbol.total = (root_symbol.total + CONTEXT_SYMBOL_DELTA) & _U16
                if (
                    count > 0xFF - 2 * CONTEXT_SYMBOL_DELTA + CONTEXT_SYMBOL_MINIMUM
                    or root_symbol.total > RANGE_CODER_BOTTOM - 0x100
                ):
                    _rescale_root(symbols, root)

            if order >= SUBCONTEXT_ORDER:
                predicted = symbols[predicted].parent
            else:
                order += 1
            if symbols.is_full():
                root = symbols.reset()
                predicted = 0
                order = 0
        return encoder.flush()
    except _OutputFull:
        return b""