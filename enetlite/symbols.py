"""Symbol table of the adaptive range coder's context model.

Symbols live in a fixed-capacity table and refer to each other by index.
Index 0 always holds the root context. It is never anyone's child, so a
``left``, ``right`` or ``symbols`` link of 0 means "none".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

CONTEXT_SYMBOL_MINIMUM = 1
CONTEXT_ESCAPE_MINIMUM = 1
SUBCONTEXT_ORDER = 2
RANGE_CODER_BOTTOM = 65536
RANGE_CODER_TOP = 16777216
SUBCONTEXT_SYMBOL_DELTA = 2
SUBCONTEXT_ESCAPE_DELTA = 5
CONTEXT_SYMBOL_DELTA = 3
SYMBOL_CAPACITY = 4096

_U8 = 0xFF
_U16 = 0xFFFF


@dataclass(slots=True)
class Symbol:
    """One node of the model.

    A symbol is a leaf of a context's binary tree of byte values, keyed by
    ``value``, with ``count`` and subtree total ``under``. It is also a
    context of its own, with a tree of following symbols (``symbols``),
    ``escapes``, ``total`` and a ``parent`` context.
    """

    value: int = 0
    count: int = 0
    under: int = 0
    left: int = 0
    right: int = 0
    symbols: int = 0
    escapes: int = 0
    total: int = 0
    parent: int = 0

    def assign(self, value: int, count: int) -> None:
        self.value = value
        self.count = count
        self.under = count
        self.left = 0
        self.right = 0
        self.symbols = 0
        self.escapes = 0
        self.total = 0
        self.parent = 0


class Lookup(NamedTuple):
    """The symbol found or created, and the frequencies it was coded with."""

    index: int
    under: int
    count: int


class SymbolTable:
    """A fixed-size pool of symbols, allocated in order until reset."""

    def __init__(self) -> None:
        self._symbols = [Symbol() for _ in range(SYMBOL_CAPACITY)]
        self.next_symbol = 0
        self.root = 0
        self.reset()

    def __getitem__(self, index: int) -> Symbol:
        if not 0 <= index < self.next_symbol:
            raise IndexError(f"symbol index not allocated: {index}")
        return self._symbols[index]

    def __len__(self) -> int:
        return self.next_symbol

    def reset(self) -> int:
        """Discard every symbol and allocate a fresh root context."""
        self.next_symbol = 0
        self.root = self.new_symbol(0, 0)
        root = self._symbols[self.root]
        root.escapes = CONTEXT_ESCAPE_MINIMUM
        root.total = CONTEXT_ESCAPE_MINIMUM + 256 * CONTEXT_SYMBOL_MINIMUM
        return self.root

    def new_symbol(self, value: int, count: int) -> int:
        """Allocate a symbol with the given value and count; return its index."""
        if not 0 <= value <= _U8:
            raise ValueError(f"symbol value out of range: {value}")
        if not 0 <= count <= _U8:
            raise ValueError(f"symbol count out of range: {count}")
        if self.next_symbol >= SYMBOL_CAPACITY:
            raise IndexError("symbol table exhausted")
        index = self.next_symbol
        self.next_symbol += 1
        self._symbols[index].assign(value, count)
        return index

    def is_full(self) -> bool:
        """True once the table must be reset before coding the next byte."""
        return self.next_symbol >= SYMBOL_CAPACITY - SUBCONTEXT_ORDER

    def rescale(self, index: int) -> int:
        """Halve the counts of the tree at ``index`` (rounding up); return its total."""
        total = 0
        while True:
            symbol = self._symbols[index]
            symbol.count = symbol.count - (symbol.count >> 1)
            symbol.under = symbol.count
            if symbol.left:
                symbol.under = (symbol.under + self.rescale(symbol.left)) & _U16
            total = (total + symbol.under) & _U16
            if not symbol.right:
                return total
            index = symbol.right

    def find_or_insert(self, context: int, value: int, delta: int) -> Lookup:
        """Find ``value`` in ``context``'s tree, inserting it if absent.

        Every node passed on the way is updated by ``delta`` as it would be
        after coding ``value``. The returned ``under`` is the total count of
        smaller values and ``count`` the value's count before the update;
        a newly inserted value has count 0.
        """
        if not 0 <= value <= _U8:
            raise ValueError(f"symbol value out of range: {value}")
        owner = self._symbols[context]
        if not owner.symbols:
            created = self.new_symbol(value, delta)
            owner.symbols = created
            return Lookup(created, 0, 0)
        under = 0
        index = owner.symbols
        while True:
            node = self._symbols[index]
            if value < node.value:
                node.under = (node.under + delta) & _U16
                if node.left:
                    index = node.left
                    continue
                created = self.new_symbol(value, delta)
                node.left = created
                return Lookup(created, under, 0)
            if value > node.value:
                under = (under + node.under) & _U16
                if node.right:
                    index = node.right
                    continue
                created = self.new_symbol(value, delta)
                node.right = created
                return Lookup(created, under, 0)
            count = node.count
            under = (under + node.under - node.count) & _U16
            node.under = (node.under + delta) & _U16
            node.count = (node.count + delta) & _U8
            return Lookup(index, under, count)