"""Building blocks of the ENet reliable UDP protocol: addresses, lists, packets, events, host randomness and the range coder."""

__version__ = "0.4.0"

__all__ = [
    "address",
    "linkedlist",
    "packet",
    "event",
    "rng",
    "symbols",
    "encoder",
    "rangecoder",
]