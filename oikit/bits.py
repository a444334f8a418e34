"""Bit-level helpers: binary formatting, masks, counting and a bit cursor."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "BitCursor",
    "bin_to_string",
    "bits_belong",
    "bit_length",
    "count_ones",
    "max_multi2_signed",
    "format_bytes_binary",
]

_U64 = 1 << 64
_INT_BITS = 32


def bin_to_string(x: int, width: int = 64) -> str:
    """Binary digits of the lowest ``width`` bits of ``x``, most significant first.

    Leading zeros are dropped unless the value was truncated to ``width`` bits.
    """
    if width <= 0:
        raise ValueError("width must be positive")
    if x < 0:
        raise ValueError("x must be non-negative")
    if x == 0:
        return "0"
    n = min(x.bit_length(), width)
    return format(x & ((1 << n) - 1), f"0{n}b")


def bits_belong(host: int, mask: int) -> bool:
    """True if every bit set in ``mask`` is also set in ``host``."""
    return (host & mask) == mask


def bit_length(n: int) -> int:
    """Position of the highest set bit of a 64-bit unsigned value, counted from 1."""
    if not 0 <= n < _U64:
        raise ValueError("n must fit in 64 unsigned bits")
    return n.bit_length()


def count_ones(x: int) -> int:
    """Number of set bits in ``x`` viewed as a 32-bit two's-complement integer."""
    return bin(x & ((1 << _INT_BITS) - 1)).count("1")


def max_multi2_signed(x: int) -> int:
    """Double ``x`` until bit 30 or the sign bit of a 32-bit integer is reached."""
    if x == 0:
        raise ValueError("x must be non-zero")
    if x < 0:
        return x
    while not x >> (_INT_BITS - 2):
        x <<= 1
    return x


def format_bytes_binary(data: bytes, byte_end: str = "") -> str:
    """Eight binary digits per byte, last byte first, each followed by ``byte_end``.

    With a little-endian value this prints the most significant byte first.
    """
    return "".join(f"{byte:08b}{byte_end}" for byte in reversed(data))


@dataclass
class BitCursor:
    """Position of a single bit inside a mutable byte buffer."""

    buffer: bytearray
    index: int = 0
    offset: int = 0

    def __post_init__(self) -> None:
        carry, self.offset = divmod(self.offset, 8)
        self.index += carry

    @property
    def bit(self) -> int:
        """Current value of the bit under the cursor."""
        return (self.buffer[self.index] >> self.offset) & 1

    def flip(self) -> None:
        """Toggle the bit under the cursor."""
        self.buffer[self.index] ^= 1 << self.offset

    def advance(self, n: int) -> None:
        """Move the cursor ``n`` bits forward."""
        carry, self.offset = divmod(self.offset + n, 8)
        self.index += carry

    def __iadd__(self, n: int) -> BitCursor:
        self.advance(n)
        return self