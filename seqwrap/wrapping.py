"""32-bit wrapping sequence numbers and their 64-bit absolute counterparts."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1
_HALF = 1 << 31


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer that wraps around, used for TCP seqnos and acknos."""

    raw_value: int

    def __post_init__(self) -> None:
        if not isinstance(self.raw_value, int) or isinstance(self.raw_value, bool):
            raise TypeError("raw_value must be an int")
        object.__setattr__(self, "raw_value", self.raw_value & _MASK32)

    def __add__(self, other: int) -> WrappingInt32:
        """Step ``other`` positions past this point."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value + other)

    def __sub__(self, other: WrappingInt32 | int) -> WrappingInt32 | int:
        """Offset to another point (signed 32-bit), or step back by an int."""
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) & _MASK32
            return diff - (1 << 32) if diff >= _HALF else diff
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value - other)

    def __lt__(self, other: WrappingInt32) -> bool:
        if not isinstance(other, WrappingInt32):
            return NotImplemented
        return self.raw_value < other.raw_value

    def __gt__(self, other: WrappingInt32) -> bool:
        if not isinstance(other, WrappingInt32):
            return NotImplemented
        return self.raw_value > other.raw_value

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute 64-bit sequence number into a relative 32-bit one."""
    return WrappingInt32(isn.raw_value + (n & _MASK64))


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to ``n`` near ``checkpoint``.

    Two candidates are considered, one whose upper half comes from
    ``checkpoint - 2**31`` and one from ``checkpoint + 2**31``; distances are
    measured without wrap-around and a tie goes to the second candidate.
    """
    checkpoint &= _MASK64
    lower = (n.raw_value - isn.raw_value) & _MASK32
    low_base = ((checkpoint - _HALF) & _MASK64) >> 32
    high_base = ((checkpoint + _HALF) & _MASK64) >> 32
    below = ((low_base << 32) + lower) & _MASK64
    above = ((high_base << 32) + lower) & _MASK64
    if abs(below - checkpoint) < abs(above - checkpoint):
        return below
    return above