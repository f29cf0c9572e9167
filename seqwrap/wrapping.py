"""32-bit wrapping sequence numbers and conversion to 64-bit absolute indices."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["WrappingInt32", "wrap", "unwrap"]

_MOD32 = 1 << 32
_MASK32 = _MOD32 - 1
_MOD64 = 1 << 64
_MASK64 = _MOD64 - 1
_HALF32 = 1 << 31


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer expressed relative to an arbitrary initial sequence number.

    The stored value is always reduced modulo 2**32, so any integer may be
    given to the constructor.
    """

    raw_value: int

    def __post_init__(self) -> None:
        if not isinstance(self.raw_value, int) or isinstance(self.raw_value, bool):
            raise TypeError("raw_value must be an int")
        object.__setattr__(self, "raw_value", self.raw_value & _MASK32)

    def __add__(self, other: object) -> WrappingInt32:
        """Step `other` positions forward, wrapping around 2**32."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value + other)

    def __sub__(self, other: object):
        """Offset between two values, or step back by an integer.

        With another WrappingInt32 the result is the signed 32-bit number of
        increments needed to get from `other` to `self`; it is negative when
        the number of decrements is less than or equal to the number of
        increments. With an integer the result is the point that many steps
        before `self`.
        """
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) & _MASK32
            return diff - _MOD32 if diff >= _HALF32 else diff
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value - other)

    def __str__(self) -> str:
        return str(self.raw_value)


def _check_u64(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int")
    if not 0 <= value < _MOD64:
        raise ValueError(f"{name} must be an unsigned 64-bit integer, got {value}")


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute 64-bit sequence number into a WrappingInt32 relative to `isn`."""
    _check_u64("n", n)
    return WrappingInt32((n & _MASK32) + isn.raw_value)


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to `n` and is closest to `checkpoint`.

    Ties are resolved towards the smaller candidate.
    """
    _check_u64("checkpoint", checkpoint)
    delta = (n.raw_value - isn.raw_value) & _MASK32
    base = checkpoint & ~_MASK32

    candidates = []
    if base >= _MOD32:
        candidates.append(base - _MOD32 + delta)
    candidates.append(base + delta)
    candidates.append(base + _MOD32 + delta)

    # min() keeps the first of equally distant candidates, i.e. the smallest.
    best = min(candidates, key=lambda value: abs(value - checkpoint))
    return best & _MASK64