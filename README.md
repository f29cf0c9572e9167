# seqwrap

Tools for TCP-style sequence numbers. These are 32-bit values that wrap around
and are counted relative to an initial sequence number (ISN).

Everything lives in the `seqwrap.wrapping` module: the `WrappingInt32` class
and the `wrap` and `unwrap` functions.

## Installation

```
pip install seqwrap
```

## Usage

```python
from seqwrap.wrapping import WrappingInt32, wrap, unwrap

isn = WrappingInt32(2**32 - 2)

# Absolute (zero-indexed, 64-bit) position -> 32-bit sequence number
seqno = wrap(3, isn)
print(seqno)              # 1

# 32-bit sequence number -> the absolute position closest to a checkpoint
print(unwrap(seqno, isn, 0))          # 3
print(unwrap(seqno, isn, 2**32 + 10)) # 4294967299

# Arithmetic wraps modulo 2**32
a = WrappingInt32(5)
print(a + 2**32 - 1)      # 4
print(a - 10)             # 4294967291
print(WrappingInt32(3) - WrappingInt32(5))  # -2, the signed offset
```

## Reference

`WrappingInt32(raw_value)` is a frozen dataclass. Any integer can be given to
the constructor and it is reduced modulo 2**32, so `raw_value` always holds the
stored 32-bit value. A value that is not an `int` (or is a `bool`) raises
`TypeError`. Two instances compare equal when their raw values match. `str()`
gives the raw value as a decimal number.

- `a + n` with an integer `n` steps `n` positions forward, wrapping around.
- `a - n` with an integer `n` steps `n` positions back, wrapping around.
- `a - b` with another `WrappingInt32` gives the signed 32-bit offset from `b`
  to `a`. The result is in the range -2**31 to 2**31 - 1. It is negative when
  going back from `b` takes no more steps than going forward.

`wrap(n, isn)` turns the absolute sequence number `n` into a `WrappingInt32`
relative to `isn`.

`unwrap(n, isn, checkpoint)` returns the absolute sequence number that wraps
to `n` and lies closest to `checkpoint`. It never returns a value below zero,
and when two candidates are equally close it returns the smaller one.

Both functions expect their absolute arguments (`n` for `wrap`, `checkpoint`
for `unwrap`) to be unsigned 64-bit integers. A non-integer raises
`TypeError`, and a value outside 0 to 2**64 - 1 raises `ValueError`.

## What this package does not do

`seqwrap` is a small library for sequence-number arithmetic. It has no
TCP sender, receiver or connection logic, does not parse or build packets,
and does not open sockets. It provides no command-line tool.

## Running the tests

```
pip install "seqwrap[test]"
pytest
```