# seqwrap

Convert between 64-bit absolute sequence numbers and the 32-bit wrapping
sequence numbers that appear on the wire, relative to an initial sequence
number (ISN), the way TCP does.

## Installation

```
pip install seqwrap
```

## Usage

```python
from seqwrap.wrapping import WrappingInt32, wrap, unwrap

isn = WrappingInt32(2**32 - 2)

# Absolute index 5 wraps around past 2**32.
seqno = wrap(5, isn)
print(seqno)            # 3

# Recover the absolute index closest to a recent checkpoint.
print(unwrap(seqno, isn, checkpoint=0))   # 5
```

### `WrappingInt32`

An immutable 32-bit value held in `raw_value`. The value given to the
constructor is reduced modulo 2**32; anything that is not an `int` (a `bool`
included) raises `TypeError`.

- `a + n` and `a - n` step a value forwards or backwards by an integer `n`,
  wrapping modulo 2**32.
- `a - b` between two `WrappingInt32` values gives the signed 32-bit offset
  from `b` to `a`, in the range -2**31 to 2**31 - 1.
- `==`, `<` and `>` compare the raw stored values; instances are hashable.
- `str(a)` gives the raw value in decimal.

### `wrap(n, isn)`

Turn an absolute 64-bit sequence number `n` (zero-indexed, taken modulo
2**64) into a `WrappingInt32` relative to `isn`.

### `unwrap(n, isn, checkpoint)`

Turn a `WrappingInt32` back into the absolute 64-bit sequence number that
wraps to `n` and lies closest to `checkpoint`, a recently seen absolute
sequence number. When two candidates are equally close, the larger one is
returned.

## What this package does not do

It only does sequence-number arithmetic. It has no TCP sender, receiver,
segment format or connection handling.

## Running the tests

```
pip install "seqwrap[test]"
pytest
```