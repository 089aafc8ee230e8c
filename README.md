# unstd

A small library of plain building blocks that keep an explicit length,
capacity and, where it applies, a capacity limit. It is handy for modelling
or testing code that reasons about buffers, terminated strings and
fixed-width integers.

The package depends on nothing outside the standard library. Its tests use
pytest, available through the `test` extra.

## Modules

### `unstd.inttypes`

`IntType` is an enum of fixed-width integer types (`U8`, `S8`, `U16`, `S16`,
`U32`, `S32`, `U64`, `S64`), each with `bits`, `signed` and `mask`.
`IntType.wrap(value)` reduces a value to the type, wrapping modulo
2**bits as a cast would.

- `is_signed(int_type)`
- `unsigned_maximum(int_type)`: the value with every bit set (so `-1` for a
  signed type)
- `signed_maximum(int_type)` and `signed_minimum(int_type)`: the largest and
  smallest values the type holds (`signed_minimum` is `0` for unsigned types)

### `unstd.ranges`

`foreach_range(start, end, step=1)` yields numbers from `start` to `end`,
both included. It counts up when `start < end` and down otherwise; `step` is
the magnitude, and a step that is not positive counts as 1.

### `unstd.ubytes`

`UBytes(capacity=0)` is a byte buffer whose used `length` is tracked apart
from its `capacity`. It also offers `data`, `remaining`, `len()` and
`bytes()` (the used part).

- `grow(size)` adds capacity, keeping the contents.
- `write(source, offset=0)` copies bytes in at `offset`; the length becomes
  the end of the write. It does not grow the buffer.
- `append(source)` writes after the used length, growing exactly as needed.
- `write_autogrow(source, offset=0, mode=GrowthMode.LINEAR)` grows first if
  needed: to exactly the required size (`LINEAR`) or by doubling
  (`EXPONENTIAL`).
- `set_length(new_length)`, `increase_length(amount)`, `has_remaining()`.

Bad sizes and writes that do not fit raise `UBytesError` (a `ValueError`);
a `None` source raises `TypeError`.

### `unstd.string_compat`

Functions on NUL-terminated strings held in `str`, `bytes` or `bytearray`
(and, for `strlen16`, sequences of 16-bit code units). Every input is read
only up to its first NUL, and `None` stands for a missing string:
`strlen`, `strlen16`, `str_equal`, `str_equal_ignorecase`, `find_char`,
`find_substring`, `find_substring_ignorecase`, `concat`, `compare` and
`compare_n`. The search functions return an index or `None`. Case folding
touches ASCII letters only.

### `unstd.chars`

Tests on a single byte value, given as an `int` (wrapped to 8 bits) or a
one-character `str`/`bytes`: `is_ascii_control`, `is_ascii_printable`,
`is_ascii_extended`, `is_ascii_visible`, `is_ascii`, `is_alphabetic`,
`is_alphanumeric`, `is_digit`, `is_hex` and `is_whitespace`.

### `unstd.ustring`

`UString(text="", limit=0)` is a mutable text string that tracks its
capacity as a terminated buffer would. A non-zero `limit` caps the capacity.
It has `text`, `length`, `capacity` and `limit`, plus:

- `set`, `reset`, `clear`
- `equals`, `equals_ignorecase`, `startswith`, `endswith` (taking a
  `UString` or a `str`)
- `startswith_char`, `startswith_char_ignorecase`, `endswith_char`,
  `endswith_char_ignorecase`
- `to_lower`, `to_upper` (in place) and `lower_copy`, `upper_copy`
- `push_char`, `push_str`, `pop_char`, `substr(start, span=0)`

Errors derive from `UStringError` (a `ValueError`): `CapacityLimitError`
when the limit would be exceeded, `EmptyStringError` when an operation needs
a non-empty string, or when an empty string is compared with a non-empty one.
`substr` raises `IndexError` for a start outside the string.

### `unstd.growth`

`GrowthPolicy` (`LINEAR`, `LOGARITHMIC`) and `next_capacity(policy, capacity)`,
which returns the capacity after one growth step: one more slot, or double
(one slot when empty).

### `unstd.vector`

`Vector(capacity=0, destructor=None, policy=GrowthPolicy.LINEAR)` is a
sequence with an explicit capacity. When full, `push_back` and `insert`
grow it by the policy. The destructor, if set, is called on every element
removed by `erase`, `clear`, `pop_back`, `resize` or `free`. Also
`reserve`, `shrink_to_fit`, `copy` (without destructor), `at`, `front`,
`back` (which return `None` when out of range) and `for_each`.

## Example

    from unstd.ubytes import UBytes
    from unstd.ranges import foreach_range

    buf = UBytes(capacity=10)
    buf.append(b"Hello")
    buf.append(b" World!")
    assert bytes(buf) == b"Hello World!"
    assert buf.capacity == 12

    assert list(foreach_range(5, 1, 2)) == [5, 3, 1]

## What it does not do

This is a library of in-memory data structures and helpers only. It has no
file, socket or memory-search functions, and no command-line tool.