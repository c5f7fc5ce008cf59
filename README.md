# hdftypes

`hdftypes` describes HDF5 data in plain Python. It needs no native library. It provides:

- **Type descriptors** (`hdftypes.descriptor`). These cover integers, floats, booleans, enums, compounds, fixed and variable-length arrays, and ASCII and Unicode strings. A compound can be laid out the way a C struct would be (`to_c_repr`) or packed with no padding (`to_packed_repr`).
- **String values** (`hdftypes.strings`): `VarLenAscii`, `VarLenUnicode`, `FixedAscii` and `FixedUnicode`.
  - They check capacity, reject embedded nulls and non-ASCII bytes, and strip null padding.
  - Problems raise `StringError`, a `ValueError` that carries a `StringErrorKind`.
- **Variable-length arrays** (`hdftypes.array`): `VarLenArray`, an immutable sequence.
- **Shapes** (`hdftypes.dim`): `ndim`, `dims` and `size` for a single integer extent or a sequence of extents. An empty shape is a scalar and holds one element.
- **Errors** (`hdftypes.errors`): `ErrorFrame`, `ErrorStack`, the exceptions `H5Error`, `LibraryError` and `InternalError`, and `h5check`.
- **Enumerations and constants**:
  - `hdftypes.typeclasses` (type classes, byte order, padding, character sets, conversion settings, `is_variable`)
  - `hdftypes.spaces` (dataspace classes, selection operators, `is_unlimited`)
  - `hdftypes.filters` (filter ids and flags, szip options, `is_reserved_filter`)
  - `hdftypes.references` (`RefType`, `reference_size`)
  - `hdftypes.plugins` (`PluginType`, `PluginFlag`, `filter_plugins_enabled`)

## Installation

```
pip install hdftypes
```

To run the tests:

```
pip install "hdftypes[test]"
pytest
```

## Type descriptors

`type_descriptor` accepts several kinds of input:

- a scalar name such as `"u16"`, `"f64"` or `"usize"`
- `bool`, `int` or `float`
- the `VarLenAscii` or `VarLenUnicode` class
- a tuple of specs, which gives a compound
- `[spec, length]`, which gives a fixed array

`tuple_type` gives the native layout of a tuple.

```python
from hdftypes.descriptor import tuple_type, type_descriptor

td = tuple_type("i8", "u64", "f32", "bool")
print(td.size())                   # 16: native layout
print(td.to_c_repr().size())       # 24: fields in declaration order with C alignment
print(td.to_packed_repr().size())  # 14: no padding

print(type_descriptor(["u32", 256]).size())  # 1024
```

## Strings

```python
from hdftypes.strings import FixedAscii, FixedUnicode, StringError, VarLenUnicode

s = FixedAscii.from_ascii(b"ab", 2)
assert s.as_str() == "ab"
assert FixedAscii.from_ascii("a\0\0", 3) == "a"   # trailing nulls are padding

try:
    FixedUnicode.from_str("€", 2)  # needs 3 bytes
except StringError as exc:
    print(exc)  # string error: insufficient capacity for fixed sized string

try:
    VarLenUnicode.from_str("foo\0bar")
except StringError as exc:
    print(exc)  # string error: variable length string with internal null
```

Lengths are counted in bytes. Each string value compares equal to a `str` with the same text.

## Variable-length arrays and shapes

```python
from hdftypes.array import VarLenArray
from hdftypes.dim import dims, ndim, size

a = VarLenArray([1, 2, 3])
assert a == [1, 2, 3] and len(a) == 3
print(repr(a))  # [1, 2, 3]

assert ndim((2, 3)) == 2
assert dims(5) == [5]
assert size(()) == 1
```

## Errors

```python
from hdftypes.errors import ErrorFrame, ErrorStack, LibraryError, h5check

stack = ErrorStack()
stack.push(ErrorFrame("can't close", "H5Pclose", "Property lists", "Unable to free object"))
stack.push(ErrorFrame("can't locate ID", "H5I_dec_ref", "Object atom", "Unable to find atom information"))
print(stack.description)  # H5Pclose(): can't close: can't locate ID
print(stack.detail())     # Error in H5Pclose(): can't close [Property lists: Unable to free object]

try:
    h5check(-1, query=lambda: stack)
except LibraryError as exc:
    print(exc)            # H5Pclose(): can't close: can't locate ID
```

`h5check` returns its value unchanged unless two things are true:

- The value signals failure: it is negative, or zero when `signed=False`.
- The `query` callable returns a non-empty stack.

When both hold, it raises `LibraryError`.

## What it does not do

This package only describes data layouts, values, enumerations and errors. It does not read or write HDF5 files. It does not call into a native HDF5 library. It has no command-line tool.