# cborkit

A pure-Python, typed model of CBOR (RFC 7049) data items. No third-party
dependencies are required.

## Modules

- `cborkit.items`: the major types (`CborType`), integer and float widths
  (`IntWidth`, `FloatWidth`), `UnsignedInt`, `NegativeInt`, `FloatCtrl`, `Map`,
  `Tag`, the simple-value builders `ctrl`, `null`, `undefined`, `boolean`, the
  predicates `is_int`, `is_float`, `is_bool`, `is_null`, `is_undef`, and
  `CborError`.
- `cborkit.arrays`: `Array`.
- `cborkit.bytestrings`: `ByteString` and `TextString`.

## Integers

Integer items store a non-negative magnitude and the width it is encoded with.
The width defaults to the narrowest one that fits. A `NegativeInt` with
magnitude `n` stands for `-1 - n`.

```python
from cborkit.items import IntWidth, NegativeInt, UnsignedInt

UnsignedInt(1000).width          # IntWidth.INT_16
UnsignedInt(10, IntWidth.INT_64) # explicit width
NegativeInt(9).integer           # -10
```

A value that does not fit in the requested width, or in 64 bits, raises
`CborError`.

## Floats and simple values

`FloatCtrl` holds a float of a given width, rounded to that width's precision,
or, with `FloatWidth.FLOAT_0`, a simple value from 0 to 255.

```python
from cborkit.items import FloatCtrl, FloatWidth, boolean, is_bool, is_null, null

half = FloatCtrl(FloatWidth.FLOAT_16, 65504.0)
flag = boolean(True)
is_bool(flag), flag.as_bool    # (True, True)
is_null(null())                # True
```

## Arrays and maps

A capacity makes a container definite: it accepts at most that many entries
and raises `CborError` once full. Passing no capacity makes it indefinite and
growable.

```python
from cborkit.arrays import Array
from cborkit.bytestrings import TextString
from cborkit.items import Map, Tag, UnsignedInt, boolean

mapping = Map(2)
mapping.add(TextString("Is CBOR awesome?"), boolean(True))
mapping.add(UnsignedInt(42), TextString("Is the answer"))

array = Array()
array.push(UnsignedInt(4))
array.push(UnsignedInt(3))
array.set(2, UnsignedInt(1))      # one past the end appends
array.replace(0, UnsignedInt(2))  # out-of-range index raises IndexError

tagged = Tag(21, UnsignedInt(1))
```

`Array` supports `len`, indexing and iteration; `Map` supports `len` and
iterates over `(key, value)` pairs in insertion order.

## Byte and text strings

Passing data makes a definite string holding a copy of it; passing nothing
makes an indefinite string built from definite chunks of the same kind.

```python
from cborkit.bytestrings import ByteString, TextString

greeting = TextString("Čaues ßvěte!")
len(greeting)               # 15 bytes
greeting.codepoint_count()  # 12

chunked = TextString()
chunked.add_chunk(TextString("a"))
chunked.add_chunk(TextString("b"))
chunked.chunk_count, chunked.text  # (2, "ab")

raw = ByteString(b"abc")
raw.data                    # b"abc"
```

Invalid UTF-8 in a text string makes `codepoint_count` and `text` raise
`CborError`.

## What this package does not do

The package only models items. It does not decode CBOR bytes into items,
encode items into bytes, offer a streaming token parser, copy or pretty-print
item trees, or provide any command-line tools.

## Running the tests

```
pip install "cborkit[test]"
pytest
```