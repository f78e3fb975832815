# polystring

A small library with two parts:

- `Collection` (in `polystring.collection`) is an ordered container for elements of one kind. The kind is given by a `FieldInfo` (in `polystring.fieldinfo`). A `FieldInfo` sets how an element is copied when it is stored and how it is rendered as bytes. Every element is copied on `append`, so a later change to the original does not reach the collection.
- `ByteString` (in `polystring.mystring`) is a string kept as a collection of single bytes. Text is stored as UTF-8.

The package also has an interactive menu for trying these operations.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

```python
from polystring.mystring import ByteString

s = ByteString("Hello world from here")
len(s)                      # 21
s.char_at(0)                # 72, the byte value of "H"
str(s.substring(0, 5))      # "Hello"
str(s.concat(ByteString("!")))   # "Hello world from here!"
s.to_bytes()                # b"Hello world from here"

words = s.split(" ")        # a Collection of ByteString
[str(w) for w in words]     # ["Hello", "world", "from", "here"]
```

A `ByteString` can be built from `str`, `bytes`, `bytearray` or `memoryview`. The text ends at the first NUL byte: anything after it is dropped. Length and indexes count bytes, not characters. For example, `ByteString("привет")` has a length of 12. `str()` decodes the bytes as UTF-8 and replaces any invalid sequences.

### How `split` works

`split(delimiters)` treats every byte of `delimiters` as a separator. When separators come one after another, or at the start or end of the string, no empty words are produced. Splitting an empty string gives an empty collection.

### Errors

- `substring(start, end)` raises `ValueError` when `start` is negative, when `start > end`, or when `end` is past the end of the string. `substring(3, 3)` gives an empty string.
- `char_at(index)` raises `IndexError` for an index that is out of range.
- `concat` raises `TypeError` when the other value is not a `ByteString`.
- `ByteString(None)` and `split(None)` raise `TypeError`.

### Collections

```python
from polystring.collection import Collection
from polystring.fieldinfo import char_field_info

c = Collection(char_field_info())
c.append(ord("a"))
c.append(ord("b"))
len(c)              # 2
c[0]                # 97
list(c)             # [97, 98]
c.slice(0, 1)       # a new Collection holding the first element
c.concat(c)         # a new Collection holding both elements, twice
c.clear()           # removes every element
```

`char_field_info()` describes single bytes. Appending a value outside 0..255 raises `ValueError`. `string_field_info()` describes `ByteString` elements, which are copied on `append`.

- Indexing out of range raises `IndexError`.
- Appending `None` raises `TypeError`.
- `slice` follows the same range rules as `substring`.
- `concat` raises `TypeError` unless both collections use the same `FieldInfo`.

## Interactive menu

```
polystring
```

The menu reads from standard input. It lets you:

- set the main string and the second string;
- show either string with its length;
- concatenate the two;
- take a substring of the main string, with the start index and the end index (not included);
- split the main string into words, using delimiters you type;
- clear both strings.

Enter `0` to exit. The menu also ends when the input runs out. Strings are kept only for the length of the session; nothing is saved.

## Tests

```
pytest
```