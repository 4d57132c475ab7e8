# ftkit

A compact library of everyday helpers with precise, predictable behaviour.

| Module | What it provides |
| --- | --- |
| `ftkit.chars` | ASCII classification and case conversion: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`, `to_upper`, `to_lower`. Each takes a one-character string or an integer code; the case converters return the same kind they were given. |
| `ftkit.numbers` | Lenient parsing and formatting: `atoi` (32-bit wrap-around), `atof` (single precision), `atod` (double precision), `itoa` (32-bit signed range, `OverflowError` outside it), `power` (negative exponents give 0). The parsers skip leading whitespace, take one optional sign, stop at the first non-digit and never raise; `atof` and `atod` accept `.` or `,` before the fraction. |
| `ftkit.strings` | `strchr`, `strrchr`, `strnstr` return an index or `None`; `strncmp`, `substr`, `strjoin`, `strtrim`, `split` (drops empty pieces), `strmapi`, `striteri` (updates a mutable sequence in place). |
| `ftkit.memory` | Operations on byte buffers: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`, `strlcpy`, `strlcat`. Buffers written to must be mutable (`bytearray` or a writable `memoryview`); lengths beyond a buffer raise `ValueError`. |
| `ftkit.output` | `put_char`, `put_str`, `put_endl`, `put_nbr`, writing to a given text stream or to standard output. |
| `ftkit.linereader` | `LineReader` with `next_line()` and iteration, and the generator `read_lines`, reading a `str` or `bytes` stream a fixed number of characters at a time (10 by default). Lines keep their newline. |
| `ftkit.lists` | A singly linked list: `Node` (`content`, `next`, `discard`) and `LinkedList` (`push_front`, `push_back`, `last`, `clear`, `for_each`, `map`, `len()`, iteration). |
| `ftkit.formatting` | `sprintf` and `printf` with the conversions `c s p d i u x X %` and the flags `- 0 # + space`, field width and precision (either may be `*`); `FormatFlags`, `itoa_hex`, `itoa_unsigned`. |

## Installation

From a checkout of the project:

```
pip install .
```

## Examples

```python
from ftkit.numbers import atoi, itoa
from ftkit.strings import split, strtrim
from ftkit.formatting import sprintf

atoi("  -42abc")               # -42
itoa(-2147483648)              # "-2147483648"
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"
sprintf("%-5d|%#x|%.3s", 42, 255, "abcdef")  # "42   |0xff|abc"
```

Reading lines from a text or binary stream:

```python
import io
from ftkit.linereader import read_lines

for line in read_lines(io.StringIO("one\ntwo\nthree"), 4):
    print(repr(line))   # 'one\n', 'two\n', 'three'
```

A linked list:

```python
from ftkit.lists import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
doubled = items.map(lambda x: x * 2, lambda x: None)
list(doubled)   # [0, 2, 4, 6]
```

Byte buffers:

```python
from ftkit.memory import calloc, strlcpy

buf = calloc(8, 1)
strlcpy(buf, b"hello world", len(buf))   # 11, the length of the source
bytes(buf)                               # b"hello w\x00"
```

## Limits

- `sprintf` and `printf` have no floating-point conversions and no length
  modifiers; an unknown conversion character is written out as it is.
- The package is a library only; it installs no command-line program.

## Running the tests

```
pip install .[test]
pytest
```