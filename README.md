# cstrkit

This package provides the behaviour of the C string library as ordinary Python functions. Use it to format and parse text the way C programs do, or to check what a C program would produce.

It is a library only. It has no command-line program.

## Installation

```
pip install cstrkit
```

## Modules

### `cstrkit.memory`

`memchr`, `memcmp`, `memcpy`, `memmove` and `memset`, each taking a byte count `n`.

- They work on any buffer, such as `bytes` or `bytearray`.
- `memchr` returns the offset of the byte it finds, or `None`.
- `memcpy`, `memmove` and `memset` write into a writable buffer and return it.
- A count outside the buffer raises `ValueError`.

### `cstrkit.strings`

`strlen`, `strcat`, `strncat`, `strchr`, `strrchr`, `strcmp`, `strncmp`, `strcpy`, `strncpy`, `strcspn`, `strspn`, `strpbrk` and `strstr`.

- They work on Python `str` values.
- A `"\0"` ends the string value, as in C.
- Functions that write return a new string and leave their argument unchanged.
- Search functions return an index, or `None` when there is no match.

For `strtok`-style splitting there are two tools:

- The `Tokenizer` class. Its `next_token(delim)` method takes the delimiters separately on each call.
- The `tokens(text, delim)` generator.

### `cstrkit.transform`

- `to_upper` and `to_lower` change ASCII letters only.
- `insert(src, text, start_index)` inserts `text` before position `start_index`. An index outside the string raises `ValueError`.

### `cstrkit.errors`

`strerror(errnum, platform=None)` returns the error message text that the Linux (`"linux"`) or macOS (`"darwin"`) C library would give.

- Without a platform it uses the running system.
- Numbers outside the table give `"Unknown error …"`.
- An unknown platform raises `ValueError`.

### `cstrkit.printf`

`sprintf(fmt, *args)` returns the formatted string.

It supports:

- the flags `-`, `+`, space, `0` and `#`;
- width and precision, including `*`;
- the length modifiers `h`, `l` and `L`;
- the conversions `c d i e E f g G o u x X p s n %`.

Integers are wrapped to the C type that the length modifier selects. A `None` string prints as `(null)`. `%n` stores the count of characters written so far in a `Counter` object. Each parsed directive is a `FormatSpec`.

### `cstrkit.scanf`

`sscanf(text, fmt)` reads values and returns a `ScanResult`.

- `count` is the number of assigned conversions, or `-1` if the input ran out before anything was assigned.
- `values` holds what was read. The result can also be iterated and indexed.
- It supports `*` suppression, field widths and the length modifiers `hh`, `h`, `l`, `ll` and `L`.
- It supports the conversions `c d i u o x X p e E f g G s n %`.
- Floats read without `l` or `L` are rounded to single precision.

## Example

```python
from cstrkit.printf import sprintf
from cstrkit.scanf import sscanf
from cstrkit.strings import tokens
from cstrkit.transform import insert

sprintf("%+08.3f|%-5d|%#x", 3.14159, 42, 255)
# '+003.142|42   |0xff'

result = sscanf("12 abc 3.5", "%d %s %lf")
result.count, result.values
# (3, (12, 'abc', 3.5))

list(tokens("/usr/local/bin/", "/"))
# ['usr', 'local', 'bin']

insert("diary", "ction", 2)
# 'dictionary'
```

## Limits

Wide-character handling is limited: `%lc` and `%ls` format Python characters and strings as they are, with no locale conversion.

## Running the tests

```
pip install "cstrkit[test]"
pytest
```