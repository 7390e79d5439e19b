# minitalk

A small library of text helpers with C semantics, written for Python
strings and bytes:

- a printf-style formatter with its own, precisely defined conversion rules,
- a line reader that pulls newline-terminated lines from file descriptors and
  keeps a separate buffer for each descriptor,
- character-class, string-query and string-building helpers in the style of
  the classic C library (`atoi`, `itoa`, `strlcpy`, `strnstr`, `split`,
  `strtrim`, ...).

It has no dependencies beyond the standard library.

## Installing

```
pip install .
```

## Formatting

`minitalk.formatting.sprintf(fmt, *args)` returns the formatted text;
`minitalk.formatting.printf(fmt, *args)` writes it to standard output and
returns its length.

Supported conversions are `c d i u x X s p %`, with the flags `#`, `+`, `-`,
`0` and space, a width and a precision. Either the width or the precision may
be `*`, in which case it is taken from the arguments; a negative `*` width
left-justifies the field, a negative `*` precision counts as none.

```python
from minitalk.formatting import sprintf

sprintf("%5d|", 42)       # '   42|'
sprintf("%-6s|", "ab")    # 'ab    |'
sprintf("%#x", 255)       # '0xff'
sprintf("%.3s", "abcdef") # 'abc'
sprintf("%p", None)       # '(nil)'
sprintf("%s", None)       # '(null)'
```

Arguments are brought to the type the conversion reads
(`minitalk.convert.coerce_argument`): `%d` wraps like a 32-bit signed int,
`%u`, `%x` and `%X` like a 32-bit unsigned int, `%c` keeps a single byte, and
strings are cut at their first NUL. Too few arguments raise `TypeError`; a
width or precision that does not fit in an int raises
`minitalk.printf_spec.FormatError`.

The pieces are available on their own:

- `minitalk.printf_spec.parse_spec(fmt, pos)` parses one specification into a
  `FormatSpec` (with `Flag` and `Conversion` enums).
- `minitalk.convert.render_conversion(spec, value)` renders one argument.
- `minitalk.layout.layout_field` and `Field` arrange sign, prefix, zero
  padding and space padding.
- `minitalk.numconv.ltoa`, `ltox` and `ptox` convert integers to decimal and
  hexadecimal text.

## Reading lines

```python
import os
from minitalk.linereader import LineReader

read_fd, write_fd = os.pipe()
os.write(write_fd, b"first\nsecond")
os.close(write_fd)

reader = LineReader(buffer_size=4)
list(reader.iter_lines(read_fd))   # [b'first\n', b'second']
```

`read_line(fd)` returns the next line with its newline, the last line without
one if the input lacks it, and `None` at end of input. On a read error the
data kept for that descriptor is dropped and the `OSError` is raised.
`forget(fd)` drops buffered data by hand. `get_next_line(fd)` uses one shared
reader.

## String helpers

All text arguments are read like NUL-terminated strings: anything from the
first `"\0"` on is ignored.

- `minitalk.charclass`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower` (each taking a code or a one-character string), `atoi`
  (which wraps like a 32-bit int) and `itoa`.
- `minitalk.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strdup`, and `strlcpy` / `strlcat`, which return the resulting buffer text
  together with the length the untruncated operation would have had.
- `minitalk.transform`: `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  and `striteri`, which works on a mutable sequence of characters in place.

```python
from minitalk.charclass import atoi
from minitalk.strings import strlcpy, strnstr
from minitalk.transform import split

atoi("  -42abc")            # -42
strnstr("hello", "ll", 10)  # 2
strlcpy("", "abcdef", 4)    # ('abc', 6)
split("a,,b", ",")          # ['a', 'b']
```

## What this package does not do

The package provides no command-line programs. It does not itself send or
receive messages between processes, install signal handlers, or offer helpers
for writing characters, strings or numbers to a given file descriptor; it
stops at formatting text, reading lines and working with strings.

## Running the tests

```
pip install ".[test]"
pytest
```