# libft

A compact toolkit of low-level helpers: ASCII character classes, byte-buffer
operations, 32-bit integer parsing and formatting, string utilities, a singly
linked list, a small `printf`, and a buffered line reader.

It has no runtime dependencies and works on Python 3.10 and later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module              | What it offers                                                              |
|---------------------|-----------------------------------------------------------------------------|
| `libft.charclass`   | `isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint`, `tolower`, `toupper` |
| `libft.memory`      | `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`        |
| `libft.numbers`     | `atoi`, `itoa`, `INT_MIN`, `INT_MAX`                                        |
| `libft.strings`     | `split`, `strchr`, `strrchr`, `striteri`, `strmapi`, `strjoin`, `strlcat`, `strlcpy`, `strlen`, `strncmp`, `strnstr`, `strtrim`, `substr` |
| `libft.linkedlist`  | `Node`, `LinkedList`                                                        |
| `libft.output`      | `put_char`, `put_str`, `put_endl`, `put_nbr`                                |
| `libft.printf`      | `sprintf`, `printf`                                                         |
| `libft.reader`      | `LineReader`                                                                |

### Characters

The functions in `libft.charclass` take an integer code or a one-character
string. The predicates return `bool` and only recognise ASCII. `tolower` and
`toupper` return the same kind of value they were given.

```python
from libft.charclass import isalpha, toupper

isalpha("q")     # True
toupper("a")     # "A"
toupper(97)      # 65
```

### Byte buffers

`libft.memory` works on `bytes` and `bytearray`. A byte count that is negative
or runs past a buffer raises `ValueError`. `memchr` returns an index or `None`;
`memmove` copies between two offsets of the same buffer, overlapping or not;
`calloc` returns a zero-filled `bytearray` and raises `OverflowError` when the
size would exceed the platform limit.

```python
from libft.memory import memmove, memchr

buf = bytearray(b"abcdef")
memmove(buf, 2, 0, 3)      # bytearray(b"ababcf")
memchr(b"hello", ord("l"), 5)   # 2
```

### Numbers

`atoi` skips leading whitespace, reads one optional sign, stops at the first
non-digit and clamps to the 32-bit signed range. `itoa` raises
`OverflowError` for a value outside that range.

```python
from libft.numbers import atoi, itoa

atoi("   -42abc")        # -42
atoi("99999999999")      # 2147483647
itoa(-2147483648)        # "-2147483648"
```

### Strings

Searches (`strchr`, `strrchr`, `strnstr`) return an index or `None`.
`strlcpy` and `strlcat` return a pair: the text produced and the length the
operation reports. `striteri` works on a mutable sequence of characters such
as a list, replacing a character whenever the callback returns one.

```python
from libft.strings import split, strtrim, substr, strlcpy

split("  hello  world ", " ")    # ["hello", "world"]
strtrim("xxhixx", "x")           # "hi"
substr("hello", 1, 3)            # "ell"
strlcpy("hello", 3)              # ("he", 5)
```

### Formatted output

`sprintf` and `printf` support `%c %s %p %d %i %u %x %X %%`. `%s` with `None`
gives `(null)`; `%p` with `None` or 0 gives `(nil)`. Any other character after
`%` is dropped. Too few arguments raise `TypeError`. `printf` writes to
standard output unless `file=` is given, and returns the number of characters
written.

```python
from libft.printf import sprintf, printf

sprintf("%s is %d (0x%x)", "answer", 42, 42)   # "answer is 42 (0x2a)"
count = printf("%u%%\n", 100)                  # writes "100%\n", returns 5
```

`libft.output` has simpler writers: `put_char`, `put_str`, `put_endl` and
`put_nbr`, each writing to standard output or to the stream given.

### Linked list

```python
from libft.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
items.push_back(4)
len(items)                           # 5
list(items.map(lambda x: x * 10))    # [0, 10, 20, 30, 40]
items.clear()
```

`map` raises `ValueError` if the function returns `None`, after passing the
values already produced to the optional `delete` callback. `clear` likewise
passes every value to `delete` when one is given.

### Reading lines

`LineReader` takes a file descriptor or any object with a `read(size)` method.
Lines keep their newline; `read_line` returns `None` at the end, and iterating
yields every remaining line.

```python
from libft.reader import LineReader

with open("notes.txt") as handle:
    for line in LineReader(handle):
        print(line, end="")
```