"""C-style string queries over Python text.

Every function treats its text arguments the way a NUL-terminated string
is read: anything from the first ``"\\0"`` onwards is ignored.  Positions
are returned as indices into the text, with ``None`` where nothing is
found.  Bounded copies return the resulting text along with the length the
untruncated operation would have produced.
"""

from __future__ import annotations

from itertools import chain, islice, repeat

NUL = "\0"


def _cstr(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return s.split(NUL, 1)[0]


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def _size(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int size, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")
    return n


def strlen(s: str) -> int:
    """Length of ``s`` up to its first NUL."""
    return len(_cstr(s))


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _cstr(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _cstr(s)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code-point difference at the first mismatch, or 0 when the
    strings agree on the compared prefix or both end together.
    """
    limit = _size(n)
    left = chain(_cstr(s1), repeat(NUL))
    right = chain(_cstr(s2), repeat(NUL))
    for x, y in islice(zip(left, right), limit):
        if x != y:
            return ord(x) - ord(y)
        if x == NUL:
            return 0
    return 0


def strnstr(big: str, little: str, n: int) -> int | None:
    """Index of ``little`` in the first ``n`` characters of ``big``.

    An empty ``little`` is found at index 0; otherwise nothing is found
    when ``n`` is 0 or the match would extend past ``n`` characters.
    """
    haystack = _cstr(big)
    needle = _cstr(little)
    remaining = _size(n)
    if not needle:
        return 0
    if remaining == 0:
        return None
    for index in range(len(haystack)):
        if len(needle) > remaining:
            break
        if haystack.startswith(needle, index):
            return index
        remaining -= 1
    return None


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the buffer's resulting text and the length of ``src``.  With a
    size of 0 the buffer is left as it was.
    """
    limit = _size(size)
    source = _cstr(src)
    if limit == 0:
        return dst, len(source)
    return source[: limit - 1], len(source)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` inside a buffer of ``size`` characters.

    Returns the buffer's resulting text and the length the full
    concatenation would have had.  When ``dst`` already fills the buffer
    without a terminator, it is left as it was and the returned length is
    ``size`` plus the length of ``src``.
    """
    limit = _size(size)
    source = _cstr(src)
    dst_len = min(len(_cstr(dst)), limit)
    if dst_len == limit:
        return dst, dst_len + len(source)
    room = limit - dst_len - 1
    return _cstr(dst)[:dst_len] + source[:room], dst_len + len(source)


def strdup(s: str) -> str:
    """Copy of ``s`` up to its first NUL."""
    return _cstr(s)