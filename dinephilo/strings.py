"""String helpers: parsing, searching, slicing and bounded copying.

Positions are returned as indices into the string, or None when nothing is
found. The terminating-character conventions of the bounded functions are
kept: searching for "\\0" finds the end of the string, and the bounded
copies report the length they tried to create.
"""

from itertools import islice, takewhile, zip_longest
from typing import Callable, Iterable, List, MutableSequence, Optional, Tuple

_WHITESPACE = {chr(code) for code in range(9, 14)} | {" "}
_NUL = "\0"


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps around in the signed 32-bit range.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", rest))
    value = 0
    for ch in digits:
        value = _wrap_int32(value * 10 + (ord(ch) - ord("0")))
    return _wrap_int32(value * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def split(s: str, sep: str) -> List[str]:
    """Split s on the character sep, dropping empty pieces."""
    return [word for word in s.split(_single_char(sep)) if word]


def strchr(s: str, c: str) -> Optional[int]:
    """Return the index of the first c in s, len(s) for "\\0", or None."""
    _single_char(c)
    if c == _NUL:
        index = s.find(_NUL)
        return len(s) if index < 0 else index
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Return the index of the last c in s, len(s) for "\\0", or None."""
    _single_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of s."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return str(s)


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be strings")
    return s1 + s2


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest within a total buffer of size characters.

    Returns the resulting string and the length the full concatenation
    would have had. When size does not exceed len(dest), dest is returned
    unchanged and the reported length is size + len(src).
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dest_len = len(dest)
    if size <= dest_len:
        return dest, size + len(src)
    room = size - 1 - dest_len
    return dest + src[:room], dest_len + len(src)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most size - 1 characters of src.

    Returns the copied string and len(src). A size of 0 copies nothing.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, char) for every character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: Optional[MutableSequence[str]],
             f: Optional[Callable[[int, MutableSequence[str]], None]]) -> None:
    """Call f(index, s) for each position of the mutable sequence s.

    f may change s[index] in place. Nothing happens when s or f is None.
    """
    if s is None or f is None:
        return
    for index in range(len(s)):
        f(index, s)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return where needle first occurs wholly within haystack[:length], or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    index = haystack[:max(length, 0)].find(needle)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters of charset from both ends of s."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("both arguments must be strings")
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s from start; empty if start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def tablen(items: Iterable[object]) -> int:
    """Count the entries before the first None (or all of them)."""
    return sum(1 for _ in takewhile(lambda item: item is not None, items))