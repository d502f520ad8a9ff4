"""A small printf: %c %s %p %d %i %u %x %X and %%.

Integers are read as fixed-width machine values: %d and %i as signed 32-bit,
%u, %x and %X as unsigned 32-bit, and %p as an unsigned 64-bit address.
A conversion letter that is not recognised, and a lone "%" at the end of the
format, produce no output.
"""

from typing import Iterator, Optional, TextIO, Union

from dinephilo.output import put_str

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF
NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _as_int(value: object, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - 0x100000000 if value >= 0x80000000 else value


def format_hex(num: int, upper: bool = False) -> str:
    """Return num as an unsigned 32-bit value in hexadecimal, without prefix."""
    text = format(_as_int(num, "x") & _UINT32, "x")
    return text.upper() if upper else text


def format_pointer(ptr: Optional[int]) -> str:
    """Return an address as 0x-prefixed lower-case hex, or "(nil)" for zero."""
    if ptr is None:
        return NULL_POINTER
    address = _as_int(ptr, "p") & _UINT64
    if address == 0:
        return NULL_POINTER
    return "0x" + format(address, "x")


def format_unsigned(n: int) -> str:
    """Return n as an unsigned 32-bit value in decimal."""
    return str(_as_int(n, "u") & _UINT32)


def _format_char(value: Union[int, str]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_string(value: Optional[str]) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _convert(conversion: str, args: Iterator[object]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "cspdiuxX" or not conversion:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return _format_char(value)  # type: ignore[arg-type]
    if conversion == "s":
        return _format_string(value)  # type: ignore[arg-type]
    if conversion == "p":
        return format_pointer(value)  # type: ignore[arg-type]
    if conversion in "di":
        return str(_to_int32(_as_int(value, conversion)))
    if conversion == "u":
        return format_unsigned(value)  # type: ignore[arg-type]
    return format_hex(value, upper=conversion == "X")  # type: ignore[arg-type]


def _render(fmt: str, args: tuple) -> Iterator[str]:
    if fmt is None:
        raise TypeError("format must be a str, not None")
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch == "%":
            yield _convert(next(chars, ""), remaining)
        else:
            yield ch


def format_message(fmt: str, *args: object) -> str:
    """Return fmt with each conversion replaced by the next argument."""
    return "".join(_render(fmt, args))


def print_formatted(fmt: str, *args: object, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (standard output by default).

    Returns the number of characters written.
    """
    text = format_message(fmt, *args)
    put_str(text, stream)
    return len(text)