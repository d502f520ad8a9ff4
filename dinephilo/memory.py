"""Byte-buffer helpers working on bytes and bytearray objects."""

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]

UINT_MAX = 0xFFFFFFFF


def _check_length(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"length {n} exceeds buffer of size {len(buffer)}")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero, in place."""
    _check_length(n, buffer)
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count elements of size bytes each.

    Raises OverflowError when count * size would exceed the unsigned
    32-bit range.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size and count > UINT_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the allocation limit")
    return bytearray(count * size)


def memchr(data: Buffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c in data[:n], or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first n bytes; return the difference at the first mismatch, else 0."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first n bytes of src over the start of dest and return dest."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes from offset src to offset dest within buffer; regions may overlap."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if max(dest, src) + n > len(buffer):
        raise ValueError("move runs past the end of the buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with the low byte of c and return buffer."""
    _check_length(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer