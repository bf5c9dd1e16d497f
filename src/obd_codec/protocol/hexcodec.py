"""Hex text <-> byte conversion.

The adapter speaks in hex text such as "41 0C 1A F8". Every other module
goes through these helpers to turn that text into bytes and back.
"""

from typing import Optional, Union, Iterable

from ..errors import InvalidArgError, InvalidHexError, BufferTooSmallError, check_capacity

WHITESPACE = " \t\r\n"
HEX_DIGITS = "0123456789ABCDEF"

_STRIP_TABLE = str.maketrans("", "", WHITESPACE)


def hex_nibble(char: str) -> int:
    """Return the value (0-15) of a hex character, or -1 if it is not one."""
    if len(char) != 1:
        return -1
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "F":
        return ord(char) - ord("A") + 10
    if "a" <= char <= "f":
        return ord(char) - ord("a") + 10
    return -1


def hex_to_bytes(text: str, capacity: Optional[int] = None) -> bytes:
    """
    Convert hex text to bytes.

    Whitespace is skipped between byte pairs, never inside one.

    Args:
        text: Hex text such as "41 0C 1A F8" or "410C1AF8"
        capacity: Maximum number of output bytes (None for unbounded, 0 allowed)

    Returns:
        Decoded bytes

    Raises:
        InvalidArgError: text is not a string or capacity is negative
        InvalidHexError: non-hex character or trailing lone nibble
        BufferTooSmallError: output would exceed capacity
    """
    if not isinstance(text, str):
        raise InvalidArgError(f"hex input must be a string, got {type(text).__name__}")
    if capacity is not None:
        check_capacity(capacity, 0, minimum=0)

    out = bytearray()
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char in WHITESPACE:
            i += 1
            continue

        high = hex_nibble(char)
        if high < 0:
            raise InvalidHexError(f"invalid hex character {char!r} at offset {i}")

        i += 1
        if i >= length:
            raise InvalidHexError("odd number of hex digits")

        low = hex_nibble(text[i])
        if low < 0:
            raise InvalidHexError(f"invalid hex character {text[i]!r} at offset {i}")
        i += 1

        if capacity is not None and len(out) >= capacity:
            raise BufferTooSmallError(len(out) + 1, capacity)

        out.append((high << 4) | low)

    return bytes(out)


def bytes_to_hex(data: Union[bytes, bytearray, Iterable[int]], capacity: Optional[int] = None) -> str:
    """
    Convert bytes to uppercase hex pairs separated by single spaces.

    A buffer of N bytes needs capacity 3*N ("XX " per byte, the last
    separator slot holds the terminator). An empty buffer needs no room.
    """
    if isinstance(data, (int, str)):
        raise InvalidArgError(f"not a byte sequence: {type(data).__name__}")
    try:
        data = bytes(data)
    except (TypeError, ValueError) as e:
        raise InvalidArgError(f"not a byte sequence: {e}") from e

    if capacity is not None:
        check_capacity(capacity, len(data) * 3, minimum=0)

    if not data:
        return ""

    return " ".join(HEX_DIGITS[b >> 4] + HEX_DIGITS[b & 0x0F] for b in data)


def strip_whitespace(text: str) -> str:
    """Remove spaces, tabs, CR and LF: "41 0C\\r\\n" -> "410C"."""
    if not isinstance(text, str):
        raise InvalidArgError(f"expected a string, got {type(text).__name__}")
    return text.translate(_STRIP_TABLE)
