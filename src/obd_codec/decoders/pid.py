"""PID response parsing (Mode 01 / 02)."""

from ..config import MAX_DATA_BYTES
from ..errors import InvalidArgError, ParseFailedError
from ..models.pid import PidResponse
from ..protocol.hexcodec import hex_to_bytes


def parse_pid_response(text: str) -> PidResponse:
    """
    Parse a cleaned PID response.

    "41 0C 1A F8" -> mode=0x41, pid=0x0C, data=b"\\x1a\\xf8"

    Only the first MAX_DATA_BYTES value bytes are kept; anything beyond
    that is dropped without error.

    Args:
        text: Cleaned hex payload (see clean_response)

    Returns:
        PidResponse

    Raises:
        InvalidHexError: payload is not valid hex
        ParseFailedError: fewer than two bytes (mode + pid)
    """
    if not isinstance(text, str):
        raise InvalidArgError(f"response must be a string, got {type(text).__name__}")

    raw = hex_to_bytes(text)
    if len(raw) < 2:
        raise ParseFailedError(f"PID response needs mode and pid bytes, got {len(raw)} byte(s)")

    return PidResponse(mode=raw[0], pid=raw[1], data=raw[2:2 + MAX_DATA_BYTES])
