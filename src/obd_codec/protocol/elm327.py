"""ELM327 response classification and cleaning.

Raw adapter output looks like "010C\\r41 0C 1A F8\\r\\r>": the echo of the
command, the data line(s), blank lines and the ">" prompt. This module
tells those lines apart and pulls out just the data payload.
"""

import re
from typing import List

from ..config import MAX_RESPONSE_LEN, RESPONSE_OFFSET
from ..errors import (
    InvalidArgError,
    BufferTooSmallError,
    NoDataError,
    ElmError,
    ParseFailedError,
    check_capacity,
)
from ..models.response import ResponseType
from .hexcodec import hex_nibble

PROMPT = ">"

OK_PREFIXES = ("OK", "ELM")  # "ELM327 v1.5" banner after ATZ counts as OK
NO_DATA_PREFIX = "NO DATA"
ERROR_PREFIXES = ("ERROR", "UNABLE TO CONNECT", "BUS INIT", "CAN ERROR", "STOPPED")

_LINE_SPLIT = re.compile(r"[\r\n]+")


def split_lines(text: str) -> List[str]:
    """Split adapter text on CR/LF, dropping empty lines."""
    return [line for line in _LINE_SPLIT.split(text) if line]


def classify_response(line) -> ResponseType:
    """
    Classify one adapter response line.

    Exact tokens are checked before the hex-digit fallback, so "OK" never
    counts as data even though it is not hex either way.

    Args:
        line: Raw response line (None is treated as empty)

    Returns:
        The ResponseType of the line
    """
    if not isinstance(line, str):
        return ResponseType.UNKNOWN

    p = line.lstrip(" \t\r\n")
    if not p:
        return ResponseType.UNKNOWN

    if p.startswith(PROMPT):
        return ResponseType.PROMPT

    if p.startswith(OK_PREFIXES):
        return ResponseType.OK

    if p.startswith(NO_DATA_PREFIX):
        return ResponseType.NO_DATA

    if p.startswith("?") or p.startswith(ERROR_PREFIXES):
        return ResponseType.ERROR

    if hex_nibble(p[0]) >= 0:
        return ResponseType.DATA

    return ResponseType.UNKNOWN


def _first_byte(line: str) -> int:
    """Value of the leading hex pair of a line, or -1."""
    if len(line) < 2:
        return -1
    high = hex_nibble(line[0])
    low = hex_nibble(line[1])
    if high < 0 or low < 0:
        return -1
    return (high << 4) | low


def clean_response(raw: str, capacity: int = MAX_RESPONSE_LEN) -> str:
    """
    Extract the data payload from a raw adapter transcript.

    "010C\\r41 0C 1A F8\\r\\r>" -> "41 0C 1A F8"

    Lines are read up to the first prompt. Only DATA lines survive, and of
    those only lines whose first byte carries the 0x40 response bit; the
    rest are echoes of our own request (01, 02, 03, 09). Multi-frame
    payloads are joined with a single CR.

    Args:
        raw: Raw transcript text
        capacity: Output capacity, terminator slot included

    Returns:
        Cleaned payload with trailing spaces trimmed

    Raises:
        NoDataError: no data line and the transcript says NO DATA
        ElmError: no data line and the transcript has "?" or ERROR
        ParseFailedError: no data line for any other reason
        BufferTooSmallError: payload does not fit capacity
        InvalidArgError: raw is not a string or capacity is not positive
    """
    if not isinstance(raw, str):
        raise InvalidArgError(f"response must be a string, got {type(raw).__name__}")
    check_capacity(capacity, 1)

    transcript = raw.split(PROMPT, 1)[0]
    out = ""

    for line in split_lines(transcript):
        line = line.lstrip(" \t")
        if not line:
            continue

        if classify_response(line) != ResponseType.DATA:
            continue

        first = _first_byte(line)
        if first < 0 or not first & RESPONSE_OFFSET:
            continue

        candidate = f"{out}\r{line}" if out else line
        if len(candidate) >= capacity:
            raise BufferTooSmallError(len(candidate) + 1, capacity)
        out = candidate

    if not out:
        if NO_DATA_PREFIX in raw:
            raise NoDataError("adapter reported NO DATA")
        if "?" in raw or "ERROR" in raw:
            raise ElmError("adapter rejected the command")
        raise ParseFailedError("no data line in response")

    return out.rstrip(" \t")
