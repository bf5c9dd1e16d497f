"""Error kinds raised by the codec."""

from enum import Enum


class ObdResult(str, Enum):
    """Outcome kind of a failed codec operation."""
    INVALID_ARG = "invalid_arg"            # Bad caller input
    BUFFER_TOO_SMALL = "buffer_too_small"  # Capacity too small for the output
    INVALID_HEX = "invalid_hex"            # Malformed hex text
    NO_DATA = "no_data"                    # Adapter reported NO DATA
    ELM_ERROR = "elm_error"                # Adapter reported "?" or ERROR
    PARSE_FAILED = "parse_failed"          # Well-formed hex, wrong structure
    UNKNOWN_PID = "unknown_pid"            # PID absent from the sensor table


class ObdError(Exception):
    """Base class for all codec errors."""

    result: ObdResult = ObdResult.PARSE_FAILED

    def __init__(self, message: str = ""):
        super().__init__(message or self.result.value.replace("_", " "))

    @property
    def is_retryable(self) -> bool:
        """Whether repeating the request (or retrying with more room) may succeed."""
        return self.result in (ObdResult.NO_DATA, ObdResult.BUFFER_TOO_SMALL)


class InvalidArgError(ObdError):
    """Caller passed an argument the codec cannot work with."""
    result = ObdResult.INVALID_ARG


class BufferTooSmallError(ObdError):
    """Output does not fit the capacity the caller allowed."""
    result = ObdResult.BUFFER_TOO_SMALL

    def __init__(self, needed: int, capacity: int):
        self.needed = needed
        self.capacity = capacity
        super().__init__(f"need capacity {needed}, got {capacity}")


class InvalidHexError(ObdError):
    """Input contains a non-hex character or a dangling nibble."""
    result = ObdResult.INVALID_HEX


class NoDataError(ObdError):
    """Adapter or vehicle answered NO DATA."""
    result = ObdResult.NO_DATA


class ElmError(ObdError):
    """Adapter rejected the command."""
    result = ObdResult.ELM_ERROR


class ParseFailedError(ObdError):
    """Payload does not have the expected structure."""
    result = ObdResult.PARSE_FAILED


class UnknownPidError(ObdError):
    """PID is not in the sensor decode table."""
    result = ObdResult.UNKNOWN_PID

    def __init__(self, pid: int):
        self.pid = pid
        label = f"0x{pid:02X}" if isinstance(pid, int) else repr(pid)
        super().__init__(f"PID {label} is not in the sensor table")


def check_capacity(capacity, needed: int, minimum: int = 1) -> None:
    """
    Validate a caller-supplied capacity against the space an output needs.

    Text capacities reserve a terminator slot and must be at least 1. Byte
    capacities pass minimum=0, since an empty output needs no room.
    """
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < minimum:
        raise InvalidArgError(f"capacity must be an integer >= {minimum}, got {capacity!r}")
    if capacity < needed:
        raise BufferTooSmallError(needed, capacity)


def check_byte(value, label: str) -> int:
    """Return value if it is an int in 0..255, else raise InvalidArgError."""
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise InvalidArgError(f"{label} must be a byte value, got {value!r}")
    return value
