"""ELM327 / OBD-II protocol codec."""

__version__ = "1.0.0"

from .errors import (
    ObdResult,
    ObdError,
    InvalidArgError,
    BufferTooSmallError,
    InvalidHexError,
    NoDataError,
    ElmError,
    ParseFailedError,
    UnknownPidError,
)
from .protocol.hexcodec import hex_to_bytes, bytes_to_hex, strip_whitespace
from .protocol.elm327 import classify_response, clean_response
from .protocol.commands import build_pid_request, build_dtc_request, build_vin_request
from .decoders.pid import parse_pid_response
from .decoders.sensor import decode_sensor, get_sensor_name
from .decoders.dtc import parse_dtc_response, format_dtc
from .decoders.vin import parse_vin_response

__all__ = [
    "__version__",
    "ObdResult",
    "ObdError",
    "InvalidArgError",
    "BufferTooSmallError",
    "InvalidHexError",
    "NoDataError",
    "ElmError",
    "ParseFailedError",
    "UnknownPidError",
    "hex_to_bytes",
    "bytes_to_hex",
    "strip_whitespace",
    "classify_response",
    "clean_response",
    "build_pid_request",
    "build_dtc_request",
    "build_vin_request",
    "parse_pid_response",
    "decode_sensor",
    "get_sensor_name",
    "parse_dtc_response",
    "format_dtc",
    "parse_vin_response",
]
