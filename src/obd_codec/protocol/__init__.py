"""ELM327 text dialect: hex codec, response cleaning, command strings."""

from .hexcodec import hex_to_bytes, bytes_to_hex, strip_whitespace
from .elm327 import classify_response, clean_response
from .commands import build_pid_request, build_dtc_request, build_vin_request, Mode, INIT_SEQUENCE

__all__ = [
    "hex_to_bytes",
    "bytes_to_hex",
    "strip_whitespace",
    "classify_response",
    "clean_response",
    "build_pid_request",
    "build_dtc_request",
    "build_vin_request",
    "Mode",
    "INIT_SEQUENCE",
]
