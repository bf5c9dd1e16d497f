"""DTC decoding for Mode 03 responses.

Each code is two bytes:

    bits 15-14  category      00=P 01=C 10=B 11=U
    bits 13-12  digit 2       0-3
    bits 11-8   digit 3       hex
    bits 7-4    digit 4       hex
    bits 3-0    digit 5       hex

"01 03" -> 0000 0001 0000 0011 -> P0103
"""

from ..config import DTC_CODE_LENGTH, MAX_DTCS
from ..errors import InvalidArgError, ParseFailedError, check_byte, check_capacity
from ..models.dtc import CATEGORY_BY_BITS, DiagnosticTroubleCode, DtcList
from ..protocol.commands import build_dtc_request
from ..protocol.hexcodec import HEX_DIGITS, hex_to_bytes

DTC_RESPONSE_MODE = 0x43  # 0x03 + 0x40

__all__ = [
    "DTC_RESPONSE_MODE",
    "build_dtc_request",
    "decode_dtc_bytes",
    "parse_dtc_response",
    "format_dtc",
]


def decode_dtc_bytes(byte1: int, byte2: int) -> DiagnosticTroubleCode:
    """Unpack one code from its two raw bytes (InvalidArgError if either is not 0..255)."""
    check_byte(byte1, "byte1")
    check_byte(byte2, "byte2")

    category = CATEGORY_BY_BITS[(byte1 >> 6) & 0x03]

    d2 = (byte1 >> 4) & 0x03
    d3 = byte1 & 0x0F
    d4 = (byte2 >> 4) & 0x0F
    d5 = byte2 & 0x0F

    return DiagnosticTroubleCode(
        category=category,
        code=(d2 << 12) | (d3 << 8) | (d4 << 4) | d5,
        formatted=f"{category.value}{d2}{HEX_DIGITS[d3]}{HEX_DIGITS[d4]}{HEX_DIGITS[d5]}",
    )


def parse_dtc_response(text: str) -> DtcList:
    """
    Parse a cleaned Mode 03 response.

    "43 01 03 01 04 00 00" -> [P0103, P0104]

    0x00 0x00 pairs are padding and skipped. At most MAX_DTCS codes are
    kept; an odd trailing byte is left unread.

    Raises:
        InvalidArgError: text is not a string
        InvalidHexError: payload is not valid hex
        ParseFailedError: empty payload or header byte is not 0x43
    """
    if not isinstance(text, str):
        raise InvalidArgError(f"response must be a string, got {type(text).__name__}")

    raw = hex_to_bytes(text)
    if not raw:
        raise ParseFailedError("empty DTC response")
    if raw[0] != DTC_RESPONSE_MODE:
        raise ParseFailedError(f"expected header 0x43, got 0x{raw[0]:02X}")

    codes = []
    i = 1
    while i + 1 < len(raw) and len(codes) < MAX_DTCS:
        byte1, byte2 = raw[i], raw[i + 1]
        i += 2
        if byte1 == 0x00 and byte2 == 0x00:
            continue
        codes.append(decode_dtc_bytes(byte1, byte2))

    return DtcList(codes=codes)


def format_dtc(dtc: DiagnosticTroubleCode, capacity: int = DTC_CODE_LENGTH) -> str:
    """Return the code string ("P0301"); capacity must leave room for a terminator."""
    if not isinstance(dtc, DiagnosticTroubleCode):
        raise InvalidArgError(f"expected DiagnosticTroubleCode, got {type(dtc).__name__}")
    check_capacity(capacity, DTC_CODE_LENGTH)
    return dtc.formatted
