"""VIN reassembly from multi-frame Mode 09 PID 02 responses.

Seventeen characters do not fit one OBD frame, so the VIN arrives as
several lines:

    49 02 01 57 42 41 33     header 49 02, sequence 01, "WBA3"
    49 02 02 42 35 46 4B     "B5FK"
    49 02 03 37 46 4E 31     "7FN1"
    49 02 04 32 33 34 35     "2345"
    49 02 05 36 00 00 00     "6" + padding

Frames are taken in the order they appear; the sequence byte is not used
to reorder them.
"""

from ..config import VIN_FRAME_CAPACITY, VIN_LENGTH
from ..errors import InvalidArgError, ObdError, ParseFailedError, check_capacity
from ..protocol.commands import build_vin_request
from ..protocol.elm327 import split_lines
from ..protocol.hexcodec import hex_to_bytes

VIN_HEADER = (0x49, 0x02)
VIN_DATA_START = 3  # After mode, pid and sequence bytes

__all__ = [
    "build_vin_request",
    "parse_vin_response",
    "vin_check_digit_valid",
]


def parse_vin_response(text: str, capacity: int = VIN_LENGTH + 1) -> str:
    """
    Reassemble a VIN from a multi-line Mode 09 response.

    Lines that are not valid hex, do not start with 49 02 or carry fewer
    than four bytes are skipped. 0x00 padding bytes are dropped.

    Args:
        text: Response text, frames separated by CR and/or LF
        capacity: Output capacity, terminator included (needs 18)

    Returns:
        17-character VIN

    Raises:
        InvalidArgError: text is not a string or capacity is not positive
        BufferTooSmallError: capacity below 18
        ParseFailedError: frames do not add up to exactly 17 characters
    """
    if not isinstance(text, str):
        raise InvalidArgError(f"response must be a string, got {type(text).__name__}")
    check_capacity(capacity, VIN_LENGTH + 1)

    chars = []
    for line in split_lines(text):
        if len(chars) >= VIN_LENGTH:
            break

        try:
            frame = hex_to_bytes(line, capacity=VIN_FRAME_CAPACITY)
        except ObdError:
            continue

        if len(frame) < 4 or tuple(frame[:2]) != VIN_HEADER:
            continue

        for byte in frame[VIN_DATA_START:]:
            if len(chars) >= VIN_LENGTH:
                break
            if byte == 0x00:
                continue
            chars.append(chr(byte))

    if len(chars) != VIN_LENGTH:
        raise ParseFailedError(f"VIN must be {VIN_LENGTH} characters, got {len(chars)}")

    return "".join(chars)


def vin_check_digit_valid(vin: str) -> bool:
    """
    Validate the VIN check digit (position 9, North American VINs).

    Args:
        vin: 17-character VIN

    Returns:
        True if check digit is valid
    """
    if not isinstance(vin, str) or len(vin) != VIN_LENGTH:
        return False

    vin = vin.upper()

    # Transliteration values
    trans = {
        "A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "F": 6, "G": 7, "H": 8,
        "J": 1, "K": 2, "L": 3, "M": 4, "N": 5, "P": 7, "R": 9,
        "S": 2, "T": 3, "U": 4, "V": 5, "W": 6, "X": 7, "Y": 8, "Z": 9,
    }

    # Position weights
    weights = [8, 7, 6, 5, 4, 3, 2, 10, 0, 9, 8, 7, 6, 5, 4, 3, 2]

    total = 0
    for char, weight in zip(vin, weights):
        value = int(char) if char.isdigit() else trans.get(char, 0)
        total += value * weight

    remainder = total % 11
    expected = "X" if remainder == 10 else str(remainder)
    return vin[8] == expected
