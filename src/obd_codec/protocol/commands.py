"""Outbound command strings for the ELM327 adapter.

Every command ends with CR, the adapter's end-of-command marker, and is
meant to be sent verbatim.
"""

from enum import IntEnum

from ..config import MAX_COMMAND_LEN
from ..errors import check_byte, check_capacity

RESET = "ATZ\r"
ECHO_OFF = "ATE0\r"
LINEFEED_OFF = "ATL0\r"
PROTOCOL_AUTO = "ATSP0\r"
HEADERS_ON = "ATH1\r"
HEADERS_OFF = "ATH0\r"

DTC_REQUEST = "03\r"
VIN_REQUEST = "0902\r"

# Sent in this order when bringing up an adapter
INIT_SEQUENCE = (RESET, ECHO_OFF, LINEFEED_OFF, PROTOCOL_AUTO, HEADERS_OFF)


class Mode(IntEnum):
    """OBD-II request modes handled by the codec."""
    LIVE_DATA = 0x01
    FREEZE_FRAME = 0x02
    STORED_DTCS = 0x03
    VEHICLE_INFO = 0x09


def _emit(command: str, capacity: int) -> str:
    """Return command after checking it fits capacity (terminator included)."""
    check_capacity(capacity, len(command) + 1)
    return command


def cmd_reset(capacity: int = MAX_COMMAND_LEN) -> str:
    """ATZ - reset the adapter to factory defaults."""
    return _emit(RESET, capacity)


def cmd_echo_off(capacity: int = MAX_COMMAND_LEN) -> str:
    """ATE0 - stop echoing commands back."""
    return _emit(ECHO_OFF, capacity)


def cmd_linefeed_off(capacity: int = MAX_COMMAND_LEN) -> str:
    """ATL0 - no linefeed after CR."""
    return _emit(LINEFEED_OFF, capacity)


def cmd_protocol_auto(capacity: int = MAX_COMMAND_LEN) -> str:
    """ATSP0 - let the adapter detect the vehicle protocol."""
    return _emit(PROTOCOL_AUTO, capacity)


def cmd_headers_on(capacity: int = MAX_COMMAND_LEN) -> str:
    """ATH1 - show header bytes (useful with several ECUs)."""
    return _emit(HEADERS_ON, capacity)


def cmd_headers_off(capacity: int = MAX_COMMAND_LEN) -> str:
    """ATH0 - hide header bytes."""
    return _emit(HEADERS_OFF, capacity)


def build_pid_request(mode: int, pid: int, capacity: int = MAX_COMMAND_LEN) -> str:
    """
    Build a PID request: mode 0x01, pid 0x0C -> "010C\\r".

    Args:
        mode: OBD mode (0x01 live data, 0x02 freeze frame)
        pid: Parameter ID
        capacity: Output capacity, terminator included (needs 6)

    Returns:
        Command string
    """
    check_byte(mode, "mode")
    check_byte(pid, "pid")
    return _emit(f"{mode:02X}{pid:02X}\r", capacity)


def build_dtc_request(capacity: int = MAX_COMMAND_LEN) -> str:
    """Mode 03 (stored DTCs) request: "03\\r"."""
    return _emit(DTC_REQUEST, capacity)


def build_vin_request(capacity: int = MAX_COMMAND_LEN) -> str:
    """Mode 09 PID 02 (VIN) request: "0902\\r"."""
    return _emit(VIN_REQUEST, capacity)


# Named commands for callers that pick a command by name (e.g. the CLI)
AT_COMMANDS = {
    "reset": cmd_reset,
    "echo-off": cmd_echo_off,
    "linefeed-off": cmd_linefeed_off,
    "protocol-auto": cmd_protocol_auto,
    "headers-on": cmd_headers_on,
    "headers-off": cmd_headers_off,
    "dtc": build_dtc_request,
    "vin": build_vin_request,
}
