"""Decoders for PID, sensor, DTC and VIN payloads."""

from .pid import parse_pid_response
from .sensor import decode_sensor, get_sensor_name, SENSOR_TABLE, Formula
from .dtc import parse_dtc_response, format_dtc, decode_dtc_bytes
from .vin import parse_vin_response, vin_check_digit_valid

__all__ = [
    "parse_pid_response",
    "decode_sensor",
    "get_sensor_name",
    "SENSOR_TABLE",
    "Formula",
    "parse_dtc_response",
    "format_dtc",
    "decode_dtc_bytes",
    "parse_vin_response",
    "vin_check_digit_valid",
]
