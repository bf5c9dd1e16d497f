"""Sensor decode table and formula evaluation.

Each supported PID maps to a name, a unit, the number of data bytes its
formula reads and the formula itself. Data bytes are named A, B, ... in
response order, as in SAE J1979.

Example, PID 0x0C with data 1A F8:
    ((A * 256) + B) / 4 = ((26 * 256) + 248) / 4 = 1726.0 rpm
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional

from ..config import SENSOR_NAME_CAPACITY, SENSOR_UNIT_CAPACITY
from ..errors import InvalidArgError, ParseFailedError, UnknownPidError, check_capacity
from ..models.pid import PidResponse, SensorValue


class Formula(str, Enum):
    """Decode formulas over data bytes A, B."""
    PERCENT = "percent"                   # A * 100 / 255
    TEMP_OFFSET40 = "temp_offset40"       # A - 40
    RPM = "rpm"                           # (A * 256 + B) / 4
    DIRECT = "direct"                     # A
    TIMING_ADVANCE = "timing_advance"     # A / 2 - 64
    MAF = "maf"                           # (A * 256 + B) / 100
    FUEL_PRESSURE = "fuel_pressure"       # A * 3
    O2_VOLTAGE = "o2_voltage"             # A / 200
    RUNTIME_SECONDS = "runtime_seconds"   # A * 256 + B
    DTC_COUNT_MASKED = "dtc_count_masked" # A & 0x7F, bit 7 is the MIL flag
    FUEL_TRIM = "fuel_trim"               # (A - 128) * 100 / 128

    def evaluate(self, data: bytes) -> float:
        """Apply the formula. Callers check the byte count first."""
        return _EVALUATORS[self](data)


_EVALUATORS: Mapping[Formula, Callable[[bytes], float]] = MappingProxyType({
    Formula.PERCENT: lambda d: d[0] * 100.0 / 255.0,
    Formula.TEMP_OFFSET40: lambda d: d[0] - 40.0,
    Formula.RPM: lambda d: (d[0] * 256.0 + d[1]) / 4.0,
    Formula.DIRECT: lambda d: float(d[0]),
    Formula.TIMING_ADVANCE: lambda d: d[0] / 2.0 - 64.0,
    Formula.MAF: lambda d: (d[0] * 256.0 + d[1]) / 100.0,
    Formula.FUEL_PRESSURE: lambda d: d[0] * 3.0,
    Formula.O2_VOLTAGE: lambda d: d[0] / 200.0,
    Formula.RUNTIME_SECONDS: lambda d: d[0] * 256.0 + d[1],
    Formula.DTC_COUNT_MASKED: lambda d: float(d[0] & 0x7F),
    Formula.FUEL_TRIM: lambda d: (d[0] - 128.0) * 100.0 / 128.0,
})


@dataclass(frozen=True)
class SensorTableEntry:
    """One row of the decode table."""
    pid: int
    name: str
    unit: str
    min_data_bytes: int
    formula: Formula


_ENTRIES = (
    #                PID   Name                         Unit   Bytes  Formula
    SensorTableEntry(0x01, "DTC Count",                 "",     4, Formula.DTC_COUNT_MASKED),
    SensorTableEntry(0x04, "Engine Load",               "%",    1, Formula.PERCENT),
    SensorTableEntry(0x05, "Coolant Temperature",       "C",    1, Formula.TEMP_OFFSET40),
    SensorTableEntry(0x06, "Short Term Fuel Trim B1",   "%",    1, Formula.FUEL_TRIM),
    SensorTableEntry(0x07, "Long Term Fuel Trim B1",    "%",    1, Formula.FUEL_TRIM),
    SensorTableEntry(0x0A, "Fuel Pressure",             "kPa",  1, Formula.FUEL_PRESSURE),
    SensorTableEntry(0x0B, "Intake Manifold Pressure",  "kPa",  1, Formula.DIRECT),
    SensorTableEntry(0x0C, "Engine RPM",                "rpm",  2, Formula.RPM),
    SensorTableEntry(0x0D, "Vehicle Speed",             "km/h", 1, Formula.DIRECT),
    SensorTableEntry(0x0E, "Timing Advance",            "deg",  1, Formula.TIMING_ADVANCE),
    SensorTableEntry(0x0F, "Intake Air Temperature",    "C",    1, Formula.TEMP_OFFSET40),
    SensorTableEntry(0x10, "MAF Air Flow Rate",         "g/s",  2, Formula.MAF),
    SensorTableEntry(0x11, "Throttle Position",         "%",    1, Formula.PERCENT),
    SensorTableEntry(0x14, "O2 Sensor 1 Voltage",       "V",    1, Formula.O2_VOLTAGE),
    SensorTableEntry(0x1F, "Run Time Since Start",      "sec",  2, Formula.RUNTIME_SECONDS),
)

SENSOR_TABLE: Mapping[int, SensorTableEntry] = MappingProxyType({e.pid: e for e in _ENTRIES})


def _bounded(text: str, capacity: int) -> str:
    """Truncate text so it fits capacity with a terminator slot."""
    return text[:capacity - 1]


def get_sensor_entry(pid: int) -> Optional[SensorTableEntry]:
    """Look up a table row, or None."""
    return SENSOR_TABLE.get(pid)


def supported_pids() -> List[int]:
    """PIDs the table can decode, ascending."""
    return sorted(SENSOR_TABLE)


def decode_sensor(response: PidResponse) -> SensorValue:
    """
    Decode a parsed PID response into a sensor value.

    Args:
        response: Output of parse_pid_response

    Returns:
        SensorValue with name and unit from the table

    Raises:
        UnknownPidError: PID not in the table
        ParseFailedError: fewer data bytes than the formula reads
    """
    if not isinstance(response, PidResponse):
        raise InvalidArgError(f"expected PidResponse, got {type(response).__name__}")

    entry = SENSOR_TABLE.get(response.pid)
    if entry is None:
        raise UnknownPidError(response.pid)

    if response.data_len < entry.min_data_bytes:
        raise ParseFailedError(
            f"{entry.name} needs {entry.min_data_bytes} data byte(s), got {response.data_len}"
        )

    return SensorValue(
        pid=response.pid,
        value=entry.formula.evaluate(response.data),
        name=_bounded(entry.name, SENSOR_NAME_CAPACITY),
        unit=_bounded(entry.unit, SENSOR_UNIT_CAPACITY),
    )


def get_sensor_name(pid: int, capacity: int = SENSOR_NAME_CAPACITY) -> str:
    """
    Get the name of a PID without decoding a value.

    Args:
        pid: Parameter ID
        capacity: Name capacity, terminator included; longer names are truncated

    Raises:
        UnknownPidError: PID not in the table
    """
    if isinstance(pid, bool) or not isinstance(pid, int):
        raise InvalidArgError(f"pid must be an integer, got {pid!r}")
    check_capacity(capacity, 1)
    entry = SENSOR_TABLE.get(pid)
    if entry is None:
        raise UnknownPidError(pid)
    return _bounded(entry.name, capacity)
