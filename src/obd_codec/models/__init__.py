"""Data models for the OBD codec."""

from .response import ResponseType
from .pid import PidResponse, SensorValue, SensorReading
from .dtc import DTCCategory, DiagnosticTroubleCode, DtcList

__all__ = [
    "ResponseType",
    "PidResponse",
    "SensorValue",
    "SensorReading",
    "DTCCategory",
    "DiagnosticTroubleCode",
    "DtcList",
]
