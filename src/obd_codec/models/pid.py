"""Data models for PID responses and decoded sensor values."""

from typing import Optional
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..config import MAX_DATA_BYTES, RESPONSE_OFFSET, SENSOR_NAME_CAPACITY, SENSOR_UNIT_CAPACITY
from ..errors import ObdResult


class PidResponse(BaseModel):
    """
    A parsed Mode 01/02 response.

    "41 0C 1A F8" -> mode=0x41, pid=0x0C, data=b"\\x1a\\xf8"
    """

    model_config = ConfigDict(frozen=True)

    mode: int = Field(..., ge=0, le=0xFF, description="Response mode (request mode | 0x40)")
    pid: int = Field(..., ge=0, le=0xFF, description="Parameter ID")
    data: bytes = Field(default=b"", max_length=MAX_DATA_BYTES, description="Value bytes A, B, C...")

    @property
    def data_len(self) -> int:
        """Number of value bytes."""
        return len(self.data)

    @property
    def request_mode(self) -> int:
        """Mode of the request this answers."""
        return self.mode & ~RESPONSE_OFFSET

    def is_response_to(self, request_mode: int) -> bool:
        """Check the mode byte is request_mode with the response bit set."""
        return self.mode == (request_mode | RESPONSE_OFFSET)


class SensorValue(BaseModel):
    """A sensor reading in engineering units."""

    model_config = ConfigDict(frozen=True)

    pid: int = Field(..., ge=0, le=0xFF)
    value: float
    name: str = Field(..., max_length=SENSOR_NAME_CAPACITY - 1, description="e.g. 'Engine RPM'")
    unit: str = Field(default="", max_length=SENSOR_UNIT_CAPACITY - 1, description="e.g. 'rpm'")

    @property
    def formatted_value(self) -> str:
        """Value with unit, two decimals."""
        return f"{self.value:.2f} {self.unit}".strip()

    def __str__(self) -> str:
        return f"{self.name}: {self.formatted_value}"


class SensorReading(BaseModel):
    """Outcome of reading one PID from the vehicle, successful or not."""

    pid: int = Field(..., ge=0, le=0xFF)
    name: str = Field(default="", description="Human-readable name, empty if unknown")
    value: Optional[float] = Field(default=None)
    unit: str = Field(default="")

    timestamp: datetime = Field(default_factory=datetime.now, description="When value was read")

    is_valid: bool = Field(default=True, description="Whether the reading is valid")
    error: Optional[ObdResult] = Field(default=None, description="Error kind if invalid")
    error_message: Optional[str] = Field(default=None, description="Error if invalid")

    @classmethod
    def from_value(cls, value: SensorValue) -> "SensorReading":
        """Wrap a decoded SensorValue."""
        return cls(pid=value.pid, name=value.name, value=value.value, unit=value.unit)

    @property
    def formatted_value(self) -> str:
        """Get formatted value with unit."""
        if self.value is None:
            return "N/A"
        return f"{self.value:.2f} {self.unit}".strip()
