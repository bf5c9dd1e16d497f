"""Protocol limits and runtime settings."""

import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Limits taken from the OBD-II and ELM327 specs. Text capacities are sized
# like the adapter-side buffers: characters plus one terminator slot.
MAX_DATA_BYTES = 7          # Data bytes kept per PID response frame
VIN_LENGTH = 17
DTC_CODE_LENGTH = 6         # "P0301" + terminator
MAX_DTCS = 32               # Codes kept per Mode 03 response
MAX_RESPONSE_LEN = 256      # Cleaned adapter payload
MAX_COMMAND_LEN = 16
SENSOR_NAME_CAPACITY = 32
SENSOR_UNIT_CAPACITY = 8
VIN_FRAME_CAPACITY = 16     # Bytes decoded from a single VIN frame line

RESPONSE_OFFSET = 0x40      # Response mode = request mode + 0x40

ENV_PREFIX = "OBD_CODEC_"


class CodecSettings(BaseModel):
    """Settings for the CLI and collectors."""

    log_level: str = Field(default="WARNING", description="Root log level")
    response_capacity: int = Field(
        default=MAX_RESPONSE_LEN,
        gt=0,
        description="Capacity used when cleaning adapter transcripts",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "CodecSettings":
        """Build settings from OBD_CODEC_* environment variables."""
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None:
                values[name] = raw
        return cls(**values)
