"""Data models for Diagnostic Trouble Codes (DTCs)."""

from enum import Enum
from typing import Iterator, List

from pydantic import BaseModel, ConfigDict, Field

from ..config import DTC_CODE_LENGTH, MAX_DTCS


class DTCCategory(str, Enum):
    """DTC category based on first character."""
    POWERTRAIN = "P"  # Engine, transmission
    CHASSIS = "C"     # ABS, steering, suspension
    BODY = "B"        # Body systems (AC, airbag, etc.)
    NETWORK = "U"     # Communication/network


# Indexed by the top two bits of the first DTC byte
CATEGORY_BY_BITS = (
    DTCCategory.POWERTRAIN,
    DTCCategory.CHASSIS,
    DTCCategory.BODY,
    DTCCategory.NETWORK,
)


class DiagnosticTroubleCode(BaseModel):
    """A single trouble code unpacked from two raw bytes."""

    model_config = ConfigDict(frozen=True)

    category: DTCCategory = Field(..., description="Code category (P/C/B/U)")
    code: int = Field(..., ge=0, le=0x3FFF, description="14-bit numeric part, e.g. 0x0301")
    formatted: str = Field(
        ...,
        min_length=DTC_CODE_LENGTH - 1,
        max_length=DTC_CODE_LENGTH - 1,
        description="Code string, e.g. 'P0301'",
    )

    @property
    def letter(self) -> str:
        """Category letter (P, C, B or U)."""
        return self.category.value

    @property
    def is_generic(self) -> bool:
        """Check if this is a generic (SAE) code vs manufacturer-specific."""
        return self.formatted[1] in ("0", "2")  # P0xxx and P2xxx are generic

    @property
    def system(self) -> str:
        """Get the system a powertrain code relates to."""
        if self.category != DTCCategory.POWERTRAIN:
            return self.category.name.title()

        systems = {
            "1": "Fuel and Air Metering",
            "2": "Fuel and Air Metering (Injector Circuit)",
            "3": "Ignition System or Misfire",
            "4": "Auxiliary Emissions Controls",
            "5": "Vehicle Speed Controls and Idle Control System",
            "6": "Computer Output Circuit",
            "7": "Transmission",
            "8": "Transmission",
        }
        return systems.get(self.formatted[2], "Unknown System")

    def __str__(self) -> str:
        return self.formatted


class DtcList(BaseModel):
    """Codes from one Mode 03 response, in response order."""

    codes: List[DiagnosticTroubleCode] = Field(default_factory=list, max_length=MAX_DTCS)

    @property
    def count(self) -> int:
        """Number of codes stored."""
        return len(self.codes)

    @property
    def formatted(self) -> List[str]:
        """Code strings in order."""
        return [dtc.formatted for dtc in self.codes]

    def __len__(self) -> int:
        return len(self.codes)

    def __iter__(self) -> Iterator[DiagnosticTroubleCode]:  # type: ignore[override]
        return iter(self.codes)
