"""VIN (Vehicle Identification Number) collector."""

from typing import Optional
import logging

from .base import BaseCollector
from ..decoders.vin import parse_vin_response, vin_check_digit_valid
from ..protocol.commands import build_vin_request

logger = logging.getLogger(__name__)


class VINCollector(BaseCollector):
    """Collects the Vehicle Identification Number."""

    def __init__(self, transport, **kwargs):
        super().__init__(transport, **kwargs)
        self._cached_vin: Optional[str] = None

    def collect(self) -> str:
        """Collect VIN from vehicle."""
        return self.read_vin()

    def read_vin(self, use_cache: bool = True) -> str:
        """
        Read VIN from vehicle.

        Args:
            use_cache: Return cached VIN if available

        Returns:
            17-character VIN string

        Raises:
            ObdError: the adapter reply could not be reassembled into a VIN
        """
        if use_cache and self._cached_vin:
            return self._cached_vin

        vin = parse_vin_response(self._query(build_vin_request()))

        if not vin_check_digit_valid(vin):
            # Check digit is only mandatory for North American vehicles
            logger.warning(f"VIN check digit mismatch: {vin}")

        logger.info(f"Read VIN: {vin}")
        self._cached_vin = vin
        return vin

    def clear_cache(self) -> None:
        """Clear cached VIN."""
        self._cached_vin = None
