"""Sensor (PID) collector."""

import logging
from typing import Iterable, List

from .base import BaseCollector
from ..errors import InvalidArgError, ObdError, ParseFailedError, check_byte
from ..models.pid import SensorValue, SensorReading
from ..decoders.pid import parse_pid_response
from ..decoders.sensor import decode_sensor, get_sensor_entry, supported_pids
from ..protocol.commands import Mode, build_pid_request

logger = logging.getLogger(__name__)


class SensorCollector(BaseCollector):
    """Reads and decodes sensor PIDs."""

    def collect(self) -> List[SensorReading]:
        """Read every PID in the decode table."""
        return self.read_many(supported_pids())

    def read(self, pid: int, mode: int = Mode.LIVE_DATA) -> SensorValue:
        """
        Read a single PID.

        Args:
            pid: Parameter ID (e.g. 0x0C for RPM)
            mode: Mode 01 (live) or 02 (freeze frame)

        Returns:
            Decoded SensorValue

        Raises:
            ObdError: any codec error, including a reply for another mode or pid
        """
        payload = self._query(build_pid_request(mode, pid))
        # Multi-ECU replies: the first frame is the one decoded
        response = parse_pid_response(payload.split("\r", 1)[0])

        if not response.is_response_to(mode) or response.pid != pid:
            raise ParseFailedError(
                f"reply {response.mode:02X} {response.pid:02X} does not answer "
                f"{mode:02X} {pid:02X}"
            )

        return decode_sensor(response)

    def read_many(self, pids: Iterable[int], mode: int = Mode.LIVE_DATA) -> List[SensorReading]:
        """
        Read several PIDs, recording failures instead of raising.

        Values that are not PIDs (not an int in 0..255) are logged and
        skipped without touching the adapter.

        Args:
            pids: Parameter IDs to read

        Returns:
            One SensorReading per valid PID, in order
        """
        readings = []
        for pid in pids:
            try:
                check_byte(pid, "pid")
            except InvalidArgError as e:
                logger.warning(f"Skipping PID {pid!r}: {e}")
                continue

            try:
                readings.append(SensorReading.from_value(self.read(pid, mode)))
            except ObdError as e:
                logger.warning(f"PID 0x{pid:02X} unavailable: {e}")
                entry = get_sensor_entry(pid)
                readings.append(SensorReading(
                    pid=pid,
                    name=entry.name if entry else "",
                    unit=entry.unit if entry else "",
                    is_valid=False,
                    error=e.result,
                    error_message=str(e),
                ))
        return readings
