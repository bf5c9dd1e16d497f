"""Adapter bring-up with the AT init sequence."""

import logging
from typing import List

from .base import BaseCollector
from ..errors import ElmError
from ..models.response import ResponseType
from ..protocol import commands
from ..protocol.elm327 import classify_response, split_lines

logger = logging.getLogger(__name__)


class AdapterInitializer(BaseCollector):
    """Sends the init sequence and checks every command was acknowledged."""

    def collect(self) -> List[str]:
        """Initialize with default settings."""
        return self.initialize()

    def initialize(self, headers: bool = False) -> List[str]:
        """
        Reset and configure the adapter.

        Args:
            headers: Leave header bytes on in responses

        Returns:
            Commands that were sent, in order

        Raises:
            ElmError: a command was not acknowledged
        """
        sequence = list(commands.INIT_SEQUENCE)
        if headers:
            sequence[-1] = commands.cmd_headers_on()

        sent = []
        for command in sequence:
            raw = self._send(command)
            self._check_acknowledged(command, raw)
            sent.append(command)

        logger.info(f"Adapter initialized ({len(sent)} commands)")
        return sent

    @staticmethod
    def _check_acknowledged(command: str, raw: str) -> None:
        """Raise ElmError unless some line of the reply classifies as OK."""
        types = [classify_response(line) for line in split_lines(raw)]
        if ResponseType.OK in types:
            return

        logger.warning(f"Adapter did not acknowledge {command.strip()!r}: {raw!r}")
        raise ElmError(f"{command.strip()} not acknowledged")
