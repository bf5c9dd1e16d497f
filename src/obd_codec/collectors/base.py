"""Base collector class for adapter queries."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

from ..config import MAX_RESPONSE_LEN
from ..protocol.elm327 import clean_response

logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Anything that can send a command to an adapter and return its raw reply."""

    def send_command(self, command: str) -> str:
        ...


class BaseCollector(ABC):
    """Abstract base class for all data collectors."""

    def __init__(self, transport: Transport, response_capacity: int = MAX_RESPONSE_LEN):
        """
        Initialize collector with a transport.

        Args:
            transport: Object used to talk to the adapter
            response_capacity: Capacity used when cleaning replies
        """
        if not isinstance(transport, Transport):
            raise TypeError(f"{type(transport).__name__} does not provide send_command()")
        self._transport = transport
        self._response_capacity = response_capacity

    @property
    def transport(self) -> Transport:
        """Get the underlying transport."""
        return self._transport

    def _send(self, command: str) -> str:
        """Send a command and return the raw transcript."""
        logger.debug(f"-> {command!r}")
        raw = self._transport.send_command(command)
        logger.debug(f"<- {raw!r}")
        return raw

    def _query(self, command: str) -> str:
        """Send a command and return its cleaned data payload."""
        return clean_response(self._send(command), capacity=self._response_capacity)

    @abstractmethod
    def collect(self) -> Any:
        """
        Collect data from the vehicle.

        Returns:
            Collected data (type depends on collector implementation)
        """
        pass
