"""In-memory ELM327 adapter that answers with canned transcripts."""

import logging
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

PROMPT_TAIL = "\r\r>"

BANNER = "ELM327 v1.5"

# Single-frame data lines per PID request
PID_REPLIES: Dict[str, str] = {
    "010C": "41 0C 1A F8",   # 1726 rpm
    "010D": "41 0D 3C",      # 60 km/h
    "0105": "41 05 7B",      # 83 C
    "0111": "41 11 33",      # 20 %
    "010F": "41 0F 46",      # 30 C
    "0110": "41 10 01 A4",   # 4.20 g/s
    "010A": "41 0A 64",      # 300 kPa
    "0104": "41 04 4C",      # 29.8 %
}

DTC_REPLY = "43 01 03 01 04 00 00"

VIN_FRAMES = (
    "49 02 01 57 42 41 33",
    "49 02 02 42 35 46 4B",
    "49 02 03 37 46 4E 31",
    "49 02 04 32 33 34 35",
    "49 02 05 36 00 00 00",
)


class MockAdapter:
    """
    Fake adapter implementing send_command() for tests and demos.

    Replies mimic a real ELM327 with echo on: the command is repeated,
    followed by the answer lines and a trailing prompt.
    """

    def __init__(self, echo: bool = True, responses: Optional[Dict[str, str]] = None):
        """
        Args:
            echo: Repeat each command at the start of its reply
            responses: Raw replies that replace the canned ones, keyed by command
        """
        self.echo = echo
        self._overrides: Dict[str, str] = {}
        self.sent: List[str] = []

        for command, raw in (responses or {}).items():
            self.set_response(command, raw)

    def set_response(self, command: str, raw: str) -> None:
        """Override the full raw reply for a command."""
        self._overrides[self._normalize(command)] = raw

    def reset(self) -> None:
        """Forget sent commands and overrides."""
        self.sent.clear()
        self._overrides.clear()

    @staticmethod
    def _normalize(command: str) -> str:
        return command.strip().replace(" ", "").upper()

    def send_command(self, command: str) -> str:
        """Return the raw transcript the adapter would produce for command."""
        self.sent.append(command)
        key = self._normalize(command)

        if key in self._overrides:
            raw = self._overrides[key]
        else:
            raw = self._reply(key)

        logger.debug(f"mock {key!r} -> {raw!r}")
        return raw

    def _with_echo(self, key: str, body: str) -> str:
        prefix = f"{key}\r" if self.echo else ""
        return f"{prefix}{body}{PROMPT_TAIL}"

    def _reply(self, key: str) -> str:
        if key == "ATZ":
            # Reset always echoes; echo is back on after a reset
            self.echo = True
            return f"ATZ\r\r{BANNER}{PROMPT_TAIL}"

        if key == "ATE0":
            reply = self._with_echo(key, "OK")
            self.echo = False
            return reply

        if key == "ATE1":
            self.echo = True
            return self._with_echo(key, "OK")

        if key.startswith("AT"):
            return self._with_echo(key, "OK")

        if key in PID_REPLIES:
            return self._with_echo(key, PID_REPLIES[key])

        if key == "03":
            return self._with_echo(key, DTC_REPLY)

        if key == "0902":
            return self._with_echo(key, "\r".join(VIN_FRAMES))

        return self._with_echo(key, "NO DATA")
