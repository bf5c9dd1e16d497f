"""Classification of single adapter response lines."""

from enum import Enum


class ResponseType(str, Enum):
    """What kind of line the adapter sent."""
    DATA = "data"          # Hex data bytes such as "41 0C 1A F8"
    OK = "ok"              # AT command acknowledged (or version banner)
    NO_DATA = "no_data"    # Vehicle did not answer the request
    ERROR = "error"        # Adapter reported an error
    PROMPT = "prompt"      # ">" ready for the next command
    UNKNOWN = "unknown"
