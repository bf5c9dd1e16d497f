"""Display and terminal output utilities."""

from .console import Console, console
from .tables import TableDisplay

__all__ = ["Console", "console", "TableDisplay"]
