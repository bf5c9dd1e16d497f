"""Console output utilities using Rich."""

from typing import Optional, Any
from rich.console import Console as RichConsole
from rich.markup import escape
from rich.theme import Theme

CODEC_THEME = Theme({
    "info": "cyan",
    "success": "green",
    "warning": "yellow",
    "error": "red bold",
    "muted": "dim",
    "pid.name": "cyan bold",
    "pid.value": "green",
    "pid.unit": "dim",
    "dtc.code": "yellow bold",
    "dtc.system": "white",
    "response.type": "magenta bold",
    "header": "bold blue",
})


class Console:
    """Themed console output for the codec CLI."""

    def __init__(self, rich_console: Optional[RichConsole] = None):
        self._console = rich_console or RichConsole(theme=CODEC_THEME)

    @property
    def rich_console(self) -> RichConsole:
        """Get the underlying Rich console."""
        return self._console

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def info(self, message: str, prefix: str = "INFO") -> None:
        """Print info message."""
        self._console.print(f"[info]\\[{prefix}][/info] {escape(message)}")

    def success(self, message: str, prefix: str = "OK") -> None:
        """Print success message."""
        self._console.print(f"[success]\\[{prefix}][/success] {escape(message)}")

    def warning(self, message: str, prefix: str = "WARN") -> None:
        """Print warning message."""
        self._console.print(f"[warning]\\[{prefix}][/warning] {escape(message)}")

    def error(self, message: str, prefix: str = "ERROR") -> None:
        """Print error message."""
        self._console.print(f"[error]\\[{prefix}][/error] {escape(message)}")

    def header(self, title: str, subtitle: Optional[str] = None) -> None:
        """Print a section header."""
        self._console.print()
        self._console.print(f"[header]{escape(title)}[/header]")
        if subtitle:
            self._console.print(f"[muted]{escape(subtitle)}[/muted]")
        self._console.print()

    def print_response_type(self, line: str, response_type: str) -> None:
        """Print a line with its classification."""
        self._console.print(
            f"  [response.type]{response_type}[/response.type] [muted]{escape(repr(line))}[/muted]"
        )

    def print_dtc(self, code: str, system: str) -> None:
        """Print a DTC code with its system."""
        self._console.print(f"  [dtc.code]{code}[/dtc.code] - [dtc.system]{escape(system)}[/dtc.system]")

    def print_pid(self, name: str, value: Any, unit: str = "") -> None:
        """Print a PID value."""
        unit_str = f" [pid.unit]{escape(unit)}[/pid.unit]" if unit else ""
        self._console.print(
            f"  [pid.name]{escape(name)}:[/pid.name] [pid.value]{value}[/pid.value]{unit_str}"
        )

    def rule(self, title: str = "", style: str = "dim") -> None:
        """Print a horizontal rule."""
        self._console.rule(title, style=style)


# Global console instance
console = Console()
