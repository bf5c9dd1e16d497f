"""OBD Codec CLI application."""

import logging
from typing import Optional
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from .config import CodecSettings
from .errors import InvalidArgError, ObdError
from .collectors import AdapterInitializer, DTCCollector, SensorCollector, VINCollector
from .decoders.dtc import parse_dtc_response
from .decoders.pid import parse_pid_response
from .decoders.sensor import decode_sensor, get_sensor_entry, supported_pids
from .decoders.vin import parse_vin_response, vin_check_digit_valid
from .display.console import console as display_console
from .display.tables import TableDisplay
from .protocol.commands import AT_COMMANDS, build_pid_request
from .protocol.elm327 import PROMPT, classify_response, clean_response, split_lines
from .simulator import MockAdapter

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="obd-codec",
    help="ELM327 / OBD-II codec - classify, clean and decode adapter responses",
    no_args_is_help=True,
)

_table_display = TableDisplay(Console())

RAW_HELP = "Adapter text; \\r and \\n escapes are expanded"
FILE_HELP = "Read the adapter text from a file instead"


def _setup_logging(level: str) -> None:
    """Route log records through Rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _unescape(text: str) -> str:
    """Expand literal \\r and \\n typed on the command line."""
    return text.replace("\\r", "\r").replace("\\n", "\n")


def _escape(text: str) -> str:
    """Show CR/LF as escapes."""
    return text.replace("\r", "\\r").replace("\n", "\\n")


def _read_input(raw: Optional[str], file: Optional[Path]) -> str:
    """Get adapter text from the argument or a transcript file."""
    if file is not None:
        return file.read_text()
    if raw is None:
        raise typer.BadParameter("provide RAW text or --file")
    return _unescape(raw)


def _payload(ctx: typer.Context, text: str) -> str:
    """Clean full transcripts (ending in a prompt); pass payloads through."""
    if PROMPT in text:
        return clean_response(text, capacity=ctx.obj.response_capacity)
    return text


def _fail(error: ObdError) -> None:
    """Report a codec error and exit."""
    display_console.error(f"{error.result.name}: {error}")
    raise typer.Exit(1)


def _parse_byte(value: str, label: str) -> int:
    try:
        return int(value, 16)
    except ValueError:
        raise InvalidArgError(f"{label} must be hex, got {value!r}")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="-v for info, -vv for debug"),
):
    """Decode ELM327 adapter text without hardware."""
    try:
        settings = CodecSettings.from_env()
    except ValidationError as e:
        display_console.error(f"Invalid environment settings: {e.errors()[0]['msg']}")
        raise typer.Exit(2)

    if verbose >= 2:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    elif verbose == 1:
        settings = settings.model_copy(update={"log_level": "INFO"})

    _setup_logging(settings.log_level)
    ctx.obj = settings


# ============ Decode Commands ============

@app.command()
def classify(
    raw: Optional[str] = typer.Argument(None, help=RAW_HELP),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_HELP),
):
    """Classify each line of adapter text."""
    text = _read_input(raw, file)
    lines = split_lines(text) or [text]
    for line in lines:
        display_console.print_response_type(line, classify_response(line).value)


@app.command()
def clean(
    ctx: typer.Context,
    raw: Optional[str] = typer.Argument(None, help=RAW_HELP),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_HELP),
    capacity: Optional[int] = typer.Option(None, "--capacity", "-c", help="Output capacity"),
):
    """Strip echo, prompt and status lines from a raw transcript."""
    text = _read_input(raw, file)
    try:
        cleaned = clean_response(text, capacity=ctx.obj.response_capacity if capacity is None else capacity)
    except ObdError as e:
        _fail(e)

    display_console.print(_escape(cleaned), markup=False)


@app.command()
def sensor(
    ctx: typer.Context,
    raw: Optional[str] = typer.Argument(None, help=RAW_HELP),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_HELP),
):
    """Decode a Mode 01/02 response into a sensor value."""
    text = _read_input(raw, file)
    try:
        payload = _payload(ctx, text)
        value = decode_sensor(parse_pid_response(payload.split("\r", 1)[0]))
    except ObdError as e:
        _fail(e)

    display_console.print_pid(value.name, f"{value.value:.2f}", value.unit)


@app.command()
def dtc(
    ctx: typer.Context,
    raw: Optional[str] = typer.Argument(None, help=RAW_HELP),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_HELP),
):
    """Decode a Mode 03 response into trouble codes."""
    text = _read_input(raw, file)
    try:
        dtcs = parse_dtc_response(_payload(ctx, text).split("\r", 1)[0])
    except ObdError as e:
        _fail(e)

    if not dtcs.count:
        display_console.success("No trouble codes stored")
        return

    display_console.header(f"{dtcs.count} trouble code(s)")
    for code in dtcs:
        display_console.print_dtc(code.formatted, code.system)


@app.command()
def vin(
    ctx: typer.Context,
    raw: Optional[str] = typer.Argument(None, help=RAW_HELP),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help=FILE_HELP),
):
    """Reassemble a VIN from a multi-frame Mode 09 response."""
    text = _read_input(raw, file)
    try:
        result = parse_vin_response(_payload(ctx, text))
    except ObdError as e:
        _fail(e)

    display_console.print(result)
    if not vin_check_digit_valid(result):
        display_console.warning("Check digit does not validate (expected for most non-US vehicles)")


# ============ Reference Commands ============

@app.command()
def sensors():
    """List the PIDs this codec can decode."""
    entries = [get_sensor_entry(pid) for pid in supported_pids()]
    _table_display.show(_table_display.sensor_definitions_table(entries))


@app.command()
def command(
    name: str = typer.Argument(..., help=f"pid, {', '.join(AT_COMMANDS)}"),
    mode: str = typer.Option("01", "--mode", "-m", help="Mode byte in hex (pid only)"),
    pid: str = typer.Option("0C", "--pid", "-p", help="PID byte in hex (pid only)"),
):
    """Print the command string sent to the adapter."""
    try:
        if name == "pid":
            text = build_pid_request(_parse_byte(mode, "mode"), _parse_byte(pid, "pid"))
        elif name in AT_COMMANDS:
            text = AT_COMMANDS[name]()
        else:
            raise InvalidArgError(f"unknown command {name!r}")
    except ObdError as e:
        _fail(e)

    display_console.print(_escape(text), markup=False)


# ============ Simulation ============

@app.command()
def simulate(ctx: typer.Context):
    """Run every collector against the built-in mock adapter."""
    adapter = MockAdapter()
    capacity = ctx.obj.response_capacity

    try:
        AdapterInitializer(adapter, response_capacity=capacity).initialize()
        display_console.success("Adapter initialized")

        readings = SensorCollector(adapter, response_capacity=capacity).collect()
        _table_display.show(_table_display.sensor_table(readings))

        dtcs = DTCCollector(adapter, response_capacity=capacity).read_stored()
        _table_display.show(_table_display.dtc_table(dtcs))

        vehicle_vin = VINCollector(adapter, response_capacity=capacity).read_vin()
        _table_display.show(_table_display.vin_table(vehicle_vin))
    except ObdError as e:
        _fail(e)

    logger.info(f"Simulation sent {len(adapter.sent)} commands")


# ============ Version Command ============

@app.command()
def version():
    """Show version information."""
    from . import __version__
    display_console.print(f"OBD Codec v{__version__}")


if __name__ == "__main__":
    app()
