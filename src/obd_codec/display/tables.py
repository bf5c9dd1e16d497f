"""Table display utilities."""

from typing import Iterable, List, Optional
from rich.table import Table
from rich.console import Console

from ..decoders.sensor import SensorTableEntry
from ..decoders.vin import vin_check_digit_valid
from ..models.dtc import DtcList
from ..models.pid import SensorReading


class TableDisplay:
    """Create and display formatted tables."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console()

    def sensor_table(self, readings: List[SensorReading], title: str = "Sensor Readings") -> Table:
        """Create a table of sensor readings."""
        table = Table(title=title, show_header=True, header_style="bold cyan")

        table.add_column("PID", style="cyan bold", width=6)
        table.add_column("Name")
        table.add_column("Value", justify="right", width=12)
        table.add_column("Unit", style="dim", width=8)
        table.add_column("Status")

        for reading in readings:
            if reading.is_valid:
                status = "[green]OK[/green]"
            else:
                status = f"[red]{reading.error.value if reading.error else 'error'}[/red]"

            value_str = f"{reading.value:.2f}" if reading.value is not None else "N/A"

            table.add_row(f"0x{reading.pid:02X}", reading.name or "-", value_str, reading.unit, status)

        return table

    def dtc_table(self, dtcs: DtcList, title: str = "Diagnostic Trouble Codes") -> Table:
        """Create a table of DTCs."""
        table = Table(title=title, show_header=True, header_style="bold cyan")

        table.add_column("Code", style="yellow bold", width=8)
        table.add_column("Category", width=12)
        table.add_column("Generic", width=8)
        table.add_column("System", style="dim")

        for dtc in dtcs.codes:
            table.add_row(
                dtc.formatted,
                dtc.category.name.title(),
                "Yes" if dtc.is_generic else "No",
                dtc.system,
            )

        return table

    def sensor_definitions_table(
        self,
        entries: Iterable[SensorTableEntry],
        title: str = "Supported Sensors",
    ) -> Table:
        """Create a table of the sensor decode definitions."""
        table = Table(title=title, show_header=True, header_style="bold cyan")

        table.add_column("PID", style="cyan bold", width=6)
        table.add_column("Name")
        table.add_column("Unit", style="dim", width=8)
        table.add_column("Bytes", justify="right", width=6)
        table.add_column("Formula", style="dim")

        for entry in entries:
            table.add_row(
                f"0x{entry.pid:02X}",
                entry.name,
                entry.unit or "-",
                str(entry.min_data_bytes),
                entry.formula.value,
            )

        return table

    def vin_table(self, vin: str) -> Table:
        """Create a table describing a VIN."""
        table = Table(title="Vehicle Identification", show_header=True, header_style="bold cyan")

        table.add_column("Property", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("VIN", vin)
        table.add_row("WMI", vin[:3])
        table.add_row("VDS", vin[3:9])
        table.add_row("VIS", vin[9:])
        if vin_check_digit_valid(vin):
            table.add_row("Check Digit", "[green]Valid[/green]")
        else:
            table.add_row("Check Digit", "[yellow]Mismatch[/yellow]")

        return table

    def show(self, table: Table) -> None:
        """Display a table to the console."""
        self._console.print(table)
        self._console.print()
