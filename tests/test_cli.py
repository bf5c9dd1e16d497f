"""Tests for the command line interface."""

from typer.testing import CliRunner

from obd_codec import __version__
from obd_codec.cli import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_classify():
    result = runner.invoke(app, ["classify", "010C\\r41 0C 1A F8\\r\\r>"])
    assert result.exit_code == 0
    assert "data" in result.output
    assert "prompt" in result.output


def test_clean():
    result = runner.invoke(app, ["clean", "010C\\r41 0C 1A F8\\r\\r>"])
    assert result.exit_code == 0
    assert result.output.strip() == "41 0C 1A F8"


def test_clean_no_data():
    result = runner.invoke(app, ["clean", "0100\\rNO DATA\\r\\r>"])
    assert result.exit_code == 1
    assert "[ERROR] NO_DATA" in result.output


def test_clean_from_file(tmp_path):
    transcript = tmp_path / "rpm.txt"
    transcript.write_text("010C\r41 0C 1A F8\r\r>")
    result = runner.invoke(app, ["clean", "--file", str(transcript)])
    assert result.exit_code == 0
    assert "41 0C 1A F8" in result.output


def test_clean_requires_input():
    result = runner.invoke(app, ["clean"])
    assert result.exit_code != 0


def test_sensor_from_payload():
    result = runner.invoke(app, ["sensor", "41 0C 1A F8"])
    assert result.exit_code == 0
    assert "Engine RPM" in result.output
    assert "1726.00" in result.output


def test_sensor_from_transcript():
    result = runner.invoke(app, ["sensor", "010D\\r41 0D 3C\\r\\r>"])
    assert result.exit_code == 0
    assert "60.00" in result.output


def test_sensor_unknown_pid():
    result = runner.invoke(app, ["sensor", "41 FF 00"])
    assert result.exit_code == 1
    assert "UNKNOWN_PID" in result.output


def test_dtc():
    result = runner.invoke(app, ["dtc", "43 01 03 41 04 80 00"])
    assert result.exit_code == 0
    for code in ("P0103", "C0104", "B0000"):
        assert code in result.output


def test_dtc_none_stored():
    result = runner.invoke(app, ["dtc", "43 00 00 00 00 00 00"])
    assert result.exit_code == 0
    assert "No trouble codes" in result.output


def test_dtc_wrong_header():
    result = runner.invoke(app, ["dtc", "41 01 03"])
    assert result.exit_code == 1
    assert "PARSE_FAILED" in result.output


def test_vin():
    raw = (
        "49 02 01 57 42 41 33\\r49 02 02 42 35 46 4B\\r49 02 03 37 46 4E 31\\r"
        "49 02 04 32 33 34 35\\r49 02 05 36 00 00 00"
    )
    result = runner.invoke(app, ["vin", raw])
    assert result.exit_code == 0
    assert "WBA3B5FK7FN123456" in result.output


def test_sensors_lists_table():
    result = runner.invoke(app, ["sensors"])
    assert result.exit_code == 0
    assert "Engine RPM" in result.output


def test_command_pid():
    result = runner.invoke(app, ["command", "pid", "--mode", "01", "--pid", "0D"])
    assert result.exit_code == 0
    assert result.output.strip() == "010D\\r"


def test_command_named():
    result = runner.invoke(app, ["command", "vin"])
    assert result.exit_code == 0
    assert result.output.strip() == "0902\\r"


def test_command_unknown():
    result = runner.invoke(app, ["command", "launch"])
    assert result.exit_code == 1
    assert "INVALID_ARG" in result.output


def test_simulate():
    result = runner.invoke(app, ["simulate"])
    assert result.exit_code == 0
    assert "P0103" in result.output
    assert "WBA3B5FK7FN123456" in result.output


def test_clean_zero_capacity_rejected():
    result = runner.invoke(app, ["clean", "--capacity", "0", "010C\\r41 0C 1A F8\\r\\r>"])
    assert result.exit_code == 1
    assert "INVALID_ARG" in result.output


def test_clean_small_capacity():
    result = runner.invoke(app, ["clean", "--capacity", "4", "010C\\r41 0C 1A F8\\r\\r>"])
    assert result.exit_code == 1
    assert "BUFFER_TOO_SMALL" in result.output
