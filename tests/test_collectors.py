"""Tests for collectors driven by the mock adapter."""

import logging

import pytest

from obd_codec.collectors import (
    AdapterInitializer,
    DTCCollector,
    SensorCollector,
    Transport,
    VINCollector,
)
from obd_codec.errors import BufferTooSmallError, ElmError, NoDataError, ObdResult, ParseFailedError
from obd_codec.protocol.commands import INIT_SEQUENCE, Mode
from obd_codec.decoders.sensor import supported_pids


def test_mock_adapter_is_a_transport(mock_adapter):
    assert isinstance(mock_adapter, Transport)


def test_rejects_object_without_send_command():
    with pytest.raises(TypeError):
        SensorCollector(object())


class TestAdapterInitializer:
    def test_sends_init_sequence(self, mock_adapter):
        sent = AdapterInitializer(mock_adapter).initialize()
        assert sent == list(INIT_SEQUENCE)
        assert mock_adapter.sent == list(INIT_SEQUENCE)

    def test_echo_off_after_init(self, mock_adapter):
        AdapterInitializer(mock_adapter).initialize()
        assert mock_adapter.send_command("010D\r") == "41 0D 3C\r\r>"

    def test_headers_on(self, mock_adapter):
        sent = AdapterInitializer(mock_adapter).initialize(headers=True)
        assert sent[-1] == "ATH1\r"

    def test_unacknowledged_command(self, mock_adapter):
        mock_adapter.set_response("ATSP0", "ATSP0\r?\r\r>")
        with pytest.raises(ElmError):
            AdapterInitializer(mock_adapter).initialize()
        assert mock_adapter.sent[-1] == "ATSP0\r"


class TestSensorCollector:
    def test_read_rpm(self, mock_adapter):
        value = SensorCollector(mock_adapter).read(0x0C)
        assert value.value == 1726.0
        assert mock_adapter.sent == ["010C\r"]

    def test_read_after_init(self, mock_adapter):
        AdapterInitializer(mock_adapter).initialize()
        assert SensorCollector(mock_adapter).read(0x0D).value == 60.0

    def test_unsupported_pid_no_data(self, mock_adapter):
        with pytest.raises(NoDataError):
            SensorCollector(mock_adapter).read(0x1F)

    def test_reply_for_other_pid(self, mock_adapter):
        mock_adapter.set_response("010C", "010C\r41 0D 3C\r\r>")
        with pytest.raises(ParseFailedError):
            SensorCollector(mock_adapter).read(0x0C)

    def test_reply_for_other_mode(self, mock_adapter):
        mock_adapter.set_response("020C", "020C\r41 0C 1A F8\r\r>")
        with pytest.raises(ParseFailedError):
            SensorCollector(mock_adapter).read(0x0C, mode=Mode.FREEZE_FRAME)

    def test_freeze_frame(self, mock_adapter):
        mock_adapter.set_response("020D", "020D\r42 0D 3C\r\r>")
        assert SensorCollector(mock_adapter).read(0x0D, mode=Mode.FREEZE_FRAME).value == 60.0

    def test_first_ecu_frame_used(self, mock_adapter):
        mock_adapter.set_response("010D", "010D\r41 0D 3C\r41 0D 40\r\r>")
        assert SensorCollector(mock_adapter).read(0x0D).value == 60.0

    def test_response_capacity(self, mock_adapter):
        with pytest.raises(BufferTooSmallError):
            SensorCollector(mock_adapter, response_capacity=4).read(0x0C)

    def test_read_many_records_failures(self, mock_adapter, caplog):
        with caplog.at_level(logging.WARNING):
            readings = SensorCollector(mock_adapter).read_many([0x0C, 0x1F])

        assert [r.pid for r in readings] == [0x0C, 0x1F]
        assert readings[0].is_valid
        assert readings[0].value == 1726.0
        assert not readings[1].is_valid
        assert readings[1].error is ObdResult.NO_DATA
        assert readings[1].name == "Run Time Since Start"
        assert readings[1].value is None
        assert "0x1F" in caplog.text

    def test_read_many_skips_values_that_are_not_pids(self, mock_adapter, caplog):
        with caplog.at_level(logging.WARNING):
            readings = SensorCollector(mock_adapter).read_many([0x0C, 0x100, "0C", 0x0D])

        assert [r.pid for r in readings] == [0x0C, 0x0D]
        assert all(r.is_valid for r in readings)
        assert mock_adapter.sent == ["010C\r", "010D\r"]
        assert "256" in caplog.text
        assert "'0C'" in caplog.text

    def test_collect_reads_whole_table(self, mock_adapter):
        readings = SensorCollector(mock_adapter).collect()
        assert [r.pid for r in readings] == supported_pids()
        assert sum(r.is_valid for r in readings) == 8


class TestDTCCollector:
    def test_read_stored(self, mock_adapter):
        dtcs = DTCCollector(mock_adapter).read_stored()
        assert dtcs.formatted == ["P0103", "P0104"]
        assert mock_adapter.sent == ["03\r"]

    def test_no_data_is_empty(self, mock_adapter):
        mock_adapter.set_response("03", "03\rNO DATA\r\r>")
        assert DTCCollector(mock_adapter).collect().count == 0

    def test_multiple_ecus(self, mock_adapter):
        mock_adapter.set_response("03", "03\r43 01 03 00 00 00 00\r43 C1 23 00 00 00 00\r\r>")
        assert DTCCollector(mock_adapter).read_stored().formatted == ["P0103", "U0123"]

    def test_adapter_error_propagates(self, mock_adapter):
        mock_adapter.set_response("03", "03\rCAN ERROR\r\r>")
        with pytest.raises(ElmError):
            DTCCollector(mock_adapter).read_stored()


class TestVINCollector:
    def test_read_vin(self, mock_adapter):
        assert VINCollector(mock_adapter).read_vin() == "WBA3B5FK7FN123456"

    def test_check_digit_warning(self, mock_adapter, caplog):
        with caplog.at_level(logging.WARNING):
            VINCollector(mock_adapter).read_vin()
        assert "check digit" in caplog.text

    def test_valid_vin_no_warning(self, mock_adapter, caplog):
        frames = [
            "49 02 01 31 48 47 42",
            "49 02 02 48 34 31 4A",
            "49 02 03 58 4D 4E 31",
            "49 02 04 30 39 31 38",
            "49 02 05 36 00 00 00",
        ]
        mock_adapter.set_response("0902", "0902\r" + "\r".join(frames) + "\r\r>")
        with caplog.at_level(logging.WARNING):
            assert VINCollector(mock_adapter).read_vin() == "1HGBH41JXMN109186"
        assert "check digit" not in caplog.text

    def test_cached(self, mock_adapter):
        collector = VINCollector(mock_adapter)
        collector.read_vin()
        collector.read_vin()
        assert mock_adapter.sent == ["0902\r"]

        collector.clear_cache()
        collector.read_vin()
        assert len(mock_adapter.sent) == 2

    def test_incomplete_vin(self, mock_adapter):
        mock_adapter.set_response("0902", "0902\r49 02 01 57 42 41 33\r\r>")
        with pytest.raises(ParseFailedError):
            VINCollector(mock_adapter).collect()
