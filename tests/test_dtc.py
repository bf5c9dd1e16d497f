"""Tests for DTC decoding."""

import pytest

from obd_codec.errors import BufferTooSmallError, InvalidArgError, InvalidHexError, ParseFailedError
from obd_codec.decoders.dtc import decode_dtc_bytes, format_dtc, parse_dtc_response
from obd_codec.models.dtc import DTCCategory


class TestParseDtcResponse:
    def test_two_powertrain_codes(self, sample_dtc_response):
        dtcs = parse_dtc_response(sample_dtc_response)
        assert dtcs.count == 2
        assert dtcs.formatted == ["P0103", "P0104"]

    def test_mixed_categories(self):
        dtcs = parse_dtc_response("43 01 03 41 04 80 00")
        assert dtcs.formatted == ["P0103", "C0104", "B0000"]
        assert [d.category for d in dtcs.codes] == [
            DTCCategory.POWERTRAIN,
            DTCCategory.CHASSIS,
            DTCCategory.BODY,
        ]

    def test_network_code(self):
        dtcs = parse_dtc_response("43 C1 23 00 00 00 00")
        assert dtcs.formatted == ["U0123"]

    def test_all_padding(self):
        dtcs = parse_dtc_response("43 00 00 00 00 00 00")
        assert dtcs.count == 0
        assert len(dtcs) == 0

    def test_header_only(self):
        assert parse_dtc_response("43").count == 0

    def test_odd_trailing_byte_ignored(self):
        assert parse_dtc_response("43 01 03 01").formatted == ["P0103"]

    def test_wrong_header(self):
        with pytest.raises(ParseFailedError):
            parse_dtc_response("41 01 03")

    def test_empty(self):
        with pytest.raises(ParseFailedError):
            parse_dtc_response("")

    def test_invalid_hex(self):
        with pytest.raises(InvalidHexError):
            parse_dtc_response("43 0X 03")

    def test_capped_at_32_codes(self):
        text = "43" + " 01 03" * 40
        assert parse_dtc_response(text).count == 32

    def test_rejects_non_string(self):
        with pytest.raises(InvalidArgError):
            parse_dtc_response(43)


class TestDecodeDtcBytes:
    def test_all_bits(self):
        dtc = decode_dtc_bytes(0xFF, 0xFF)
        assert dtc.formatted == "U3FFF"
        assert dtc.code == 0x3FFF

    def test_digit_two(self):
        assert decode_dtc_bytes(0x21, 0x35).formatted == "P2135"

    def test_generic_and_system(self):
        dtc = decode_dtc_bytes(0x03, 0x01)
        assert dtc.formatted == "P0301"
        assert dtc.is_generic
        assert dtc.system == "Ignition System or Misfire"
        assert not decode_dtc_bytes(0x11, 0x00).is_generic

    def test_non_powertrain_system(self):
        assert decode_dtc_bytes(0x41, 0x04).system == "Chassis"

    @pytest.mark.parametrize("byte1,byte2", [
        (0x100, 0x00),
        (0x01, -1),
        ("01", 0x03),
        (0x01, None),
        (True, 0x03),
    ])
    def test_rejects_non_byte_values(self, byte1, byte2):
        with pytest.raises(InvalidArgError):
            decode_dtc_bytes(byte1, byte2)


class TestFormatDtc:
    def test_format(self):
        dtc = decode_dtc_bytes(0x01, 0x03)
        assert format_dtc(dtc) == "P0103"
        assert str(dtc) == "P0103"

    def test_capacity_too_small(self):
        with pytest.raises(BufferTooSmallError):
            format_dtc(decode_dtc_bytes(0x01, 0x03), capacity=5)

    def test_rejects_non_dtc(self):
        with pytest.raises(InvalidArgError):
            format_dtc("P0103")


def test_dtc_list_iterates_codes():
    dtcs = parse_dtc_response("43 01 03 C1 23")
    assert [dtc.letter for dtc in dtcs] == ["P", "U"]
