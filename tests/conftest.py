"""Pytest fixtures for OBD codec tests."""

import pytest

from obd_codec.simulator import MockAdapter


@pytest.fixture
def mock_adapter():
    """Create a mock ELM327 adapter with echo on."""
    return MockAdapter()


@pytest.fixture
def rpm_transcript():
    """Raw adapter output for an RPM request."""
    return "010C\r41 0C 1A F8\r\r>"


@pytest.fixture
def vin_frames():
    """Multi-frame Mode 09 PID 02 payload."""
    return (
        "49 02 01 57 42 41 33\r"
        "49 02 02 42 35 46 4B\r"
        "49 02 03 37 46 4E 31\r"
        "49 02 04 32 33 34 35\r"
        "49 02 05 36 00 00 00"
    )


@pytest.fixture
def sample_dtc_response():
    """Mode 03 payload with two powertrain codes."""
    return "43 01 03 01 04 00 00"


@pytest.fixture
def sample_vin():
    """Sample VIN with a valid check digit."""
    return "1HGBH41JXMN109186"
