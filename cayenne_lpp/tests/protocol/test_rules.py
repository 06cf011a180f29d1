from __future__ import annotations

import pytest

import cayenne_lpp.protocol.rules as rules
from cayenne_lpp.protocol.decoder import Decoder
from cayenne_lpp.protocol.definitions import v1_standard_types


def _one(payload: list[int]):
    out = Decoder().decode(bytes(payload))
    assert len(out) == 1
    return next(iter(out.values()))


def test_every_standard_type_has_a_rule():
    assert set(rules.STANDARD_RULES) == {dt.type_id for dt in v1_standard_types()}


@pytest.mark.parametrize(
    "payload, expected",
    [
        ([0x01, 0x00, 0x00], 0),
        ([0x01, 0x00, 0xFF], 255),
        ([0x01, 0x01, 0x00], 0),
        ([0x01, 0x01, 0xFF], 255),
        ([0x01, 0x66, 0x01], 1),
        ([0x01, 0x66, 0xFF], 255),
    ],
)
def test_single_byte_types_are_unsigned_ints(payload, expected):
    value = _one(payload)
    assert value == expected
    assert isinstance(value, int)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ((0x00, 0x00), 0.0),
        ((0x00, 0x64), 1.0),
        ((0xFF, 0x9C), -1.0),
        ((0x7F, 0xFF), 327.67),
        ((0x80, 0x00), -327.68),
    ],
)
def test_analog_input_and_output(raw, expected):
    assert _one([0x01, 0x02, *raw]) == expected
    assert _one([0x01, 0x03, *raw]) == expected


def test_luminosity_is_unsigned_integer():
    assert _one([0x01, 0x65, 0x00, 0x64]) == 100
    value = _one([0x01, 0x65, 0xFF, 0xFF])
    assert value == 65535
    assert isinstance(value, int)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ((0x00, 0x00), 0.0),
        ((0x03, 0xE8), 100.0),
        ((0xFF, 0xCE), -5.0),
        ((0x7F, 0xFF), 3276.7),
        ((0x80, 0x00), -3276.8),
    ],
)
def test_temperature(raw, expected):
    assert _one([0x01, 0x67, *raw]) == expected


@pytest.mark.parametrize("type_id", [0x68, 0x73])
def test_humidity_and_barometer_are_unsigned(type_id):
    assert _one([0x01, type_id, 0x00, 0x00]) == 0.0
    assert _one([0x01, type_id, 0x03, 0xE8]) == 100.0
    assert _one([0x01, type_id, 0xFF, 0xFF]) == 6553.5


def test_barometer_sea_level():
    assert _one([0x01, 0x73, 0x27, 0x8D]) == 1012.5


def test_accelerometer_negative_and_max():
    assert _one([0x01, 0x71, 0xFF, 0x9C, 0xFF, 0x38, 0xFE, 0xD4]) == {"x": -0.1, "y": -0.2, "z": -0.3}
    assert _one([0x01, 0x71, 0x7F, 0xFF, 0x7F, 0xFF, 0x7F, 0xFF]) == {"x": 32.767, "y": 32.767, "z": 32.767}
    assert _one([0x01, 0x71, 0x00, 0x00, 0x00, 0x00, 0x03, 0xD5])["z"] == 0.981


def test_gyrometer():
    assert _one([0x01, 0x86, 0x00, 0x64, 0x00, 0xC8, 0x01, 0x2C]) == {"x": 1.0, "y": 2.0, "z": 3.0}
    assert _one([0x01, 0x86, 0xFF, 0x9C, 0xFF, 0x38, 0xFE, 0xD4]) == {"x": -1.0, "y": -2.0, "z": -3.0}
    assert _one([0x01, 0x86, 0x7F, 0xFF, 0x7F, 0xFF, 0x7F, 0xFF]) == {"x": 327.67, "y": 327.67, "z": 327.67}


def test_gps_negative_altitude():
    gps = _one([0x01, 0x88, 0, 0, 0, 0, 0, 0, 0xFF, 0xFF, 0xCE])
    assert gps["altitude"] == -0.5
    assert gps["latitude"] == 0.0


def test_gps_24bit_boundaries():
    gps = _one([0x01, 0x88, 0x7F, 0xFF, 0xFF, 0x80, 0x00, 0x00, 0x80, 0x00, 0x00])
    assert gps["latitude"] == 838.8607
    assert gps["longitude"] == -838.8608
    assert gps["altitude"] == -83886.08


def test_gps_field_order():
    gps = rules.decode_gps(bytes(9))
    assert list(gps) == ["latitude", "longitude", "altitude"]
