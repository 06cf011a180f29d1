# cayenne_lpp/protocol/rules.py
"""
Standard LPP conversions.

Every rule assumes the slice it receives already has the width declared
in protocol.definitions; the decode loop guarantees that.
"""
from __future__ import annotations

from typing import Any, Callable, Dict

from cayenne_lpp.model.codec import (
    bytes_to_int16,
    bytes_to_int24,
    bytes_to_uint16,
)
from . import definitions as d


def decode_digital(data: bytes) -> int:
    return data[0]


def decode_analog(data: bytes) -> float:
    return bytes_to_int16(data) / 100.0


def decode_luminosity(data: bytes) -> int:
    return bytes_to_uint16(data)


def decode_presence(data: bytes) -> int:
    return data[0]


def decode_temperature(data: bytes) -> float:
    return bytes_to_int16(data) / 10.0


def decode_humidity(data: bytes) -> float:
    return bytes_to_uint16(data) / 10.0


def decode_barometer(data: bytes) -> float:
    return bytes_to_uint16(data) / 10.0


def _xyz(data: bytes, divisor: float) -> Dict[str, float]:
    return {
        "x": bytes_to_int16(data[0:2]) / divisor,
        "y": bytes_to_int16(data[2:4]) / divisor,
        "z": bytes_to_int16(data[4:6]) / divisor,
    }


def decode_accelerometer(data: bytes) -> Dict[str, float]:
    return _xyz(data, 1000.0)


def decode_gyrometer(data: bytes) -> Dict[str, float]:
    return _xyz(data, 100.0)


def decode_gps(data: bytes) -> Dict[str, float]:
    return {
        "latitude": bytes_to_int24(data[0:3]) / 10000.0,
        "longitude": bytes_to_int24(data[3:6]) / 10000.0,
        "altitude": bytes_to_int24(data[6:9]) / 100.0,
    }


STANDARD_RULES: Dict[int, Callable[[bytes], Any]] = {
    d.DIGITAL_INPUT: decode_digital,
    d.DIGITAL_OUTPUT: decode_digital,
    d.ANALOG_INPUT: decode_analog,
    d.ANALOG_OUTPUT: decode_analog,
    d.LUMINOSITY: decode_luminosity,
    d.PRESENCE: decode_presence,
    d.TEMPERATURE: decode_temperature,
    d.HUMIDITY: decode_humidity,
    d.ACCELEROMETER: decode_accelerometer,
    d.BAROMETER: decode_barometer,
    d.GYROMETER: decode_gyrometer,
    d.GPS: decode_gps,
}
