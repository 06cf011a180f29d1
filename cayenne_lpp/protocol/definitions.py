# cayenne_lpp/protocol/definitions.py
from __future__ import annotations

from typing import List

from cayenne_lpp.model.data_type import TypeDescriptor

DIGITAL_INPUT = 0x00
DIGITAL_OUTPUT = 0x01
ANALOG_INPUT = 0x02
ANALOG_OUTPUT = 0x03
LUMINOSITY = 0x65
PRESENCE = 0x66
TEMPERATURE = 0x67
HUMIDITY = 0x68
ACCELEROMETER = 0x71
BAROMETER = 0x73
GYROMETER = 0x86
GPS = 0x88


def v1_standard_types() -> List[TypeDescriptor]:
    """Cayenne LPP v1 standard data types (type_id, name, byte width)."""
    return [
        TypeDescriptor(DIGITAL_INPUT, "Digital Input", 1),
        TypeDescriptor(DIGITAL_OUTPUT, "Digital Output", 1),
        TypeDescriptor(ANALOG_INPUT, "Analog Input", 2),
        TypeDescriptor(ANALOG_OUTPUT, "Analog Output", 2),
        TypeDescriptor(LUMINOSITY, "Luminosity", 2),
        TypeDescriptor(PRESENCE, "Presence", 1),
        TypeDescriptor(TEMPERATURE, "Temperature", 2),
        TypeDescriptor(HUMIDITY, "Humidity", 2),
        TypeDescriptor(ACCELEROMETER, "Accelerometer", 6),
        TypeDescriptor(BAROMETER, "Barometer", 2),
        TypeDescriptor(GYROMETER, "Gyrometer", 6),
        TypeDescriptor(GPS, "GPS", 9),
    ]
