from __future__ import annotations

from pathlib import Path
import textwrap

import pytest

from cayenne_lpp.model.loader import TypeCatalogLoader
from cayenne_lpp.protocol.decoder import Decoder


def _write(p: Path, name: str, text: str) -> Path:
    path = p / name
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


def test_load_happy_path_builds_specs_and_hash(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "types.yml",
        """
        types:
          0xF0:
            name: Battery
            fields:
              - {name: voltage, encode: uint16, divisor: 1000}
          "0xF2":
            name: Status
            fields:
              - {encode: uint8}
          243:
            name: Power
            fields:
              - {encode: int32}
        """,
    )

    loader = TypeCatalogLoader(path)
    specs = loader.load()

    assert [s.type_id for s in specs] == [0xF0, 0xF2, 0xF3]
    assert loader.file_hash is not None and len(loader.file_hash) == 64

    battery = loader.specs[0xF0]
    assert battery.name == "Battery"
    assert battery.byte_width == 2
    assert battery.decode(b"\x0E\x74") == {"voltage": 3.7}

    status = loader.specs[0xF2]
    assert status.decode(b"\x0F") == 15
    assert isinstance(status.decode(b"\x0F"), int)

    assert loader.specs[0xF3].decode(b"\xFF\xFF\xFF\xFF") == -1


def test_multi_field_type_decodes_in_order(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "types.yml",
        """
        types:
          0xF1:
            name: RGBColor
            fields:
              - {name: red, encode: uint8}
              - {name: green, encode: uint8}
              - {name: blue, encode: uint8}
          0xF5:
            name: Position
            fields:
              - {name: lat, encode: int24, divisor: 10000}
              - {name: lon, encode: int24, divisor: 10000}
        """,
    )

    loader = TypeCatalogLoader(path)
    loader.load()

    rgb = loader.specs[0xF1]
    assert rgb.byte_width == 3
    assert rgb.decode(b"\xFF\x80\x00") == {"red": 255, "green": 128, "blue": 0}

    pos = loader.specs[0xF5]
    assert pos.byte_width == 6
    assert pos.decode(b"\x06\x19\x48\xF9\xCC\xE6") == {"lat": 39.9688, "lon": -40.6298}


def test_apply_registers_into_decoder(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "types.yml",
        """
        types:
          0xF0:
            name: Battery
            fields:
              - {name: voltage, encode: uint16, divisor: 1000}
          0x67:
            name: FakeTemp
            fields:
              - {encode: int16}
        """,
    )

    loader = TypeCatalogLoader(path)
    loader.load()

    dec = Decoder()
    results = loader.apply(dec.registry)

    assert results == {0xF0: True, 0x67: False}
    assert dec.decode(bytes([0x02, 0xF0, 0x0D, 0x48])) == {"Battery_2": {"voltage": 3.4}}
    assert dec.decode(bytes([0x01, 0x67, 0x01, 0x10])) == {"Temperature_1": 27.2}


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        TypeCatalogLoader(tmp_path / "nope.yml").load()


def test_requires_types_root(tmp_path: Path) -> None:
    path = _write(tmp_path, "types.yml", "nope: 1\n")
    with pytest.raises(ValueError):
        TypeCatalogLoader(path).load()


def test_empty_file_requires_types_root(tmp_path: Path) -> None:
    path = _write(tmp_path, "types.yml", "")
    with pytest.raises(ValueError):
        TypeCatalogLoader(path).load()


@pytest.mark.parametrize(
    "body",
    [
        # out of range id
        """
        types:
          256:
            name: X
            fields: [{encode: uint8}]
        """,
        # non-numeric id
        """
        types:
          battery:
            name: X
            fields: [{encode: uint8}]
        """,
        # missing name
        """
        types:
          0xF0:
            fields: [{encode: uint8}]
        """,
        # empty fields
        """
        types:
          0xF0:
            name: X
            fields: []
        """,
        # unknown encode
        """
        types:
          0xF0:
            name: X
            fields: [{encode: uint128}]
        """,
        # zero divisor
        """
        types:
          0xF0:
            name: X
            fields: [{encode: uint8, divisor: 0}]
        """,
        # unnamed field among several
        """
        types:
          0xF0:
            name: X
            fields: [{name: a, encode: uint8}, {encode: uint8}]
        """,
        # duplicate field names
        """
        types:
          0xF0:
            name: X
            fields: [{name: a, encode: uint8}, {name: a, encode: uint8}]
        """,
        # duplicate type id in two spellings
        """
        types:
          0xF0:
            name: X
            fields: [{encode: uint8}]
          "240":
            name: Y
            fields: [{encode: uint8}]
        """,
    ],
)
def test_malformed_catalogs_raise_value_error(tmp_path: Path, body: str) -> None:
    path = _write(tmp_path, "types.yml", body)
    with pytest.raises(ValueError):
        TypeCatalogLoader(path).load()


def test_bundled_example_catalog_loads() -> None:
    path = Path(__file__).resolve().parents[3] / "examples" / "custom_types.yml"
    loader = TypeCatalogLoader(path)
    loader.load()

    dec = Decoder()
    assert all(loader.apply(dec.registry).values())

    out = dec.decode(bytes([0x01, 0xF0, 0x0C, 0xE4, 0x02, 0xF3, 0x00, 0x00, 0x09, 0xC4]))
    assert out == {"BatteryVoltage_1": 3.3, "PowerConsumption_mW_2": 2500}
