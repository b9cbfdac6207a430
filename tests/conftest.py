from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from conversion_wiz import UnitConverter, parse_config


def temperature_document(*, bidirectional: bool = False) -> dict[str, Any]:
    return {
        "bidirectional": bidirectional,
        "units": [
            {"name": "Celsius", "aliases": ["celsius", "C"]},
            {"name": "Fahrenheit", "aliases": ["F"]},
            {"name": "Kelvin", "aliases": ["K"]},
            {"name": "_C1", "intermediate": True},
        ],
        "conversions_scale": [{"from": "Celsius", "to": "_C1", "factor": 1.8}],
        "conversions_offset": [{"from": "_C1", "to": "Fahrenheit", "offset": 32.0}],
    }


@pytest.fixture
def temperature_payload() -> dict[str, Any]:
    return temperature_document()


@pytest.fixture
def one_way_converter() -> UnitConverter:
    return UnitConverter.from_config(parse_config(temperature_document()))


@pytest.fixture
def two_way_converter() -> UnitConverter:
    return UnitConverter.from_config(parse_config(temperature_document(bidirectional=True)))


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "units.json"
    path.write_text(json.dumps(temperature_document(bidirectional=True)), encoding="utf-8")
    return path
