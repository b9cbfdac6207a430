import json

import pytest

from conversion_wiz.errors import (
    ConversionError,
    DuplicateUnitError,
    InvalidConfigurationError,
    NoPathFoundError,
    UnknownUnitError,
)


@pytest.mark.parametrize(
    "error, code, kind",
    [
        (UnknownUnitError("Furlong"), "UNIT_001", "unknown_unit"),
        (DuplicateUnitError("K", "Kelvin", "Rankine"), "UNIT_002", "duplicate_unit"),
        (NoPathFoundError("Celsius", "Kelvin"), "PATH_001", "no_path"),
        (InvalidConfigurationError("bad", "units.0"), "CFG_001", "invalid_configuration"),
    ],
)
def test_error_codes_are_stable(error, code, kind):
    assert isinstance(error, ConversionError)
    assert error.error_code == code
    assert error.kind == kind


def test_messages_name_the_offending_input():
    assert str(UnknownUnitError("Furlong")) == "Cannot find unit 'Furlong'."
    assert str(NoPathFoundError("A", "B")) == "No conversion path found from 'A' to 'B'."
    assert "'K'" in str(DuplicateUnitError("K", "Kelvin", "Rankine"))
    assert "more than once" in str(DuplicateUnitError("K", "Kelvin", "Kelvin"))
    assert str(InvalidConfigurationError("bad", "units.0")) == "Invalid configuration at units.0: bad"


def test_payload_is_json():
    payload = json.loads(NoPathFoundError("A", "B").to_payload())
    assert payload == {
        "error_code": "PATH_001",
        "kind": "no_path",
        "message": "No conversion path found from 'A' to 'B'.",
        "details": {"source": "A", "target": "B"},
    }
