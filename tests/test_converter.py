import pytest

from conversion_wiz import NoPathFoundError, UnknownUnitError, load_converter


def test_celsius_to_fahrenheit_through_intermediate(one_way_converter):
    assert one_way_converter.convert(0.0, "Celsius", "Fahrenheit") == pytest.approx(32.0)
    assert one_way_converter.convert(100.0, "Celsius", "Fahrenheit") == pytest.approx(212.0)


def test_alias_converts_like_canonical_name(one_way_converter):
    assert one_way_converter.convert(0.0, "celsius", "Fahrenheit") == one_way_converter.convert(
        0.0, "Celsius", "Fahrenheit"
    )
    assert one_way_converter.convert(37.0, "C", "F") == pytest.approx(98.6)


def test_identity_conversion(one_way_converter):
    assert one_way_converter.convert(-12.5, "Kelvin", "K") == -12.5
    assert one_way_converter.path("Celsius", "celsius") == ()


def test_disconnected_units(one_way_converter):
    with pytest.raises(NoPathFoundError) as excinfo:
        one_way_converter.convert(0.0, "Celsius", "Kelvin")
    assert excinfo.value.details == {"source": "Celsius", "target": "Kelvin"}


def test_one_way_graph_has_no_reverse_path(one_way_converter):
    with pytest.raises(NoPathFoundError):
        one_way_converter.convert(212.0, "Fahrenheit", "Celsius")


def test_bidirectional_reverse_conversion(two_way_converter):
    assert two_way_converter.convert(212.0, "Fahrenheit", "Celsius") == pytest.approx(100.0)
    assert two_way_converter.convert(-40.0, "F", "C") == pytest.approx(-40.0)


@pytest.mark.parametrize("source, target", [("Furlong", "Celsius"), ("Celsius", "fahrenheit")])
def test_unknown_unit_names_exact_string(one_way_converter, source, target):
    with pytest.raises(UnknownUnitError) as excinfo:
        one_way_converter.convert(1.0, source, target)
    unknown = source if source == "Furlong" else target
    assert excinfo.value.name == unknown
    assert f"'{unknown}'" in str(excinfo.value)


def test_describe_and_listing(one_way_converter):
    assert one_way_converter.describe("C", "F") == "Celsius -[x1.8]-> _C1 -[+32.0]-> Fahrenheit"
    assert one_way_converter.units_formatted() == [
        "Celsius (celsius, C)",
        "Fahrenheit (F)",
        "Kelvin (K)",
    ]
    assert "_C1" in one_way_converter.units_formatted(include_intermediate=True)
    assert one_way_converter.contains_unit("celsius")
    assert not one_way_converter.contains_unit("_c1")


def test_load_converter_from_file(config_file):
    converter = load_converter(config_file)
    assert converter.convert(32.0, "F", "C") == pytest.approx(0.0)
    one_way = load_converter(config_file, bidirectional=False)
    with pytest.raises(NoPathFoundError):
        one_way.convert(32.0, "F", "C")


def test_bundled_temperature_table(monkeypatch):
    monkeypatch.delenv("CONVERSION_WIZ_CONFIG", raising=False)
    converter = load_converter()
    assert converter.convert(0.0, "Celsius", "Kelvin") == pytest.approx(273.15)
    assert converter.convert(0.0, "K", "R") == pytest.approx(0.0)
    assert converter.convert(100.0, "Celsius", "Rankine") == pytest.approx(671.67)
    assert converter.convert(212.0, "degF", "K") == pytest.approx(373.15)
    assert converter.convert(491.67, "Rankine", "Fahrenheit") == pytest.approx(32.0)
