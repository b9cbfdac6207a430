import pytest

from conversion_wiz.errors import DuplicateUnitError, InvalidConfigurationError, UnknownUnitError
from conversion_wiz.registry import Unit, UnitId, UnitRegistry, format_unit


def test_register_allocates_dense_ids_in_order():
    registry = UnitRegistry()
    assert registry.register("Kelvin", ["K"]) == 0
    assert registry.register("Rankine", ["R"]) == 1
    assert len(registry) == 2
    assert [unit.name for unit in registry.units()] == ["Kelvin", "Rankine"]


def test_resolve_by_name_and_alias():
    registry = UnitRegistry()
    kelvin = registry.register("Kelvin", ["K", "kelvin"])
    assert registry.resolve("Kelvin") == kelvin
    assert registry.resolve("K") == kelvin
    assert registry.resolve("kelvin") == kelvin


def test_lookup_is_case_sensitive_unless_aliased():
    registry = UnitRegistry()
    registry.register("Kelvin", ["K"])
    with pytest.raises(UnknownUnitError) as excinfo:
        registry.resolve("kelvin")
    assert excinfo.value.name == "kelvin"
    assert "'kelvin'" in str(excinfo.value)


def test_alias_equal_to_name_is_not_duplicated():
    registry = UnitRegistry()
    unit_id = registry.register("Kelvin", ["Kelvin", "K"])
    assert registry.unit(unit_id).aliases == ("K",)
    assert registry.unit(unit_id).keys == ("Kelvin", "K")


def test_duplicate_name_rejected():
    registry = UnitRegistry()
    registry.register("Kelvin", ["K"])
    with pytest.raises(DuplicateUnitError) as excinfo:
        registry.register("Kelvin", [])
    assert excinfo.value.name == "Kelvin"


def test_alias_shared_across_units_rejected_without_partial_registration():
    registry = UnitRegistry()
    registry.register("Kelvin", ["K"])
    with pytest.raises(DuplicateUnitError) as excinfo:
        registry.register("Rankine", ["R", "K"])
    assert excinfo.value.details == {"name": "K", "existing_unit": "Kelvin", "new_unit": "Rankine"}
    assert not registry.contains("Rankine")
    assert not registry.contains("R")
    assert len(registry) == 1


def test_alias_repeated_within_one_unit_rejected():
    registry = UnitRegistry()
    with pytest.raises(DuplicateUnitError):
        registry.register("Kelvin", ["K", "K"])


@pytest.mark.parametrize("name, aliases", [("", []), ("   ", []), ("Kelvin", [""])])
def test_empty_names_rejected(name, aliases):
    with pytest.raises(InvalidConfigurationError):
        UnitRegistry().register(name, aliases)


def test_unknown_identifier_rejected():
    registry = UnitRegistry()
    registry.register("Kelvin")
    with pytest.raises(UnknownUnitError):
        registry.unit(5)


def test_format_unit_lists_aliases():
    assert format_unit(Unit(UnitId(0), "Kelvin", ("K", "kelvin"))) == "Kelvin (K, kelvin)"
    assert format_unit(Unit(UnitId(1), "_C1", (), True)) == "_C1"
