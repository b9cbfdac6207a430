"""Unit registry: the single boundary where unit strings become ``UnitId``s.

Example:
    >>> registry = UnitRegistry()
    >>> registry.register("Kelvin", ["K"])
    0
    >>> registry.resolve("K")
    0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, NewType

from .errors import DuplicateUnitError, InvalidConfigurationError, UnknownUnitError

logger = logging.getLogger(__name__)

UnitId = NewType("UnitId", int)


@dataclass(frozen=True)
class Unit:
    """A named measurement standard and its alternative names.

    Parameters:
        unit_id: Dense identifier allocated by the registry.
        name: Canonical name, e.g. ``Kelvin``.
        aliases: Alternative names, e.g. ``("K",)``. Never contains ``name``.
        intermediate: Hidden from listings; only used to decompose conversions.
    """

    unit_id: UnitId
    name: str
    aliases: tuple[str, ...] = ()
    intermediate: bool = False

    @property
    def keys(self) -> tuple[str, ...]:
        """Every string that resolves to this unit, canonical name first."""
        return (self.name, *self.aliases)


def format_unit(unit: Unit) -> str:
    """Render a unit with its aliases.

    Example:
        >>> format_unit(Unit(UnitId(0), "Kilojoule", ("kJ", "kJoule")))
        'Kilojoule (kJ, kJoule)'
    """
    if not unit.aliases:
        return unit.name
    return f"{unit.name} ({', '.join(unit.aliases)})"


class UnitRegistry:
    """Maps canonical names and aliases to dense unit identifiers."""

    def __init__(self) -> None:
        self._units: list[Unit] = []
        self._ids_by_key: dict[str, UnitId] = {}

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._ids_by_key

    def register(
        self,
        name: str,
        aliases: Iterable[str] = (),
        *,
        intermediate: bool = False,
    ) -> UnitId:
        """Register a unit and allocate its identifier.

        Raises:
            InvalidConfigurationError: If the name or an alias is empty.
            DuplicateUnitError: If any key is already taken, by another unit or
                twice by this one.
        """
        if not name.strip():
            raise InvalidConfigurationError("unit name cannot be empty")

        resolved_aliases: list[str] = []
        seen = {name}
        for alias in aliases:
            if not alias.strip():
                raise InvalidConfigurationError(f"unit '{name}' has an empty alias")
            if alias == name:
                continue
            if alias in seen:
                raise DuplicateUnitError(alias, name, name)
            seen.add(alias)
            resolved_aliases.append(alias)

        for key in (name, *resolved_aliases):
            existing = self._ids_by_key.get(key)
            if existing is not None:
                raise DuplicateUnitError(key, self._units[existing].name, name)

        unit_id = UnitId(len(self._units))
        unit = Unit(
            unit_id=unit_id,
            name=name,
            aliases=tuple(resolved_aliases),
            intermediate=intermediate,
        )
        self._units.append(unit)
        for key in unit.keys:
            self._ids_by_key[key] = unit_id
        logger.debug("registered unit %s as %d", format_unit(unit), unit_id)
        return unit_id

    def resolve(self, name: str) -> UnitId:
        """Return the identifier for a canonical name or alias.

        Raises:
            UnknownUnitError: If ``name`` is not registered.
        """
        try:
            return self._ids_by_key[name]
        except KeyError:
            raise UnknownUnitError(name) from None

    def contains(self, name: str) -> bool:
        return name in self._ids_by_key

    def unit(self, unit_id: int) -> Unit:
        """Return the unit for an identifier.

        Raises:
            UnknownUnitError: If no unit holds ``unit_id``.
        """
        if not 0 <= unit_id < len(self._units):
            raise UnknownUnitError(f"#{unit_id}")
        return self._units[unit_id]

    def name_of(self, unit_id: int) -> str:
        return self.unit(unit_id).name

    def units(self) -> tuple[Unit, ...]:
        """Return all units in registration order."""
        return tuple(self._units)
