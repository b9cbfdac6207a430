"""Directed conversion graph with typed scale and offset edges.

Example:
    >>> from conversion_wiz.registry import UnitRegistry
    >>> registry = UnitRegistry()
    >>> c = registry.register("Celsius")
    >>> k = registry.register("Kelvin")
    >>> graph = ConversionGraph(registry)
    >>> graph.add_edge(c, k, Offset(273.15)).transform.apply(0.0)
    273.15
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Union

from .errors import InvalidConfigurationError
from .registry import UnitId, UnitRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scale:
    """Multiply the input by ``factor``."""

    factor: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.factor):
            raise InvalidConfigurationError(f"scale factor must be finite, got {self.factor!r}")
        if self.factor == 0.0:
            raise InvalidConfigurationError("conversion rate cannot be 0")

    def apply(self, value: float) -> float:
        return value * self.factor

    def inverse(self) -> "Scale":
        return Scale(1.0 / self.factor)

    def describe(self) -> str:
        return f"x{self.factor!r}"


@dataclass(frozen=True)
class Offset:
    """Add ``offset`` to the input."""

    offset: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.offset):
            raise InvalidConfigurationError(f"offset must be finite, got {self.offset!r}")

    def apply(self, value: float) -> float:
        return value + self.offset

    def inverse(self) -> "Offset":
        return Offset(-self.offset)

    def describe(self) -> str:
        return f"{self.offset:+}"


Transform = Union[Scale, Offset]


@dataclass(frozen=True)
class Edge:
    """One directed conversion step."""

    source: UnitId
    target: UnitId
    transform: Transform


class ConversionGraph:
    """Adjacency list of conversion edges indexed by ``UnitId``.

    The graph owns its registry. It is built once from configuration and treated
    as read-only afterwards; a configuration change builds a new graph.
    """

    def __init__(self, registry: Optional[UnitRegistry] = None):
        self.registry = registry if registry is not None else UnitRegistry()
        self._adjacency: list[list[Edge]] = []
        self._edge_by_pair: dict[tuple[UnitId, UnitId], Edge] = {}

    @property
    def edge_count(self) -> int:
        return len(self._edge_by_pair)

    def add_edge(self, source: UnitId, target: UnitId, transform: Transform) -> Edge:
        """Insert a directed edge.

        Raises:
            UnknownUnitError: If either identifier is not registered.
            InvalidConfigurationError: On a self-loop or a second edge for an
                already connected ordered pair.
        """
        source_name = self.registry.name_of(source)
        target_name = self.registry.name_of(target)
        if source == target:
            raise InvalidConfigurationError(
                f"conversion from '{source_name}' to itself is not allowed"
            )
        if (source, target) in self._edge_by_pair:
            raise InvalidConfigurationError(
                f"duplicate conversion from '{source_name}' to '{target_name}'"
            )

        while len(self._adjacency) <= source:
            self._adjacency.append([])
        edge = Edge(source=source, target=target, transform=transform)
        self._adjacency[source].append(edge)
        self._edge_by_pair[(source, target)] = edge
        logger.debug("edge %s -[%s]-> %s", source_name, transform.describe(), target_name)
        return edge

    def has_edge(self, source: UnitId, target: UnitId) -> bool:
        return (source, target) in self._edge_by_pair

    def edge(self, source: UnitId, target: UnitId) -> Optional[Edge]:
        return self._edge_by_pair.get((source, target))

    def neighbors(self, unit_id: UnitId) -> tuple[Edge, ...]:
        """Return outgoing edges of ``unit_id`` in insertion order."""
        self.registry.unit(unit_id)
        if unit_id >= len(self._adjacency):
            return ()
        return tuple(self._adjacency[unit_id])
