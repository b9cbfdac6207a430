"""Stable conversion entry point used by the CLI and library callers.

Example:
    >>> converter = load_converter()
    >>> converter.convert(100.0, "Celsius", "Fahrenheit")
    212.0
"""

from __future__ import annotations

import logging
from typing import Optional

from .composer import apply, describe_path
from .config import ConfigSource, ConversionConfig, build_graph, load_config
from .graph import ConversionGraph
from .registry import format_unit
from .resolver import Path, find_path

logger = logging.getLogger(__name__)


class UnitConverter:
    """Resolves unit names and converts values over a read-only graph.

    The converter never mutates its graph, so one instance may be shared
    between threads.
    """

    def __init__(self, graph: ConversionGraph):
        self.graph = graph

    @classmethod
    def from_config(
        cls,
        config: ConversionConfig,
        *,
        bidirectional: Optional[bool] = None,
    ) -> "UnitConverter":
        return cls(build_graph(config, bidirectional=bidirectional))

    def path(self, from_unit: str, to_unit: str) -> Path:
        """Return the edges a conversion from ``from_unit`` to ``to_unit`` follows.

        Raises:
            UnknownUnitError: If either name is not registered.
            NoPathFoundError: If the units are not connected.
        """
        registry = self.graph.registry
        source = registry.resolve(from_unit)
        target = registry.resolve(to_unit)
        return find_path(self.graph, source, target)

    def convert(self, value: float, from_unit: str, to_unit: str) -> float:
        """Convert ``value`` from ``from_unit`` to ``to_unit``.

        Raises:
            UnknownUnitError: If either name is not registered.
            NoPathFoundError: If the units are not connected.
        """
        path = self.path(from_unit, to_unit)
        result = apply(path, value)
        logger.debug("%r %s -> %r %s over %d edges", value, from_unit, result, to_unit, len(path))
        return result

    def describe(self, from_unit: str, to_unit: str) -> str:
        return describe_path(self.graph.registry, self.path(from_unit, to_unit))

    def contains_unit(self, name: str) -> bool:
        return self.graph.registry.contains(name)

    def units_formatted(self, *, include_intermediate: bool = False) -> list[str]:
        """List units as ``Name (alias, ...)`` in configuration order."""
        return [
            format_unit(unit)
            for unit in self.graph.registry.units()
            if include_intermediate or not unit.intermediate
        ]


def load_converter(
    path: Optional[ConfigSource] = None,
    *,
    bidirectional: Optional[bool] = None,
) -> UnitConverter:
    """Load configuration (explicit path, environment, or bundled table) and build a converter."""
    return UnitConverter.from_config(load_config(path), bidirectional=bidirectional)
