"""Apply a resolved path to a value.

Example:
    >>> from conversion_wiz.graph import Edge, Offset, Scale
    >>> from conversion_wiz.registry import UnitId
    >>> path = (Edge(UnitId(0), UnitId(1), Scale(1.8)), Edge(UnitId(1), UnitId(2), Offset(32.0)))
    >>> apply(path, 100.0)
    212.0
"""

from __future__ import annotations

from typing import Iterable

from .graph import Edge
from .registry import UnitRegistry


def apply(path: Iterable[Edge], value: float) -> float:
    """Fold the path's transforms over ``value``, strictly in path order."""
    current = float(value)
    for edge in path:
        current = edge.transform.apply(current)
    return current


def describe_path(registry: UnitRegistry, path: Iterable[Edge]) -> str:
    """Render a path as ``Celsius -[x1.8]-> _C1 -[+32.0]-> Fahrenheit``."""
    edges = list(path)
    if not edges:
        return "(identity)"
    parts = [registry.name_of(edges[0].source)]
    for edge in edges:
        parts.append(f"-[{edge.transform.describe()}]->")
        parts.append(registry.name_of(edge.target))
    return " ".join(parts)
