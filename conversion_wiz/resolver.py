"""Breadth-first path resolution over the conversion graph."""

from __future__ import annotations

import logging
from collections import deque

from .errors import NoPathFoundError
from .graph import ConversionGraph, Edge
from .registry import UnitId

logger = logging.getLogger(__name__)

Path = tuple[Edge, ...]


def find_path(graph: ConversionGraph, source: UnitId, target: UnitId) -> Path:
    """Return a fewest-hop path of edges from ``source`` to ``target``.

    Every edge costs one hop. Outgoing edges are expanded in insertion order and
    the first path to reach ``target`` wins, so equal-length alternatives always
    resolve the same way for the same graph.

    Raises:
        UnknownUnitError: If either identifier is not registered.
        NoPathFoundError: If no directed path connects the two units.
    """
    graph.registry.unit(source)
    graph.registry.unit(target)
    if source == target:
        return ()

    reached_by: dict[UnitId, Edge] = {}
    visited = {source}
    queue = deque([source])
    while queue:
        current = queue.popleft()
        for edge in graph.neighbors(current):
            if edge.target in visited:
                continue
            visited.add(edge.target)
            reached_by[edge.target] = edge
            if edge.target == target:
                return _walk_back(reached_by, source, target)
            queue.append(edge.target)

    raise NoPathFoundError(graph.registry.name_of(source), graph.registry.name_of(target))


def _walk_back(reached_by: dict[UnitId, Edge], source: UnitId, target: UnitId) -> Path:
    edges: list[Edge] = []
    current = target
    while current != source:
        edge = reached_by[current]
        edges.append(edge)
        current = edge.source
    edges.reverse()
    logger.debug("resolved %d-hop path %d -> %d", len(edges), source, target)
    return tuple(edges)
