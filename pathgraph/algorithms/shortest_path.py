"""Single-source shortest paths (Dijkstra) and back-pointer path reconstruction.

The cost table returned by :func:`dijkstra` maps every vertex to a
:class:`CostHomePair`: the best known distance from the source and the
neighbor ("home") through which that distance is achieved. Following the home
pointers always leads back to the source, which is why callers that want a
path *to* some vertex run Dijkstra *from* it (see :func:`shortest_path`): one
run then answers path queries from every start vertex.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

import numpy as np

if TYPE_CHECKING:
    from ..core.graph import Graph
    from ..core.structure import Edge, Vertex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CostHomePair:
    """Final Dijkstra record for one vertex.

    Attributes
    ----------
    cost : float
        Distance from the source; ``math.inf`` when unreachable.
    home : Vertex or None
        Predecessor on a shortest path back to the source. ``None`` for the
        source itself and for unreachable vertices.
    """

    cost: float
    home: Any = None

    @property
    def reachable(self) -> bool:
        return not math.isinf(self.cost)


def edge_weight(edge: Edge) -> float:
    """Weight of ``edge`` derived from its payload.

    Numeric payloads (anything implementing ``__float__``, booleans excluded)
    give their float value; every other payload weighs ``0.0``.
    """
    data = edge.data
    if isinstance(data, (bool, np.bool_)) or not hasattr(type(data), "__float__"):
        return 0.0
    return float(data)


def dijkstra(
    graph: Graph,
    source: Vertex,
    weight: Callable[[Edge], float] | None = None,
) -> dict[Vertex, CostHomePair]:
    """Shortest distances from ``source`` to every vertex of ``graph``.

    Parameters
    ----------
    graph : Graph
    source : Vertex
        Must belong to ``graph``.
    weight : callable, optional
        ``weight(edge) -> float``; defaults to :func:`edge_weight`.

    Returns
    -------
    dict[Vertex, CostHomePair]
        One record per vertex, in the graph's vertex order.

    Raises
    ------
    KeyError
        If ``source`` does not belong to ``graph``.

    Notes
    -----
    - Weights must be non-negative. Negative weights are not detected and
      give meaningless results.
    - The next vertex to settle is the unvisited one with the smallest cost;
      among equal costs the one added to the graph last wins.

    """
    if not graph.contains_vertex(source):
        raise KeyError(f"Vertex {source!r} not found")
    w = weight or edge_weight

    verts = graph.vertices()
    pos = {v: i for i, v in enumerate(verts)}
    n = len(verts)

    cost = np.full(n, np.inf, dtype=np.float64)
    home: list[Vertex | None] = [None] * n
    unvisited = np.ones(n, dtype=bool)
    cost[pos[source]] = 0.0

    while unvisited.any():
        candidates = np.flatnonzero(unvisited)
        values = cost[candidates]
        i = int(candidates[np.flatnonzero(values == values.min())[-1]])
        unvisited[i] = False
        u = verts[i]

        for nb in graph.neighbors(u):
            j = pos[nb]
            if not unvisited[j]:
                continue
            alt = cost[i] + w(graph.edge_to(u, nb))
            if alt < cost[j]:
                cost[j] = alt
                home[j] = u

    logger.debug(
        "dijkstra from %r: %d of %d vertices reachable",
        source,
        int(np.isfinite(cost).sum()),
        n,
    )
    return {v: CostHomePair(float(cost[i]), home[i]) for i, v in enumerate(verts)}


def get_distances(table: dict[Vertex, CostHomePair]) -> dict[Vertex, float]:
    """Project a Dijkstra table onto its costs."""
    return {v: pair.cost for v, pair in table.items()}


def get_shortest_path(
    table: dict[Vertex, CostHomePair], start: Vertex, end: Vertex
) -> list[Vertex] | None:
    """Walk the home pointers from ``start`` back to ``end``.

    Parameters
    ----------
    table : dict[Vertex, CostHomePair]
        Result of ``dijkstra(graph, end)``. Note the inversion: the table is
        computed *from the destination*.
    start, end : Vertex

    Returns
    -------
    list[Vertex] or None
        Vertices from ``start`` to ``end`` inclusive, or ``None`` when
        ``start`` cannot reach ``end`` under this table.

    """
    if start is end:
        return [end]
    if not table[start].reachable:
        return None

    path = []
    seen = set()
    current = start
    while current is not end:
        if current is None or current in seen:
            return None
        seen.add(current)
        path.append(current)
        current = table[current].home
    path.append(end)
    return path


def shortest_path(
    graph: Graph,
    start: Vertex,
    end: Vertex,
    weight: Callable[[Edge], float] | None = None,
) -> tuple[float, list[Vertex] | None]:
    """Cost and vertex sequence of a shortest ``start`` -> ``end`` path.

    Returns
    -------
    tuple[float, list[Vertex] or None]
        ``(math.inf, None)`` when ``end`` is unreachable.

    """
    table = dijkstra(graph, end, weight=weight)
    pair = table[start]
    if not pair.reachable:
        return math.inf, None
    return pair.cost, get_shortest_path(table, start, end)
