"""Breadth-first and depth-first traversal over a :class:`Graph`.

Both return the edges used to reach each newly discovered vertex. Neighbors
are visited in edge-insertion order, so results are reproducible.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.graph import Graph
    from ..core.structure import Edge, Vertex

logger = logging.getLogger(__name__)


def breadth_first_traversal(graph: Graph, start: Vertex) -> list[Edge]:
    """Traverse ``graph`` level by level from ``start``.

    Parameters
    ----------
    graph : Graph
    start : Vertex
        Must belong to ``graph``; a foreign vertex raises ``KeyError``.

    Returns
    -------
    list[Edge]
        Tree edges in discovery order. Empty for an isolated vertex.

    """
    queue = deque([start])
    visited = {start}
    traversed = []

    while queue:
        current = queue.popleft()
        for v in graph.neighbors(current):
            if v not in visited:
                visited.add(v)
                queue.append(v)
                traversed.append(graph.edge_to(current, v))

    logger.debug("bfs from %r traversed %d edge(s)", start, len(traversed))
    return traversed


def depth_first_traversal(graph: Graph, start: Vertex) -> list[Edge]:
    """Traverse ``graph`` depth-first from ``start``.

    Parameters
    ----------
    graph : Graph
    start : Vertex
        Must belong to ``graph``; a foreign vertex raises ``KeyError``.

    Returns
    -------
    list[Edge]
        Tree edges. Each edge is inserted at the front of the list once the
        subtree it leads to has been fully explored, so the most recently
        closed descent comes first.

    Notes
    -----
    Uses an explicit stack instead of recursion, so deep graphs cannot
    exhaust the interpreter's recursion limit.

    """
    visited = {start}
    traversed = deque()
    # frame: (vertex, remaining neighbors, edge used to get here)
    stack = [(start, iter(graph.neighbors(start)), None)]

    while stack:
        current, pending, _ = stack[-1]
        for v in pending:
            if v not in visited:
                visited.add(v)
                stack.append((v, iter(graph.neighbors(v)), graph.edge_to(current, v)))
                break
        else:
            _, _, via = stack.pop()
            if via is not None:
                traversed.appendleft(via)

    logger.debug("dfs from %r traversed %d edge(s)", start, len(traversed))
    return list(traversed)
