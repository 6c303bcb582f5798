"""Vertex and edge records owned by a :class:`~pathgraph.core.graph.Graph`.

Both carry an application-defined payload and a stable integer handle.
Vertices compare by identity; edges compare by their unordered endpoint pair.
"""
from __future__ import annotations

from typing import Any, Iterator


class Vertex:
    """A graph vertex holding an arbitrary payload.

    Parameters
    ----------
    vid : int
        Handle assigned by the owning graph. Never reused within that graph.
    data : Any
        Application payload.

    Notes
    -----
    - Equality and hashing are by identity. Two vertices may hold equal
      payloads only across different graphs.
    - The incident-edge mapping is maintained exclusively by the graph.

    """

    __slots__ = ("_id", "_data", "_edges", "__weakref__")

    def __init__(self, vid: int, data: Any):
        self._id = vid
        self._data = data
        self._edges: dict[int, Edge] = {}  # edge id -> Edge, insertion ordered

    @property
    def id(self) -> int:
        return self._id

    @property
    def data(self) -> Any:
        return self._data

    # Private adjacency bookkeeping (graph only)

    def _add_edge_ref(self, edge: Edge) -> None:
        self._edges[edge.id] = edge

    def _remove_edge_ref(self, edge: Edge) -> None:
        self._edges.pop(edge.id, None)

    # Queries

    def incident_edges(self) -> list[Edge]:
        """Edges touching this vertex, in insertion order."""
        return list(self._edges.values())

    def has_edges(self) -> bool:
        return bool(self._edges)

    def degree(self) -> int:
        return len(self._edges)

    def neighbors(self) -> list[Vertex]:
        """Opposite endpoints of the incident edges.

        The opposite endpoint is selected by identity, so two vertices
        carrying equal payloads never shadow each other.
        """
        out: dict[int, Vertex] = {}
        for e in self._edges.values():
            other = e.other(self)
            out.setdefault(other.id, other)
        return list(out.values())

    def edge_to(self, other: Vertex) -> Edge | None:
        """Incident edge whose opposite endpoint is ``other``, or None.

        Self-loops are never stored, so ``v.edge_to(v)`` is always None.
        """
        if other is self:
            return None
        for e in self._edges.values():
            if e.source is other or e.target is other:
                return e
        return None

    def __repr__(self):
        return str(self._data)


class Edge:
    """An edge stored as ``source -> target`` but compared as undirected.

    Parameters
    ----------
    eid : int
        Handle assigned by the owning graph.
    data : Any
        Application payload. Numeric payloads double as the weight.
    source, target : Vertex
        Endpoints. The order is kept for display and export only.

    """

    __slots__ = ("_id", "_data", "_source", "_target", "_key")

    def __init__(self, eid: int, data: Any, source: Vertex, target: Vertex):
        self._id = eid
        self._data = data
        self._source = source
        self._target = target
        self._key = edge_key(source, target)

    @property
    def id(self) -> int:
        return self._id

    @property
    def data(self) -> Any:
        return self._data

    @property
    def source(self) -> Vertex:
        return self._source

    @property
    def target(self) -> Vertex:
        return self._target

    @property
    def key(self) -> tuple[int, int]:
        """Canonical unordered endpoint pair (sorted vertex handles)."""
        return self._key

    def endpoints(self) -> tuple[Vertex, Vertex]:
        return self._source, self._target

    def other(self, vertex: Vertex) -> Vertex:
        """Endpoint opposite to ``vertex`` (identity comparison)."""
        if vertex is self._source:
            return self._target
        return self._source

    def touches(self, vertex: Vertex) -> bool:
        return vertex is self._source or vertex is self._target

    def __iter__(self) -> Iterator[Vertex]:
        yield self._source
        yield self._target

    def __eq__(self, other):
        if other is self:
            return True
        if not isinstance(other, Edge):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    def __repr__(self):
        return f"{self._source!r} - {self._target!r}"


def edge_key(a: Vertex, b: Vertex) -> tuple[int, int]:
    """Order-independent key of the pair ``{a, b}``."""
    return (a.id, b.id) if a.id <= b.id else (b.id, a.id)
