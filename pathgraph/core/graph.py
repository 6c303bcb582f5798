import inspect
import json
import logging
import time
from datetime import UTC, datetime
from functools import wraps

import numpy as np
import polars as pl

from .. import config
from .structure import Edge, Vertex, edge_key

logger = logging.getLogger(__name__)


class Graph:
    """Mutable graph with payload-carrying vertices and undirected edges.

    Vertices hold an application payload (``V``) and edges hold an application
    payload (``E``). Edges are stored with a source and a target but behave as
    undirected everywhere else: ``A -> B`` and ``B -> A`` are the same edge,
    and neighbor queries and the algorithms ignore the stored direction.

    Parameters
    ----------
    history : bool, optional
        Record mutations in the in-memory history log. Defaults to
        ``pathgraph.config.HISTORY_ENABLED``.

    Notes
    -----
    - Vertex payloads are unique under value equality. Hashable payloads are
      indexed; unhashable ones are matched with a linear scan.
    - No two edges connect the same unordered pair and self-loops are never
      created. Both rejections return ``None`` rather than raising.
    - Vertex and edge handles (``.id``) are assigned from monotonic counters
      and are never reused, even after ``clear()``.
    - The store is not synchronized. Serialize access externally when
      sharing a graph between threads.
    - With history on, every mutator call (rejected inserts included) is
      appended to an in-memory log that only grows. Long-lived graphs should
      pass ``history=False``, or call ``clear_history()`` after
      ``export_history()``. ``copy()`` starts with an empty log.

    See Also
    --------
    add_vertex, add_edge, remove_vertex, remove_edge, neighbors

    """

    # Construction

    def __init__(self, history=None):
        # Vertex storage (insertion ordered) and payload uniqueness index
        self._vertices = {}  # vertex id -> Vertex
        self._payload_index = {}  # hashable payload -> Vertex
        self._unhashable = []  # vertices whose payload cannot be hashed

        # Edge storage (insertion ordered) and unordered-pair index
        self._edges = {}  # edge id -> Edge
        self._edge_index = {}  # (min id, max id) -> Edge

        self._next_vertex_id = 0
        self._next_edge_id = 0

        # History and Timeline
        self._history_enabled = config.HISTORY_ENABLED if history is None else bool(history)
        self._history = []  # list[dict]
        self._version = 0
        self._history_clock0 = time.perf_counter_ns()
        self._install_history_hooks()  # wrap mutating methods

    # Vertices

    def add_vertex(self, data):
        """Create and register a vertex carrying ``data``.

        Parameters
        ----------
        data : Any
            Vertex payload.

        Returns
        -------
        Vertex or None
            The new vertex, or ``None`` when a vertex with an equal payload
            already exists (the graph is left unchanged).

        """
        if self.find_vertex(data) is not None:
            logger.debug("add_vertex rejected: duplicate payload %r", data)
            return None

        vertex = Vertex(self._next_vertex_id, data)
        self._next_vertex_id += 1
        self._vertices[vertex.id] = vertex
        self._index_payload(vertex)
        return vertex

    def add_vertices(self, items):
        """Add several payloads; returns the per-item result of ``add_vertex``."""
        return [self.add_vertex(d) for d in items]

    def find_vertex(self, data):
        """Vertex whose payload equals ``data``, or ``None``.

        Parameters
        ----------
        data : Any

        Returns
        -------
        Vertex or None

        """
        try:
            hit = self._payload_index.get(data)
        except TypeError:
            # unhashable probe: compare against every payload
            for v in self._vertices.values():
                if v.data == data:
                    return v
            return None
        if hit is not None:
            return hit
        for v in self._unhashable:
            if v.data == data:
                return v
        return None

    def set_vertex_data(self, vertex, data):
        """Replace the payload of ``vertex``.

        Returns
        -------
        bool
            False (and no change) when another vertex already carries an
            equal payload.

        Raises
        ------
        KeyError
            If ``vertex`` does not belong to this graph.

        """
        self._require_vertex(vertex)
        owner = self.find_vertex(data)
        if owner is not None and owner is not vertex:
            logger.debug("set_vertex_data rejected: %r already used", data)
            return False
        self._unindex_payload(vertex)
        vertex._data = data
        self._index_payload(vertex)
        return True

    def remove_vertex(self, vertex):
        """Remove ``vertex`` and every edge incident to it.

        Parameters
        ----------
        vertex : Vertex

        Returns
        -------
        list[Edge]
            The edges removed along with the vertex.

        Raises
        ------
        KeyError
            If ``vertex`` does not belong to this graph.

        """
        self._require_vertex(vertex)

        # collect first, then mutate
        for_remove = [e for e in self._edges.values() if e.touches(vertex)]
        for e in for_remove:
            self._detach_edge(e)

        self._unindex_payload(vertex)
        del self._vertices[vertex.id]
        logger.debug("removed vertex %r with %d incident edge(s)", vertex, len(for_remove))
        return for_remove

    def contains_vertex(self, vertex):
        return isinstance(vertex, Vertex) and self._vertices.get(vertex.id) is vertex

    def get_vertex(self, index: int):
        """Vertex at position ``index`` in insertion order.

        Raises
        ------
        IndexError
            If ``index`` is out of range.

        """
        return list(self._vertices.values())[index]

    def vertices(self):
        """All vertices in insertion order.

        Returns
        -------
        list[Vertex]

        """
        return list(self._vertices.values())

    def number_of_vertices(self):
        return len(self._vertices)

    # Edges

    def add_edge(self, data, source, target):
        """Connect ``source`` and ``target`` with an edge carrying ``data``.

        Parameters
        ----------
        data : Any
            Edge payload. Numeric payloads are used as weights by Dijkstra.
        source, target : Vertex
            Endpoints; the order is stored but not used for equality.

        Returns
        -------
        Edge or None
            ``None`` when ``source is target`` or when the unordered pair is
            already connected.

        Raises
        ------
        KeyError
            If either endpoint does not belong to this graph.

        """
        self._require_vertex(source)
        self._require_vertex(target)
        if source is target:
            logger.debug("add_edge rejected: self-loop on %r", source)
            return None
        key = edge_key(source, target)
        if key in self._edge_index:
            logger.debug("add_edge rejected: %r - %r already connected", source, target)
            return None

        edge = Edge(self._next_edge_id, data, source, target)
        self._next_edge_id += 1
        self._edges[edge.id] = edge
        self._edge_index[key] = edge
        source._add_edge_ref(edge)
        target._add_edge_ref(edge)
        return edge

    def set_edge_data(self, edge, data):
        """Replace the payload of ``edge``.

        Raises
        ------
        KeyError
            If ``edge`` does not belong to this graph.

        """
        self._require_edge(edge)
        edge._data = data
        return edge

    def remove_edge(self, edge, target=None):
        """Remove an edge.

        Call as ``remove_edge(edge)`` or ``remove_edge(source, target)``.

        Parameters
        ----------
        edge : Edge or Vertex
            The edge itself, or its first endpoint when ``target`` is given.
        target : Vertex, optional
            Second endpoint. Either direction matches.

        Returns
        -------
        Edge or None
            The removed edge. The two-vertex form returns ``None`` (and does
            nothing) when the vertices are not connected.

        Raises
        ------
        KeyError
            If an ``Edge`` is passed that does not belong to this graph.

        """
        if target is not None:
            found = self.get_edge_ref(edge, target)
            if found is None:
                return None
            edge = found
        self._require_edge(edge)
        self._detach_edge(edge)
        return edge

    def get_edge_ref(self, a, b):
        """Edge connecting ``a`` and ``b`` in either direction, or ``None``."""
        if not (isinstance(a, Vertex) and isinstance(b, Vertex)):
            return None
        e = self._edge_index.get(edge_key(a, b))
        if e is not None and e.touches(a) and e.touches(b):
            return e
        return None

    def has_edge(self, a, b):
        return self.get_edge_ref(a, b) is not None

    def contains_edge(self, edge):
        return isinstance(edge, Edge) and self._edges.get(edge.id) is edge

    def get_edge(self, index: int):
        """Edge at position ``index`` in insertion order."""
        return list(self._edges.values())[index]

    def edges(self):
        """All edges in insertion order.

        Returns
        -------
        list[Edge]

        """
        return list(self._edges.values())

    def number_of_edges(self):
        return len(self._edges)

    # Adjacency

    def neighbors(self, vertex):
        """Vertices sharing an edge with ``vertex``.

        Returns
        -------
        list[Vertex]
            Unique neighbors in edge-insertion order.

        """
        self._require_vertex(vertex)
        return vertex.neighbors()

    def edge_to(self, vertex, other):
        """Edge among ``vertex``'s own incident edges that reaches ``other``."""
        self._require_vertex(vertex)
        return vertex.edge_to(other)

    def incident_edges(self, vertex):
        self._require_vertex(vertex)
        return vertex.incident_edges()

    def degree(self, vertex):
        self._require_vertex(vertex)
        return vertex.degree()

    def other_vertices(self, group):
        """Vertices of this graph that are not in ``group``.

        Returns
        -------
        set[Vertex]

        """
        group = set(group)
        return {v for v in self._vertices.values() if v not in group}

    def endpoints(self, edges):
        """Target vertices of ``edges``."""
        return {e.target for e in edges}

    def startpoints(self, edges):
        """Source vertices of ``edges``."""
        return {e.source for e in edges}

    # Whole-graph operations

    def clear(self):
        """Drop every vertex and edge. Handles are not reused afterwards."""
        for v in self._vertices.values():
            v._edges.clear()
        self._vertices.clear()
        self._payload_index.clear()
        self._unhashable.clear()
        self._edges.clear()
        self._edge_index.clear()

    def copy(self):
        """Structural copy sharing the payload objects.

        Returns
        -------
        Graph
            New graph with fresh vertex/edge objects in the same order.
            Its history setting follows this graph, but the rebuild itself
            is not logged.

        """
        G = Graph(history=False)
        mapping = {}
        for v in self._vertices.values():
            mapping[v.id] = G.add_vertex(v.data)
        for e in self._edges.values():
            G.add_edge(e.data, mapping[e.source.id], mapping[e.target.id])
        G.enable_history(self._history_enabled)
        return G

    # Algorithm entry points (delegates)

    def breadth_first_traversal(self, start):
        from ..algorithms.traversal import breadth_first_traversal

        return breadth_first_traversal(self, start)

    def depth_first_traversal(self, start):
        from ..algorithms.traversal import depth_first_traversal

        return depth_first_traversal(self, start)

    def dijkstra(self, source, weight=None):
        from ..algorithms.shortest_path import dijkstra

        return dijkstra(self, source, weight=weight)

    def shortest_path(self, start, end, weight=None):
        from ..algorithms.shortest_path import shortest_path

        return shortest_path(self, start, end, weight=weight)

    # Dunder

    def __len__(self):
        return len(self._vertices)

    def __iter__(self):
        return iter(list(self._vertices.values()))

    def __contains__(self, item):
        if isinstance(item, Edge):
            return self.contains_edge(item)
        return self.contains_vertex(item)

    def __repr__(self):
        return f"Graph(vertices={self.vertices()!r}, edges={self.edges()!r})"

    # Internals

    def _require_vertex(self, vertex):
        if not self.contains_vertex(vertex):
            raise KeyError(f"Vertex {vertex!r} not found")

    def _require_edge(self, edge):
        if not self.contains_edge(edge):
            raise KeyError(f"Edge {edge!r} not found")

    def _index_payload(self, vertex):
        try:
            self._payload_index[vertex.data] = vertex
        except TypeError:
            self._unhashable.append(vertex)

    def _unindex_payload(self, vertex):
        try:
            if self._payload_index.get(vertex.data) is vertex:
                del self._payload_index[vertex.data]
                return
        except TypeError:
            pass
        self._unhashable = [v for v in self._unhashable if v is not vertex]

    def _detach_edge(self, edge):
        edge.source._remove_edge_ref(edge)
        edge.target._remove_edge_ref(edge)
        del self._edges[edge.id]
        self._edge_index.pop(edge.key, None)

    # History and Timeline

    @property
    def version(self):
        """Number of mutations applied since construction."""
        return self._version

    def _utcnow_iso(self) -> str:
        return datetime.now(UTC).isoformat(timespec="microseconds").replace("+00:00", "Z")

    def _jsonify(self, x):
        # Make args/return JSON-safe & compact.
        if x is None or isinstance(x, (bool, int, float, str)):
            return x
        if isinstance(x, (Vertex, Edge)):
            return repr(x)
        if isinstance(x, (set, frozenset)):
            return sorted(str(self._jsonify(v)) for v in x)
        if isinstance(x, (list, tuple)):
            return [self._jsonify(v) for v in x]
        if isinstance(x, dict):
            return {str(k): self._jsonify(v) for k, v in x.items()}
        # NumPy scalars
        if isinstance(x, (np.generic,)):
            return x.item()
        # payload objects -> their text form
        return str(x)

    def _log_event(self, op: str, **fields):
        self._version += 1
        if not self._history_enabled:
            return
        evt = {
            "version": self._version,
            "ts_utc": self._utcnow_iso(),  # ISO-8601 with Z
            "mono_ns": time.perf_counter_ns() - self._history_clock0,
            "op": op,
        }
        # sanitize
        for k, v in fields.items():
            evt[k] = self._jsonify(v)
        self._history.append(evt)

    def _log_mutation(self, name=None):
        def deco(fn):
            op = name or fn.__name__
            sig = inspect.signature(fn)

            @wraps(fn)
            def wrapper(*args, **kwargs):
                bound = sig.bind(*args, **kwargs)
                bound.apply_defaults()
                result = fn(*args, **kwargs)
                payload = {}
                for k, v in bound.arguments.items():
                    payload[k] = v
                payload["result"] = result
                self._log_event(op, **payload)
                return result

            return wrapper

        return deco

    def _install_history_hooks(self):
        # Mutating methods to wrap. Add here if you add new mutators.
        to_wrap = [
            "add_vertex",
            "add_edge",
            "remove_vertex",
            "remove_edge",
            "set_vertex_data",
            "set_edge_data",
            "clear",
        ]
        for name in to_wrap:
            fn = getattr(self, name)
            # Avoid double-wrapping
            if getattr(fn, "__wrapped__", None) is None:
                setattr(self, name, self._log_mutation(name)(fn))

    def history(self, as_df: bool = False):
        """Return the append-only mutation history.

        Parameters
        ----------
        as_df : bool, default False
            If True, return a Polars DF [DataFrame]; otherwise return a list of dicts.

        Returns
        -------
        list[dict] or polars.DataFrame
            Each event includes: 'version', 'ts_utc' (UTC ISO-8601), 'mono_ns'
            (monotonic nanoseconds since construction), 'op', the call
            arguments and 'result'.

        """
        if as_df:
            return pl.DataFrame(
                [self._flatten_event(e) for e in self._history], infer_schema_length=None
            )
        return list(self._history)

    @staticmethod
    def _flatten_event(evt):
        # heterogeneous argument shapes -> JSON strings so the frame has one schema
        out = {}
        for k, v in evt.items():
            out[k] = v if k in ("version", "ts_utc", "mono_ns", "op") else json.dumps(v)
        return out

    def export_history(self, path: str):
        """Write the mutation history to disk.

        Parameters
        ----------
        path : str
            Output path. Supported extensions: '.parquet', '.ndjson' (a.k.a. '.jsonl'),
            '.json', '.csv'. Unknown extensions default to Parquet by appending '.parquet'.

        Returns
        -------
        int
            Number of events written. Returns 0 if the history is empty.

        """
        if not self._history:
            return 0
        p = str(path).lower()
        if p.endswith(".ndjson") or p.endswith(".jsonl"):
            with open(path, "w", encoding="utf-8") as f:
                for r in self._history:
                    f.write(json.dumps(r, ensure_ascii=False) + "\n")
            return len(self._history)
        if p.endswith(".json"):
            with open(path, "w", encoding="utf-8") as f:
                json.dump(self._history, f, ensure_ascii=False)
            return len(self._history)
        df = self.history(as_df=True)
        if p.endswith(".csv"):
            df.write_csv(path)
            return len(df)
        if p.endswith(".parquet"):
            df.write_parquet(path)
            return len(df)
        # Default to Parquet if unknown
        df.write_parquet(str(path) + ".parquet")
        return len(df)

    def enable_history(self, flag: bool = True):
        """Enable or disable in-memory mutation logging."""
        self._history_enabled = bool(flag)

    def clear_history(self):
        """Clear the in-memory mutation log (exported files are untouched)."""
        self._history.clear()

    def mark(self, label: str):
        """Insert a manual marker into the mutation history."""
        self._log_event("mark", label=label)
