try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install pathgraph[networkx]"
    ) from e

import logging
from typing import Any

from ..algorithms.shortest_path import edge_weight
from ..core.graph import Graph

logger = logging.getLogger(__name__)


def _node_key(vertex, node_key: str) -> Any:
    if node_key == "id":
        return vertex.id
    return vertex.data


def to_nx(graph: "Graph", *, node_key: str = "data", weight=None) -> "nx.Graph":
    """
    Export Graph to an undirected ``networkx.Graph``.

    Parameters
    ----------
    graph : Graph
        Source graph instance.
    node_key : {"data", "id"}
        Use the vertex payload (must be hashable) or the vertex handle as
        the NetworkX node.
    weight : callable, optional
        ``weight(edge) -> float``; defaults to the payload-derived weight.

    Returns
    -------
    networkx.Graph
        Nodes carry ``data`` (the payload); edges carry ``weight``,
        ``data`` (the payload) and ``source`` (the stored source node, so the
        stored direction survives a round trip).
    """
    if node_key not in ("data", "id"):
        raise ValueError(f"node_key must be 'data' or 'id', got {node_key!r}")
    w = weight or edge_weight

    G = nx.Graph()
    for v in graph.vertices():
        G.add_node(_node_key(v, node_key), data=v.data)
    for e in graph.edges():
        u = _node_key(e.source, node_key)
        t = _node_key(e.target, node_key)
        G.add_edge(u, t, weight=w(e), data=e.data, source=u)
    return G


def from_nx(nxG: "nx.Graph", *, weight: str = "weight") -> Graph:
    """
    Build a Graph from any NetworkX graph.

    Node payloads come from the ``data`` node attribute when present, else
    the node itself. Edge payloads come from the ``data`` edge attribute,
    else from ``weight``, else ``None``. Self-loops and parallel edges are
    dropped because the store does not hold them.

    Parameters
    ----------
    nxG : networkx.Graph | DiGraph | MultiGraph | MultiDiGraph
    weight : str
        Edge attribute used as payload when ``data`` is absent.

    Returns
    -------
    Graph
    """
    H = Graph()
    vmap = {}
    for node, attrs in nxG.nodes(data=True):
        payload = attrs.get("data", node)
        vertex = H.add_vertex(payload)
        if vertex is None:
            vertex = H.find_vertex(payload)
        vmap[node] = vertex

    dropped = 0
    for u, t, attrs in nxG.edges(data=True):
        if attrs.get("source", u) == t:
            u, t = t, u
        payload = attrs["data"] if "data" in attrs else attrs.get(weight)
        if H.add_edge(payload, vmap[u], vmap[t]) is None:
            dropped += 1
    if dropped:
        logger.debug("from_nx dropped %d self-loop/parallel edge(s)", dropped)
    return H
