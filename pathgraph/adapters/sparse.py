"""SciPy sparse views of a Graph."""
from __future__ import annotations

import numpy as np
import scipy.sparse as sp

from ..algorithms.shortest_path import edge_weight


def adjacency_matrix(graph, weight=None):
    """Symmetric weighted adjacency matrix.

    Parameters
    ----------
    graph : Graph
    weight : callable, optional
        ``weight(edge) -> float``; defaults to the payload-derived weight.

    Returns
    -------
    scipy.sparse.csr_matrix
        Shape ``(n, n)`` with rows/columns in ``graph.vertices()`` order.
        Every edge appears twice (``[i, j]`` and ``[j, i]``); zero-weight edges
        are stored as explicit zeros.

    """
    w = weight or edge_weight
    verts = graph.vertices()
    pos = {v: i for i, v in enumerate(verts)}
    n = len(verts)

    edges = graph.edges()
    rows = np.empty(2 * len(edges), dtype=np.int64)
    cols = np.empty(2 * len(edges), dtype=np.int64)
    vals = np.empty(2 * len(edges), dtype=np.float64)
    for k, e in enumerate(edges):
        i, j = pos[e.source], pos[e.target]
        rows[2 * k], cols[2 * k] = i, j
        rows[2 * k + 1], cols[2 * k + 1] = j, i
        vals[2 * k] = vals[2 * k + 1] = w(e)

    return sp.coo_matrix((vals, (rows, cols)), shape=(n, n)).tocsr()


def incidence_matrix(graph):
    """Unsigned vertex x edge incidence matrix (1 where a vertex touches an edge).

    Returns
    -------
    scipy.sparse.csr_matrix
        Rows follow ``graph.vertices()``, columns follow ``graph.edges()``.

    """
    verts = graph.vertices()
    pos = {v: i for i, v in enumerate(verts)}
    M = sp.dok_matrix((len(verts), graph.number_of_edges()), dtype=np.float32)
    for c, e in enumerate(graph.edges()):
        M[pos[e.source], c] = 1.0
        M[pos[e.target], c] = 1.0
    return M.tocsr()
