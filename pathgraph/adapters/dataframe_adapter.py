from __future__ import annotations

from typing import Dict

import polars as pl

from ..algorithms.shortest_path import edge_weight
from ..core.graph import Graph


def to_dataframes(graph: "Graph", *, include_payloads: bool = True) -> Dict[str, pl.DataFrame]:
    """
    Export graph to Polars DataFrames.

    Returns a dictionary of DataFrames:
    - 'vertices': vertex_id, label [, data]
    - 'edges': edge_id, source, target, source_label, target_label, weight [, data]

    ``source``/``target`` hold vertex ids in the stored direction; ``label``
    columns hold ``str(payload)``.

    Args:
        graph: Graph instance to export
        include_payloads: Add an Object column with the payloads themselves.
            Leave it off when the frames are written to Parquet/CSV.

    Returns:
        Dictionary mapping table names to Polars DataFrames
    """
    verts = graph.vertices()
    edges = graph.edges()

    vcols = [
        pl.Series("vertex_id", [v.id for v in verts], dtype=pl.Int64),
        pl.Series("label", [str(v.data) for v in verts], dtype=pl.Utf8),
    ]
    ecols = [
        pl.Series("edge_id", [e.id for e in edges], dtype=pl.Int64),
        pl.Series("source", [e.source.id for e in edges], dtype=pl.Int64),
        pl.Series("target", [e.target.id for e in edges], dtype=pl.Int64),
        pl.Series("source_label", [str(e.source.data) for e in edges], dtype=pl.Utf8),
        pl.Series("target_label", [str(e.target.data) for e in edges], dtype=pl.Utf8),
        pl.Series("weight", [edge_weight(e) for e in edges], dtype=pl.Float64),
    ]
    if include_payloads:
        vcols.append(pl.Series("data", [v.data for v in verts], dtype=pl.Object))
        ecols.append(pl.Series("data", [e.data for e in edges], dtype=pl.Object))

    return {"vertices": pl.DataFrame(vcols), "edges": pl.DataFrame(ecols)}


def from_dataframes(vertices: pl.DataFrame, edges: pl.DataFrame | None = None) -> Graph:
    """
    Build a Graph from the tables produced by :func:`to_dataframes`.

    Vertex payloads come from ``data`` when present, else ``label``.
    Edge payloads come from ``data`` when present, else ``weight``.
    Edges reference vertices by ``vertex_id``.

    Raises:
        KeyError: if a required column is missing or an edge references an
            unknown vertex id.
    """
    for col in ("vertex_id",):
        if col not in vertices.columns:
            raise KeyError(f"vertices frame lacks column {col!r}")
    vpay = "data" if "data" in vertices.columns else "label"

    G = Graph()
    by_id = {}
    for vid, payload in zip(vertices["vertex_id"].to_list(), vertices[vpay].to_list()):
        v = G.add_vertex(payload)
        by_id[vid] = v if v is not None else G.find_vertex(payload)

    if edges is None or edges.height == 0:
        return G
    for col in ("source", "target"):
        if col not in edges.columns:
            raise KeyError(f"edges frame lacks column {col!r}")
    epay = "data" if "data" in edges.columns else "weight"
    payloads = edges[epay].to_list() if epay in edges.columns else [None] * edges.height

    for s, t, payload in zip(edges["source"].to_list(), edges["target"].to_list(), payloads):
        try:
            src, tgt = by_id[s], by_id[t]
        except KeyError:
            raise KeyError(f"edge {s} - {t} references an unknown vertex id") from None
        G.add_edge(payload, src, tgt)
    return G
