"""
Plain-text graph format.

One record per line, whitespace separated:

    v <x> <y> <name>                 vertex at integer position (x, y)
    e <length> <source> <target>     edge between two named vertices

Vertices are written before edges. Names may not contain whitespace.
Blank lines and lines starting with ``#`` or ``//`` are ignored on read.

Public entry points:
- read_text(path, graph=None) -> Graph
- write_text(graph, path) -> int
- loads(text, graph=None) -> Graph
- dumps(graph) -> str
"""
from __future__ import annotations

import logging
import warnings
from typing import Iterable

from .. import config
from ..algorithms.shortest_path import edge_weight
from ..core.graph import Graph
from ..payloads import EdgeData, VertexData

logger = logging.getLogger(__name__)


def _parse_int(tok: str, line_no: int, what: str) -> int:
    try:
        return int(tok)
    except ValueError:
        raise ValueError(f"line {line_no}: {what} must be an integer, got {tok!r}") from None


def _parse_float(tok: str, line_no: int, what: str) -> float:
    try:
        return float(tok)
    except ValueError:
        raise ValueError(f"line {line_no}: {what} must be a number, got {tok!r}") from None


def _load_lines(lines: Iterable[str], graph: Graph) -> Graph:
    by_name = {str(v.data): v for v in graph.vertices()}
    line_no = 0
    for raw in lines:
        line_no += 1
        s = raw.strip()
        if not s or any(s.startswith(pfx) for pfx in config.TEXT_COMMENT_PREFIXES):
            continue
        toks = s.split()
        tag = toks[0]

        if tag == config.VERTEX_TAG:
            if len(toks) != 4:
                raise ValueError(f"line {line_no}: expected 'v <x> <y> <name>', got {s!r}")
            x = _parse_int(toks[1], line_no, "x")
            y = _parse_int(toks[2], line_no, "y")
            name = toks[3]
            vertex = graph.add_vertex(VertexData(name, x, y))
            if vertex is None:
                warnings.warn(f"line {line_no}: duplicate vertex name {name!r} skipped", stacklevel=3)
                continue
            by_name[name] = vertex

        elif tag == config.EDGE_TAG:
            if len(toks) != 4:
                raise ValueError(
                    f"line {line_no}: expected 'e <length> <source> <target>', got {s!r}"
                )
            length = _parse_float(toks[1], line_no, "length")
            src, tgt = by_name.get(toks[2]), by_name.get(toks[3])
            if src is None or tgt is None:
                warnings.warn(
                    f"line {line_no}: edge {toks[2]} - {toks[3]} references an unknown vertex; skipped",
                    stacklevel=3,
                )
                continue
            if graph.add_edge(EdgeData(length), src, tgt) is None:
                logger.debug("line %d: edge %s - %s not added", line_no, toks[2], toks[3])

        else:
            warnings.warn(f"line {line_no}: unknown record type {tag!r} skipped", stacklevel=3)

    return graph


def loads(text: str, graph: Graph | None = None) -> Graph:
    """Parse the text format into ``graph`` (a new Graph when omitted)."""
    return _load_lines(text.splitlines(), Graph() if graph is None else graph)


def read_text(path, graph: Graph | None = None, encoding: str = config.TEXT_ENCODING) -> Graph:
    """Load a graph from a text file.

    Parameters
    ----------
    path : str or os.PathLike
    graph : Graph, optional
        Populate this graph instead of a new one.
    encoding : str

    Returns
    -------
    Graph
        Vertices carry :class:`VertexData`, edges :class:`EdgeData`.

    Raises
    ------
    ValueError
        On a malformed record (the message names the line).
    OSError
        If the file cannot be read.

    """
    with open(path, "r", encoding=encoding) as f:
        G = _load_lines(f, Graph() if graph is None else graph)
    logger.debug(
        "read %d vertices / %d edges from %s", G.number_of_vertices(), G.number_of_edges(), path
    )
    return G


def _vertex_record(data) -> str:
    name = str(data)
    if not name or any(c.isspace() for c in name):
        raise ValueError(f"vertex name {name!r} cannot be written: empty or contains whitespace")
    x = int(getattr(data, "x", 0))
    y = int(getattr(data, "y", 0))
    return f"{config.VERTEX_TAG} {x} {y} {name}"


def _iter_records(graph: Graph):
    for v in graph.vertices():
        yield _vertex_record(v.data)
    for e in graph.edges():
        yield f"{config.EDGE_TAG} {edge_weight(e)!r} {e.source.data} {e.target.data}"


def dumps(graph: Graph) -> str:
    """Serialize ``graph``; payloads without a position are written at (0, 0)."""
    return "".join(rec + "\n" for rec in _iter_records(graph))


def write_text(graph: Graph, path, encoding: str = config.TEXT_ENCODING) -> int:
    """Write ``graph`` to ``path``.

    Returns
    -------
    int
        Number of records written.

    """
    records = list(_iter_records(graph))
    with open(path, "w", encoding=encoding) as f:
        for rec in records:
            f.write(rec + "\n")
    return len(records)
