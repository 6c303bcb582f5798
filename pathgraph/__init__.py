"""pathgraph: single import, full API."""
from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    # namespaces
    "adapters": "pathgraph.adapters",
    "io": "pathgraph.io",
    "core": "pathgraph.core",
    "algorithms": "pathgraph.algorithms",
    # adapter modules (direct convenience)
    "networkx": "pathgraph.adapters.networkx",
    "dataframe": "pathgraph.adapters.dataframe_adapter",
    "sparse": "pathgraph.adapters.sparse",
    # io modules
    "textio": "pathgraph.io.text",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "Graph": ("pathgraph.core.graph", "Graph"),
    "Vertex": ("pathgraph.core.structure", "Vertex"),
    "Edge": ("pathgraph.core.structure", "Edge"),

    # Payloads
    "VertexData": ("pathgraph.payloads", "VertexData"),
    "EdgeData": ("pathgraph.payloads", "EdgeData"),

    # Algorithms
    "breadth_first_traversal": ("pathgraph.algorithms.traversal", "breadth_first_traversal"),
    "depth_first_traversal": ("pathgraph.algorithms.traversal", "depth_first_traversal"),
    "dijkstra": ("pathgraph.algorithms.shortest_path", "dijkstra"),
    "get_distances": ("pathgraph.algorithms.shortest_path", "get_distances"),
    "get_shortest_path": ("pathgraph.algorithms.shortest_path", "get_shortest_path"),
    "shortest_path": ("pathgraph.algorithms.shortest_path", "shortest_path"),
    "CostHomePair": ("pathgraph.algorithms.shortest_path", "CostHomePair"),

    # Text format
    "read_text": ("pathgraph.io.text", "read_text"),
    "write_text": ("pathgraph.io.text", "write_text"),

    # NetworkX adapter (optional dependency)
    "to_nx": ("pathgraph.adapters.networkx", "to_nx"),
    "from_nx": ("pathgraph.adapters.networkx", "from_nx"),

    # Polars tables
    "to_dataframes": ("pathgraph.adapters.dataframe_adapter", "to_dataframes"),
    "from_dataframes": ("pathgraph.adapters.dataframe_adapter", "from_dataframes"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("pathgraph")
except PackageNotFoundError:
    __version__ = "0.0.0"
