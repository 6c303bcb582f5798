from .traversal import breadth_first_traversal, depth_first_traversal
from .shortest_path import (
    CostHomePair,
    dijkstra,
    edge_weight,
    get_distances,
    get_shortest_path,
    shortest_path,
)

__all__ = [
    "breadth_first_traversal",
    "depth_first_traversal",
    "CostHomePair",
    "dijkstra",
    "edge_weight",
    "get_distances",
    "get_shortest_path",
    "shortest_path",
]
