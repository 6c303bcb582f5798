from .structure import Edge, Vertex, edge_key
from .graph import Graph

__all__ = ["Graph", "Vertex", "Edge", "edge_key"]
