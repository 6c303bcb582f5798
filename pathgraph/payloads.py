"""Ready-made vertex and edge payloads for named, positioned graphs.

These are what :mod:`pathgraph.io.text` produces and consumes. Any other
payload type works with :class:`~pathgraph.core.graph.Graph` as well.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class VertexData:
    """A named vertex with a position.

    Equality and hashing use ``name`` only, so a graph holding
    ``VertexData`` payloads never has two vertices with the same name.
    """

    name: str
    x: int = field(default=0, compare=False)
    y: int = field(default=0, compare=False)

    @property
    def point(self) -> tuple[int, int]:
        return self.x, self.y

    def moved_to(self, x: int, y: int) -> VertexData:
        return replace(self, x=x, y=y)

    def renamed(self, name: str) -> VertexData:
        return replace(self, name=name)

    def __str__(self):
        return self.name


@dataclass
class EdgeData:
    """Edge payload carrying a length; numeric, so it doubles as a weight."""

    length: float = 0.0

    def __float__(self):
        return float(self.length)

    def __int__(self):
        return int(self.length)

    def __str__(self):
        return repr(float(self.length))
