import argparse
import logging
import math

import pathgraph as pg
from pathgraph import config


def build_sample():
    G = pg.Graph()

    # name, x, y
    places = [
        ("A", 40, 40),
        ("B", 160, 40),
        ("C", 160, 160),
        ("D", 280, 160),
        ("E", 40, 280),
    ]
    # length, source, target
    roads = [
        (1.0, "A", "B"),
        (2.0, "B", "C"),
        (5.0, "A", "C"),
        (1.0, "C", "D"),
    ]

    by_name = {}
    for name, x, y in places:
        by_name[name] = G.add_vertex(pg.VertexData(name, x, y))
    for length, s, t in roads:
        G.add_edge(pg.EdgeData(length), by_name[s], by_name[t])
    return G


def _print_edges(title, edges):
    print(f"---{title}---")
    for e in edges:
        print(e)
    print()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the graph algorithms on a sample or a text file.")
    parser.add_argument("path", nargs="?", help="graph in the 'v x y name' / 'e len src tgt' format")
    parser.add_argument("--start", help="vertex name to start from (default: first vertex)")
    parser.add_argument("--end", help="vertex name for the shortest path (default: last vertex)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL)

    G = pg.read_text(args.path) if args.path else build_sample()
    print(G)
    print()
    if len(G) == 0:
        return 0

    start = G.find_vertex(pg.VertexData(args.start)) if args.start else G.get_vertex(0)
    end = G.find_vertex(pg.VertexData(args.end)) if args.end else G.get_vertex(-1)
    if start is None or end is None:
        parser.error("unknown vertex name")

    _print_edges("Breadth First Traversal", G.breadth_first_traversal(start))
    _print_edges("Depth First Traversal", G.depth_first_traversal(start))

    print("---Distances---")
    for v, dist in pg.get_distances(G.dijkstra(start)).items():
        print(f"{v} {dist}")
    print()

    cost, path = G.shortest_path(start, end)
    print("---Shortest Path---")
    if math.isinf(cost):
        print(f"{end} is not reachable from {start}")
    else:
        print(" -> ".join(str(v) for v in path), f"({cost})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
