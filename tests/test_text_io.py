import os
import shutil
import tempfile
import unittest

from pathgraph.core.graph import Graph
from pathgraph.io.text import dumps, loads, read_text, write_text
from pathgraph.payloads import EdgeData, VertexData

SAMPLE = """\
# towns
v 40 40 A
v 160 40 B
v 160 160 C

// roads
e 1.0 A B
e 2.5 B C
"""


class TestReadText(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_loads_sample(self):
        G = loads(SAMPLE)
        self.assertEqual(G.number_of_vertices(), 3)
        self.assertEqual(G.number_of_edges(), 2)

        a = G.find_vertex(VertexData("A"))
        self.assertIsNotNone(a)
        self.assertEqual(a.data.point, (40, 40))

        e = G.get_edge(1)
        self.assertIsInstance(e.data, EdgeData)
        self.assertEqual(e.data.length, 2.5)
        self.assertEqual(str(e.source), "B")
        self.assertEqual(str(e.target), "C")

    def test_read_text_file(self):
        path = os.path.join(self.tmpdir, "g.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write(SAMPLE)
        G = read_text(path)
        self.assertEqual([str(v) for v in G.vertices()], ["A", "B", "C"])
        self.assertEqual(G.shortest_path(G.get_vertex(0), G.get_vertex(2))[0], 3.5)

    def test_read_into_existing_graph(self):
        G = Graph()
        G.add_vertex(VertexData("Z", 1, 1))
        loads("v 0 0 A\ne 4 Z A\n", graph=G)
        self.assertEqual(G.number_of_vertices(), 2)
        self.assertEqual(G.number_of_edges(), 1)

    def test_missing_file(self):
        with self.assertRaises(OSError):
            read_text(os.path.join(self.tmpdir, "missing.txt"))

    def test_malformed_vertex_names_line(self):
        with self.assertRaises(ValueError) as cm:
            loads("v 1 2 A\nv 1 B\n")
        self.assertIn("line 2", str(cm.exception))

    def test_non_integer_position(self):
        with self.assertRaises(ValueError) as cm:
            loads("v 1.5 2 A\n")
        self.assertIn("line 1", str(cm.exception))

    def test_non_numeric_length(self):
        with self.assertRaises(ValueError) as cm:
            loads("v 0 0 A\nv 0 0 B\ne far A B\n")
        self.assertIn("line 3", str(cm.exception))

    def test_duplicate_name_warns(self):
        with self.assertWarns(UserWarning):
            G = loads("v 0 0 A\nv 5 5 A\n")
        self.assertEqual(G.number_of_vertices(), 1)
        # the first record wins
        self.assertEqual(G.get_vertex(0).data.point, (0, 0))

    def test_unknown_endpoint_warns(self):
        with self.assertWarns(UserWarning):
            G = loads("v 0 0 A\ne 1 A Q\n")
        self.assertEqual(G.number_of_edges(), 0)

    def test_unknown_tag_warns(self):
        with self.assertWarns(UserWarning):
            G = loads("x 0 0 A\nv 0 0 A\n")
        self.assertEqual(G.number_of_vertices(), 1)

    def test_repeated_edge_ignored(self):
        G = loads("v 0 0 A\nv 0 0 B\ne 1 A B\ne 2 B A\n")
        self.assertEqual(G.number_of_edges(), 1)
        self.assertEqual(G.get_edge(0).data.length, 1.0)


class TestWriteText(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_dumps_is_stable(self):
        G = loads(SAMPLE)
        self.assertEqual(
            dumps(G),
            "v 40 40 A\nv 160 40 B\nv 160 160 C\ne 1.0 A B\ne 2.5 B C\n",
        )
        self.assertEqual(dumps(loads(dumps(G))), dumps(G))

    def test_write_and_read_back(self):
        G = loads(SAMPLE)
        path = os.path.join(self.tmpdir, "out.txt")
        self.assertEqual(write_text(G, path), 5)
        H = read_text(path)
        self.assertEqual(
            [(str(e.source), str(e.target), e.data.length) for e in H.edges()],
            [("A", "B", 1.0), ("B", "C", 2.5)],
        )
        self.assertEqual(H.find_vertex(VertexData("C")).data.point, (160, 160))

    def test_plain_payloads(self):
        G = Graph()
        a, b = G.add_vertex("A"), G.add_vertex("B")
        G.add_edge(1, a, b)
        G.add_edge("road", a, G.add_vertex("C"))
        self.assertEqual(dumps(G), "v 0 0 A\nv 0 0 B\nv 0 0 C\ne 1.0 A B\ne 0.0 A C\n")

    def test_unwritable_name(self):
        G = Graph()
        G.add_vertex("New York")
        with self.assertRaises(ValueError):
            dumps(G)


if __name__ == "__main__":
    unittest.main()
