import unittest
from collections import Counter

from degreegraph.classes.edge import Edge
from degreegraph.core.graph import AdjacencyBuilder, build


class TestAdjacencyBuilder(unittest.TestCase):
    def setUp(self):
        self.builder = AdjacencyBuilder()

    def test_duplicate_edges_are_appended_in_order(self):
        edges = [Edge("A", "B"), Edge("A", "C"), Edge("B", "C"), Edge("A", "B")]
        adjacency = self.builder.build(edges)
        self.assertEqual(dict(adjacency), {"A": ("B", "C", "B"), "B": ("C",)})

    def test_empty_input(self):
        self.assertEqual(dict(build([])), {})

    def test_self_loop(self):
        self.assertEqual(dict(build([("X", "X")])), {"X": ("X",)})

    def test_target_only_nodes_are_not_keys(self):
        adjacency = build([("A", "B"), ("B", "C")])
        self.assertNotIn("C", adjacency)

    def test_keys_and_lengths_match_source_counts(self):
        edges = [("n%d" % (i % 7), "n%d" % (i % 3)) for i in range(50)]
        adjacency = build(edges)
        source_counts = Counter(source for source, _ in edges)
        self.assertEqual(set(adjacency), set(source_counts))
        for source, targets in adjacency.items():
            self.assertEqual(len(targets), source_counts[source])
        self.assertEqual(sum(len(t) for t in adjacency.values()), len(edges))

    def test_result_is_read_only(self):
        adjacency = build([("A", "B")])
        with self.assertRaises(TypeError):
            adjacency["Z"] = ("Y",)
        self.assertIsInstance(adjacency["A"], tuple)

    def test_accepts_generator(self):
        adjacency = build(Edge(s, t) for s, t in [("A", "B"), ("A", "A")])
        self.assertEqual(adjacency["A"], ("B", "A"))


if __name__ == "__main__":
    unittest.main()
