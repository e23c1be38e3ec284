import shutil
import tempfile
import unittest
from pathlib import Path

from degreegraph.classes.exceptions import InputFileError, ParseError
from degreegraph.config import PipelineConfig
from degreegraph.core.pipeline import DegreePipeline
from degreegraph.analysis.histogram import format_histogram


class TestDegreePipeline(unittest.TestCase):
    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp(prefix="test_pipeline_"))
        self.input_path = self.test_dir / "edges.tsv"
        self.input_path.write_text(
            "SOURCE_SUBREDDIT\tTARGET_SUBREDDIT\tPOST_ID\n"
            "A\tB\tp1\nA\tC\tp2\nB\tC\tp3\nA\tB\tp4\n",
            encoding="utf-8",
        )
        self.output_path = self.test_dir / "distn.png"

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def make_pipeline(self, **kwargs):
        return DegreePipeline(PipelineConfig(input_path=self.input_path, output_path=self.output_path, **kwargs))

    def test_compute_from_file(self):
        result = self.make_pipeline().compute()
        self.assertEqual(result.edge_count, 4)
        self.assertEqual(sorted(result.degrees), [1, 3])
        self.assertEqual(result.histogram, ((1, 1), (3, 1)))
        self.assertEqual(result.summary.node_count, 2)
        self.assertEqual(result.summary.max_degree, 3)

    def test_single_pass_matches_staged(self):
        staged = self.make_pipeline().compute()
        single = self.make_pipeline(single_pass=True).compute()
        self.assertEqual(staged.histogram, single.histogram)

    def test_rerun_is_identical(self):
        first = format_histogram(self.make_pipeline().compute().histogram)
        second = format_histogram(self.make_pipeline().compute().histogram)
        self.assertEqual(first, second)

    def test_compute_with_explicit_edges(self):
        result = DegreePipeline().compute([("X", "X")])
        self.assertEqual(result.histogram, ((1, 1),))

    def test_compute_empty_edges(self):
        result = DegreePipeline().compute([])
        self.assertEqual(result.degrees, ())
        self.assertEqual(result.histogram, ())

    def test_target_only_nodes_excluded(self):
        result = DegreePipeline().compute([("A", "B"), ("A", "C"), ("A", "D")])
        self.assertEqual(result.histogram, ((3, 1),))

    def test_render_writes_output(self):
        pipeline = self.make_pipeline()
        path = pipeline.render(pipeline.compute().histogram)
        self.assertEqual(path, self.output_path)
        self.assertTrue(self.output_path.exists())

    def test_missing_input_propagates(self):
        pipeline = DegreePipeline(PipelineConfig(input_path=self.test_dir / "absent.tsv"))
        with self.assertRaises(InputFileError):
            pipeline.compute()

    def test_malformed_input_propagates(self):
        self.input_path.write_text("h1\th2\nA\n", encoding="utf-8")
        with self.assertRaises(ParseError):
            self.make_pipeline().compute()


if __name__ == "__main__":
    unittest.main()
