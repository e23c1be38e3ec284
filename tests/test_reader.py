import shutil
import tempfile
import unittest
from pathlib import Path

from degreegraph.classes.edge import Edge
from degreegraph.classes.exceptions import InputFileError, ParseError
from degreegraph.io.reader import EdgeReader, parse

HEADER = "SOURCE_SUBREDDIT\tTARGET_SUBREDDIT\tPOST_ID\tTIMESTAMP\tLINK_SENTIMENT\tPROPERTIES\n"


class TestEdgeReader(unittest.TestCase):
    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp(prefix="test_reader_"))

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def write(self, name, text):
        path = self.test_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    def test_skips_header_and_ignores_extra_columns(self):
        path = self.write("edges.tsv", HEADER
                          + "leagueoflegends\tteamredditteams\t1u4nrps\t2013-12-31 16:39:58\t1\t345.0,298.0\n"
                          + "theredlion\tsoccer\t1u4qkd\t2013-12-31 18:18:37\t-1\t101.0,98.0\n")
        self.assertEqual(parse(path), [
            Edge("leagueoflegends", "teamredditteams"),
            Edge("theredlion", "soccer"),
        ])

    def test_two_column_records(self):
        path = self.write("edges.tsv", "src\tdst\nA\tB\nA\tC\n")
        self.assertEqual(parse(str(path)), [("A", "B"), ("A", "C")])

    def test_header_only(self):
        path = self.write("edges.tsv", HEADER)
        self.assertEqual(parse(path), [])

    def test_blank_lines_are_skipped(self):
        path = self.write("edges.tsv", "src\tdst\nA\tB\n\nB\tC\n")
        self.assertEqual(len(parse(path)), 2)

    def test_quotes_are_kept_literally(self):
        path = self.write("edges.tsv", 'src\tdst\n"A\tB"\n')
        self.assertEqual(parse(path), [Edge('"A', 'B"')])

    def test_short_record_raises_parse_error_with_line_number(self):
        path = self.write("edges.tsv", "src\tdst\nA\tB\nlonely\n")
        with self.assertRaises(ParseError) as ctx:
            parse(path)
        self.assertEqual(ctx.exception.line_number, 3)
        self.assertEqual(ctx.exception.path, path)
        self.assertNotIsInstance(ctx.exception, InputFileError)

    def test_missing_file_raises_input_file_error(self):
        missing = self.test_dir / "nope.tsv"
        with self.assertRaises(InputFileError) as ctx:
            parse(missing)
        self.assertIsInstance(ctx.exception, OSError)
        self.assertIsInstance(ctx.exception, ParseError)
        self.assertIsInstance(ctx.exception.__cause__, FileNotFoundError)

    def test_leading_blank_line_before_header(self):
        path = self.write("edges.tsv", "\nSOURCE\tTARGET\nA\tB\n")
        self.assertEqual(parse(path), [Edge("A", "B")])

    def test_custom_delimiter_without_header(self):
        path = self.write("edges.csv", "A,B\nB,C\n")
        reader = EdgeReader(delimiter=",", has_header=False)
        self.assertEqual(reader.parse(path), [("A", "B"), ("B", "C")])


if __name__ == "__main__":
    unittest.main()
