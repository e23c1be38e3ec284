"""
Edge list reader for tab-separated hyperlink files.

The expected layout is the one used by the SNAP Reddit hyperlink datasets:
a header row followed by one record per line, tab-delimited, with the
source node in the first column and the target node in the second. Any
further columns (post id, timestamp, sentiment, properties) are ignored.
"""

import csv
import logging
from pathlib import Path
from typing import List, Union

from ..classes.edge import Edge
from ..classes.exceptions import InputFileError, ParseError

logger = logging.getLogger(__name__)

Pathish = Union[str, Path]


class EdgeReader:
    """
    Reads directed edges from a delimited text file.

    Args:
        delimiter: Field separator, a tab by default
        has_header: Whether the first row is a header to skip
    """

    def __init__(self, delimiter: str = "\t", has_header: bool = True):
        self.delimiter = delimiter
        self.has_header = has_header

    def parse(self, path: Pathish) -> List[Edge]:
        """
        Parse every record of the file into an Edge.

        Args:
            path: Location of the edge file

        Returns:
            List of edges in file order

        Raises:
            InputFileError: If the file cannot be opened or read
            ParseError: If a record has fewer than two fields
        """
        input_path = Path(path)
        edges: List[Edge] = []
        header_skipped = not self.has_header

        logger.info(f"Reading edges from {input_path}")

        try:
            with input_path.open("r", encoding="utf-8", newline="") as handle:
                reader = csv.reader(handle, delimiter=self.delimiter, quoting=csv.QUOTE_NONE)
                for record in reader:
                    line_number = reader.line_num
                    if not record:
                        continue
                    if not header_skipped:
                        header_skipped = True
                        continue
                    if len(record) < 2:
                        raise ParseError(
                            f"{input_path}:{line_number}: expected at least 2 fields, found {len(record)}",
                            path=input_path,
                            line_number=line_number,
                        )
                    edges.append(Edge(record[0], record[1]))
        except csv.Error as e:
            raise ParseError(f"{input_path}: malformed record: {e}", path=input_path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise InputFileError(f"Cannot read edge file {input_path}: {e}", path=input_path) from e

        logger.info(f"Read {len(edges)} edges from {input_path}")
        return edges


def parse(path: Pathish) -> List[Edge]:
    """Read (source, target) edges from a tab-separated file with a header row."""
    return EdgeReader().parse(path)
