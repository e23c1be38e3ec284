"""
Error taxonomy for degreegraph.

Only the I/O boundaries (edge parsing, chart rendering, configuration
loading) raise these. The aggregation stages are total functions.
"""


class DegreeGraphError(Exception):
    """Base class for every error raised by degreegraph."""


class ParseError(DegreeGraphError):
    """
    A record in the edge file could not be turned into an edge.

    Attributes:
        path: Path of the edge file, if known
        line_number: 1-based line of the offending record, if known
    """

    def __init__(self, message: str, path=None, line_number=None):
        super().__init__(message)
        self.path = path
        self.line_number = line_number


class InputFileError(ParseError, OSError):
    """The edge file could not be opened or read."""


class RenderError(DegreeGraphError):
    """The chart could not be written to its output path."""


class ConfigError(DegreeGraphError):
    """The pipeline configuration is invalid."""
