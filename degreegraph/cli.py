"""
Command line entry point.

    degreegraph --input soc-redditHyperlinks-body.tsv --output distn.png
"""

import argparse
import logging
import sys
from typing import List, Optional

from .classes.exceptions import ConfigError, ParseError, RenderError
from .config import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH, LOG_LEVELS, load_config
from .core.pipeline import DegreePipeline
from .analysis.histogram import format_histogram

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_RENDER_ERROR = 2
EXIT_CONFIG_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="degreegraph",
        description="Plot the out-degree distribution of a tab-separated edge list",
    )
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config")
    parser.add_argument("--input", dest="input_path", type=str, default=None,
                        help=f"Edge file to read (default {DEFAULT_INPUT_PATH})")
    parser.add_argument("--output", dest="output_path", type=str, default=None,
                        help=f"Chart image to write (default {DEFAULT_OUTPUT_PATH})")
    parser.add_argument("--single-pass", dest="single_pass", action="store_true", default=None,
                        help="Count out-degrees while reading edges instead of building the adjacency map")
    parser.add_argument("--log-level", dest="log_level", type=str.upper, default=None, choices=LOG_LEVELS,
                        help="Logging verbosity (default INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(
            args.config,
            input_path=args.input_path,
            output_path=args.output_path,
            single_pass=args.single_pass,
            log_level=args.log_level,
        )
    except ConfigError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pipeline = DegreePipeline(config)

    try:
        result = pipeline.compute()
    except ParseError as e:
        logger.error(f"Failed to read edges: {e}")
        return EXIT_INPUT_ERROR

    print(format_histogram(result.histogram))
    sys.stdout.flush()

    try:
        pipeline.render(result.histogram)
    except RenderError as e:
        logger.error(f"Failed to render chart: {e}")
        return EXIT_RENDER_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
