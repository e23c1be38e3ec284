"""Run the degreegraph command line with ``python -m degreegraph``."""

import sys

from .cli import main

sys.exit(main())
