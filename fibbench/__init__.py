"""fibbench: Fibonacci algorithm variants and a benchmark harness."""

import logging

__version__ = "0.1.0"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
