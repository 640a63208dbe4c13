"""
Logging configuration.

The library only creates module loggers; the famchart command line calls
setup_logging to get console output on stderr.
"""

import logging
import sys


def setup_logging(level: int = logging.WARNING) -> None:
    """Send records of the 'famchart' logger at `level` and above to stderr."""
    logger = logging.getLogger("famchart")
    logger.setLevel(level)

    # main() may run several times in one process
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
