"""
Logging configuration for grcli-man-tool.

Log records go to stderr so that rendered pages on stdout stay clean.
"""

import logging
import sys

LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger.

    Args:
        name: Logger name, usually __name__

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def setup_logging(verbose: int = 0) -> None:
    """
    Configure root logging from a -v count.

    - 0: WARNING
    - 1 (-v): INFO
    - 2+ (-vv): DEBUG

    Args:
        verbose: Number of -v flags given
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)
