"""
Logging Configuration

Both the CLI and the deals server log diagnostics to stderr, leaving stdout
for the circular report and for the server's access log.
"""

import logging
import sys

PACKAGE_LOGGER = "shoprite"
LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        verbose: If True, log at DEBUG (includes skipped SKUs, cache hits)
        quiet: If True, only warnings and errors

    Returns:
        The configured package logger
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Re-configuration replaces the handler instead of stacking another one
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger
