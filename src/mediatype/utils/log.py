"""Logging setup for the command line.

Library modules only create named loggers with
``logging.getLogger(__name__)``; configuring handlers is left to the
application, or to :func:`setup_logging` when running the ``mediatype``
command.
"""

import logging
import sys

# Global flag to track if logging has been set up
_LOGGING_CONFIGURED = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Set up root logging once.

    Uses a singleton pattern to prevent duplicate handlers when called
    more than once. Log records go to stderr so they never mix with
    command output.

    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :type level: str
    :return: None
    :rtype: None
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        logging.getLogger(__name__).debug(
            "Logging already configured, skipping duplicate setup"
        )
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True,  # Override any existing configuration
    )

    _LOGGING_CONFIGURED = True
