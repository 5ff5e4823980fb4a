"""Logging setup for dynstr.

Modules log through ``logging.getLogger(__name__)`` under the ``dynstr``
logger. Nothing is configured on import; applications call
:func:`configure_logging` (or configure ``logging`` themselves).
"""

import logging
import sys

logger = logging.getLogger("dynstr")


def configure_logging(level=logging.INFO):
    """Send dynstr log records to stderr at ``level``."""
    logging.basicConfig(level=level, stream=sys.stderr)
    logger.setLevel(level)
    return logger
