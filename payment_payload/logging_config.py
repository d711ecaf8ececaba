"""
logging_config.py — Logging setup for the payment payload service

Every module logs through `logging.getLogger(__name__)`; this module wires the
handlers once, at application start.

Features:
    • Console output (stdout), container friendly
    • Process ID tagging
    • Log level taken from settings (LOG_LEVEL)
    • Reduced verbosity for the HTTP server libraries
"""

import logging
import sys

from payment_payload.config import settings


def setup_logging(level: str | None = None):
    """
    Configures the global logging system.

    Args:
        level (str | None): Overrides the configured LOG_LEVEL when given.
    """
    log_format = '%(asctime)s - %(levelname)s - [PID:%(process)d] - %(name)s - %(message)s'

    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name):
    """
    Returns the logger for a module or component name.

    Args:
        name (str): The logger name, typically the module's __name__.

    Returns:
        logging.Logger
    """
    return logging.getLogger(name)
