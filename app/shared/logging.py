"""
Logging configuration for the allocation service.

Sets up one pipe-separated format on stdout for the whole process.
Logging must not change program behavior.
Never logs sensitive data (request bodies, secrets, raw payloads).
Ledger events (deposits, switches, status changes) are logged under
the ``app`` logger hierarchy.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
APP_LOGGER_NAME = "app"

# Third-party loggers kept at WARNING unless debug is on.
NOISY_LOGGERS = ("uvicorn.access", "uvicorn.error", "slowapi")


def configure_logging(level: str = "INFO", debug: bool = False) -> logging.Logger:
    """Configure process-wide logging for the service.

    Args:
        level: Level for the service's own loggers (DEBUG, INFO, WARNING, ERROR).
        debug: Let third-party loggers through at the same level.

    Returns:
        The service's root logger.
    """
    resolved = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(resolved)

    third_party_level = resolved if debug else max(resolved, logging.WARNING)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)

    return app_logger
