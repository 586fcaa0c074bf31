"""Logging setup."""
import logging

_logger = logging.getLogger(__name__)

VERBOSITY_MAP = {
    0: logging.NOTSET,
    1: logging.INFO,
    2: logging.DEBUG,
}


def initialize_logger(level: int = 0) -> None:
    """Set up the global logging level based on the verbosity number."""
    logger = logging.getLogger(__package__)
    if not any(getattr(h, '_ansiblestyle', False) for h in logger.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(levelname)-8s %(message)s')
        handler.setFormatter(formatter)
        handler._ansiblestyle = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    # Unknown logging level is treated as DEBUG
    logging_level = VERBOSITY_MAP.get(level, logging.DEBUG)
    logger.setLevel(logging_level)
    # Use module-level _logger instead of logger to avoid conflict.
    _logger.debug("Logging initialized to level %s", logging_level)
