"""Logging configuration for the server."""

import logging
import sys


def setup_logging(log_level: str = "INFO") -> None:
    """Attach a timestamped console handler to the root logger.

    Safe to call more than once; the handler is only installed the first time.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not any(getattr(h, "_sheetproxy", False) for h in root_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        handler._sheetproxy = True
        root_logger.addHandler(handler)

    # Quiet noisy third-party libraries
    logging.getLogger("googleapiclient.discovery_cache").setLevel(logging.ERROR)
