"""Logging configuration."""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level=None) -> logging.Logger:
    """Attach a console handler to the root logger.

    The level defaults to SKINEVAL_LOG_LEVEL, then INFO. Calling this
    more than once does not add duplicate handlers.
    """
    if level is None:
        level = os.environ.get("SKINEVAL_LOG_LEVEL", "INFO").upper()
    if isinstance(level, str):
        level = logging.getLevelName(level)
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if getattr(handler, "_skineval", False):
            handler.setLevel(level)
            return root

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._skineval = True
    root.addHandler(console_handler)

    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))

    return root
