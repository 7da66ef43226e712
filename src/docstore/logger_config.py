"""Logging setup for the docstore CLI"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the docstore logger (once) and set its level."""
    logger = logging.getLogger("docstore")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
