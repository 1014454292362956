"""Logging setup shared by the command line."""

import logging


def setup_logger(logger_name: str, level: int = logging.INFO) -> logging.Logger:
    """Attach a single stream handler with the standard format to a logger."""
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
