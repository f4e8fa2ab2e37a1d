"""Logging setup for the CLI and server."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Marks the console handler installed here so repeated setup stays idempotent
_HANDLER_NAME = "random_string_parameter.console"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the root logger.

    Other handlers already on the root logger (files, test capture) are left
    alone; the console handler is added once.

    Args:
        level: Log level name, e.g. "INFO"

    Returns:
        The root logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    if not any(h.get_name() == _HANDLER_NAME for h in root_logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return root_logger
