import logging
import sys

from .config import Settings


def setup_logging(settings: Settings) -> logging.Logger:
    """
    Configures the ``ippool`` logger tree from settings.

    Handlers are reset on every call, so calling it twice (tests, reloads)
    does not duplicate output.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger("ippool")
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(settings.log_format, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(console_handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING if log_level > logging.INFO else log_level)

    root_logger.info(f"Logging setup complete. Log level set to {logging.getLevelName(log_level)}.")
    return root_logger
