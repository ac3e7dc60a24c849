"""Centralized logging configuration."""

import sys

from loguru import logger as loguru_logger


LAYER = "layer"

log_format = " | ".join(
    (
        "<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        f"<lg>{{extra[{LAYER}]}}</> <c>{{name}}::{{function}}:{{line}}</>",
        "{message}",
    )
)

loguru_logger.remove()  # Drop the default handler so records are not printed twice
logger = loguru_logger.bind(**{LAYER: ""})
logger.add(sys.stdout, format=log_format, level="INFO")


def layer_logger(layer: str):
    """Return the shared logger tagged with an architectural layer name."""
    return logger.bind(**{LAYER: layer})
