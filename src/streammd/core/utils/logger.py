"""Namespaced standard-library loggers for streammd"""

import logging


ROOT_LOGGER = "streammd"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the 'streammd.' namespace (e.g. 'core.parse' -> 'streammd.core.parse')."""
    if not (name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}.")):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING") -> None:
    """Attach a stderr handler to the root streammd logger at the given level."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger(ROOT_LOGGER).setLevel(level.upper())
