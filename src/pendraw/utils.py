import logging

from .config import AppConfig

logger: logging.Logger = logging.getLogger("pendraw")
logger.addHandler(logging.StreamHandler())
logger.setLevel(getattr(logging, AppConfig.LOG_LEVEL, logging.WARNING))


def keyword_of(line: str) -> str:
    """Returns the lower-cased first token of a line, or '' for a blank line."""
    words = line.split()
    return words[0].lower() if words else ""
