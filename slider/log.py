import os
import sys

from loguru import logger

LEVEL = os.environ.get("SLIDER_LOG_LEVEL", "INFO").upper()

# silent when used as a library; CLIs opt in through configure()
logger.disable("slider")


def formatter(record):
    comp = record["extra"].get("component", "")
    if comp:
        return "{time:HH:mm:ss} | <cyan>" + f"{comp:<10}" + "</> | <level>{message}</level>\n"
    return "{time:HH:mm:ss} | <level>{message}</level>\n"


def configure(level: str = LEVEL):
    """Route all slider logging to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, format=formatter, level=level, colorize=True)
    logger.enable("slider")
    return logger
