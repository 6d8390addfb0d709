"""
logging setup for the front ends

modules get their logger with `logging.getLogger(__name__)`; the window and
other entry points call setup_logging() once.
"""
import logging


def setup_logging(level="INFO"):
    """apply a basic logging config, unless the app already configured one"""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
