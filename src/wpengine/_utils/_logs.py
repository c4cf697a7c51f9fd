import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the `wpengine` logger.

    Without ``debug`` the logger is left as the host application configured it.
    With ``debug`` a single stderr handler is attached, the level drops to DEBUG
    and records stop propagating so they are not printed twice.

    Args:
        debug (bool): Log requests and responses at DEBUG level on stderr.

    Returns:
        logging.Logger: The library logger.
    """
    logger = logging.getLogger("wpengine")
    if not debug:
        return logger

    if not any(getattr(h, "_wpengine", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._wpengine = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger
