import logging
import sys

def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Configure the ``teamsync`` logger once; later calls return it as is.

    ``level`` may be a number or a level name such as ``"debug"``.
    """
    logger = logging.getLogger("teamsync")
    if logger.handlers:
        return logger  # already configured
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    # every API request is logged by httpx at INFO
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
    return logger
