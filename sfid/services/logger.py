import logging
from typing import Optional


def setup_logger(name: str = "sfid", level: Optional[str] = None):
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)

    if level is not None:
        logger.setLevel(level)

    return logger
