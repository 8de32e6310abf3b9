from __future__ import annotations

import logging
import sys


def setup_logger(name: str = "pathfinder", level: int = logging.WARNING) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger
    # stdout is reserved for the console protocol
    ch = logging.StreamHandler(sys.stderr)
    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
    )
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    return logger
