import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "SCRATCHDAMAGE_LOG_LEVEL"


def configure_logging(level: Optional[int] = None) -> None:
    """Configure the root logger with a single stdout handler.

    When ``level`` is omitted, SCRATCHDAMAGE_LOG_LEVEL is respected if present.
    """
    if level is None:
        level = logging.INFO
        level_name = os.getenv(LOG_LEVEL_ENV)
        if level_name:
            candidate = getattr(logging, level_name.upper(), None)
            if isinstance(candidate, int):
                level = candidate

    handler = logging.StreamHandler(stream=sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplicates in repeated test runs
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
