"""
Root logger setup for the World Wonders API.

Only ``run.py`` and ``create_app`` call ``setup_logging``.  Everything
else logs through ``logging.getLogger(__name__)``: the dataset store
reports what it loaded, the HTTP layer reports each request and every
client error.  The query service stays silent.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Set the root level and, on first use, attach the handlers.

    ``level`` is a level name in any case; unknown names mean
    ``INFO``.  Output goes to stderr, and is copied to ``logfile``
    when one is given (its directory is created if needed).  Later
    calls only change the level, so building several applications in
    one process never duplicates output.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
