"""
Logging setup.

Configures the root logger with a single console handler. Called once
from main.py before routers are included; repeated calls are no-ops so
the test client can import the app many times.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger if none exists."""
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
