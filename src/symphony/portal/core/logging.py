# symphony/portal/core/logging.py
"""
Root logger setup: JSON lines for deployments, plain text for local runs.
"""
from __future__ import annotations

import logging
import sys
from pythonjsonlogger import jsonlogger


def configure_logging(level: str = "INFO", *, json_format: bool = True) -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        formatter: logging.Formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s  %(message)s"
        )
    handler.setFormatter(formatter)

    # Avoid duplicate handlers in reload
    root.handlers = [handler]
