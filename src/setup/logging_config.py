from __future__ import annotations

import logging
import sys


def setup_logging(level: str | int = logging.INFO) -> None:
    """
    Configure the root logger with a single stderr handler.

    Call this once at process start, before the first log record.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates on reload.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(fmt)
    root.addHandler(stream)

    logging.captureWarnings(True)
