"""Flat-file error log for the store.

Each install root gets its own logger under ``jsonsets.log.<digest>``; every
warning or error emitted through it is appended to that root's
``jsonsets.log`` as ``\\n<message>``. The file is seeded with ``Hello !`` the
first time it is created.
"""
from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path

PACKAGE_LOGGER = "jsonsets"
SEED_CONTENT = "Hello !"


class SeededFileHandler(logging.FileHandler):
    """Append-only handler that writes the seed line when the file is new."""

    terminator = ""

    def __init__(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        if not path.exists():
            path.write_text(SEED_CONTENT, encoding="utf-8")
        super().__init__(path, mode="a", encoding="utf-8")
        self.setFormatter(logging.Formatter("\n%(message)s"))
        self.setLevel(logging.WARNING)


def _logger_for(path: str) -> logging.Logger:
    digest = hashlib.sha1(path.encode("utf-8")).hexdigest()[:12]
    return logging.getLogger(f"{PACKAGE_LOGGER}.log.{digest}")


def file_logger(path: Path) -> logging.Logger:
    """Return the logger writing to ``path``, attaching its handler once."""
    path = os.path.abspath(path)
    logger = _logger_for(path)
    if not any(isinstance(handler, SeededFileHandler) for handler in logger.handlers):
        logger.addHandler(SeededFileHandler(Path(path)))
    return logger


def detach_file_log(path: Path) -> None:
    """Close and remove the handler writing to ``path``, if any."""
    logger = _logger_for(os.path.abspath(path))
    for handler in list(logger.handlers):
        if isinstance(handler, SeededFileHandler):
            logger.removeHandler(handler)
            handler.close()
