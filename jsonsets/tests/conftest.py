"""Shared fixtures for the jsonsets tests."""
import json
import logging
from pathlib import Path
from typing import Any, Callable

import pytest

from jsonsets.logs import PACKAGE_LOGGER, SeededFileHandler


@pytest.fixture
def write_set() -> Callable[[Path, str, Any], Path]:
    """Write a pretty-printed set file the way the store does."""

    def _write(sets_dir: Path, name: str, value: Any) -> Path:
        sets_dir.mkdir(parents=True, exist_ok=True)
        path = sets_dir / f"{name}.json"
        path.write_text(json.dumps(value, indent=4, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def store_root(tmp_path: Path, write_set) -> Path:
    """Install root with two sets and no production file yet."""
    root = tmp_path / "store"
    sets_dir = root / ".sets"
    write_set(sets_dir, "fruits", {"list": ["a", "b"]})
    write_set(sets_dir, "settings", {"theme": "dark", "size": 12})
    return root


@pytest.fixture(autouse=True)
def detach_file_logs():
    """Close log handlers opened by a test so tmp files are released."""
    yield
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if not name.startswith(PACKAGE_LOGGER) or not isinstance(logger, logging.Logger):
            continue
        for handler in list(logger.handlers):
            if isinstance(handler, SeededFileHandler):
                logger.removeHandler(handler)
                handler.close()
