"""Pretty-printed JSON file primitive shared by the sets and production stores."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

INDENT = 4


class JSONFile:
    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def read(self) -> Any:
        return json.loads(self._path.read_text(encoding="utf-8"))

    def write(self, data: Any) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(dumps(data), encoding="utf-8")


def dumps(data: Any) -> str:
    return json.dumps(data, indent=INDENT, ensure_ascii=False)
