"""Access to the sets directory: one ``<name>.json`` file per set."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from jsonsets.errors import SetReadError, SetsListingError
from jsonsets.models import PROD_DIRNAME
from jsonsets.storage.json_store import JSONFile

SET_SUFFIX = ".json"


class SetStore:
    """Lists, reads and writes individual set files."""

    def __init__(self, base_path: Path, logger: Optional[logging.Logger] = None) -> None:
        self._base_path = Path(base_path)
        self._base_path.mkdir(parents=True, exist_ok=True)
        self._log = logger or logging.getLogger(__name__)

    @property
    def base_path(self) -> Path:
        return self._base_path

    def _file(self, name: str) -> JSONFile:
        return JSONFile(self._base_path / f"{name}{SET_SUFFIX}")

    def list_sets(self) -> List[str]:
        """Return set names, sorted; a name already listed is skipped."""
        try:
            entries = sorted(self._base_path.iterdir(), key=lambda entry: entry.name)
        except OSError as exc:
            self._log.error("setsList : unable to read %s - %s", self._base_path, exc)
            raise SetsListingError(f"unable to list sets in {self._base_path}") from exc

        names: List[str] = []
        for entry in entries:
            if entry.name == PROD_DIRNAME or not entry.name.endswith(SET_SUFFIX):
                continue
            if not entry.is_file():
                continue
            name = entry.name[: -len(SET_SUFFIX)]
            if name in names:
                self._log.warning("Skipped file duplicata %s%s", name, SET_SUFFIX)
                continue
            names.append(name)
        return names

    def read(self, name: str) -> Any:
        try:
            return self._file(name).read()
        except (OSError, json.JSONDecodeError) as exc:
            self._log.error("prodCompile : unable to read set %s - %s", name, exc)
            raise SetReadError(f"unable to read set {name}") from exc

    def write(self, name: str, value: Any) -> None:
        self._log.debug("writing set %s", name)
        self._file(name).write(value)

    def exists(self, name: str) -> bool:
        return self._file(name).exists()
