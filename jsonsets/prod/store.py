"""The compiled production file holding the whole aggregate document."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from jsonsets.errors import JSONSetsError, ProductionFileMissingError
from jsonsets.storage.json_store import JSONFile

MISSING_PROD_MESSAGE = "unable to get file prod"


class ProductionFile:
    def __init__(self, path: Path, logger: Optional[logging.Logger] = None) -> None:
        self._file = JSONFile(Path(path))
        self._file.path.parent.mkdir(parents=True, exist_ok=True)
        self._log = logger or logging.getLogger(__name__)

    @property
    def path(self) -> Path:
        return self._file.path

    def exists(self) -> bool:
        return self._file.exists()

    def read(self) -> Dict[str, Any]:
        if not self.exists():
            self._log.error("prodLoad : %s", MISSING_PROD_MESSAGE)
            raise ProductionFileMissingError(f"prodLoad : {MISSING_PROD_MESSAGE}")
        try:
            document = self._file.read()
        except (OSError, json.JSONDecodeError) as exc:
            self._log.error("prodLoad : unable to parse %s - %s", self.path, exc)
            raise JSONSetsError(f"prodLoad : unable to parse {self.path}") from exc
        if not isinstance(document, dict):
            self._log.error("prodLoad : %s does not hold an object", self.path)
            raise JSONSetsError(f"prodLoad : {self.path} does not hold an object")
        return document

    def write(self, document: Dict[str, Any], *, create: bool = False) -> None:
        """Persist ``document``; the file must already exist unless ``create``."""
        if not create and not self.exists():
            self._log.error("prodCompile : %s", MISSING_PROD_MESSAGE)
            raise ProductionFileMissingError(f"prodCompile : {MISSING_PROD_MESSAGE}")
        self._file.write(document)
