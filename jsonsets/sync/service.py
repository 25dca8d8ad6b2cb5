"""Reconciles the sets directory with the aggregate document.

``compile`` folds set files into the aggregate and persists the production
file. ``replace`` flushes working values that differ from the aggregate back
into their set files; it never deletes a set file. Both skip sets whose
values compare equal so unchanged files are never rewritten.
"""
from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Optional

from jsonsets.prod.store import ProductionFile
from jsonsets.sets.store import SetStore
from jsonsets.state.equality import MISSING, same_entry, same_value


class SetSynchronizer:
    def __init__(
        self,
        sets: SetStore,
        production: ProductionFile,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._sets = sets
        self._production = production
        self._log = logger or logging.getLogger(__name__)

    @property
    def sets(self) -> SetStore:
        return self._sets

    @property
    def production(self) -> ProductionFile:
        return self._production

    def list_sets(self) -> List[str]:
        return self._sets.list_sets()

    def compile(
        self,
        original: Dict[str, Any],
        override_sets: bool = True,
        names: Optional[List[str]] = None,
    ) -> List[str]:
        """Refresh ``original`` from set files (when asked) and write the production file.

        ``names`` is a listing already taken by the caller. Returns the names
        whose value was taken from disk.
        """
        changed: List[str] = []
        if override_sets:
            if names is None:
                names = self._sets.list_sets()
            for name in names:
                value = self._sets.read(name)
                if same_value(value, original.get(name, MISSING)):
                    continue
                original[name] = value
                changed.append(name)
        self._production.write(original, create=override_sets)
        self._log.debug("compiled %d sets into %s", len(original), self._production.path)
        return changed

    def replace(self, original: Dict[str, Any], working: Dict[str, Any]) -> List[str]:
        """Write differing working values to set files and adopt them into ``original``.

        Sets dropped from ``working`` leave ``original`` but keep their file.
        Returns the names written.
        """
        written: List[str] = []
        for name in list(working):
            if same_entry(original, working, name):
                continue
            if not _valid_set_name(name):
                self._log.warning("setsReplace : skipped invalid set name %r", name)
                continue
            self._sets.write(name, working[name])
            original[name] = copy.deepcopy(working[name])
            written.append(name)
        for name in [name for name in original if name not in working]:
            del original[name]
        return written


def _valid_set_name(name: str) -> bool:
    return bool(name) and "/" not in name and "\\" not in name and name not in {".", ".."}
