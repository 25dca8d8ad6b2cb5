"""Named JSON database backed by a sets directory and a compiled production file.

Layout under the install root::

    config.txt            # optional: pointer=<inner_var|global_var>, prodname=<name>
    jsonsets.log          # append-only error log
    .sets/<set>.json      # one file per set
    .prod/<name>.json     # compiled aggregate of every set

The aggregate ("original") is what was last compiled; the working copy is
what get/set/delete/push/splice act on. :meth:`Database.save` flushes changed
sets to disk, recompiles the production file and reloads it.
"""
from __future__ import annotations

import asyncio
import copy
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from jsonsets.config.loader import load_store_config
from jsonsets.errors import JSONSetsError, SequenceTypeError, SetsReplaceError
from jsonsets.logs import file_logger
from jsonsets.models import PointerMode, StoreConfig, StoreLayout
from jsonsets.paths.resolver import ResolvedPath, resolve
from jsonsets.prod.store import ProductionFile
from jsonsets.sets.store import SetStore
from jsonsets.state.working import WorkingRegistry, WorkingStore, working_store_for
from jsonsets.sync.service import SetSynchronizer

_NO_VALUE: Any = object()


class Database:
    """In-memory JSON document kept in sync with per-set files on disk."""

    def __init__(
        self,
        name: Optional[str] = None,
        root: Optional[Path] = None,
        *,
        registry: Optional[WorkingRegistry] = None,
        config: Optional[StoreConfig] = None,
    ) -> None:
        root = Path(root) if root is not None else Path.cwd()
        if config is None:
            config = load_store_config(root, name)
        elif name is not None:
            config = config.model_copy(update={"prodname": name})
        self._config = config
        self._layout = StoreLayout(root=root, name=config.prodname)
        self._log = file_logger(self._layout.log_file)

        self._sync = SetSynchronizer(
            SetStore(self._layout.sets_dir, self._log),
            ProductionFile(self._layout.prod_file, self._log),
            self._log,
        )
        self._working: WorkingStore = working_store_for(config.pointer, config.prodname, registry)
        self.original: Dict[str, Any] = {}
        self.sets: List[str] = []
        self._first()

    def __repr__(self) -> str:
        return f"Database(name={self.name!r}, pointer={self.pointer_mode.value!r})"

    @property
    def name(self) -> str:
        return self._config.prodname

    @property
    def pointer_mode(self) -> PointerMode:
        return self._working.mode

    @property
    def layout(self) -> StoreLayout:
        return self._layout

    @property
    def logger(self) -> logging.Logger:
        return self._log

    @property
    def synchronizer(self) -> SetSynchronizer:
        return self._sync

    @property
    def working(self) -> Dict[str, Any]:
        return self._working.get()

    def get_pointer(self) -> Dict[str, Any]:
        """Return the working copy every mutation resolves against."""
        return self._working.get()

    # Pipeline -------------------------------------------------------------

    def _first(self) -> None:
        if not self._sync.production.exists():
            self._compile(True)
        self._load()

    def _compile(self, override_sets: bool, names: Optional[List[str]] = None) -> None:
        changed = self._sync.compile(self.original, override_sets, names)
        working = self._working.get()
        for set_name in changed:
            working[set_name] = copy.deepcopy(self.original[set_name])

    def _load(self) -> PointerMode:
        self.original = self._sync.production.read()
        self._working.put(copy.deepcopy(self.original))
        self._log.debug("loaded %s (%d sets) as %s", self.name, len(self.original), self.pointer_mode.value)
        return self.pointer_mode

    async def sets_list(self) -> List[str]:
        self.sets = await asyncio.to_thread(self._sync.list_sets)
        return self.sets

    async def sets_replace(self) -> List[str]:
        return self._sync.replace(self.original, self._working.get())

    async def prod_compile(self, override_sets: bool = True) -> None:
        names = await self.sets_list() if override_sets else None
        self._compile(override_sets, names)

    async def prod_load(self) -> PointerMode:
        return self._load()

    async def save(self) -> None:
        """Flush changed sets, recompile the production file and reload it."""
        try:
            written = await self.sets_replace()
        except (JSONSetsError, OSError, TypeError, ValueError) as exc:
            self._log.error("Unable to replace %s sets - %s", self.name, exc)
            raise SetsReplaceError(f"unable to replace {self.name} sets") from exc
        self._log.debug("saved %s, sets written: %s", self.name, written)
        await self.prod_compile(False)
        await self.prod_load()

    async def manu(self) -> bool:
        """Recompile from set files edited outside the API; errors are only logged."""
        try:
            await self.prod_compile(True)
            await self.prod_load()
        except (JSONSetsError, OSError) as exc:
            self._log.error("manu : unable to recompile %s - %s", self.name, exc)
            return False
        return True

    # Mutation API ---------------------------------------------------------

    def _resolve(self, path: Optional[str]) -> Optional[ResolvedPath]:
        return resolve(path, self.get_pointer(), self._log)

    def get(self, path: Optional[str] = ".") -> Any:
        target = self._resolve(path)
        if target is None:
            return None
        return target.read()

    def set(self, path: Optional[str] = ".", value: Any = None) -> None:
        target = self._resolve(path)
        if target is None:
            return
        if target.is_root:
            if not isinstance(value, dict):
                self._log.error("set : root value must be an object, got %s", type(value).__name__)
                return
            self._working.put(value)
            return
        target.write(value)

    def delete(self, path: Optional[str] = ".") -> None:
        target = self._resolve(path)
        if target is None:
            return
        if target.is_root:
            self._log.error("del : cannot delete the root of %s", self.name)
            return
        target.remove()

    def push(self, path: Optional[str], value: Any = None) -> None:
        """Append ``value`` to the list at ``path``; a list value is concatenated."""
        items = self._sequence(path, "push")
        if items is None:
            return
        if isinstance(value, list):
            items.extend(value)
        else:
            items.append(value)

    def splice(
        self,
        path: Optional[str],
        index: int = 0,
        remove_count: int = 0,
        value: Any = _NO_VALUE,
    ) -> None:
        """Remove ``remove_count`` items at ``index`` and insert ``value`` there.

        A list value is inserted element by element at consecutive positions;
        the removal happens once, with the first insertion.
        """
        items = self._sequence(path, "splice")
        if items is None:
            return
        start = _clamp(index, len(items))
        stop = start + max(remove_count, 0)
        if value is _NO_VALUE:
            del items[start:stop]
        elif isinstance(value, list):
            if value:
                items[start:stop] = value
        else:
            items[start:stop] = [value]

    def _sequence(self, path: Optional[str], operation: str) -> Optional[List[Any]]:
        """Return the list at ``path``; ``None`` only when no path was given."""
        if path is None:
            self._log.error("%s : missing path", operation)
            return None
        target = self._resolve(path)
        items = target.read() if target is not None else None
        if not isinstance(items, list):
            kind = "nothing" if items is None else type(items).__name__
            self._log.error("%s : %r holds %s, not a list", operation, path, kind)
            raise SequenceTypeError(f"{operation} : {path!r} holds {kind}, not a list")
        return items


def _clamp(index: int, length: int) -> int:
    if index < 0:
        return max(length + index, 0)
    return min(index, length)
