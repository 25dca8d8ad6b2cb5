"""Reads ``config.txt`` into a :class:`StoreConfig`."""
from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Optional

from jsonsets.models import CONFIG_FILENAME, PointerMode, StoreConfig

_POINTER_RE = re.compile(r"pointer=([a-zA-Z_]*)")
_PRODNAME_RE = re.compile(r"prodname=([a-zA-Z0-9_]*)")


class StoreConfigLoader:
    def __init__(self, base_path: Optional[Path] = None) -> None:
        self._base_path = Path(base_path) if base_path is not None else Path.cwd()

    @property
    def path(self) -> Path:
        return self._base_path / CONFIG_FILENAME

    def load(self) -> StoreConfig:
        if not self.path.is_file():
            return StoreConfig()
        return parse_config(self.path.read_text(encoding="utf-8"))


def parse_config(text: str) -> StoreConfig:
    """Pick ``pointer=`` and ``prodname=`` out of free-form text.

    Unknown pointer values and empty names fall back to the defaults.
    """
    fields: Dict[str, Any] = {}
    pointer = _POINTER_RE.search(text)
    if pointer and pointer.group(1) in {mode.value for mode in PointerMode}:
        fields["pointer"] = PointerMode(pointer.group(1))
    prodname = _PRODNAME_RE.search(text)
    if prodname and prodname.group(1):
        fields["prodname"] = prodname.group(1)
    return StoreConfig(**fields)


def load_store_config(base_path: Optional[Path] = None, name: Optional[str] = None) -> StoreConfig:
    config = StoreConfigLoader(base_path=base_path).load()
    if name is not None:
        config = config.model_copy(update={"prodname": name})
    return config
