"""Dotted-path resolution against a JSON-like tree.

``resolve("a.b.c", root)`` walks ``root["a"]["b"]``, creating empty mappings
for missing steps, and returns that container together with the unresolved
last segment ``"c"``. Callers decide whether to read, write or remove it.
"""
from __future__ import annotations

import logging
from typing import Any, List, NamedTuple, Optional

logger = logging.getLogger(__name__)

SEPARATOR = "."
ROOT_PATHS = frozenset({".", ""})


class ResolvedPath(NamedTuple):
    container: Any
    key: Optional[str]

    @property
    def is_root(self) -> bool:
        return self.key is None

    def read(self) -> Any:
        if self.key is None:
            return self.container
        if isinstance(self.container, list):
            index = _index(self.key)
            if index is None or index >= len(self.container):
                return None
            return self.container[index]
        return self.container.get(self.key)

    def write(self, value: Any) -> None:
        if self.key is None:
            raise ValueError("cannot write to the root container through a path")
        if isinstance(self.container, list):
            index = _require_index(self.key)
            _pad(self.container, index)
            self.container[index] = value
            return
        self.container[self.key] = value

    def remove(self) -> None:
        if self.key is None:
            raise ValueError("cannot remove the root container through a path")
        if isinstance(self.container, list):
            index = _index(self.key)
            if index is not None and index < len(self.container):
                del self.container[index]
            return
        self.container.pop(self.key, None)


def split_path(path: str) -> List[str]:
    if path in ROOT_PATHS:
        return []
    if path.startswith(SEPARATOR):
        path = path[1:]
    return path.split(SEPARATOR)


def resolve(
    path: Optional[str], root: Any, log: Optional[logging.Logger] = None
) -> Optional[ResolvedPath]:
    """Resolve ``path`` against ``root``; ``None`` means the path is unusable."""
    log = log or logger
    if path is None:
        log.error("resolve : missing path")
        return None
    segments = split_path(path)
    if not segments:
        return ResolvedPath(root, None)

    node = root
    for step in segments[:-1]:
        node = _descend(node, step)
        if node is None:
            log.error("resolve : unable to descend into %r for path %r", step, path)
            return None
    return ResolvedPath(node, segments[-1])


def _descend(node: Any, step: str) -> Any:
    if isinstance(node, dict):
        child = node.get(step)
        if child is None:
            child = node[step] = {}
    elif isinstance(node, list):
        index = _index(step)
        if index is None:
            return None
        _pad(node, index)
        child = node[index]
        if child is None:
            child = node[index] = {}
    else:
        return None
    if not isinstance(child, (dict, list)):
        return None
    return child


def _index(key: str) -> Optional[int]:
    return int(key) if key.isdigit() else None


def _require_index(key: str) -> int:
    index = _index(key)
    if index is None:
        raise KeyError(f"list index must be a non-negative integer, got {key!r}")
    return index


def _pad(items: list, index: int) -> None:
    if index >= len(items):
        items.extend([None] * (index + 1 - len(items)))
