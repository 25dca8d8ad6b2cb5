"""Holders for the live working copy of a database.

A database either owns its working copy (``inner_var``) or publishes it into
a registry shared across the process under the database name
(``global_var``). The choice is made once, at construction.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, MutableMapping, Optional

from jsonsets.models import PointerMode


class WorkingRegistry(MutableMapping[str, Dict[str, Any]]):
    """Process-wide bindings of database name to working copy."""

    def __init__(self) -> None:
        self._bindings: Dict[str, Dict[str, Any]] = {}

    def __getitem__(self, name: str) -> Dict[str, Any]:
        return self._bindings[name]

    def __setitem__(self, name: str, document: Dict[str, Any]) -> None:
        self._bindings[name] = document

    def __delitem__(self, name: str) -> None:
        del self._bindings[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)


GLOBAL_REGISTRY = WorkingRegistry()


class WorkingStore(ABC):
    mode: PointerMode

    @abstractmethod
    def get(self) -> Dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    def put(self, document: Dict[str, Any]) -> None:
        raise NotImplementedError


class InnerWorkingStore(WorkingStore):
    mode = PointerMode.INNER

    def __init__(self) -> None:
        self._document: Dict[str, Any] = {}

    def get(self) -> Dict[str, Any]:
        return self._document

    def put(self, document: Dict[str, Any]) -> None:
        self._document = document


class GlobalWorkingStore(WorkingStore):
    mode = PointerMode.GLOBAL

    def __init__(self, name: str, registry: WorkingRegistry) -> None:
        self._name = name
        self._registry = registry
        self._registry.setdefault(name, {})

    @property
    def name(self) -> str:
        return self._name

    def get(self) -> Dict[str, Any]:
        return self._registry.setdefault(self._name, {})

    def put(self, document: Dict[str, Any]) -> None:
        self._registry[self._name] = document


def working_store_for(
    mode: PointerMode, name: str, registry: Optional[WorkingRegistry] = None
) -> WorkingStore:
    if mode is PointerMode.GLOBAL:
        return GlobalWorkingStore(name, registry if registry is not None else GLOBAL_REGISTRY)
    return InnerWorkingStore()
