"""Embedded JSON document store built from per-set files."""
from .database import Database
from .errors import (
    JSONSetsError,
    ProductionFileMissingError,
    SequenceTypeError,
    SetReadError,
    SetsListingError,
    SetsReplaceError,
)
from .models import PointerMode, StoreConfig, StoreLayout
from .state.working import GLOBAL_REGISTRY, WorkingRegistry

__all__ = [
    "Database",
    "JSONSetsError",
    "ProductionFileMissingError",
    "SequenceTypeError",
    "SetReadError",
    "SetsListingError",
    "SetsReplaceError",
    "PointerMode",
    "StoreConfig",
    "StoreLayout",
    "GLOBAL_REGISTRY",
    "WorkingRegistry",
]
