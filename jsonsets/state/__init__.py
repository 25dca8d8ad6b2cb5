"""Working-copy state exports."""
from .equality import MISSING, canonical, same_entry, same_value
from .working import (
    GLOBAL_REGISTRY,
    GlobalWorkingStore,
    InnerWorkingStore,
    WorkingRegistry,
    WorkingStore,
    working_store_for,
)

__all__ = [
    "MISSING",
    "canonical",
    "same_entry",
    "same_value",
    "GLOBAL_REGISTRY",
    "GlobalWorkingStore",
    "InnerWorkingStore",
    "WorkingRegistry",
    "WorkingStore",
    "working_store_for",
]
