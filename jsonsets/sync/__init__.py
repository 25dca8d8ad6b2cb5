"""Set synchronization exports."""
from .service import SetSynchronizer

__all__ = [
    "SetSynchronizer",
]
