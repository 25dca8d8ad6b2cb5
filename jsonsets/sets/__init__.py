"""Sets directory exports."""
from .store import SetStore

__all__ = [
    "SetStore",
]
