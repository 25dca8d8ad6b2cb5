"""Storage package exports."""
from .json_store import JSONFile, dumps

__all__ = [
    "JSONFile",
    "dumps",
]
