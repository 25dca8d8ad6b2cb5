"""Path resolution exports."""
from .resolver import ResolvedPath, resolve, split_path

__all__ = [
    "ResolvedPath",
    "resolve",
    "split_path",
]
