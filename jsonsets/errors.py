"""Exceptions raised by the JSON sets store."""
from __future__ import annotations


class JSONSetsError(RuntimeError):
    """Base class for store failures."""


class ProductionFileMissingError(JSONSetsError):
    """Raised when the compiled production file is required but absent."""


class SetsListingError(JSONSetsError):
    """Raised when the sets directory cannot be enumerated."""


class SetReadError(JSONSetsError):
    """Raised when a set file cannot be read or parsed."""


class SetsReplaceError(JSONSetsError):
    """Raised when flushing working values to set files fails."""


class SequenceTypeError(JSONSetsError, TypeError):
    """Raised when push/splice target something that is not a list."""
