"""Production file exports."""
from .store import MISSING_PROD_MESSAGE, ProductionFile

__all__ = [
    "MISSING_PROD_MESSAGE",
    "ProductionFile",
]
