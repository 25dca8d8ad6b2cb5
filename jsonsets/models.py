"""Pydantic data contracts for the JSON sets store."""
from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_NAME = "dbj"
SETS_DIRNAME = ".sets"
PROD_DIRNAME = ".prod"
CONFIG_FILENAME = "config.txt"
LOG_FILENAME = "jsonsets.log"


class PointerMode(str, Enum):
    """Where the working copy of a database lives."""

    INNER = "inner_var"
    GLOBAL = "global_var"


class StoreConfig(BaseModel):
    """Settings read from ``config.txt``."""

    pointer: PointerMode = Field(
        PointerMode.INNER, description="Binding that holds the working copy"
    )
    prodname: str = Field(DEFAULT_NAME, description="Database name, also the production file stem")


class StoreLayout(BaseModel):
    """Filesystem locations derived from an install root and a database name."""

    root: Path
    name: str = DEFAULT_NAME

    @property
    def sets_dir(self) -> Path:
        return self.root / SETS_DIRNAME

    @property
    def prod_dir(self) -> Path:
        return self.root / PROD_DIRNAME

    @property
    def prod_file(self) -> Path:
        return self.prod_dir / f"{self.name}.json"

    @property
    def config_file(self) -> Path:
        return self.root / CONFIG_FILENAME

    @property
    def log_file(self) -> Path:
        return self.root / LOG_FILENAME
