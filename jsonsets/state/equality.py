"""Value equality used to decide whether a set changed.

Two values are equal when their canonical JSON serializations match. Key
order is significant: ``{"a": 1, "b": 2}`` and ``{"b": 2, "a": 1}`` differ.
"""
from __future__ import annotations

import json
from typing import Any, Mapping, Optional

MISSING: Any = object()


def canonical(value: Any) -> Optional[str]:
    if value is MISSING:
        return None
    return json.dumps(value, ensure_ascii=False)


def same_value(left: Any, right: Any) -> bool:
    return canonical(left) == canonical(right)


def same_entry(left: Mapping[str, Any], right: Mapping[str, Any], key: str) -> bool:
    """Compare ``key`` in two mappings; an absent key differs from ``null``."""
    return same_value(left.get(key, MISSING), right.get(key, MISSING))
