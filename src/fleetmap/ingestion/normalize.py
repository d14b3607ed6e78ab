"""Normalization helpers.

Centralizes defensive parsing and placeholder handling for vessel payloads.
"""

from __future__ import annotations

import contextlib
import math
from typing import Any

from pydantic import BaseModel

_PLACEHOLDERS = frozenset({"", "--", "NaN", "nan"})


def is_placeholder(value: Any) -> bool:
    """Return True for the API's "not available" markers."""
    if value is None:
        return True
    if isinstance(value, str) and value.strip() in _PLACEHOLDERS:
        return True
    return isinstance(value, float) and math.isnan(value)


def safe_float(value: Any) -> float | None:
    if is_placeholder(value) or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def safe_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        # Exact for ids beyond float precision.
        with contextlib.suppress(ValueError):
            return int(value.strip())
    parsed = safe_float(value)
    if parsed is None:
        return None
    return int(parsed)


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text else None


def mapping_or_none(value: Any) -> Any:
    """Keep dicts and already-built models; anything else means "absent"."""
    if isinstance(value, (dict, BaseModel)):
        return value
    return None
