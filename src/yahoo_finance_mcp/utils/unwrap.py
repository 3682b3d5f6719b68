"""Structural transforms over JSON-like values.

The quoteSummary endpoint wraps most scalars as ``{"raw": 123, "fmt": "123"}``
(sometimes with ``longFmt``). These helpers reduce such values to their raw
scalar without knowing the shape of the surrounding document.
"""

import math
from typing import Any


def is_raw_wrapper(value: Any) -> bool:
    """True for a ``{"raw": ...}`` formatted-value wrapper."""
    return isinstance(value, dict) and "raw" in value


def unwrap_raw(value: Any) -> Any:
    """
    Recursively replace every ``{"raw": x, ...}`` wrapper with ``x``.

    Mappings and sequences are rebuilt; other scalars pass through. Applying
    it twice gives the same result as applying it once.
    """
    if is_raw_wrapper(value):
        return value["raw"]
    if isinstance(value, dict):
        return {k: unwrap_raw(v) for k, v in value.items()}
    if isinstance(value, list):
        return [unwrap_raw(item) for item in value]
    return value


def flatten_statement(statement: dict[str, Any]) -> dict[str, Any]:
    """
    Flatten one financial statement entry.

    Top-level ``{"raw": x}`` wrappers become ``x``. The ``endDate`` wrapper is
    renamed to ``date`` and carries its formatted value (e.g. ``"2024-09-28"``).
    """
    flat: dict[str, Any] = {}
    for key, value in statement.items():
        if key == "endDate" and isinstance(value, dict) and "fmt" in value:
            flat["date"] = value["fmt"]
            continue
        flat[key] = value["raw"] if is_raw_wrapper(value) else value
    return flat


def _is_nan_or_inf(x: Any) -> bool:
    """Check if value is NaN or inf."""
    try:
        return math.isnan(x) or math.isinf(x)
    except (TypeError, ValueError, OverflowError):
        return False


def sanitize_nan_inf(obj: Any) -> Any:
    """Recursively replace NaN, inf and -inf with None so JSON stays strict."""
    if isinstance(obj, dict):
        return {k: sanitize_nan_inf(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [sanitize_nan_inf(item) for item in obj]
    if isinstance(obj, bool):
        return obj
    if _is_nan_or_inf(obj):
        return None
    return obj
