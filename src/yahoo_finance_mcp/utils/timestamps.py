"""Epoch timestamp formatting."""

from collections.abc import Iterable

import pandas as pd


def _format_iso(ts: pd.Timestamp) -> str:
    # Millisecond precision with a Z suffix: 2024-01-02T14:30:00.000Z
    return ts.strftime("%Y-%m-%dT%H:%M:%S.") + f"{ts.microsecond // 1000:03d}Z"


def epoch_to_iso(epoch: float) -> str:
    """Epoch seconds to a UTC ISO-8601 string."""
    return _format_iso(pd.Timestamp(epoch, unit="s", tz="UTC"))


def epochs_to_iso(epochs: Iterable[float]) -> list[str]:
    """Vectorized epoch_to_iso."""
    index = pd.to_datetime(list(epochs), unit="s", utc=True)
    return [_format_iso(ts) for ts in index]


def epoch_to_date(epoch: float) -> str:
    """Epoch seconds to a UTC YYYY-MM-DD string."""
    return pd.Timestamp(epoch, unit="s", tz="UTC").strftime("%Y-%m-%d")
