"""Utility modules."""

from yahoo_finance_mcp.utils.render import render_error, render_payload, run_tool
from yahoo_finance_mcp.utils.sanitize import clean_field
from yahoo_finance_mcp.utils.timestamps import epoch_to_date, epoch_to_iso, epochs_to_iso
from yahoo_finance_mcp.utils.unwrap import flatten_statement, sanitize_nan_inf, unwrap_raw
from yahoo_finance_mcp.utils.validators import HistoryParams, normalize_ticker, parse_expiration_date

__all__ = [
    "render_error",
    "render_payload",
    "run_tool",
    "clean_field",
    "epoch_to_date",
    "epoch_to_iso",
    "epochs_to_iso",
    "flatten_statement",
    "sanitize_nan_inf",
    "unwrap_raw",
    "HistoryParams",
    "normalize_ticker",
    "parse_expiration_date",
]
