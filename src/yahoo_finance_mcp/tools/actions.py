"""Corporate actions (dividends and splits) tool."""

from typing import Any

import pandas as pd

from yahoo_finance_mcp.data.endpoints import chart_url
from yahoo_finance_mcp.data.yahoo_client import YahooClient, first_result, yahoo_client
from yahoo_finance_mcp.utils.timestamps import epochs_to_iso
from yahoo_finance_mcp.utils.validators import normalize_ticker


def _split_ratio(split: dict[str, Any]) -> float | None:
    numerator = split.get("numerator")
    denominator = split.get("denominator")
    if numerator is None or not denominator:
        return None
    return numerator / denominator


def events_to_actions(events: dict[str, Any]) -> list[dict[str, Any]]:
    """
    Merge dividend and split events into one list sorted ascending by date.

    Dividends report ``Stock Splits`` as 0 and splits report ``Dividends``
    as 0. Events on the same date keep dividends before splits.
    """
    rows: list[dict[str, Any]] = []
    for div in (events.get("dividends") or {}).values():
        rows.append({"epoch": div.get("date"), "Dividends": div.get("amount"), "Stock Splits": 0})
    for split in (events.get("splits") or {}).values():
        rows.append({"epoch": split.get("date"), "Dividends": 0, "Stock Splits": _split_ratio(split)})

    rows = [row for row in rows if row["epoch"] is not None]
    if not rows:
        return []

    df = pd.DataFrame(rows, dtype=object)
    df["epoch"] = df["epoch"].astype("float64")
    df = df.sort_values("epoch", kind="mergesort")
    df.insert(0, "Date", epochs_to_iso(df["epoch"]))
    return df.drop(columns="epoch").to_dict("records")


async def stock_actions(ticker: str, client: YahooClient | None = None) -> list[dict[str, Any]]:
    """
    Get the full dividend and split history for a ticker.

    Args:
        ticker: Stock ticker symbol
        client: Upstream client (default: process-wide client)

    Returns:
        List of {Date, Dividends, Stock Splits} sorted ascending by date
    """
    symbol = normalize_ticker(ticker)
    client = client or yahoo_client

    url = chart_url(symbol, range="max", interval="1d", events="div,split")
    data = await client.fetch_json(url)
    result = first_result(data, "chart", symbol)
    return events_to_actions(result.get("events") or {})
