"""Historical price tool."""

from typing import Any

import pandas as pd

from yahoo_finance_mcp.data.endpoints import chart_url
from yahoo_finance_mcp.data.yahoo_client import YahooClient, first_result, yahoo_client
from yahoo_finance_mcp.utils.timestamps import epochs_to_iso
from yahoo_finance_mcp.utils.validators import HistoryParams

PRICE_COLUMNS = ["Date", "Open", "High", "Low", "Close", "Volume", "Adj Close"]


def _aligned(values: list[Any] | None, length: int) -> list[Any]:
    """Pad or cut an indicator array to the timestamp count."""
    values = values or []
    return [values[i] if i < len(values) else None for i in range(length)]


def chart_to_rows(result: dict[str, Any]) -> list[dict[str, Any]]:
    """
    Convert one chart result into OHLCV rows.

    Missing values stay null. ``Adj Close`` falls back to ``Close`` when the
    adjusted series is absent or has a gap.
    """
    timestamps = result.get("timestamp") or []
    indicators = result.get("indicators") or {}
    quote = (indicators.get("quote") or [{}])[0] or {}
    adjclose = ((indicators.get("adjclose") or [{}])[0] or {}).get("adjclose")

    n = len(timestamps)
    close = _aligned(quote.get("close"), n)
    adjusted = [
        adj if adj is not None else c
        for adj, c in zip(_aligned(adjclose, n), close)
    ]

    df = pd.DataFrame(
        {
            "Date": epochs_to_iso(timestamps),
            "Open": _aligned(quote.get("open"), n),
            "High": _aligned(quote.get("high"), n),
            "Low": _aligned(quote.get("low"), n),
            "Close": close,
            "Volume": _aligned(quote.get("volume"), n),
            "Adj Close": adjusted,
        },
        columns=PRICE_COLUMNS,
        dtype=object,
    )
    return df.to_dict("records")


async def historical_stock_prices(
    ticker: str,
    period: str = "1mo",
    interval: str = "1d",
    client: YahooClient | None = None,
) -> list[dict[str, Any]]:
    """
    Fetch OHLCV history for a ticker.

    Args:
        ticker: Stock ticker symbol
        period: Range (1d, 5d, 1mo, 3mo, 6mo, 1y, 2y, 5y, 10y, ytd, max)
        interval: Bar interval (1m ... 3mo)
        client: Upstream client (default: process-wide client)

    Returns:
        List of {Date, Open, High, Low, Close, Volume, Adj Close} rows

    Raises:
        InvalidParameterError: If period or interval is not allowed
        UpstreamSemanticError: If the chart envelope carries an error
        TickerNotFoundError: If the chart result is empty
    """
    params = HistoryParams(ticker=ticker, period=period, interval=interval)
    client = client or yahoo_client

    data = await client.fetch_json(chart_url(params.ticker, **params.to_query()))
    result = first_result(data, "chart", params.ticker)
    return chart_to_rows(result)
