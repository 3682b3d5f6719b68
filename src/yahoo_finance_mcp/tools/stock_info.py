"""Stock info tool."""

from typing import Any

from yahoo_finance_mcp.data.endpoints import STOCK_INFO_MODULES, quote_summary_url
from yahoo_finance_mcp.data.yahoo_client import YahooClient, first_result, yahoo_client
from yahoo_finance_mcp.utils.validators import normalize_ticker


def merge_modules(result: dict[str, Any]) -> dict[str, Any]:
    """Flatten quoteSummary modules into one object; later modules win on key clashes."""
    info: dict[str, Any] = {}
    for value in result.values():
        if value and isinstance(value, dict):
            info.update(value)
    return info


async def stock_info(ticker: str, client: YahooClient | None = None) -> dict[str, Any]:
    """
    Get profile, quote, valuation and calendar data for a ticker.

    Args:
        ticker: Stock ticker symbol
        client: Upstream client (default: process-wide client)

    Returns:
        Single flattened dict merging the summary modules
    """
    symbol = normalize_ticker(ticker)
    client = client or yahoo_client

    data = await client.fetch_json(quote_summary_url(symbol, STOCK_INFO_MODULES), needs_auth=True)
    result = first_result(data, "quoteSummary", symbol)
    return merge_modules(result)
