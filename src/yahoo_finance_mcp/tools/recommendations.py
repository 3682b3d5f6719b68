"""Analyst recommendations tool."""

import time
from typing import Any

from yahoo_finance_mcp.data.endpoints import quote_summary_url
from yahoo_finance_mcp.data.yahoo_client import YahooClient, first_result, yahoo_client
from yahoo_finance_mcp.errors import InvalidParameterError
from yahoo_finance_mcp.utils.timestamps import epoch_to_iso
from yahoo_finance_mcp.utils.validators import normalize_ticker

RECOMMENDATION_MODULES: dict[str, str] = {
    "recommendations": "recommendationTrend",
    "upgrades_downgrades": "upgradeDowngradeHistory",
}

# A "month" of lookback is a fixed 30 days
SECONDS_PER_MONTH = 30 * 24 * 60 * 60


def latest_grade_per_firm(
    history: list[dict[str, Any]],
    months_back: float,
    now: float,
) -> list[dict[str, Any]]:
    """
    Filter upgrade/downgrade history to the lookback window.

    Entries are sorted newest first and only the most recent action per firm
    is kept. Each kept entry gains an ISO ``gradeDate``.
    """
    cutoff = int(now - months_back * SECONDS_PER_MONTH)
    recent = [
        item for item in history
        if item.get("epochGradeDate") and item["epochGradeDate"] >= cutoff
    ]
    recent.sort(key=lambda item: item["epochGradeDate"], reverse=True)

    seen_firms: set[Any] = set()
    latest: list[dict[str, Any]] = []
    for item in recent:
        firm = item.get("firm")
        if firm in seen_firms:
            continue
        seen_firms.add(firm)
        latest.append({**item, "gradeDate": epoch_to_iso(item["epochGradeDate"])})
    return latest


async def analyst_recommendations(
    ticker: str,
    recommendation_type: str,
    months_back: float = 12,
    client: YahooClient | None = None,
    now: float | None = None,
) -> list[dict[str, Any]]:
    """
    Get analyst recommendation trends or upgrade/downgrade history.

    Args:
        ticker: Stock ticker symbol
        recommendation_type: "recommendations" or "upgrades_downgrades"
        months_back: Lookback window for upgrades_downgrades (default: 12)
        client: Upstream client (default: process-wide client)
        now: Reference epoch seconds (default: current time)

    Returns:
        Trend rows, or the latest upgrade/downgrade per firm, newest first
    """
    if recommendation_type not in RECOMMENDATION_MODULES:
        raise InvalidParameterError(f"Invalid recommendation type: {recommendation_type}")

    symbol = normalize_ticker(ticker)
    client = client or yahoo_client
    module = RECOMMENDATION_MODULES[recommendation_type]

    data = await client.fetch_json(quote_summary_url(symbol, module), needs_auth=True)
    result = first_result(data, "quoteSummary", symbol)

    if recommendation_type == "recommendations":
        return (result.get(module) or {}).get("trend") or []

    history = (result.get(module) or {}).get("history") or []
    return latest_grade_per_firm(history, months_back, time.time() if now is None else now)
