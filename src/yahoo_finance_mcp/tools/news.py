"""Stock news tool."""

from typing import Any

from yahoo_finance_mcp.data.endpoints import search_url
from yahoo_finance_mcp.data.yahoo_client import YahooClient, yahoo_client
from yahoo_finance_mcp.utils.sanitize import clean_field
from yahoo_finance_mcp.utils.timestamps import epoch_to_iso
from yahoo_finance_mcp.utils.validators import normalize_ticker

NEWS_COUNT = 10


def format_article(item: dict[str, Any]) -> str:
    """Render one search news item as a Title/Publisher/Published/URL block."""
    published = item.get("providerPublishTime")
    return "\n".join(
        [
            f"Title: {clean_field(item.get('title'))}",
            f"Publisher: {clean_field(item.get('publisher'))}",
            f"Published: {epoch_to_iso(published) if published is not None else ''}",
            f"URL: {clean_field(item.get('link'))}",
        ]
    )


async def yahoo_finance_news(ticker: str, client: YahooClient | None = None) -> str:
    """
    Get the latest news headlines for a ticker.

    Args:
        ticker: Stock ticker symbol
        client: Upstream client (default: process-wide client)

    Returns:
        Blank-line separated article blocks, or a "No news found" line
    """
    symbol = normalize_ticker(ticker)
    client = client or yahoo_client

    data = await client.fetch_json(search_url(symbol, news_count=NEWS_COUNT))
    news = data.get("news") or []
    if not news:
        return f"No news found for {symbol}."

    return "\n\n".join(format_article(item) for item in news)
