"""Upstream URL templates.

Every endpoint is fixed; only the ticker and query values vary. Tickers are
percent-encoded as a single path segment.
"""

from urllib.parse import quote, urlencode

BASE_URL = "https://query1.finance.yahoo.com"
BASE_URL_V2 = "https://query2.finance.yahoo.com"

# Auth handshake endpoints
COOKIE_URL = "https://fc.yahoo.com"
FALLBACK_COOKIE_URL = "https://finance.yahoo.com"
CRUMB_URL = f"{BASE_URL}/v1/test/getcrumb"

STOCK_INFO_MODULES: tuple[str, ...] = (
    "assetProfile",
    "summaryProfile",
    "summaryDetail",
    "financialData",
    "defaultKeyStatistics",
    "calendarEvents",
    "price",
)


def _encode_ticker(ticker: str) -> str:
    # Matches encodeURIComponent: everything but unreserved marks is escaped
    return quote(ticker, safe="-_.!~*'()")


def chart_url(ticker: str, **params: str) -> str:
    """Chart (price history / corporate events) URL."""
    return f"{BASE_URL}/v8/finance/chart/{_encode_ticker(ticker)}?{urlencode(params, safe=',')}"


def quote_summary_url(ticker: str, modules: str | list[str] | tuple[str, ...]) -> str:
    """quoteSummary URL selecting one or more modules."""
    if not isinstance(modules, str):
        modules = ",".join(modules)
    return f"{BASE_URL_V2}/v10/finance/quoteSummary/{_encode_ticker(ticker)}?modules={modules}"


def search_url(query: str, news_count: int = 10) -> str:
    """Search URL (used for news)."""
    params = {"q": query, "newsCount": news_count, "enableFuzzyQuery": "false"}
    return f"{BASE_URL}/v1/finance/search?{urlencode(params)}"


def options_url(ticker: str, date: int | None = None) -> str:
    """Options chain URL, optionally pinned to an expiration epoch."""
    url = f"{BASE_URL}/v7/finance/options/{_encode_ticker(ticker)}"
    if date is not None:
        url += f"?date={date}"
    return url
