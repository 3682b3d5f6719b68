"""Option expirations and chains."""

from typing import Any

from yahoo_finance_mcp.data.endpoints import options_url
from yahoo_finance_mcp.data.yahoo_client import YahooClient, first_result, yahoo_client
from yahoo_finance_mcp.errors import InvalidParameterError
from yahoo_finance_mcp.utils.timestamps import epoch_to_date
from yahoo_finance_mcp.utils.validators import OPTION_TYPES, normalize_ticker, parse_expiration_date


async def option_expiration_dates(ticker: str, client: YahooClient | None = None) -> list[str]:
    """
    List available option expiration dates.

    Args:
        ticker: Stock ticker symbol
        client: Upstream client (default: process-wide client)

    Returns:
        List of YYYY-MM-DD strings
    """
    symbol = normalize_ticker(ticker)
    client = client or yahoo_client

    data = await client.fetch_json(options_url(symbol), needs_auth=True)
    result = first_result(data, "optionChain", symbol)
    return [epoch_to_date(ts) for ts in result.get("expirationDates") or []]


async def option_chain(
    ticker: str,
    expiration_date: str,
    option_type: str,
    client: YahooClient | None = None,
) -> list[dict[str, Any]] | str:
    """
    Get the calls or puts expiring on a given date.

    Args:
        ticker: Stock ticker symbol
        expiration_date: Expiration date (YYYY-MM-DD)
        option_type: "calls" or "puts"
        client: Upstream client (default: process-wide client)

    Returns:
        List of option contracts, or guidance text when the date has no chain
    """
    if option_type not in OPTION_TYPES:
        raise InvalidParameterError(f"Invalid option type: {option_type}")
    date_epoch = parse_expiration_date(expiration_date)

    symbol = normalize_ticker(ticker)
    client = client or yahoo_client

    data = await client.fetch_json(options_url(symbol, date=date_epoch), needs_auth=True)
    result = first_result(data, "optionChain", symbol)

    chains = result.get("options") or []
    if not chains or not chains[0]:
        return f"No options for {expiration_date}. Use get_option_expiration_dates first."
    return chains[0].get(option_type) or []
