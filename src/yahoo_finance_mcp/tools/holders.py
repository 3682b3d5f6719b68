"""Holder information tool."""

from typing import Any

from yahoo_finance_mcp.data.endpoints import quote_summary_url
from yahoo_finance_mcp.data.yahoo_client import YahooClient, first_result, yahoo_client
from yahoo_finance_mcp.errors import InvalidParameterError
from yahoo_finance_mcp.utils.unwrap import unwrap_raw
from yahoo_finance_mcp.utils.validators import normalize_ticker

# holder_type -> (quoteSummary module, list key or None when the module itself is the payload)
HOLDER_MODULES: dict[str, tuple[str, str | None]] = {
    "major_holders": ("majorHoldersBreakdown", None),
    "institutional_holders": ("institutionOwnership", "ownershipList"),
    "mutualfund_holders": ("fundOwnership", "ownershipList"),
    "insider_transactions": ("insiderTransactions", "transactions"),
    "insider_purchases": ("netSharePurchaseActivity", None),
    "insider_roster_holders": ("insiderHolders", "holders"),
}


async def holder_info(
    ticker: str,
    holder_type: str,
    client: YahooClient | None = None,
) -> Any:
    """
    Get major, institutional, fund or insider holder data.

    Args:
        ticker: Stock ticker symbol
        holder_type: One of the HOLDER_MODULES keys
        client: Upstream client (default: process-wide client)

    Returns:
        Object (major_holders, insider_purchases) or list, with raw values unwrapped
    """
    if holder_type not in HOLDER_MODULES:
        raise InvalidParameterError(f"Invalid holder type: {holder_type}")

    symbol = normalize_ticker(ticker)
    client = client or yahoo_client
    module, list_key = HOLDER_MODULES[holder_type]

    data = await client.fetch_json(quote_summary_url(symbol, module), needs_auth=True)
    result = first_result(data, "quoteSummary", symbol)

    if list_key is None:
        holders = result.get(module)
    else:
        holders = (result.get(module) or {}).get(list_key) or []
    return unwrap_raw(holders)
