"""Financial statement tool."""

from typing import Any

from yahoo_finance_mcp.data.endpoints import quote_summary_url
from yahoo_finance_mcp.data.yahoo_client import YahooClient, first_result, yahoo_client
from yahoo_finance_mcp.errors import InvalidParameterError
from yahoo_finance_mcp.utils.unwrap import flatten_statement
from yahoo_finance_mcp.utils.validators import normalize_ticker

# financial_type -> (quoteSummary module, list key inside the module)
STATEMENT_MODULES: dict[str, tuple[str, str]] = {
    "income_stmt": ("incomeStatementHistory", "incomeStatementHistory"),
    "quarterly_income_stmt": ("incomeStatementHistoryQuarterly", "incomeStatementHistory"),
    "balance_sheet": ("balanceSheetHistory", "balanceSheetStatements"),
    "quarterly_balance_sheet": ("balanceSheetHistoryQuarterly", "balanceSheetStatements"),
    "cashflow": ("cashflowStatementHistory", "cashflowStatements"),
    "quarterly_cashflow": ("cashflowStatementHistoryQuarterly", "cashflowStatements"),
}


async def financial_statement(
    ticker: str,
    financial_type: str,
    client: YahooClient | None = None,
) -> list[dict[str, Any]]:
    """
    Get income statement, balance sheet or cash flow history.

    Args:
        ticker: Stock ticker symbol
        financial_type: One of the STATEMENT_MODULES keys
        client: Upstream client (default: process-wide client)

    Returns:
        List of flattened statements, newest first as served upstream
    """
    if financial_type not in STATEMENT_MODULES:
        raise InvalidParameterError(f"Invalid financial type: {financial_type}")

    symbol = normalize_ticker(ticker)
    client = client or yahoo_client
    module, list_key = STATEMENT_MODULES[financial_type]

    data = await client.fetch_json(quote_summary_url(symbol, module), needs_auth=True)
    result = first_result(data, "quoteSummary", symbol)

    statements = (result.get(module) or {}).get(list_key) or []
    return [flatten_statement(stmt) for stmt in statements]
