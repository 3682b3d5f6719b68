"""Yahoo Finance MCP Server using FastMCP."""

import argparse
import logging
import os

from fastmcp import FastMCP

from yahoo_finance_mcp import SERVER_VERSION
from yahoo_finance_mcp.tools import (
    analyst_recommendations,
    financial_statement,
    historical_stock_prices,
    holder_info,
    option_chain,
    option_expiration_dates,
    stock_actions,
    stock_info,
    yahoo_finance_news,
)
from yahoo_finance_mcp.utils.render import run_tool
from yahoo_finance_mcp.utils.validators import (
    FinancialType,
    HolderType,
    Interval,
    OptionType,
    Period,
    RecommendationType,
)

# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastMCP server instance
mcp = FastMCP(
    name="yfinance",
    version=SERVER_VERSION,
)


# ============================================================================
# TOOLS
# ============================================================================


@mcp.tool
async def get_historical_stock_prices(
    ticker: str,
    period: Period = "1mo",
    interval: Interval = "1d",
) -> str:
    """
    Get historical stock prices (OHLCV) for a ticker.

    Args:
        ticker: Ticker symbol, e.g. "AAPL"
        period: Time period - 1d, 5d, 1mo, 3mo, 6mo, 1y, 2y, 5y, 10y, ytd, max
        interval: Bar interval - 1m, 2m, 5m, 15m, 30m, 60m, 90m, 1h, 1d, 5d, 1wk, 1mo, 3mo

    Returns:
        JSON array of {Date, Open, High, Low, Close, Volume, Adj Close}
    """
    return await run_tool(
        "get_historical_stock_prices",
        historical_stock_prices(ticker, period=period, interval=interval),
    )


@mcp.tool
async def get_stock_info(ticker: str) -> str:
    """
    Get comprehensive stock information for a ticker.

    Merges company profile, price, summary detail, financial data,
    key statistics and calendar events into one object.

    Args:
        ticker: Ticker symbol, e.g. "AAPL"
    """
    return await run_tool("get_stock_info", stock_info(ticker))


@mcp.tool
async def get_yahoo_finance_news(ticker: str) -> str:
    """
    Get latest news for a ticker.

    Args:
        ticker: Ticker symbol, e.g. "AAPL"

    Returns:
        Title/Publisher/Published/URL blocks separated by blank lines
    """
    return await run_tool("get_yahoo_finance_news", yahoo_finance_news(ticker))


@mcp.tool
async def get_stock_actions(ticker: str) -> str:
    """
    Get dividends and stock splits for a ticker.

    Args:
        ticker: Ticker symbol, e.g. "AAPL"

    Returns:
        JSON array of {Date, Dividends, Stock Splits} sorted oldest first
    """
    return await run_tool("get_stock_actions", stock_actions(ticker))


@mcp.tool
async def get_financial_statement(ticker: str, financial_type: FinancialType) -> str:
    """
    Get financial statements for a ticker.

    Args:
        ticker: Ticker symbol, e.g. "AAPL"
        financial_type: income_stmt, quarterly_income_stmt, balance_sheet,
            quarterly_balance_sheet, cashflow or quarterly_cashflow
    """
    return await run_tool(
        "get_financial_statement",
        financial_statement(ticker, financial_type),
    )


@mcp.tool
async def get_holder_info(ticker: str, holder_type: HolderType) -> str:
    """
    Get holder information for a ticker.

    Args:
        ticker: Ticker symbol, e.g. "AAPL"
        holder_type: major_holders, institutional_holders, mutualfund_holders,
            insider_transactions, insider_purchases or insider_roster_holders
    """
    return await run_tool("get_holder_info", holder_info(ticker, holder_type))


@mcp.tool
async def get_option_expiration_dates(ticker: str) -> str:
    """
    Get available option expiration dates for a ticker.

    Args:
        ticker: Ticker symbol, e.g. "AAPL"

    Returns:
        JSON array of YYYY-MM-DD dates
    """
    return await run_tool("get_option_expiration_dates", option_expiration_dates(ticker))


@mcp.tool
async def get_option_chain(ticker: str, expiration_date: str, option_type: OptionType) -> str:
    """
    Get option chain for a ticker.

    Call get_option_expiration_dates first to find valid dates.

    Args:
        ticker: Ticker symbol, e.g. "AAPL"
        expiration_date: Expiration date (YYYY-MM-DD)
        option_type: calls or puts
    """
    return await run_tool(
        "get_option_chain",
        option_chain(ticker, expiration_date, option_type),
    )


@mcp.tool
async def get_recommendations(
    ticker: str,
    recommendation_type: RecommendationType,
    months_back: float = 12,
) -> str:
    """
    Get analyst recommendations for a ticker.

    Args:
        ticker: Ticker symbol, e.g. "AAPL"
        recommendation_type: recommendations (monthly trend) or
            upgrades_downgrades (latest action per firm)
        months_back: Lookback window in months for upgrades_downgrades (default: 12)
    """
    return await run_tool(
        "get_recommendations",
        analyst_recommendations(ticker, recommendation_type, months_back=months_back),
    )


# ============================================================================
# ENTRY POINT
# ============================================================================


def main() -> None:
    """Run the MCP server."""
    parser = argparse.ArgumentParser(description="Yahoo Finance MCP Server")
    parser.add_argument("--transport", choices=["stdio", "http"], default="stdio")
    parser.add_argument("--host", default=os.environ.get("HOST", "0.0.0.0"))
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")))
    args = parser.parse_args()

    logger.info(f"Starting Yahoo Finance MCP Server v{SERVER_VERSION} ({args.transport})")

    if args.transport == "http":
        import uvicorn

        from yahoo_finance_mcp.app import create_app

        uvicorn.run(create_app(), host=args.host, port=args.port)
    else:
        mcp.run()


if __name__ == "__main__":
    main()
