"""Yahoo Finance data tools."""

from yahoo_finance_mcp.tools.actions import stock_actions
from yahoo_finance_mcp.tools.financials import financial_statement
from yahoo_finance_mcp.tools.holders import holder_info
from yahoo_finance_mcp.tools.news import yahoo_finance_news
from yahoo_finance_mcp.tools.options import option_chain, option_expiration_dates
from yahoo_finance_mcp.tools.price_history import historical_stock_prices
from yahoo_finance_mcp.tools.recommendations import analyst_recommendations
from yahoo_finance_mcp.tools.stock_info import stock_info

__all__ = [
    "analyst_recommendations",
    "financial_statement",
    "historical_stock_prices",
    "holder_info",
    "option_chain",
    "option_expiration_dates",
    "stock_actions",
    "stock_info",
    "yahoo_finance_news",
]
