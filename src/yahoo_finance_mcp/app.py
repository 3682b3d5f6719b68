"""HTTP entrypoint: documentation route plus the SSE and streamable-HTTP transports."""

import logging
from collections.abc import AsyncIterator
from contextlib import AsyncExitStack, asynccontextmanager
from typing import Any

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from yahoo_finance_mcp import SERVER_NAME, SERVER_VERSION
from yahoo_finance_mcp.data.yahoo_client import yahoo_client
from yahoo_finance_mcp.server import mcp
from yahoo_finance_mcp.utils.validators import (
    FINANCIAL_TYPES,
    HOLDER_TYPES,
    INTERVALS,
    OPTION_TYPES,
    PERIODS,
    RECOMMENDATION_TYPES,
)

logger = logging.getLogger(__name__)

SSE_PATH = "/sse"
MCP_PATH = "/mcp"


def _choices(values: tuple[str, ...]) -> str:
    return "|".join(values)


def build_index_document() -> dict[str, Any]:
    """Capability document served at the root path."""
    ticker = {"ticker": "string"}
    return {
        "name": SERVER_NAME,
        "version": SERVER_VERSION,
        "description": "MCP server providing Yahoo Finance data tools",
        "endpoints": {"sse": SSE_PATH, "mcp": MCP_PATH},
        "tools": [
            {
                "name": "get_historical_stock_prices",
                "description": "Get historical OHLCV data",
                "params": {**ticker, "period": _choices(PERIODS), "interval": _choices(INTERVALS)},
            },
            {
                "name": "get_stock_info",
                "description": "Get comprehensive stock information",
                "params": ticker,
            },
            {"name": "get_yahoo_finance_news", "description": "Get latest news", "params": ticker},
            {"name": "get_stock_actions", "description": "Get dividends and splits", "params": ticker},
            {
                "name": "get_financial_statement",
                "description": "Get financial statements",
                "params": {**ticker, "financial_type": _choices(FINANCIAL_TYPES)},
            },
            {
                "name": "get_holder_info",
                "description": "Get holder information",
                "params": {**ticker, "holder_type": _choices(HOLDER_TYPES)},
            },
            {
                "name": "get_option_expiration_dates",
                "description": "Get option expiration dates",
                "params": ticker,
            },
            {
                "name": "get_option_chain",
                "description": "Get option chain data",
                "params": {
                    **ticker,
                    "expiration_date": "YYYY-MM-DD",
                    "option_type": _choices(OPTION_TYPES),
                },
            },
            {
                "name": "get_recommendations",
                "description": "Get analyst recommendations",
                "params": {
                    **ticker,
                    "recommendation_type": _choices(RECOMMENDATION_TYPES),
                    "months_back": "number",
                },
            },
        ],
        "usage": {
            "claude_desktop": {
                "mcpServers": {
                    "yahoo-finance": {
                        "command": "npx",
                        "args": ["mcp-remote", f"https://your-host.example.com{SSE_PATH}"],
                    }
                }
            },
            "mcp_inspector": "npx @modelcontextprotocol/inspector@latest",
        },
    }


async def index(request: Request) -> JSONResponse:
    """Root and health check route."""
    return JSONResponse(build_index_document())


def create_app() -> Starlette:
    """
    Build the HTTP application.

    ``/`` and ``/health`` return the capability document, ``/sse`` and
    ``/mcp`` delegate to the MCP transports and every other path is a 404.
    """
    sse_app = mcp.http_app(path="/", transport="sse")
    streamable_app = mcp.http_app(path="/", transport="http")

    @asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        async with AsyncExitStack() as stack:
            await stack.enter_async_context(sse_app.lifespan(app))
            await stack.enter_async_context(streamable_app.lifespan(app))
            yield
            logger.info("Closing upstream HTTP client")
            await yahoo_client.aclose()

    return Starlette(
        routes=[
            Route("/", index, methods=["GET"]),
            Route("/health", index, methods=["GET"]),
            Mount(SSE_PATH, app=sse_app),
            Mount(MCP_PATH, app=streamable_app),
        ],
        lifespan=lifespan,
    )
