"""Rendering of tool results as text at the MCP boundary.

Tools raise typed errors and return plain Python data; only this module
turns either outcome into the text payload an agent receives.
"""

import json
import logging
from collections.abc import Awaitable
from time import perf_counter
from typing import Any

from yahoo_finance_mcp.errors import InvalidParameterError, TickerNotFoundError
from yahoo_finance_mcp.utils.unwrap import sanitize_nan_inf

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error: "


def render_payload(payload: Any) -> str:
    """Strings pass through; anything else becomes compact strict JSON."""
    if isinstance(payload, str):
        return payload
    return json.dumps(
        sanitize_nan_inf(payload),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
        default=str,
    )


def render_error(error: Exception) -> str:
    """
    Render a failure as a single line of text.

    Not-found and invalid-parameter outcomes are informative answers rather
    than failures and carry no prefix.
    """
    message = str(error) or type(error).__name__
    if isinstance(error, (TickerNotFoundError, InvalidParameterError)):
        return message
    return f"{ERROR_PREFIX}{message}"


async def run_tool(name: str, call: Awaitable[Any]) -> str:
    """
    Await a data-shaping call and render its outcome.

    No exception crosses the tool boundary; callers always receive text.
    """
    start_time = perf_counter()
    try:
        payload = await call
    except Exception as e:
        duration_ms = (perf_counter() - start_time) * 1000
        logger.warning(f"{name} failed after {duration_ms:.1f}ms: {type(e).__name__}: {e}")
        return render_error(e)

    duration_ms = (perf_counter() - start_time) * 1000
    logger.info(f"{name} completed in {duration_ms:.1f}ms")
    return render_payload(payload)
