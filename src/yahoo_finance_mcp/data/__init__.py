"""Data layer: upstream endpoints, credential cache and authenticated fetcher."""

from yahoo_finance_mcp.data.auth import (
    BROWSER_HEADERS,
    CREDENTIAL_TTL_SECONDS,
    CredentialCache,
    CredentialState,
    is_valid_crumb,
    parse_set_cookie,
)
from yahoo_finance_mcp.data.yahoo_client import (
    YahooClient,
    create_http_client,
    first_result,
    with_crumb,
    yahoo_client,
)

__all__ = [
    # Auth
    "BROWSER_HEADERS",
    "CREDENTIAL_TTL_SECONDS",
    "CredentialCache",
    "CredentialState",
    "is_valid_crumb",
    "parse_set_cookie",
    # Client
    "YahooClient",
    "create_http_client",
    "first_result",
    "with_crumb",
    "yahoo_client",
]
