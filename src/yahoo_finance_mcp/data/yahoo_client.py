"""Async Yahoo Finance client with cookie/crumb authentication."""

import logging
import os
from http.cookiejar import CookieJar, DefaultCookiePolicy
from typing import Any
from urllib.parse import quote

import httpx

from yahoo_finance_mcp.data.auth import BROWSER_HEADERS, CredentialCache
from yahoo_finance_mcp.errors import TickerNotFoundError, UpstreamHttpError, UpstreamSemanticError

logger = logging.getLogger(__name__)

# Transport timeout (seconds) for every upstream request
_http_timeout = float(os.environ.get("YAHOO_HTTP_TIMEOUT", "15"))

# Characters kept in error previews
BODY_PREVIEW_CHARS = 200


def create_http_client(
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float = _http_timeout,
) -> httpx.AsyncClient:
    """
    Build the shared HTTP client.

    Cookies are never stored implicitly: the session cookie is sent only
    through the explicit Cookie header of authenticated requests.
    """
    no_cookies = CookieJar(policy=DefaultCookiePolicy(allowed_domains=[]))
    return httpx.AsyncClient(
        headers=BROWSER_HEADERS,
        cookies=no_cookies,
        timeout=httpx.Timeout(timeout),
        transport=transport,
    )


def with_crumb(url: str, crumb: str) -> str:
    """Append the url-encoded crumb as a query parameter."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}crumb={quote(crumb, safe='')}"


def first_result(data: Any, envelope: str, ticker: str) -> dict[str, Any]:
    """
    Unpack ``data[envelope].result[0]`` from an upstream JSON body.

    Raises:
        UpstreamSemanticError: If the envelope carries an ``error`` object
        TickerNotFoundError: If the result array is missing, empty or holds null
    """
    body = data.get(envelope) if isinstance(data, dict) else None
    if not isinstance(body, dict):
        raise TickerNotFoundError(ticker)

    error = body.get("error")
    if error:
        if isinstance(error, dict):
            description = error.get("description") or error.get("code") or "unknown error"
        else:
            description = str(error)
        raise UpstreamSemanticError(description)

    results = body.get("result") or []
    if not results or not isinstance(results[0], dict):
        raise TickerNotFoundError(ticker)
    return results[0]


class YahooClient:
    """
    Issues upstream GET requests, attaching credentials where required.

    Authentication is mandatory when requested: if no credential pair can be
    obtained the request is not attempted and AuthUnavailable propagates.
    """

    def __init__(
        self,
        http: httpx.AsyncClient | None = None,
        credentials: CredentialCache | None = None,
    ):
        self._http = http if http is not None else create_http_client()
        self.credentials = credentials if credentials is not None else CredentialCache(self._http)

    async def fetch(self, url: str, needs_auth: bool = False) -> httpx.Response:
        """
        Fetch a fully-formed upstream URL.

        Args:
            url: Absolute URL with all non-auth query parameters present
            needs_auth: Attach cookie header and crumb query parameter

        Returns:
            The raw successful response

        Raises:
            AuthUnavailable: If needs_auth and the handshake failed
            UpstreamHttpError: If the upstream status is not 2xx
            httpx.HTTPError: On transport failures
        """
        headers = dict(BROWSER_HEADERS)
        state = None
        final_url = url

        if needs_auth:
            state = await self.credentials.acquire()
            headers["Cookie"] = state.cookie
            final_url = with_crumb(url, state.crumb)

        response = await self._http.get(final_url, headers=headers)

        if not response.is_success:
            preview = response.text[:BODY_PREVIEW_CHARS]
            logger.warning(f"Upstream returned HTTP {response.status_code} for {url}")
            if needs_auth and response.status_code == 401:
                # Crumb revoked before expiry; force a new handshake next time
                self.credentials.invalidate(state)
            raise UpstreamHttpError(response.status_code, preview)

        return response

    async def fetch_json(self, url: str, needs_auth: bool = False) -> Any:
        """Fetch and decode a JSON body."""
        response = await self.fetch(url, needs_auth=needs_auth)
        return response.json()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()


# Global instance
yahoo_client = YahooClient()
