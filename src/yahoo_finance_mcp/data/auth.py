"""Cookie/crumb credential cache for authenticated upstream requests.

The upstream has no documented auth API. A session cookie is obtained from a
cookie-issuing endpoint (falling back to the main site), then exchanged for a
crumb. Both travel with every authenticated request until the pair expires.
"""

import asyncio
import logging
import os
import re
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

import httpx

from yahoo_finance_mcp.data.endpoints import COOKIE_URL, CRUMB_URL, FALLBACK_COOKIE_URL
from yahoo_finance_mcp.errors import AuthUnavailable

logger = logging.getLogger(__name__)

# How long a cookie/crumb pair is trusted, regardless of upstream revocation
CREDENTIAL_TTL_SECONDS = float(os.environ.get("YAHOO_CREDENTIAL_TTL", "1800"))

# Upstream blocks requests without browser-like headers
BROWSER_HEADERS: dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}

# A comma only separates cookies when a new name= token follows it
# (Expires=Wed, 21 Oct 2026 ... must stay intact)
_COOKIE_SEPARATOR = re.compile(r",(?=\s*[^;,=\s]+=)")


@dataclass(frozen=True)
class CredentialState:
    """A cookie/crumb pair and the absolute time it stops being trusted."""

    cookie: str
    crumb: str
    expires_at: float

    def is_valid(self, now: float) -> bool:
        return now < self.expires_at


def parse_set_cookie(header_values: Iterable[str]) -> str:
    """
    Reduce Set-Cookie header values to a Cookie request header.

    Each value may hold several comma-joined cookies. Attributes after the
    first ``;`` are dropped and the remaining name=value pairs are joined
    with ``"; "``.

    Returns:
        Cookie header string, empty if no cookie was found
    """
    pairs: list[str] = []
    for value in header_values:
        for part in _COOKIE_SEPARATOR.split(value):
            pair = part.split(";", 1)[0].strip()
            if "=" in pair and not pair.startswith("="):
                pairs.append(pair)
    return "; ".join(pairs)


def is_valid_crumb(crumb: str) -> bool:
    """Reject empty bodies, HTML error pages and error messages served with 200."""
    return bool(crumb) and "<" not in crumb and "error" not in crumb


class CredentialCache:
    """
    Process-wide holder of the current cookie/crumb pair.

    ``acquire()`` is the only mutator. Concurrent callers that find the cache
    empty or expired share a single in-flight handshake.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        clock: Callable[[], float] = time.time,
        ttl: float = CREDENTIAL_TTL_SECONDS,
    ):
        self._http = http
        self._clock = clock
        self._ttl = ttl
        self._state: CredentialState | None = None
        self._refresh_lock = asyncio.Lock()

    @property
    def state(self) -> CredentialState | None:
        """Current cached state, without validity checks."""
        return self._state

    def _fresh_state(self) -> CredentialState | None:
        state = self._state
        if state is not None and state.is_valid(self._clock()):
            return state
        return None

    async def acquire(self) -> CredentialState:
        """
        Return a valid credential pair, refreshing it if absent or expired.

        Returns:
            CredentialState whose expiry lies in the future

        Raises:
            AuthUnavailable: If the handshake could not produce a usable pair
        """
        state = self._fresh_state()
        if state is not None:
            logger.debug("Credential cache hit")
            return state

        async with self._refresh_lock:
            # Another waiter may have refreshed while we queued for the lock
            state = self._fresh_state()
            if state is not None:
                return state

            # Every refresh starts from "no credentials"
            self._state = None
            logger.info("Refreshing upstream credentials")
            cookie, crumb = await self._handshake()
            state = CredentialState(
                cookie=cookie,
                crumb=crumb,
                expires_at=self._clock() + self._ttl,
            )
            self._state = state
            logger.info(f"Credentials refreshed (crumb={crumb[:4]}...)")
            return state

    def invalidate(self, state: CredentialState | None = None) -> None:
        """
        Drop the cached pair so the next acquire() performs a handshake.

        When ``state`` is given, only that pair is dropped; a newer pair
        installed by a concurrent refresh is kept.
        """
        if self._state is None or (state is not None and self._state is not state):
            return
        logger.info("Invalidating cached credentials")
        self._state = None

    async def _handshake(self) -> tuple[str, str]:
        try:
            cookie = await self._fetch_cookie()
            if not cookie:
                logger.warning("No cookies obtained from upstream")
                raise AuthUnavailable("No cookies obtained from upstream")
            crumb = await self._fetch_crumb(cookie)
        except httpx.HTTPError as e:
            logger.warning(f"Credential handshake failed: {e}")
            raise AuthUnavailable(f"Credential handshake failed: {e}") from e
        return cookie, crumb

    async def _fetch_cookie(self) -> str:
        response = await self._http.get(
            COOKIE_URL,
            headers=BROWSER_HEADERS,
            follow_redirects=False,
        )
        cookie = parse_set_cookie(response.headers.get_list("set-cookie"))
        if cookie:
            return cookie

        logger.info(f"No cookie from {COOKIE_URL}, falling back to {FALLBACK_COOKIE_URL}")
        response = await self._http.get(
            FALLBACK_COOKIE_URL,
            headers=BROWSER_HEADERS,
            follow_redirects=True,
        )
        return parse_set_cookie(response.headers.get_list("set-cookie"))

    async def _fetch_crumb(self, cookie: str) -> str:
        response = await self._http.get(
            CRUMB_URL,
            headers={**BROWSER_HEADERS, "Cookie": cookie},
        )
        if not response.is_success:
            logger.warning(f"Crumb request failed: {response.status_code}")
            raise AuthUnavailable(f"Crumb request failed with HTTP {response.status_code}")

        crumb = response.text
        if not is_valid_crumb(crumb):
            logger.warning(f"Invalid crumb: {crumb[:50]!r}")
            raise AuthUnavailable("Upstream returned an invalid crumb")
        return crumb
