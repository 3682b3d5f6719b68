"""Error taxonomy shared by the fetch layer and the data-shaping tools."""


class YahooFinanceError(Exception):
    """Base class for failures talking to or interpreting the upstream."""

    pass


class AuthUnavailable(YahooFinanceError):
    """Raised when the cookie/crumb handshake cannot produce a usable pair."""

    pass


class UpstreamHttpError(YahooFinanceError):
    """Raised when the upstream answers a data request with a non-2xx status."""

    def __init__(self, status: int, body_preview: str):
        super().__init__(f"HTTP {status}: {body_preview}")
        self.status = status
        self.body_preview = body_preview


class UpstreamSemanticError(YahooFinanceError):
    """Raised when a 200 response carries an embedded ``error`` object."""

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description


class TickerNotFoundError(YahooFinanceError):
    """Raised when the upstream returns an empty result set for a ticker."""

    def __init__(self, ticker: str):
        super().__init__(f"Ticker {ticker} not found.")
        self.ticker = ticker


class InvalidParameterError(YahooFinanceError, ValueError):
    """Raised when a tool argument falls outside its allowed values."""

    pass
