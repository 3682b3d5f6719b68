"""Validation utilities and parameter classes."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal, get_args

from yahoo_finance_mcp.errors import InvalidParameterError

Period = Literal["1d", "5d", "1mo", "3mo", "6mo", "1y", "2y", "5y", "10y", "ytd", "max"]
Interval = Literal[
    "1m", "2m", "5m", "15m", "30m", "60m", "90m", "1h", "1d", "5d", "1wk", "1mo", "3mo"
]
FinancialType = Literal[
    "income_stmt",
    "quarterly_income_stmt",
    "balance_sheet",
    "quarterly_balance_sheet",
    "cashflow",
    "quarterly_cashflow",
]
HolderType = Literal[
    "major_holders",
    "institutional_holders",
    "mutualfund_holders",
    "insider_transactions",
    "insider_purchases",
    "insider_roster_holders",
]
RecommendationType = Literal["recommendations", "upgrades_downgrades"]
OptionType = Literal["calls", "puts"]

# Allowlists in declaration order (used for docs and error messages)
PERIODS: tuple[str, ...] = get_args(Period)
INTERVALS: tuple[str, ...] = get_args(Interval)
FINANCIAL_TYPES: tuple[str, ...] = get_args(FinancialType)
HOLDER_TYPES: tuple[str, ...] = get_args(HolderType)
RECOMMENDATION_TYPES: tuple[str, ...] = get_args(RecommendationType)
OPTION_TYPES: tuple[str, ...] = get_args(OptionType)


def normalize_ticker(ticker: str) -> str:
    """Uppercase and strip a ticker symbol."""
    return ticker.upper().strip()


@dataclass(frozen=True)
class HistoryParams:
    """Immutable price history parameters."""

    ticker: str
    period: str = "1mo"
    interval: str = "1d"

    def __post_init__(self) -> None:
        object.__setattr__(self, "ticker", normalize_ticker(self.ticker))

        # Normalize period/interval: lowercase, strip whitespace, validate
        period = self.period.lower().strip()
        interval = self.interval.lower().strip()

        if period not in PERIODS:
            raise InvalidParameterError(
                f"Invalid period '{self.period}'. Must be one of: {', '.join(PERIODS)}"
            )
        if interval not in INTERVALS:
            raise InvalidParameterError(
                f"Invalid interval '{self.interval}'. Must be one of: {', '.join(INTERVALS)}"
            )

        object.__setattr__(self, "period", period)
        object.__setattr__(self, "interval", interval)

    def to_query(self) -> dict[str, str]:
        """Query parameters for the chart endpoint."""
        return {
            "range": self.period,
            "interval": self.interval,
            "includeAdjustedClose": "true",
        }


def parse_expiration_date(value: str) -> int:
    """
    Convert a YYYY-MM-DD expiration date to the epoch of its UTC midnight.

    Raises:
        InvalidParameterError: If the value is not a valid calendar date
    """
    try:
        day = datetime.strptime(value.strip(), "%Y-%m-%d")
    except ValueError:
        raise InvalidParameterError(
            f"Invalid expiration date: {value} (expected YYYY-MM-DD)"
        ) from None
    return int(day.replace(tzinfo=timezone.utc).timestamp())
