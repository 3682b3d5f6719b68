"""Tests for the historical price tool."""

import pytest

from yahoo_finance_mcp.errors import InvalidParameterError, TickerNotFoundError, UpstreamSemanticError
from yahoo_finance_mcp.tools.price_history import PRICE_COLUMNS, chart_to_rows, historical_stock_prices


class TestChartToRows:
    """Tests for chart_to_rows function."""

    def test_rows_follow_timestamps(self, sample_chart) -> None:
        rows = chart_to_rows(sample_chart["chart"]["result"][0])

        assert len(rows) == 3
        assert list(rows[0]) == PRICE_COLUMNS
        assert rows[0] == {
            "Date": "2024-01-02T14:30:00.000Z",
            "Open": 187.15,
            "High": 188.44,
            "Low": 183.89,
            "Close": 185.64,
            "Volume": 82488700,
            "Adj Close": 184.73,
        }

    def test_missing_values_stay_null(self, sample_chart) -> None:
        rows = chart_to_rows(sample_chart["chart"]["result"][0])
        assert rows[2]["Low"] is None

    def test_adj_close_falls_back_to_close(self, sample_chart) -> None:
        rows = chart_to_rows(sample_chart["chart"]["result"][0])
        assert rows[1]["Adj Close"] == rows[1]["Close"] == 184.25

    def test_no_adjclose_series(self, sample_chart) -> None:
        result = sample_chart["chart"]["result"][0]
        del result["indicators"]["adjclose"]

        rows = chart_to_rows(result)

        assert [r["Adj Close"] for r in rows] == [r["Close"] for r in rows]

    def test_short_indicator_arrays_are_padded(self) -> None:
        result = {"timestamp": [0, 60], "indicators": {"quote": [{"close": [1.0]}]}}

        rows = chart_to_rows(result)

        assert rows[1]["Close"] is None
        assert rows[1]["Open"] is None

    def test_no_timestamps(self) -> None:
        assert chart_to_rows({"indicators": {"quote": [{}]}}) == []


class TestHistoricalStockPrices:
    """Tests for historical_stock_prices tool."""

    @pytest.mark.asyncio
    async def test_request_and_rows(self, client, upstream, sample_chart) -> None:
        upstream.data_json = sample_chart

        rows = await historical_stock_prices("aapl", period="5d", interval="1d", client=client)

        request = upstream.data_requests[-1]
        assert request.url.path == "/v8/finance/chart/AAPL"
        assert request.url.params["range"] == "5d"
        assert request.url.params["interval"] == "1d"
        assert request.url.params["includeAdjustedClose"] == "true"
        assert "crumb" not in request.url.params
        assert len(rows) == 3

    @pytest.mark.asyncio
    async def test_invalid_period_makes_no_request(self, client, upstream) -> None:
        with pytest.raises(InvalidParameterError):
            await historical_stock_prices("AAPL", period="2w", client=client)
        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_embedded_error(self, client, upstream) -> None:
        upstream.data_json = {
            "chart": {"result": None, "error": {"code": "Not Found", "description": "No data found, symbol may be delisted"}}
        }
        with pytest.raises(UpstreamSemanticError):
            await historical_stock_prices("ZZZZ", client=client)

    @pytest.mark.asyncio
    async def test_empty_result(self, client, upstream) -> None:
        upstream.data_json = {"chart": {"result": [], "error": None}}
        with pytest.raises(TickerNotFoundError):
            await historical_stock_prices("ZZZZ", client=client)
