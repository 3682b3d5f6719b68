"""Tests for the dividends and splits tool."""

import pytest

from yahoo_finance_mcp.tools.actions import events_to_actions, stock_actions


class TestEventsToActions:
    """Tests for events_to_actions function."""

    def test_merged_and_sorted_ascending(self) -> None:
        events = {
            "dividends": {"100": {"amount": 0.5, "date": 100}},
            "splits": {"50": {"date": 50, "numerator": 2, "denominator": 1, "splitRatio": "2:1"}},
        }

        assert events_to_actions(events) == [
            {"Date": "1970-01-01T00:00:50.000Z", "Dividends": 0, "Stock Splits": 2.0},
            {"Date": "1970-01-01T00:01:40.000Z", "Dividends": 0.5, "Stock Splits": 0},
        ]

    def test_dividends_only(self) -> None:
        events = {
            "dividends": {
                "2": {"amount": 0.24, "date": 1723123800},
                "1": {"amount": 0.25, "date": 1731076200},
                "0": {"amount": 0.24, "date": 1715261400},
            }
        }

        actions = events_to_actions(events)

        assert [a["Dividends"] for a in actions] == [0.24, 0.24, 0.25]
        assert all(a["Stock Splits"] == 0 for a in actions)
        assert [a["Date"] for a in actions] == sorted(a["Date"] for a in actions)

    def test_same_date_keeps_dividend_first(self) -> None:
        events = {
            "dividends": {"1": {"amount": 0.1, "date": 500}},
            "splits": {"1": {"date": 500, "numerator": 4, "denominator": 1}},
        }

        actions = events_to_actions(events)

        assert [a["Dividends"] for a in actions] == [0.1, 0]

    def test_no_events(self) -> None:
        assert events_to_actions({}) == []
        assert events_to_actions({"dividends": {}, "splits": None}) == []


class TestStockActions:
    """Tests for stock_actions tool."""

    @pytest.mark.asyncio
    async def test_requests_full_event_history(self, client, upstream) -> None:
        upstream.data_json = {"chart": {"result": [{"meta": {}, "events": {}}], "error": None}}

        actions = await stock_actions("msft", client=client)

        request = upstream.data_requests[-1]
        assert request.url.path == "/v8/finance/chart/MSFT"
        assert request.url.params["range"] == "max"
        assert request.url.params["interval"] == "1d"
        assert request.url.params["events"] == "div,split"
        assert actions == []

    @pytest.mark.asyncio
    async def test_result_without_events(self, client, upstream) -> None:
        upstream.data_json = {"chart": {"result": [{"meta": {}}], "error": None}}
        assert await stock_actions("MSFT", client=client) == []
