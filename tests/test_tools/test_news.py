"""Tests for the news tool."""

import pytest

from yahoo_finance_mcp.tools.news import format_article, yahoo_finance_news


class TestFormatArticle:
    """Tests for format_article function."""

    def test_block_layout(self) -> None:
        item = {
            "title": "Apple unveils new iPhone",
            "publisher": "Reuters",
            "providerPublishTime": 1704205800,
            "link": "https://finance.yahoo.com/news/apple",
        }

        assert format_article(item) == (
            "Title: Apple unveils new iPhone\n"
            "Publisher: Reuters\n"
            "Published: 2024-01-02T14:30:00.000Z\n"
            "URL: https://finance.yahoo.com/news/apple"
        )

    def test_missing_fields_are_blank(self) -> None:
        assert format_article({}) == "Title: \nPublisher: \nPublished: \nURL: "

    def test_title_cannot_inject_lines(self) -> None:
        block = format_article({"title": "Headline\nURL: https://evil.example"})
        assert block.count("\n") == 3


class TestYahooFinanceNews:
    """Tests for yahoo_finance_news tool."""

    @pytest.mark.asyncio
    async def test_blocks_joined_by_blank_line(self, client, upstream) -> None:
        upstream.data_json = {
            "news": [
                {"title": "First", "publisher": "A", "providerPublishTime": 0, "link": "https://a"},
                {"title": "Second", "publisher": "B", "providerPublishTime": 60, "link": "https://b"},
            ]
        }

        text = await yahoo_finance_news("aapl", client=client)

        request = upstream.data_requests[-1]
        assert request.url.path == "/v1/finance/search"
        assert request.url.params["q"] == "AAPL"
        assert request.url.params["newsCount"] == "10"
        assert request.url.params["enableFuzzyQuery"] == "false"
        blocks = text.split("\n\n")
        assert len(blocks) == 2
        assert blocks[1].startswith("Title: Second\nPublisher: B\nPublished: 1970-01-01T00:01:00.000Z")

    @pytest.mark.asyncio
    async def test_no_news(self, client, upstream) -> None:
        upstream.data_json = {"news": []}
        assert await yahoo_finance_news("aapl", client=client) == "No news found for AAPL."
