"""Tests for parse_feed."""

from datetime import datetime, timezone
import logging

import pytest

from medium_feed.parser import parse_feed

from .feeds import make_feed, make_item


class TestParseFeed:
    def test_extracts_fields_in_document_order(self, sample_feed):
        articles = parse_feed(sample_feed)

        assert [article.title for article in articles] == ["Older post", "Newer post"]
        first = articles[0]
        assert first.link == "https://medium.com/@chemicalstan15/older"
        assert first.published_at == datetime(2024, 1, 5, 10, 0, tzinfo=timezone.utc)
        assert "Older body" in first.raw_description
        assert first.engagement_score == 0

    @pytest.mark.parametrize("count", [0, 1, 7])
    def test_produces_one_article_per_entry(self, count):
        items = [
            make_item(title=f"Post {i}", link=f"https://example.com/{i}", pub_date="Mon, 01 Jan 2024 12:00:00 GMT")
            for i in range(count)
        ]

        assert len(parse_feed(make_feed(*items))) == count

    def test_missing_title_defaults_to_untitled(self):
        feed = make_feed(make_item(link="https://example.com/a", pub_date="Mon, 01 Jan 2024 12:00:00 GMT"))

        (article,) = parse_feed(feed)

        assert article.title == "Untitled"

    def test_empty_title_defaults_to_untitled(self):
        (article,) = parse_feed(make_feed(make_item(title="", link="https://example.com/a")))

        assert article.title == "Untitled"

    def test_missing_link_and_description_default_to_empty(self):
        (article,) = parse_feed(make_feed(make_item(title="Only a title")))

        assert article.link == ""
        assert article.raw_description == ""

    def test_guid_is_not_used_as_link(self):
        feed = make_feed("<item><title>x</title><guid>https://medium.com/p/abc</guid></item>")

        (article,) = parse_feed(feed)

        assert article.link == ""

    def test_link_element_wins_over_earlier_guid(self):
        feed = make_feed(
            "<item><title>x</title><guid>https://medium.com/p/abc</guid>"
            "<link>https://medium.com/@chemicalstan15/x</link></item>"
        )

        (article,) = parse_feed(feed)

        assert article.link == "https://medium.com/@chemicalstan15/x"

    def test_description_is_kept_unsanitized(self):
        body = '<p>Body<img src="a.png"></p><script>track()</script>'

        (article,) = parse_feed(make_feed(make_item(title="Raw", description=body)))

        assert article.raw_description == body

    def test_missing_date_is_none(self):
        (article,) = parse_feed(make_feed(make_item(title="Undated")))

        assert article.published_at is None
        assert not article.has_valid_date

    def test_unparseable_date_is_none(self):
        (article,) = parse_feed(make_feed(make_item(title="Bad date", pub_date="sometime last week")))

        assert article.published_at is None

    def test_malformed_xml_returns_empty_and_logs(self, caplog):
        broken = "<rss><channel><item><title>Broken</title></channel>"

        with caplog.at_level(logging.ERROR, logger="medium_feed.parser"):
            articles = parse_feed(broken)

        assert articles == []
        assert "Error parsing XML" in caplog.text

    def test_empty_document_returns_empty(self):
        assert parse_feed("") == []

    def test_url_like_text_is_not_fetched(self):
        assert parse_feed("https://medium.com/feed/@chemicalstan15") == []

    def test_articles_are_immutable(self, sample_feed):
        article = parse_feed(sample_feed)[0]

        with pytest.raises(AttributeError):
            article.title = "changed"
