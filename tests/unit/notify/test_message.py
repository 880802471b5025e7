"""Tests for notification message bodies."""

from dataclasses import dataclass

import pytest

from recwatch.notify.message import email_html_body, email_text_body, slack_text


@dataclass
class Collection:
    name: str = "main"
    url: str = "https://example.com/table"


@pytest.fixture
def collection() -> Collection:
    return Collection()


class TestMessageBodies:
    """Tests for message composition."""

    def test_email_text_body(self, collection: Collection) -> None:
        """Test the plain-text alternative."""
        assert email_text_body(collection) == "main https://example.com/table"

    def test_email_html_body(self, make_episode, collection: Collection) -> None:
        """Test linked titles followed by the collection link."""
        episodes = [make_episode("A", url="https://a"), make_episode("B", url="https://b")]

        html = email_html_body(episodes, collection)

        assert html == (
            '<a href="https://a">A</a><br>'
            '<a href="https://b">B</a><br>'
            '<a href="https://example.com/table">main</a>'
        )

    def test_email_html_body_escapes(self, make_episode, collection: Collection) -> None:
        """Test that titles and links are HTML-escaped."""
        episodes = [make_episode("Fire & Ice <2>", url="https://a?x=1&y=2")]

        html = email_html_body(episodes, collection)

        assert "Fire &amp; Ice &lt;2&gt;" in html
        assert 'href="https://a?x=1&amp;y=2"' in html

    def test_slack_text(self, make_episode, collection: Collection) -> None:
        """Test the Slack message layout."""
        episodes = [make_episode("A", url="https://a"), make_episode("B", url="https://b")]

        text = slack_text("Record it!", episodes, collection)

        assert text == (
            "Record it!\n"
            "<https://a|A>\n"
            "<https://b|B>\n"
            "<https://example.com/table|main>"
        )

    def test_slack_text_escapes(self, make_episode) -> None:
        """Test that mrkdwn control characters cannot break the link markup."""
        episodes = [make_episode("Fire & Ice <2>", url="https://a?x=1&y=2")]

        text = slack_text("Record it!", episodes, Collection(name="<main>"))

        assert text.splitlines() == [
            "Record it!",
            "<https://a?x=1&amp;y=2|Fire &amp; Ice &lt;2&gt;>",
            "<https://example.com/table|&lt;main&gt;>",
        ]
