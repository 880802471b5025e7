"""Tests for Slack webhook delivery."""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass

import httpx
import pytest

from recwatch.config.schema import NotificationConfig
from recwatch.notify.slack import SlackNotifier
from recwatch.utils.errors import NotificationError

WEBHOOK = "https://hooks.slack.example.com/services/T/B/X"


@dataclass
class Collection:
    name: str = "main"
    url: str = "https://example.com/table"


def _notifier(handler: Callable[[httpx.Request], httpx.Response]) -> SlackNotifier:
    config = NotificationConfig(
        subject="Record it!",
        slack_channel="#tv",
        slack_username="recwatch",
        slack_icon_emoji=":tv:",
    )
    return SlackNotifier(config, http_client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestSlackNotifier:
    """Tests for SlackNotifier."""

    def test_post_sends_json_payload(self, make_episode) -> None:
        """Test the payload fields and content type."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="ok")

        sent = _notifier(handler).post(
            WEBHOOK, [make_episode("A", url="https://a")], Collection()
        )

        assert sent is True
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == WEBHOOK
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == {
            "channel": "#tv",
            "username": "recwatch",
            "icon_emoji": ":tv:",
            "text": "Record it!\n<https://a|A>\n<https://example.com/table|main>",
        }

    def test_non_200_is_logged_not_raised(self, make_episode, caplog) -> None:
        """Test that webhook rejections are only logged."""
        notifier = _notifier(lambda request: httpx.Response(404, text="no_service"))

        with caplog.at_level(logging.WARNING, logger="recwatch.notify.slack"):
            sent = notifier.post(WEBHOOK, [make_episode()], Collection())

        assert sent is False
        assert "responseCode=404" in caplog.text
        assert "contentText=no_service" in caplog.text

    def test_unreachable_webhook_raises(self, make_episode) -> None:
        """Test transport failures."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("dns failure", request=request)

        with pytest.raises(NotificationError, match="Failed to reach Slack webhook"):
            _notifier(handler).post(WEBHOOK, [make_episode()], Collection())
