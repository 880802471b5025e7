"""Slack incoming-webhook delivery."""

import logging

import httpx

from recwatch.config.schema import NotificationConfig
from recwatch.guide.models import Episode
from recwatch.notify.message import CollectionLink, slack_text
from recwatch.utils.errors import NotificationError

logger = logging.getLogger(__name__)


class SlackNotifier:
    """Post the unrecorded-episode list to a Slack webhook."""

    def __init__(
        self,
        config: NotificationConfig,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize Slack notifier.

        Args:
            config: Notification settings (channel, username, icon)
            http_client: Preconfigured client (tests inject a MockTransport)
        """
        self.config = config
        self._http = http_client

    def build_payload(self, episodes: list[Episode], collection: CollectionLink) -> dict:
        return {
            "channel": self.config.slack_channel,
            "username": self.config.slack_username,
            "icon_emoji": self.config.slack_icon_emoji,
            "text": slack_text(self.config.subject, episodes, collection),
        }

    def post(
        self,
        webhook_url: str,
        episodes: list[Episode],
        collection: CollectionLink,
    ) -> bool:
        """Send the message.

        A non-200 response is logged, not raised.

        Returns:
            True if Slack answered 200

        Raises:
            NotificationError: If the webhook could not be reached
        """
        payload = self.build_payload(episodes, collection)

        try:
            if self._http is not None:
                response = self._http.post(webhook_url, json=payload)
            else:
                with httpx.Client(timeout=self.config.timeout_seconds) as client:
                    response = client.post(webhook_url, json=payload)
        except httpx.RequestError as e:
            raise NotificationError(
                f"Failed to reach Slack webhook ({type(e).__name__}): {e}"
            ) from e

        if response.status_code != 200:
            logger.warning(
                "Failed to send notification to Slack. "
                f"responseCode={response.status_code}, contentText={response.text}"
            )
            return False

        logger.info(f"Slack notification sent ({len(episodes)} episodes)")
        return True
