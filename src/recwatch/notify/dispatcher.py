"""Send email and Slack notifications for unrecorded episodes."""

import logging
from dataclasses import dataclass

from recwatch.config.properties import (
    RECIPIENT_EMAIL,
    SLACK_WEB_HOOK_URL,
    SMTP_PASSWORD,
    PropertyStore,
)
from recwatch.guide.models import Episode
from recwatch.notify.mail import EmailNotifier
from recwatch.notify.message import CollectionLink
from recwatch.notify.slack import SlackNotifier
from recwatch.utils.errors import NotificationError

logger = logging.getLogger(__name__)


@dataclass
class DispatchReport:
    """Outcome of one dispatch."""

    email_sent: bool = False
    slack_sent: bool = False


class NotificationDispatcher:
    """Deliver the same episode list over email and Slack.

    Both channels are always attempted. A channel whose destination
    property is missing is skipped with a warning. An email failure is
    re-raised as NotificationError after Slack has been tried.
    """

    def __init__(
        self,
        properties: PropertyStore,
        email: EmailNotifier,
        slack: SlackNotifier,
    ) -> None:
        self.properties = properties
        self.email = email
        self.slack = slack

    def dispatch(self, episodes: list[Episode], collection: CollectionLink) -> DispatchReport:
        """Notify about ``episodes``.

        Args:
            episodes: Unrecorded episodes airing soon (non-empty)
            collection: Link back to the episode table

        Returns:
            DispatchReport describing which channels delivered

        Raises:
            NotificationError: Email delivery failed or the Slack webhook
                was unreachable
        """
        report = DispatchReport()
        email_error: Exception | None = None

        recipient = self.properties.get_property(RECIPIENT_EMAIL)
        if recipient is None:
            logger.warning(f"Cannot get property '{RECIPIENT_EMAIL}', skipping email")
        else:
            try:
                self.email.send(
                    recipient,
                    episodes,
                    collection,
                    password=self.properties.get_property(SMTP_PASSWORD),
                )
                report.email_sent = True
            except Exception as e:
                logger.error(f"Email notification failed: {type(e).__name__}: {e}")
                email_error = e

        webhook_url = self.properties.get_property(SLACK_WEB_HOOK_URL)
        if webhook_url is None:
            logger.warning(f"Cannot get property '{SLACK_WEB_HOOK_URL}', skipping Slack")
        else:
            try:
                report.slack_sent = self.slack.post(webhook_url, episodes, collection)
            except NotificationError as e:
                if email_error is None:
                    raise
                raise NotificationError(
                    f"Email notification failed: {email_error}; {e}"
                ) from email_error

        if email_error is not None:
            raise NotificationError(f"Email notification failed: {email_error}") from email_error

        return report
