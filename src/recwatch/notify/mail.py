"""Email delivery over SMTP."""

import logging
import smtplib
from collections.abc import Callable
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from recwatch.config.schema import NotificationConfig
from recwatch.guide.models import Episode
from recwatch.notify.message import CollectionLink, email_html_body, email_text_body

logger = logging.getLogger(__name__)


class EmailNotifier:
    """Send the unrecorded-episode list to a single recipient.

    Delivery errors (``smtplib.SMTPException``, ``OSError``) are not
    handled here.
    """

    def __init__(
        self,
        config: NotificationConfig,
        smtp_factory: Callable[..., smtplib.SMTP] = smtplib.SMTP,
    ) -> None:
        """Initialize email notifier.

        Args:
            config: Notification settings (subject, SMTP server)
            smtp_factory: SMTP connection factory (replaced in tests)
        """
        self.config = config
        self._smtp_factory = smtp_factory

    def build_message(
        self,
        recipient: str,
        episodes: list[Episode],
        collection: CollectionLink,
    ) -> MIMEMultipart:
        """Build the multipart (text + HTML) message."""
        msg = MIMEMultipart("alternative")
        msg["Subject"] = self.config.subject
        msg["From"] = self.config.smtp_sender or self.config.smtp_username or recipient
        msg["To"] = recipient

        msg.attach(MIMEText(email_text_body(collection), "plain", "utf-8"))
        msg.attach(MIMEText(email_html_body(episodes, collection), "html", "utf-8"))
        return msg

    def send(
        self,
        recipient: str,
        episodes: list[Episode],
        collection: CollectionLink,
        password: str | None = None,
    ) -> None:
        """Send the notification email.

        Args:
            recipient: Destination address
            episodes: Episodes to list
            collection: Link back to the episode table
            password: SMTP password (login is skipped without username/password)
        """
        msg = self.build_message(recipient, episodes, collection)

        with self._smtp_factory(
            self.config.smtp_host,
            self.config.smtp_port,
            timeout=self.config.timeout_seconds,
        ) as server:
            if self.config.smtp_use_tls:
                server.starttls()
            if self.config.smtp_username and password:
                server.login(self.config.smtp_username, password)
            server.sendmail(msg["From"], [recipient], msg.as_string())

        logger.info(f"Email sent to {recipient} ({len(episodes)} episodes)")
