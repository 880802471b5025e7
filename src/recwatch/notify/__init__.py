"""Email and Slack notifications."""

from recwatch.notify.dispatcher import DispatchReport, NotificationDispatcher
from recwatch.notify.mail import EmailNotifier
from recwatch.notify.slack import SlackNotifier

__all__ = ["DispatchReport", "EmailNotifier", "NotificationDispatcher", "SlackNotifier"]
