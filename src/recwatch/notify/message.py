"""Message bodies for unrecorded-episode notifications."""

from html import escape
from typing import Protocol

from recwatch.guide.models import Episode


class CollectionLink(Protocol):
    """Where the full episode list can be viewed."""

    @property
    def name(self) -> str: ...

    @property
    def url(self) -> str: ...


def email_text_body(collection: CollectionLink) -> str:
    """Plain-text alternative: collection name and link."""
    return f"{collection.name} {collection.url}"


def email_html_body(episodes: list[Episode], collection: CollectionLink) -> str:
    """HTML body: one linked title per line, then a link to the collection."""
    links = [
        f'<a href="{escape(e.url, quote=True)}">{escape(e.title)}</a>' for e in episodes
    ]
    links.append(
        f'<a href="{escape(collection.url, quote=True)}">{escape(collection.name)}</a>'
    )
    return "<br>".join(links)


def _slack_escape(text: str) -> str:
    """Escape the control characters of Slack mrkdwn (``&``, ``<``, ``>``)."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def slack_text(subject: str, episodes: list[Episode], collection: CollectionLink) -> str:
    """Slack mrkdwn text: subject, one ``<url|title>`` per line, collection link."""
    lines = [_slack_escape(subject)]
    lines.extend(f"<{_slack_escape(e.url)}|{_slack_escape(e.title)}>" for e in episodes)
    lines.append(f"<{_slack_escape(collection.url)}|{_slack_escape(collection.name)}>")
    return "\n".join(lines)
