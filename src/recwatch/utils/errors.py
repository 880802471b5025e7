"""Custom exceptions for recwatch."""


class RecwatchError(Exception):
    """Base exception for all recwatch errors."""

    pass


class ConfigError(RecwatchError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class GuideError(RecwatchError):
    """TV guide search errors."""

    pass


class GuideAPIError(GuideError):
    """Search endpoint answered with an error status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GuideParseError(GuideError):
    """Search response could not be parsed."""

    pass


class DateParseError(GuideError):
    """Broadcast start time could not be parsed."""

    pass


class NetworkError(RecwatchError):
    """Network-related errors."""

    pass


class NetworkConnectionError(NetworkError):
    """Connection failures."""

    pass


class NetworkTimeoutError(NetworkError):
    """Request timeout."""

    pass


class TableError(RecwatchError):
    """Episode table read/write errors."""

    pass


class TableFormatError(TableError):
    """Episode table contains a malformed row."""

    pass


class NotificationError(RecwatchError):
    """Notification delivery failures."""

    pass


def classify_http_error(status_code: int, error_message: str = "") -> GuideAPIError:
    """Build a descriptive error for a failed search request.

    Args:
        status_code: HTTP status code
        error_message: Response body or error text

    Returns:
        GuideAPIError carrying the status code
    """
    if status_code == 429:
        message = f"Rate limit exceeded: {error_message}"
    elif 500 <= status_code < 600:
        message = f"Server error (HTTP {status_code}): {error_message}"
    elif status_code == 408:
        message = f"Request timeout: {error_message}"
    elif status_code in (401, 403):
        message = f"Authentication failed (HTTP {status_code}): {error_message}"
    elif 400 <= status_code < 500:
        message = f"Invalid request (HTTP {status_code}): {error_message}"
    else:
        message = f"HTTP error {status_code}: {error_message}"

    return GuideAPIError(message, status_code=status_code)
