"""HTTP client for the TV guide search endpoint."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from recwatch.guide.models import SearchPage
from recwatch.utils.errors import (
    GuideParseError,
    NetworkConnectionError,
    NetworkTimeoutError,
    classify_http_error,
)

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_URL = "https://tvguide.myjcom.jp/api/mypage/get_searchresult/"


class GuideClient:
    """Fetch search result pages from the guide.

    Each call is a form-encoded ``POST`` with ``keyword``, ``channel`` and
    ``offset``. Errors are raised immediately; nothing is retried here.

    Example:
        >>> with GuideClient() as client:
        ...     page = client.search("Mayday", "546_65406", offset=0)
        >>> page.total_count, page.count
        (42, 20)
    """

    def __init__(
        self,
        search_url: str = DEFAULT_SEARCH_URL,
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the guide client.

        Args:
            search_url: Search endpoint URL
            timeout: HTTP request timeout in seconds
            http_client: Preconfigured client (tests inject a MockTransport)
        """
        self.search_url = search_url
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "GuideClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._http.close()

    def search(self, keyword: str, channel: str | None, offset: int) -> SearchPage:
        """Request one page of results.

        Args:
            keyword: Show name to search for
            channel: Channel filter, or None for all channels
            offset: Number of records already consumed

        Returns:
            Parsed SearchPage

        Raises:
            GuideAPIError: Non-success HTTP status
            GuideParseError: Body is not the expected JSON shape
            NetworkTimeoutError: Request timed out
            NetworkConnectionError: Transport failure
        """
        form: dict[str, Any] = {"keyword": keyword, "offset": str(offset)}
        if channel is not None:
            form["channel"] = channel

        logger.debug(f"Searching guide: keyword={keyword!r} channel={channel!r} offset={offset}")

        try:
            response = self._http.post(self.search_url, data=form)
        except httpx.TimeoutException as e:
            raise NetworkTimeoutError(f"Guide search timed out: {e}") from e
        except httpx.RequestError as e:
            raise NetworkConnectionError(
                f"Guide search failed ({type(e).__name__}): {e}"
            ) from e

        if response.is_error:
            raise classify_http_error(response.status_code, response.text[:200])

        return self._parse(response, offset)

    def _parse(self, response: httpx.Response, offset: int) -> SearchPage:
        try:
            payload = response.json()
        except ValueError as e:
            raise GuideParseError(f"Guide returned invalid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise GuideParseError(
                f"Guide returned {type(payload).__name__}, expected an object"
            )

        # The endpoint wraps results as {"status": ..., "body": {...}}
        body = payload.get("body", payload)
        if not isinstance(body, dict):
            raise GuideParseError("Guide response body is not an object")

        try:
            page = SearchPage.model_validate(body)
        except ValidationError as e:
            raise GuideParseError(f"Unexpected guide response shape: {e}") from e

        page.offset = offset
        return page
