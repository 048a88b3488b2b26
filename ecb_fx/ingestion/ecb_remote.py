"""requests-based downloader for the ECB daily reference-rate feed."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import requests

from ecb_fx.exceptions import FetchError
from ecb_fx.ingestion.models import FeedContent
from ecb_fx.utils.ecb import ECB_DAILY_FEED_URL
from ecb_fx.utils.logger import get_logger

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from ecb_fx import FeedSettings


LOGGER = get_logger(__name__)
DEFAULT_USER_AGENT = "ecb-fx/0.1 (+https://www.ecb.europa.eu/stats/eurofxref/)"
DEFAULT_TIMEOUT = 30.0


def fetch_remote(
    url: str = ECB_DAILY_FEED_URL,
    *,
    session: requests.Session | None = None,
    timeout: float | None = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> FeedContent:
    """Download the feed once and return its text.

    Raises :class:`FetchError` for non-success statuses and for any transport
    failure. No retries are attempted.
    """

    sess = session or requests.Session()
    sess.headers.setdefault("User-Agent", user_agent)
    try:
        response = sess.get(
            url,
            headers={"Accept": "application/xml,text/xml;q=0.9,*/*;q=0.8"},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise FetchError(
            f"{type(exc).__name__}: {exc}", url=url, transport=True
        ) from exc
    _raise_with_context(response, url)
    content_type = response.headers.get("Content-Type")
    LOGGER.info("Fetched ECB feed from %s (%s)", url, content_type or "no content type")
    return FeedContent(text=response.text, origin=url, content_type=content_type)


def _raise_with_context(response: requests.Response, url: str) -> None:
    try:
        response.raise_for_status()
    except requests.HTTPError as exc:
        status = response.status_code
        reason = response.reason or ""
        raise FetchError(
            f"ECB feed responded with HTTP {status} for {url}",
            url=url,
            status_code=status,
            reason=reason,
        ) from exc


class RemoteFeedSource:
    """Rate source backed by the live ECB feed."""

    def __init__(
        self,
        url: str = ECB_DAILY_FEED_URL,
        *,
        session: Optional[requests.Session] = None,
        timeout: float | None = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.url = url
        self.session = session
        self.timeout = timeout
        self.user_agent = user_agent

    @classmethod
    def from_settings(
        cls, settings: "FeedSettings", *, session: Optional[requests.Session] = None
    ) -> "RemoteFeedSource":
        return cls(
            settings.feed_url,
            session=session,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
        )

    def fetch(self) -> FeedContent:
        return fetch_remote(
            self.url,
            session=self.session,
            timeout=self.timeout,
            user_agent=self.user_agent,
        )


__all__ = ["DEFAULT_TIMEOUT", "DEFAULT_USER_AGENT", "RemoteFeedSource", "fetch_remote"]
