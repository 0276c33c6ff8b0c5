"""Content retrieval used by strategies that read remote documents."""

from __future__ import annotations

import threading
from typing import Mapping, Optional, Protocol

import requests

from livecheck.exceptions import ContentFetchError
from livecheck.models import PageContent
from livecheck.utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_TIMEOUT = 30
DEFAULT_USER_AGENT = "livecheck/1.0"


class ContentFetcher(Protocol):
    """Contract for retrieving the textual content at a URL.

    Implementations either return a :class:`PageContent` or raise. Retries,
    caching and cancellation belong to the implementation, never to the
    strategies calling it.
    """

    def fetch(self, url: str) -> PageContent:
        ...  # pragma: no cover - protocol definition


class RequestsContentFetcher:
    """Fetch page content over HTTP(S) with a shared ``requests`` session."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", user_agent)
        if headers:
            self.session.headers.update(headers)

    def fetch(self, url: str) -> PageContent:
        """Return the body at ``url``, raising :class:`ContentFetchError` on failure."""

        try:
            response = self.session.get(url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as exc:
            LOGGER.warning("Request to %s failed: %s", url, exc)
            raise ContentFetchError(f"Unable to fetch {url}: {exc}", url=url) from exc

        self._raise_with_context(response, url)
        final_url = response.url if response.url and response.url != url else None
        LOGGER.info("Fetched %s (%s bytes)", url, len(response.content))
        return PageContent(
            content=response.text,
            final_url=final_url,
            status_code=response.status_code,
        )

    @staticmethod
    def _raise_with_context(response: requests.Response, url: str) -> None:
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = response.status_code
            LOGGER.warning("%s responded with HTTP %s", url, status)
            raise ContentFetchError(
                f"{url} responded with HTTP {status}", url=url, status_code=status
            ) from exc

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RequestsContentFetcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


_DEFAULT_FETCHER: Optional[ContentFetcher] = None
_DEFAULT_FETCHER_LOCK = threading.Lock()


def default_fetcher() -> ContentFetcher:
    """Return the process-wide fetcher, creating it on first use."""
    global _DEFAULT_FETCHER
    with _DEFAULT_FETCHER_LOCK:
        if _DEFAULT_FETCHER is None:
            _DEFAULT_FETCHER = RequestsContentFetcher()
        return _DEFAULT_FETCHER


def set_default_fetcher(fetcher: Optional[ContentFetcher]) -> None:
    """Replace the process-wide fetcher; ``None`` resets it to the default."""
    global _DEFAULT_FETCHER
    with _DEFAULT_FETCHER_LOCK:
        _DEFAULT_FETCHER = fetcher


def page_content(url: str, *, fetcher: Optional[ContentFetcher] = None) -> PageContent:
    """Fetch ``url`` with ``fetcher`` or the process-wide default."""

    return (fetcher or default_fetcher()).fetch(url)


__all__ = [
    "ContentFetcher",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "RequestsContentFetcher",
    "default_fetcher",
    "page_content",
    "set_default_fetcher",
]
