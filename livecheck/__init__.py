"""Public interface for the livecheck package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from typing import Optional

from livecheck.exceptions import (
    ContentFetchError,
    LivecheckError,
    StrategyNotFoundError,
    StrategyUsageError,
)
from livecheck.fetch import ContentFetcher, RequestsContentFetcher
from livecheck.models import MatchResult, PageContent
from livecheck.strategy import STRATEGIES, ElectronBuilder, from_symbol, from_url
from livecheck.strategy.base import RegexArg, Transform
from livecheck.version import Version

__all__ = [
    "__version__",
    "ContentFetchError",
    "ContentFetcher",
    "ElectronBuilder",
    "LivecheckError",
    "MatchResult",
    "PageContent",
    "RequestsContentFetcher",
    "STRATEGIES",
    "StrategyNotFoundError",
    "StrategyUsageError",
    "Version",
    "find_versions",
    "from_symbol",
    "from_url",
]

try:
    __version__ = importlib_metadata.version("livecheck")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


def find_versions(
    url: str,
    strategy: str,
    *,
    regex: RegexArg = None,
    transform: Optional[Transform] = None,
    fetcher: Optional[ContentFetcher] = None,
) -> MatchResult:
    """Run the strategy registered as ``strategy`` against ``url``."""

    return from_symbol(strategy).find_versions(url, regex, transform, fetcher=fetcher)
