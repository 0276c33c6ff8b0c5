"""Exception hierarchy raised by livecheck strategies and fetchers."""

from __future__ import annotations


class LivecheckError(Exception):
    """Base class for every error raised by the package."""


class StrategyUsageError(LivecheckError, ValueError):
    """Raised when a strategy is called with arguments it does not support."""


class StrategyNotFoundError(LivecheckError, KeyError):
    """Raised when a strategy symbol is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class ContentFetchError(LivecheckError, RuntimeError):
    """Raised when the content at a URL cannot be retrieved."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


__all__ = [
    "ContentFetchError",
    "LivecheckError",
    "StrategyNotFoundError",
    "StrategyUsageError",
]
