"""Abstractions for pluggable version-extraction strategies."""

from __future__ import annotations

from typing import Callable, ClassVar, Optional, Pattern, Protocol, Union

from livecheck.fetch import ContentFetcher
from livecheck.models import MatchResult

Transform = Callable[[str], object]
RegexArg = Optional[Union[Pattern[str], str]]


class Strategy(Protocol):
    """Contract shared by every livecheck strategy.

    ``PRIORITY`` controls automatic selection: strategies with a priority of
    zero are only used when requested by name.
    """

    NICE_NAME: ClassVar[str]
    PRIORITY: ClassVar[int]
    SUPPORTS_REGEX: ClassVar[bool]

    @classmethod
    def match(cls, url: str) -> bool:
        ...  # pragma: no cover - protocol definition

    @classmethod
    def find_versions(
        cls,
        url: str,
        regex: RegexArg = None,
        transform: Optional[Transform] = None,
        *,
        fetcher: Optional[ContentFetcher] = None,
    ) -> MatchResult:
        ...  # pragma: no cover - protocol definition


def regex_provided(regex: RegexArg) -> bool:
    """Return True when ``regex`` is a non-empty pattern or string."""

    if regex is None:
        return False
    pattern = regex if isinstance(regex, str) else regex.pattern
    return bool(pattern)


__all__ = ["RegexArg", "Strategy", "Transform", "regex_provided"]
