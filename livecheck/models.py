"""Data models shared across strategies and fetchers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Pattern

from livecheck.version import Version


@dataclass(slots=True)
class PageContent:
    """Raw content retrieved for a URL plus optional fetch metadata."""

    content: str
    final_url: str | None = None
    status_code: int | None = None


@dataclass(slots=True)
class MatchResult:
    """Outcome of a single strategy invocation."""

    url: str
    regex: Pattern[str] | None = None
    matches: dict[str, Version] = field(default_factory=dict)
    messages: list[str] = field(default_factory=list)
    final_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a plain-dict view with versions rendered as strings."""

        return {
            "url": self.url,
            "regex": self.regex.pattern if self.regex is not None else None,
            "matches": {match: str(version) for match, version in self.matches.items()},
            "messages": list(self.messages),
            "final_url": self.final_url,
        }
