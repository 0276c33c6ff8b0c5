"""Registry of the strategies livecheck can apply to a URL."""

from __future__ import annotations

from typing import Optional

from livecheck.exceptions import StrategyNotFoundError
from livecheck.strategy.base import Strategy
from livecheck.strategy.electron_builder import ElectronBuilder

STRATEGIES: dict[str, type[Strategy]] = {
    "electron_builder": ElectronBuilder,
}


def from_symbol(symbol: str) -> type[Strategy]:
    """Return the strategy registered under ``symbol``."""

    key = symbol.strip().lower().replace("-", "_")
    try:
        return STRATEGIES[key]
    except KeyError:
        raise StrategyNotFoundError(f"Unknown livecheck strategy: {symbol}") from None


def from_url(
    url: str,
    *,
    livecheck_strategy: Optional[str] = None,
    regex_provided: bool = False,
) -> list[type[Strategy]]:
    """Return the strategies applicable to ``url``, highest priority first.

    Zero-priority strategies are only returned when named through
    ``livecheck_strategy``; naming a strategy also restricts the result to it.
    """

    if livecheck_strategy is not None:
        requested = from_symbol(livecheck_strategy)
        candidates = {
            symbol: strategy for symbol, strategy in STRATEGIES.items() if strategy is requested
        }
    else:
        candidates = {
            symbol: strategy for symbol, strategy in STRATEGIES.items() if strategy.PRIORITY > 0
        }

    applicable: list[type[Strategy]] = []
    for strategy in candidates.values():
        if regex_provided and not strategy.SUPPORTS_REGEX:
            continue
        if strategy.match(url):
            applicable.append(strategy)

    applicable.sort(key=lambda strategy: strategy.PRIORITY, reverse=True)
    return applicable


__all__ = [
    "ElectronBuilder",
    "STRATEGIES",
    "Strategy",
    "from_symbol",
    "from_url",
]
