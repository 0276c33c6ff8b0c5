from __future__ import annotations

import pytest

from livecheck import strategy as strategy_module
from livecheck.exceptions import StrategyNotFoundError
from livecheck.strategy import STRATEGIES, ElectronBuilder, from_symbol, from_url

YML_URL = "https://example.com/app/latest.yml"


class _HighPriorityYaml:
    NICE_NAME = "yaml-feed"
    PRIORITY = 50
    SUPPORTS_REGEX = True

    @classmethod
    def match(cls, url: str) -> bool:
        return url.endswith(".yml")

    @classmethod
    def find_versions(cls, url, regex=None, transform=None, *, fetcher=None):  # pragma: no cover
        raise NotImplementedError


class _LowPriorityYaml(_HighPriorityYaml):
    NICE_NAME = "yaml-low"
    PRIORITY = 10


def test_registry_contains_electron_builder() -> None:
    assert STRATEGIES["electron_builder"] is ElectronBuilder


@pytest.mark.parametrize("symbol", ["electron_builder", "electron-builder", " Electron_Builder "])
def test_from_symbol_normalises_names(symbol: str) -> None:
    assert from_symbol(symbol) is ElectronBuilder


def test_from_symbol_unknown_raises() -> None:
    with pytest.raises(StrategyNotFoundError, match="Unknown livecheck strategy: sparkle"):
        from_symbol("sparkle")


def test_from_url_never_auto_selects_zero_priority() -> None:
    assert from_url(YML_URL) == []


def test_from_url_returns_explicitly_requested_strategy() -> None:
    assert from_url(YML_URL, livecheck_strategy="electron_builder") == [ElectronBuilder]


def test_from_url_requested_strategy_must_match_url() -> None:
    assert from_url("https://example.com/latest.yaml", livecheck_strategy="electron_builder") == []


def test_from_url_drops_strategies_refusing_regex() -> None:
    assert from_url(YML_URL, livecheck_strategy="electron_builder", regex_provided=True) == []


def test_from_url_orders_by_priority(monkeypatch) -> None:
    monkeypatch.setattr(
        strategy_module,
        "STRATEGIES",
        {
            "electron_builder": ElectronBuilder,
            "yaml_low": _LowPriorityYaml,
            "yaml_feed": _HighPriorityYaml,
        },
    )

    assert from_url(YML_URL) == [_HighPriorityYaml, _LowPriorityYaml]
    assert from_url(YML_URL, livecheck_strategy="yaml_low") == [_LowPriorityYaml]


def test_from_url_regex_filter_follows_strategy_not_symbol(monkeypatch) -> None:
    monkeypatch.setattr(
        strategy_module,
        "STRATEGIES",
        {"appcast": ElectronBuilder, "yaml_feed": _HighPriorityYaml},
    )

    assert from_url(YML_URL, livecheck_strategy="appcast", regex_provided=True) == []
    assert from_url(YML_URL, livecheck_strategy="appcast") == [ElectronBuilder]
    assert from_url(YML_URL, regex_provided=True) == [_HighPriorityYaml]
