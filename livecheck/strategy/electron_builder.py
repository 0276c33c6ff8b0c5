"""Strategy that reads the ``version`` field of electron-builder appcasts."""

from __future__ import annotations

import re
from typing import Any, Optional

import yaml

from livecheck.exceptions import StrategyUsageError
from livecheck.fetch import ContentFetcher, page_content
from livecheck.models import MatchResult
from livecheck.strategy.base import RegexArg, Transform, regex_provided
from livecheck.utils.logger import get_logger
from livecheck.version import Version

LOGGER = get_logger(__name__)


class ElectronBuilder:
    """Fetch a URL and parse it as an electron-builder appcast in YAML.

    The appcast (``latest.yml``, ``latest-mac.yml`` ...) carries the release
    version in a top-level ``version`` key, so no regex is needed or accepted.
    """

    NICE_NAME = "electron-builder"

    # Zero keeps the strategy out of automatic selection; callers must ask for
    # it by name.
    PRIORITY = 0

    # The version is read from a named field, so caller regexes are refused.
    SUPPORTS_REGEX = False

    URL_MATCH_REGEX = re.compile(r"^https?://.+?/.+?\.yml", re.IGNORECASE)

    @classmethod
    def match(cls, url: str) -> bool:
        """Whether the strategy can be applied to ``url``."""

        return cls.URL_MATCH_REGEX.search(url) is not None

    @staticmethod
    def version_from_content(content: str) -> Optional[str]:
        """Return the top-level ``version`` of a YAML document, if any.

        Only plain scalars, sequences and mappings are loaded; documents using
        custom tags are treated like any other unparsable content.
        """

        try:
            item: Any = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            LOGGER.debug("Content is not a safe YAML document: %s", exc)
            return None
        except RecursionError:
            LOGGER.debug("Content is nested too deeply to load")
            return None

        if not isinstance(item, dict):
            return None

        version = item.get("version")
        if isinstance(version, bool) or not isinstance(version, (str, int, float)):
            return None
        # Unquoted numbers load as int/float; keep their textual form.
        text = str(version)
        return text or None

    @classmethod
    def find_versions(
        cls,
        url: str,
        regex: RegexArg = None,
        transform: Optional[Transform] = None,
        *,
        fetcher: Optional[ContentFetcher] = None,
    ) -> MatchResult:
        """Check the appcast at ``url`` for a version.

        ``transform`` receives the raw version string; its return value,
        converted to ``str``, is recorded instead. Returning ``None`` or an
        empty value records nothing.
        """

        if regex_provided(regex):
            raise StrategyUsageError(f"The {cls.__name__} strategy does not support a regex.")

        result = MatchResult(url=url, regex=None)

        page = page_content(url, fetcher=fetcher)
        if page.final_url:
            result.final_url = page.final_url
            result.messages.append(f"Redirected to {page.final_url}")

        item = cls.version_from_content(page.content)
        if item is None:
            LOGGER.debug("No version found in %s", url)
            return result

        if transform is not None:
            returned = transform(item)
            match = str(returned) if returned is not None else None
        else:
            match = item

        if match:
            result.matches[match] = Version(match)
        else:
            LOGGER.debug("Transform for %s returned no value", url)
        return result


__all__ = ["ElectronBuilder"]
