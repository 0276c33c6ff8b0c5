"""Opaque, comparable version values built from strings found upstream."""

from __future__ import annotations

import re
from functools import total_ordering
from itertools import zip_longest
from typing import Tuple, Union

_TOKEN_PATTERN = re.compile(r"\d+|[a-z]+")

# Numeric components sort after alphabetic ones so "1.0rc1" < "1.0".
_Token = Tuple[int, int, str]
_MISSING: _Token = (1, 0, "")


def _tokenise(value: str) -> tuple[_Token, ...]:
    tokens: list[_Token] = []
    for part in _TOKEN_PATTERN.findall(value.lower()):
        if part.isdigit():
            tokens.append((1, int(part), ""))
        else:
            tokens.append((0, 0, part))
    return tuple(tokens)


@total_ordering
class Version:
    """A version string with loose, token-wise ordering.

    Any non-empty string is accepted, so values returned by caller transforms
    such as ``"v2.0.0-custom"`` are valid. Two versions are equal only when
    their strings are identical; ordering compares numeric and alphabetic
    components in turn and falls back to the raw string on ties.
    """

    __slots__ = ("_value", "_tokens")

    def __init__(self, value: Union[str, "Version"]) -> None:
        text = str(value)
        if not text:
            raise ValueError("Version string must not be empty")
        self._value = text
        self._tokens = _tokenise(text)

    @property
    def tokens(self) -> tuple[_Token, ...]:
        return self._tokens

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Version({self._value!r})"

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Version):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        for left, right in zip_longest(self._tokens, other._tokens, fillvalue=_MISSING):
            if left != right:
                return left < right
        return self._value < other._value


__all__ = ["Version"]
