"""Multi-character matchers built from the character matchers.

All matchers return the number of leading characters consumed, or 0.
Comparison is code point by code point with no case folding.

``match_pattern`` uses ``google-re2`` for guaranteed linear-time matching.
RE2 does not support backreferences or lookahead/lookbehind because they
require backtracking. Patterns using them are rejected with MatcherError.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

import re2

from clam._alternatives import MatcherError
from clam._char_matchers import match_anychar, match_numeric10_char

if TYPE_CHECKING:
    from clam._types import MatchResult

_SIGNS = "-+"


def _agreeing_prefix(input: str, chars: str) -> int:
    """Count leading characters on which ``input`` and ``chars`` agree."""
    limit = min(len(input), len(chars))
    i = 0
    while i < limit and input[i] == chars[i]:
        i += 1
    return i


def match_at_least_n_chars(input: str, n: int, chars: str) -> MatchResult:
    """Match at least ``n`` leading characters of ``chars``.

    Keeps consuming while the two strings agree, so the result can exceed
    ``n`` up to the shorter of the two lengths.

    >>> match_at_least_n_chars("ABQ", 2, "ABC")
    2
    """
    i = _agreeing_prefix(input, chars)
    return i if i >= n else 0


def match_chars(input: str, chars: str) -> MatchResult:
    """Match ``chars`` as a prefix of ``input``.

    Returns ``len(chars)`` or 0. An empty ``chars`` never matches.
    """
    i = _agreeing_prefix(input, chars)
    return i if i == len(chars) else 0


def match_chars_to_end(input: str, chars: str) -> MatchResult:
    """Match ``input`` only if it equals ``chars`` exactly."""
    i = match_chars(input, chars)
    if not i:
        return 0
    return i if i == len(input) else 0


def match_unsigned_integer10(input: str) -> MatchResult:
    """Match the leading run of base-10 digits."""
    i = 0
    while i < len(input) and match_numeric10_char(input[i]):
        i += 1
    return i


def match_signed_integer10(input: str) -> MatchResult:
    """Match a base-10 integer with an optional ``+`` or ``-`` sign.

    A sign alone is not a match.
    """
    sign = match_anychar(input, _SIGNS)
    number = match_unsigned_integer10(input[sign:])
    return sign + number if number else 0


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re2.Pattern[str]:
    """Compile ``pattern`` with RE2, caching by pattern string.

    Raises:
        MatcherError: If the pattern is not valid RE2 syntax.
    """
    try:
        return re2.compile(pattern)
    except re2.error as e:
        msg = f'invalid regex pattern "{pattern}": {e}'
        raise MatcherError(msg) from e


def match_pattern(input: str, pattern: str) -> MatchResult:
    """Match ``pattern`` anchored at the start of ``input``.

    Returns the length of the match; a zero-width match counts as no match.

    Raises:
        MatcherError: If the pattern is not valid RE2 syntax.
    """
    m = compile_pattern(pattern).match(input)
    if m is None:
        return 0
    return m.end()
