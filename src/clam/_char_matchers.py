"""Single-character matchers.

Every function here looks at the first character of ``input`` only and
returns 1 or 0. The empty string is end of input and classifies as none of
the character classes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clam._types import AllowSet, MatchResult


def match_char(input: str, c: str) -> MatchResult:
    """Match ``input`` if its first character is ``c``."""
    return 1 if input and input[0] == c else 0


def match_end(input: str) -> MatchResult:
    """Match the end of input.

    Returns 1 for the empty string. This is a success code, not a consumed
    length: nothing is consumed.
    """
    return 0 if input else 1


def match_anychar(input: str, chars: AllowSet) -> MatchResult:
    """Match ``input`` if its first character is one of ``chars``.

    ``chars=None`` allows any character; ``chars=""`` allows none.
    End of input never matches.
    """
    if match_end(input):
        return 0
    if chars is None:
        return 1
    for c in chars:
        if match_char(input, c):
            return 1
    return 0


def match_numeric10_char(input: str) -> MatchResult:
    """Match one base-10 digit (0-9)."""
    c = input[:1]
    return 1 if "0" <= c <= "9" else 0


def match_numeric16_char(input: str) -> MatchResult:
    """Match one base-16 digit (0-9, A-F, a-f)."""
    c = input[:1]
    return 1 if "0" <= c <= "9" or "A" <= c <= "F" or "a" <= c <= "f" else 0


def match_uppercase_char(input: str) -> MatchResult:
    c = input[:1]
    return 1 if "A" <= c <= "Z" else 0


def match_lowercase_char(input: str) -> MatchResult:
    c = input[:1]
    return 1 if "a" <= c <= "z" else 0


def match_alpha_char(input: str) -> MatchResult:
    return 1 if match_lowercase_char(input) or match_uppercase_char(input) else 0


def match_alphanumeric_char(input: str) -> MatchResult:
    return 1 if match_alpha_char(input) or match_numeric10_char(input) else 0
