"""Windows-style switch matchers (``/x`` and ``/name``)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from clam._char_matchers import match_alphanumeric_char, match_anychar, match_char
from clam._string_matchers import match_chars

if TYPE_CHECKING:
    from clam._types import AllowSet, MatchResult


def match_windows_switch(input: str, allowed_switches: AllowSet) -> MatchResult:
    """Match ``/`` followed by one alphanumeric switch in ``allowed_switches``.

    Consumes exactly 2 characters on success.
    """
    if (
        match_char(input, "/")
        and match_alphanumeric_char(input[1:])
        and match_anychar(input[1:], allowed_switches)
    ):
        return 2
    return 0


def match_windows_long_switch(input: str, switch: str) -> MatchResult:
    """Match ``/`` followed by ``switch`` as a prefix."""
    slash = match_char(input, "/")
    if not slash:
        return 0
    name = match_chars(input[slash:], switch)
    return slash + name if name else 0
