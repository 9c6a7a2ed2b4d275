"""POSIX-style argument matchers.

- ``-x``: single option (match_posix_option)
- ``-xyz``: combined flags (match_posix_flags)
- ``--name`` or ``-name``: long option (match_posix_long_option)
- ``--``: end of options (match_posix_terminate_options)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from clam._char_matchers import (
    match_alphanumeric_char,
    match_anychar,
    match_char,
)
from clam._string_matchers import match_chars, match_chars_to_end

if TYPE_CHECKING:
    from clam._types import AllowSet, MatchResult

_TERMINATOR = "--"


def match_posix_option(input: str, allowed_options: AllowSet) -> MatchResult:
    """Match ``-`` followed by one alphanumeric option in ``allowed_options``.

    Always consumes exactly 2 characters on success. Whatever follows (an
    attached value, more flags) is left to the caller.
    """
    if (
        match_char(input, "-")
        and match_alphanumeric_char(input[1:])
        and match_anychar(input[1:], allowed_options)
    ):
        return 2
    return 0


def match_posix_flags(input: str, allowed_options: AllowSet) -> MatchResult:
    """Match ``-`` followed by one or more alphanumeric flags.

    Every character up to the end of ``input`` must be an allowed flag;
    a bare ``-`` does not match.
    """
    if not match_char(input, "-"):
        return 0
    i = 1
    while i < len(input):
        if not (
            match_alphanumeric_char(input[i])
            and match_anychar(input[i], allowed_options)
        ):
            return 0
        i += 1
    return i if i > 1 else 0


def match_posix_long_option(input: str, option: str) -> MatchResult:
    """Match ``-`` followed by ``option`` as a prefix.

    Pass ``"-name"`` to match ``--name``. The trailer (``=value`` or
    anything else) is left to the caller.
    """
    dash = match_char(input, "-")
    if not dash:
        return 0
    opt = match_chars(input[dash:], option)
    return dash + opt if opt else 0


def match_posix_terminate_options(input: str) -> MatchResult:
    """Match an argument that is exactly ``--``."""
    return match_chars_to_end(input, _TERMINATOR)
