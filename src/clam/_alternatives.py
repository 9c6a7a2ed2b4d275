"""Alternatives: ordered matcher alternatives with first-match-wins semantics.

The explicit form of the short-circuit caller pattern:

    if (i := match_posix_option(arg, "h")) or (i := match_posix_long_option(arg, "-help")):
        arg = arg[i:]

becomes

    help_ = Alternatives((
        Alternative(partial(match_posix_option, allowed_options="h"), "help"),
        Alternative(partial(match_posix_long_option, option="-help"), "help"),
    ))
    hit = help_.match(arg)

- Alternatives are tried in order; later ones are never consulted after a hit
- A Hit carries the consumed length and the remainder to continue from
- on_no_match is the fallback tag when every alternative fails
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clam._types import Matcher, MatchResult

MAX_ALTERNATIVES = 256


class MatcherError(Exception):
    """Errors from matcher construction and validation."""


@dataclass(frozen=True, slots=True)
class Alternative[T]:
    """A one-argument matcher paired with the tag reported on success."""

    matcher: Matcher
    tag: T


@dataclass(frozen=True, slots=True)
class Hit[T]:
    """The outcome of a successful alternative.

    ``length`` is the matcher's result and ``remainder`` is the input past
    it. For match_end the length is 1 even though nothing was consumed; the
    remainder is still the empty string.
    """

    tag: T
    length: MatchResult
    remainder: str


@dataclass(frozen=True, slots=True)
class Alternatives[T]:
    """Ordered alternatives, evaluated first-match-wins.

    Width validation runs at construction time. More than MAX_ALTERNATIVES
    alternatives raises MatcherError.
    """

    alternatives: tuple[Alternative[T], ...]
    on_no_match: T | None = None

    def __post_init__(self) -> None:
        self.validate()

    def match(self, input: str) -> Hit[T] | None:
        """Try each alternative against ``input`` in order.

        Returns the first hit, the on_no_match fallback as a zero-length hit,
        or None.
        """
        for alt in self.alternatives:
            length = alt.matcher(input)
            if length:
                return Hit(alt.tag, length, input[length:])
        if self.on_no_match is not None:
            return Hit(self.on_no_match, 0, input)
        return None

    def validate(self) -> None:
        """Validate the number of alternatives.

        Raises:
            MatcherError: If there are more than MAX_ALTERNATIVES.
        """
        n = len(self.alternatives)
        if n > MAX_ALTERNATIVES:
            msg = f"{n} alternatives exceeds maximum allowed {MAX_ALTERNATIVES}"
            raise MatcherError(msg)

    def __len__(self) -> int:
        return len(self.alternatives)


def first_match(input: str, *matchers: Matcher) -> MatchResult:
    """Return the first non-zero result of ``matchers`` on ``input``, or 0."""
    for matcher in matchers:
        length = matcher(input)
        if length:
            return length
    return 0


def alternatives_from_matchers[T](
    matchers: list[Matcher],
    tag: T,
    on_no_match: T | None = None,
) -> Alternatives[T]:
    """Create Alternatives that report the same tag for every matcher.

    The common case of one option spelled several ways (``-h``, ``--help``).
    """
    return Alternatives(
        alternatives=tuple(Alternative(m, tag) for m in matchers),
        on_no_match=on_no_match,
    )
