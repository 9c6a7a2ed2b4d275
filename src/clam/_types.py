"""Core type aliases and protocols for clam.

- MatchResult is the consumed-length integer every matcher returns
- AllowSet distinguishes "any character" (None) from "no character" ("")
- Matcher is the one-argument shape used for composition
"""

from __future__ import annotations

from typing import Protocol

# Number of leading characters matched. 0 is "no match", except for
# match_end, which reports a matched end of input as 1.
type MatchResult = int

# None accepts any character; an empty string accepts none.
type AllowSet = str | None


class Matcher(Protocol):
    """Match a prefix of an input string.

    Parameterized matchers are bound to this shape with functools.partial,
    e.g. ``partial(match_posix_option, allowed_options="h")``.
    """

    def __call__(self, input: str, /) -> MatchResult: ...
