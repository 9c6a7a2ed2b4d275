"""Tests for single-character matchers."""

import string

import pytest

from clam import (
    match_alpha_char,
    match_alphanumeric_char,
    match_anychar,
    match_char,
    match_end,
    match_lowercase_char,
    match_numeric10_char,
    match_numeric16_char,
    match_uppercase_char,
)
from conftest import ASCII_CHARS, SAMPLE_ARGS

CLASSIFIERS = [
    (match_numeric10_char, string.digits),
    (match_numeric16_char, string.hexdigits),
    (match_uppercase_char, string.ascii_uppercase),
    (match_lowercase_char, string.ascii_lowercase),
    (match_alpha_char, string.ascii_letters),
    (match_alphanumeric_char, string.ascii_letters + string.digits),
]


class TestMatchChar:
    def test_match(self) -> None:
        assert match_char("A", "A") == 1

    def test_no_match(self) -> None:
        assert match_char("A", "a") == 0

    def test_empty_input(self) -> None:
        assert match_char("", "A") == 0

    def test_nul_is_an_ordinary_character(self) -> None:
        assert match_char("\0", "\0") == 1
        assert match_end("\0") == 0

    @pytest.mark.parametrize("s", SAMPLE_ARGS)
    @pytest.mark.parametrize("c", ["-", "/", "h", "1"])
    def test_first_character_only(self, s: str, c: str) -> None:
        expected = 1 if s and s[0] == c else 0
        assert match_char(s, c) == expected


class TestMatchEnd:
    def test_empty_matches_with_one(self) -> None:
        assert match_end("") == 1

    def test_non_empty(self) -> None:
        assert match_end("A") == 0

    @pytest.mark.parametrize("s", SAMPLE_ARGS)
    def test_only_empty_matches(self, s: str) -> None:
        assert match_end(s) == (1 if s == "" else 0)


class TestMatchAnychar:
    def test_allowed(self) -> None:
        assert match_anychar("A", "aA123") == 1

    def test_wildcard(self) -> None:
        assert match_anychar("A", None) == 1

    def test_empty_set_is_not_wildcard(self) -> None:
        assert match_anychar("A", "") == 0

    def test_not_allowed(self) -> None:
        assert match_anychar("B", "aA123") == 0

    @pytest.mark.parametrize("chars", [None, "", "abc"])
    def test_empty_input_never_matches(self, chars: str | None) -> None:
        assert match_anychar("", chars) == 0

    def test_duplicates_in_set_still_return_one(self) -> None:
        assert match_anychar("a", "aaa") == 1

    @pytest.mark.parametrize("c", ASCII_CHARS)
    def test_membership(self, c: str) -> None:
        allowed = "dacb1"
        assert match_anychar(c + "zz", allowed) == (1 if c in allowed else 0)


class TestClassifiers:
    @pytest.mark.parametrize(("matcher", "members"), CLASSIFIERS)
    def test_exact_ascii_range(self, matcher, members: str) -> None:
        for c in ASCII_CHARS:
            assert matcher(c) == (1 if c in members else 0), c

    @pytest.mark.parametrize(("matcher", "members"), CLASSIFIERS)
    def test_empty_input(self, matcher, members: str) -> None:
        assert matcher("") == 0

    @pytest.mark.parametrize(("matcher", "members"), CLASSIFIERS)
    def test_looks_at_first_character_only(self, matcher, members: str) -> None:
        assert matcher(members[0] + "!") == 1
        assert matcher("!" + members[0]) == 0

    @pytest.mark.parametrize("c", ["٣", "Ä", "ß", "Ａ"])
    def test_non_ascii_is_not_classified(self, c: str) -> None:
        for matcher, _ in CLASSIFIERS:
            assert matcher(c) == 0
