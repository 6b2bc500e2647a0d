"""
WORKLOG — Text Matcher Tests.

Tests for levenshtein_distance, fuzzy_match and match_text strategy order.
"""

import pytest

from worklog.search.models import MatchType, SearchOptions
from worklog.search.text import fuzzy_match, levenshtein_distance, match_text


def opts(**kwargs) -> SearchOptions:
    return SearchOptions(query=kwargs.pop("query", ""), **kwargs)


class TestLevenshtein:
    def test_identical_strings(self):
        assert levenshtein_distance("commit", "commit") == 0

    def test_empty_strings(self):
        assert levenshtein_distance("", "") == 0
        assert levenshtein_distance("abc", "") == 3
        assert levenshtein_distance("", "abcd") == 4

    def test_classic_example(self):
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_single_deletion(self):
        assert levenshtein_distance("authentication", "authenticaton") == 1

    def test_symmetric(self):
        assert levenshtein_distance("flaw", "lawn") == levenshtein_distance("lawn", "flaw") == 2


class TestFuzzyMatch:
    def test_substring_is_perfect(self):
        assert fuzzy_match("Authentication handler", "handler") == (True, 1.0)

    def test_misspelling_matches(self):
        matched, similarity = fuzzy_match("authentication handler", "authenticaton")
        assert matched
        assert similarity == pytest.approx(1 - 1 / 14)

    def test_unrelated_word_rejected(self):
        matched, similarity = fuzzy_match("deploy pipeline", "authentication")
        assert not matched
        assert similarity < 0.6

    def test_threshold_is_inclusive(self):
        # "abcde" vs "abxyz": distance 3 over length 5 -> similarity 0.4
        assert not fuzzy_match("abxyz", "abcde")[0]
        # "abcde" vs "abcxy": distance 2 over length 5 -> similarity 0.6
        assert fuzzy_match("abcxy", "abcde") == (True, pytest.approx(0.6))

    def test_empty_text(self):
        assert fuzzy_match("", "query") == (False, 0.0)


class TestMatchTextExact:
    @pytest.mark.parametrize(
        "text,query",
        [
            ("Fix authentication bug", "authentication"),
            ("Fix OAuth Integration", "oauth"),
            ("refactor", "REFACTOR"),
            ("a", "a"),
        ],
    )
    def test_substring_is_exact_in_range(self, text, query):
        m = match_text(text, query, opts(query=query))
        assert m.matched
        assert m.kind is MatchType.EXACT
        assert 0.5 <= m.score <= 1.0

    def test_score_rewards_coverage(self):
        m = match_text("Fix authentication bug", "authentication", opts())
        assert m.score == pytest.approx(0.5 + 0.5 * 14 / 22)

    def test_full_text_scores_one(self):
        assert match_text("Deploy", "deploy", opts()).score == 1.0

    def test_no_match(self):
        m = match_text("Add new feature", "authentication", opts())
        assert not m.matched
        assert m.score == 0
        assert m.kind is MatchType.EXACT

    def test_empty_query_matches_with_floor_score(self):
        m = match_text("anything", "", opts())
        assert m.matched
        assert m.score == 0.5

    def test_empty_text_and_query(self):
        m = match_text("", "", opts())
        assert m.matched
        assert m.score == 1.0


class TestMatchTextRegex:
    def test_regex_match_scores_fixed(self):
        m = match_text("fix: resolve memory leak", "^fix:", opts(regex=True))
        assert m.matched
        assert m.kind is MatchType.REGEX
        assert m.score == 0.9

    def test_regex_is_case_insensitive(self):
        m = match_text("FIX: handle timeout", "^fix:", opts(regex=True))
        assert m.kind is MatchType.REGEX

    def test_regex_wins_over_exact(self):
        m = match_text("deploy", "deploy", opts(regex=True))
        assert m.kind is MatchType.REGEX
        assert m.score == 0.9

    def test_regex_disabled_is_literal(self):
        assert not match_text("fix: resolve memory leak", "^fix:", opts()).matched

    def test_invalid_regex_falls_back_to_substring(self):
        m = match_text("call foo( now", "foo(", opts(regex=True))
        assert m.matched
        assert m.kind is MatchType.EXACT

    def test_invalid_regex_without_substring_does_not_raise(self):
        m = match_text("nothing here", "[unclosed", opts(regex=True))
        assert not m.matched

    def test_regex_miss_falls_through_to_fuzzy(self):
        m = match_text("authentication handler", "authenticaton$", opts(regex=True, fuzzy=True))
        # Regex misses and no substring; fuzzy compares the raw query text
        assert m.matched
        assert m.kind is MatchType.FUZZY


class TestMatchTextFuzzy:
    def test_fuzzy_misspelling(self):
        m = match_text("authentication handler", "authenticaton", opts(fuzzy=True))
        assert m.matched
        assert m.kind is MatchType.FUZZY
        assert m.score == pytest.approx((1 - 1 / 14) * 0.8)

    def test_fuzzy_not_attempted_when_disabled(self):
        assert not match_text("authentication handler", "authenticaton", opts()).matched

    def test_exact_preferred_over_fuzzy(self):
        m = match_text("authentication handler", "handler", opts(fuzzy=True))
        assert m.kind is MatchType.EXACT

    def test_fuzzy_below_threshold(self):
        assert not match_text("deploy pipeline", "authentication", opts(fuzzy=True)).matched
