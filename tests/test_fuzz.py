"""Tests for the scorers: ratio, partial_ratio, the token ratios and wratio.

Fixture strings follow the classic fuzzy matching test suite (baseball team
names, punctuation-only corner cases and the "Issue 7" place names).
"""

import pytest

import fuzzyratio as fr

S1 = "new york mets"
S1A = "new york mets"
S1B = "york new mets"
S2 = "new YORK mets"
S3 = "the wonderful new york mets"
S4 = "new york mets vs atlanta braves"
S5 = "atlanta braves vs new york mets"
S6 = "new york mets - atlanta braves"
S7 = "new york city mets - atlanta braves"

# Silly corner cases
S8 = "{"
S8A = "{"
S9 = "{a"
S9A = "{a"
S10 = "a{"
S10A = "{b"


class TestRatio:
    """Tests for the simple ratio."""

    def test_equal_strings(self):
        assert fr.ratio(S1, S1A) == 100
        assert fr.ratio(S8, S8A) == 100
        assert fr.ratio(S9, S9A) == 100

    def test_case_insensitive(self):
        assert fr.ratio(S1, S2, full_process=False) != 100
        assert fr.ratio(S1, S2) == 100

    def test_without_processing(self):
        # 9 common characters out of 26
        assert fr.ratio(S1, S2, full_process=False) == 69

    def test_readme_examples(self):
        assert fr.ratio("this is a test", "did you know this is a test") == 68
        assert fr.ratio("fuzzy wuzzy was a bear", "wuzzy fuzzy was a bear") == 91

    def test_empty_strings(self):
        assert fr.ratio("", "") == 100
        assert fr.ratio("", "hello") == 0
        assert fr.ratio("hello", "") == 0

    def test_punctuation_only_strings_are_equal(self):
        assert fr.ratio("{}", "!!") == 100

    def test_unicode(self):
        assert fr.ratio("Á", "ABCD") == 0

    def test_returns_int(self):
        assert isinstance(fr.ratio("abc", "abd"), int)


class TestPartialRatio:
    """Tests for the best-substring ratio."""

    def test_substring(self):
        assert fr.partial_ratio(S1, S3) == 100
        assert fr.partial_ratio(S3, S1) == 100

    def test_readme_example(self):
        assert fr.partial_ratio("this is a test", "did you know this is a test") == 100

    def test_empty_strings(self):
        assert fr.partial_ratio("", "") == 100
        assert fr.partial_ratio("", "hello") == 0
        assert fr.partial_ratio("hello", "") == 0

    def test_unicode(self):
        assert fr.partial_ratio("Á", "ABCD") == 0

    def test_no_common_characters(self):
        assert fr.partial_ratio("a", "bcd") == 0

    def test_single_character_substring(self):
        assert fr.partial_ratio("a", "abc") == 100

    def test_repeated_occurrence(self):
        # The last alignment pairs "abc" with "abX", the verbatim copy is at 0
        assert fr.partial_ratio("abc", "abcXabXc", full_process=False) == 100

    def test_issue_7(self):
        s1 = "HSINCHUANG"
        s2 = "SINJHUAN"
        s3 = "LSINJHUANG DISTRIC"
        s4 = "SINJHUANG DISTRICT"

        assert fr.partial_ratio(s1, s2) > 75
        assert fr.partial_ratio(s1, s3) > 75
        assert fr.partial_ratio(s1, s4) > 75
        assert fr.partial_ratio(s1, s2, full_process=False) == 88


class TestTokenSortRatio:
    """Tests for token_sort_ratio and partial_token_sort_ratio."""

    def test_token_sort_ratio(self):
        assert fr.token_sort_ratio(S1, S1B) == 100
        assert fr.token_sort_ratio("fuzzy wuzzy was a bear", "wuzzy fuzzy was a bear") == 100
        assert fr.token_sort_ratio("fuzzy was a bear", "fuzzy fuzzy was a bear") == 84

    def test_partial_token_sort_ratio(self):
        assert fr.partial_token_sort_ratio(S1, S1A) == 100
        assert fr.partial_token_sort_ratio(S4, S5) == 100
        assert fr.partial_token_sort_ratio(S8, S8A, full_process=False) == 100
        assert fr.partial_token_sort_ratio(S9, S9A, full_process=False) == 100
        assert fr.partial_token_sort_ratio(S9, S9A, full_process=True) == 100
        assert fr.partial_token_sort_ratio(S10, S10A, full_process=False) == 50

    def test_default_processing_differs(self):
        # token_sort_ratio does not process by default, the partial variant does
        assert fr.token_sort_ratio("New York", "new york") == 75
        assert fr.token_sort_ratio("New York", "new york", full_process=True) == 100
        assert fr.partial_token_sort_ratio("New York", "new york") == 100

    def test_force_ascii(self):
        from fuzzyratio.token_ratio import _token_sort

        s1 = "ABCDÁ EFGHÁ"
        s2 = "ABCD EFGH"
        assert _token_sort(s1, s2, force_ascii=True) == 100
        assert _token_sort(s1, s2, force_ascii=False) < 100


class TestTokenSetRatio:
    """Tests for token_set_ratio and partial_token_set_ratio."""

    def test_token_set_ratio(self):
        assert fr.token_set_ratio(S4, S5) == 100
        assert fr.token_set_ratio(S8, S8A, full_process=False) == 100
        assert fr.token_set_ratio(S9, S9A, full_process=True) == 100
        assert fr.token_set_ratio(S9, S9A, full_process=False) == 100
        assert fr.token_set_ratio(S10, S10A, full_process=False) == 50

    def test_duplicated_words(self):
        assert fr.token_set_ratio("fuzzy was a bear", "fuzzy fuzzy was a bear") == 100

    def test_partial_token_set_ratio(self):
        assert fr.partial_token_set_ratio(S4, S7) == 100
        assert fr.partial_token_set_ratio(S10, S10A, full_process=False) == 50

    def test_empty_after_processing(self):
        assert fr.token_set_ratio("{}", "!!", full_process=True) == 100
        assert fr.token_set_ratio("{}", "abc", full_process=True) == 0

    def test_force_ascii(self):
        from fuzzyratio.token_ratio import _token_set

        s1 = "ABCDÁ EFGHÁ"
        s2 = "ABCD EFGH"
        assert _token_set(s1, s2, force_ascii=True) == 100
        assert _token_set(s1, s2, force_ascii=False) < 100


class TestWRatio:
    """Tests for the weighted ratio."""

    def test_equal(self):
        assert fr.wratio(S1, S1A) == 100

    def test_case_insensitive(self):
        assert fr.wratio(S1, S2) == 100

    def test_partial_match(self):
        # a partial match is scaled by .9
        assert fr.wratio(S1, S3) == 90

    def test_misordered_match(self):
        # misordered full matches are scaled by .95
        assert fr.wratio(S4, S5) == 95

    def test_long_length_ratio(self):
        # "abbbbbbbbb" is 10 times as long as "a", so partials are scaled by .6
        assert fr.wratio("a", "abbbbbbbbb") == 60

    def test_readme_example(self):
        assert fr.wratio("this is an interesting test", "this is a test!") == 86

    def test_empty_strings(self):
        assert fr.wratio("", "") == 100
        assert fr.wratio("{}", "!!") == 100
        assert fr.wratio("", "hello") == 0
        assert fr.wratio("hello", "!!") == 0

    def test_unicode(self):
        assert fr.wratio("ABCD", "Á", force_ascii=False) == 0

        russian1 = "психолог"
        russian2 = "психотерапевт"
        assert fr.wratio(russian1, russian2, force_ascii=False) > 0

        chinese1 = "我了解数学"
        chinese2 = "我学数学"
        assert fr.wratio(chinese1, chinese2, force_ascii=False) > 0

    def test_non_ascii_tokens_kept_without_force_ascii(self):
        assert fr.wratio("我", "你", force_ascii=False) == 0

    def test_weighted_ratio_alias(self):
        assert fr.weighted_ratio is fr.wratio


@pytest.mark.parametrize(
    "scorer",
    [
        fr.ratio,
        fr.partial_ratio,
        fr.token_sort_ratio,
        fr.partial_token_sort_ratio,
        fr.token_set_ratio,
        fr.partial_token_set_ratio,
        fr.wratio,
    ],
)
def test_scorers_return_int(scorer):
    score = scorer(S4, S6)
    assert isinstance(score, int)
    assert 0 <= score <= 100
