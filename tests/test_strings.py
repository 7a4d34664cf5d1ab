import pytest

from dailypuzzles.strings import (
    buddy_strings,
    is_valid_parentheses,
    largest_variance,
    max_consecutive_answers,
    max_vowels,
    merge_alternately,
    predict_party_victory,
    remove_stars,
    simplify_path,
)


@pytest.mark.parametrize("text", ["()", "()[]{}", "{[]}", "", "([{}])"])
def test_valid_parentheses(text):
    assert is_valid_parentheses(text) is True


@pytest.mark.parametrize("text", ["(]", "([)]", "(", "}", "(()"])
def test_invalid_parentheses(text):
    assert is_valid_parentheses(text) is False


def test_remove_stars_example():
    assert remove_stars("leet**cod*e") == "lecoe"


def test_remove_stars_without_stars_is_identity():
    assert remove_stars("abc") == "abc"


def test_remove_stars_can_empty_string():
    assert remove_stars("ab**") == ""


def test_remove_stars_with_nothing_to_remove():
    with pytest.raises(ValueError):
        remove_stars("*a")


def test_simplify_path_root():
    assert simplify_path("/../") == "/"
    assert simplify_path("/") == "/"


def test_simplify_path_resolves_dots():
    assert simplify_path("/a/./b/../../c/") == "/c"


@pytest.mark.parametrize("path", ["/home//foo/", "/a/b/../c/./d", "/x/y/z/"])
def test_simplify_path_is_canonical(path):
    result = simplify_path(path)
    assert simplify_path(result) == result
    assert "//" not in result
    assert result.startswith("/")
    assert result == "/" or not result.endswith("/")


def test_merge_alternately_equal_lengths():
    merged = merge_alternately("abc", "xyz")
    assert merged[::2] == "abc"
    assert merged[1::2] == "xyz"


def test_merge_alternately_leftovers():
    assert merge_alternately("abc", "") == "abc"
    assert merge_alternately("", "xyz") == "xyz"
    merged = merge_alternately("ab", "pqrs")
    assert len(merged) == 6
    assert merged.endswith("rs")


def test_predict_party_victory():
    assert predict_party_victory("RD") == "Radiant"
    assert predict_party_victory("RDD") == "Dire"
    assert predict_party_victory("RRR") == "Radiant"
    assert predict_party_victory("DDR") == "Dire"


def test_max_vowels_full_window():
    assert max_vowels("aeiou", 2) == 2
    assert max_vowels("abciiidef", 3) == 3


def test_max_vowels_none():
    assert max_vowels("rhythms", 2) == 0


@pytest.mark.parametrize("text,k", [("leetcode", 3), ("tryhard", 4), ("aabbaa", 2)])
def test_max_vowels_bounded_by_window(text, k):
    result = max_vowels(text, k)
    assert 0 <= result <= k


@pytest.mark.parametrize(
    "s,goal,expected",
    [
        ("ab", "ba", True),
        ("ab", "ab", False),
        ("aa", "aa", True),
        ("abcaa", "abcbb", False),
        ("abc", "ab", False),
        ("abcd", "abdc", True),
    ],
)
def test_buddy_strings(s, goal, expected):
    assert buddy_strings(s, goal) is expected


def test_max_consecutive_answers_enough_changes():
    assert max_consecutive_answers("TTFF", 2) == 4
    key = "TFTFTFFT"
    assert max_consecutive_answers(key, len(key)) == len(key)


def test_max_consecutive_answers_monotonic_in_k():
    key = "TTFTTFTTFFT"
    results = [max_consecutive_answers(key, k) for k in range(len(key) + 1)]
    assert results == sorted(results)
    assert all(1 <= r <= len(key) for r in results)


def test_largest_variance_example():
    assert largest_variance("aababbb") == 3


def test_largest_variance_needs_two_letters():
    assert largest_variance("aaaa") == 0
    assert largest_variance("abcde") == 0


def test_largest_variance_symmetric_under_reversal():
    text = "abbcbbaacb"
    assert largest_variance(text) == largest_variance(text[::-1])
    assert largest_variance(text) < len(text)