from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algosolve.backtracking import generate_parenthesis
from algosolve.strings import (
    count_and_say,
    find_substring,
    is_valid_parentheses,
    length_of_longest_substring,
    longest_common_prefix,
    longest_palindrome,
    longest_valid_parentheses,
    str_str,
    zigzag_convert,
)


@given(st.text(alphabet="abcd", min_size=1, max_size=20))
def test_longest_substring_bounds(s):
    result = length_of_longest_substring(s)
    assert 1 <= result <= len(set(s))


@given(st.text(alphabet="abcdefgh", max_size=20))
def test_longest_substring_whole_when_distinct(s):
    result = length_of_longest_substring(s)
    assert (result == len(s)) == (len(set(s)) == len(s))


def test_longest_substring_empty():
    assert length_of_longest_substring("") == 0


@given(st.text(alphabet="abc", max_size=20))
def test_longest_palindrome_is_palindromic_substring(s):
    result = longest_palindrome(s)
    assert result in s
    assert result == result[::-1]
    assert bool(result) == bool(s)


@given(st.text(alphabet="abc", max_size=10))
def test_longest_palindrome_of_palindrome_is_itself(half):
    s = half + half[::-1]
    assert longest_palindrome(s) == s


def test_zigzag_worked_example():
    assert zigzag_convert("PAYPALISHIRING", 3) == "PAHNAPLSIIGYIR"


@given(st.text(max_size=30), st.integers(min_value=1, max_value=8))
def test_zigzag_is_permutation(s, rows):
    assert sorted(zigzag_convert(s, rows)) == sorted(s)


@given(st.text(max_size=10))
def test_zigzag_trivial_rows(s):
    assert zigzag_convert(s, 1) == s
    assert zigzag_convert(s, len(s) + 1) == s


def test_zigzag_rejects_zero_rows():
    with pytest.raises(ValueError):
        zigzag_convert("abc", 0)


def test_common_prefix_example():
    assert longest_common_prefix(["flower", "flow", "flight"]) == "fl"


def test_common_prefix_edge_cases():
    assert longest_common_prefix([]) == ""
    assert longest_common_prefix(["alone"]) == "alone"


@given(st.text(alphabet="ab", max_size=5), st.lists(st.text(alphabet="ab", max_size=5), min_size=1, max_size=4))
def test_common_prefix_is_maximal(prefix, suffixes):
    strs = [prefix + suffix for suffix in suffixes]
    result = longest_common_prefix(strs)
    assert result.startswith(prefix)
    assert all(s.startswith(result) for s in strs)
    following = {s[len(result):len(result) + 1] for s in strs}
    assert "" in following or len(following) > 1


@pytest.mark.parametrize("n", range(1, 5))
def test_generated_parentheses_are_valid(n):
    assert all(is_valid_parentheses(s) for s in generate_parenthesis(n))


@pytest.mark.parametrize("s", ["()[]{}", "{[()]}", ""])
def test_valid_brackets(s):
    assert is_valid_parentheses(s) is True


@pytest.mark.parametrize("s", ["(]", "([)]", ")(", "(", "a", "(a)"])
def test_invalid_brackets(s):
    assert is_valid_parentheses(s) is False


@given(st.text(alphabet="ab", min_size=1, max_size=12), st.text(alphabet="ab", max_size=3))
def test_str_str_matches_find(haystack, needle):
    assert str_str(haystack, needle) == haystack.find(needle)


def test_str_str_empty_haystack():
    assert str_str("", "") == -1
    assert str_str("", "a") == -1


def test_str_str_missing():
    assert str_str("hello", "xyz") == -1


def test_find_substring_example():
    assert sorted(find_substring("barfoothefoobarman", ["foo", "bar"])) == [0, 9]


def test_find_substring_empty_inputs():
    assert find_substring("abc", []) == []
    assert find_substring("", ["a"]) == []


@given(st.lists(st.text(alphabet="ab", min_size=2, max_size=2), min_size=1, max_size=3))
def test_find_substring_joined_words(words):
    assert 0 in find_substring("".join(words), words)


@given(
    st.text(alphabet="ab", max_size=14),
    st.lists(st.text(alphabet="ab", min_size=2, max_size=2), min_size=1, max_size=3),
)
def test_find_substring_hits_are_sound(s, words):
    span = 2 * len(words)
    for start in find_substring(s, words):
        window = s[start:start + span]
        chunks = [window[k:k + 2] for k in range(0, span, 2)]
        assert Counter(chunks) == Counter(words)


@pytest.mark.parametrize("n", range(0, 5))
def test_longest_valid_on_valid_strings(n):
    for s in generate_parenthesis(n):
        assert longest_valid_parentheses(s) == len(s)
        assert longest_valid_parentheses(")" + s + "(") == len(s)


def test_longest_valid_nothing_valid():
    assert longest_valid_parentheses("") == 0
    assert longest_valid_parentheses(")(") == 0


def test_count_and_say_first_term():
    assert count_and_say(1) == "1"
    assert count_and_say(0) == "1"


@pytest.mark.parametrize("n", range(1, 12))
def test_count_and_say_describes_previous(n):
    current = count_and_say(n)
    following = count_and_say(n + 1)
    decoded = "".join(digit * int(count) for count, digit in zip(following[::2], following[1::2]))
    assert decoded == current
    assert set(following) <= set("123")