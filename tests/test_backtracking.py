import math
import re
from collections import Counter
from itertools import product

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algosolve.backtracking import (
    combination_sum,
    combination_sum2,
    generate_parenthesis,
    is_match,
    letter_combinations,
)

tokens = st.lists(st.tuples(st.sampled_from("ab."), st.booleans()), max_size=5)


@given(st.text(alphabet="ab", max_size=8), tokens)
def test_is_match_agrees_with_re(s, parts):
    pattern = "".join(char + ("*" if star else "") for char, star in parts)
    assert is_match(s, pattern) == (re.fullmatch(pattern, s) is not None)


@given(st.text(alphabet="abc", max_size=10))
def test_is_match_literal_and_wildcards(s):
    assert is_match(s, s)
    assert is_match(s, ".*")
    assert is_match(s, "." * len(s))
    assert not is_match(s + "a", s)


def test_is_match_basic():
    assert is_match("", "a*")
    assert not is_match("aa", "a")


def test_letter_combinations_single_digit():
    assert letter_combinations("2") == list("abc")
    assert letter_combinations("7") == list("pqrs")


def test_letter_combinations_empty_and_unknown():
    assert letter_combinations("") == []
    assert letter_combinations("21") == []


def test_letter_combinations_order():
    result = letter_combinations("29")
    assert result == ["".join(pair) for pair in product("abc", "wxyz")]
    assert result == sorted(result)


def test_generate_parenthesis_zero():
    assert generate_parenthesis(0) == [""]


@pytest.mark.parametrize("n", range(1, 7))
def test_generate_parenthesis_counts(n):
    result = generate_parenthesis(n)
    assert len(result) == math.comb(2 * n, n) // (n + 1)
    assert len(set(result)) == len(result)
    for s in result:
        assert len(s) == 2 * n
        depth = 0
        for char in s:
            depth += 1 if char == "(" else -1
            assert depth >= 0
        assert depth == 0


def test_combination_sum_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


@given(st.lists(st.integers(min_value=1, max_value=8), min_size=1, max_size=4, unique=True), st.integers(min_value=1, max_value=15))
def test_combination_sum_invariants(candidates, target):
    result = combination_sum(candidates, target)
    for combo in result:
        assert sum(combo) == target
        assert set(combo) <= set(candidates)
    assert len({tuple(sorted(c)) for c in result}) == len(result)


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)


def test_combination_sum2_example():
    assert combination_sum2([10, 1, 2, 7, 6, 1, 5], 8) == [[1, 1, 6], [1, 2, 5], [1, 7], [2, 6]]


@given(st.lists(st.integers(min_value=1, max_value=6), max_size=8), st.integers(min_value=1, max_value=12))
def test_combination_sum2_invariants(candidates, target):
    result = combination_sum2(candidates, target)
    available = Counter(candidates)
    for combo in result:
        assert sum(combo) == target
        assert combo == sorted(combo)
        assert not Counter(combo) - available
    assert len({tuple(c) for c in result}) == len(result)