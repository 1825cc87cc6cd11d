"""Backtracking problems: pattern matching, combinations and generation."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from itertools import product

_KEYPAD = {
    "2": "abc", "3": "def", "4": "ghi", "5": "jkl",
    "6": "mno", "7": "pqrs", "8": "tuv", "9": "wxyz",
}


def is_match(s: str, p: str) -> bool:
    """Whether p matches all of s, where '.' is any character and '*' repeats the one before."""

    @lru_cache(maxsize=None)
    def match(i: int, j: int) -> bool:
        if j == len(p):
            return i == len(s)
        first = i < len(s) and p[j] in (s[i], ".")
        if j + 1 < len(p) and p[j + 1] == "*":
            return match(i, j + 2) or (first and match(i + 1, j))
        return first and match(i + 1, j + 1)

    return match(0, 0)


def letter_combinations(digits: str) -> list[str]:
    """All letter strings a phone keypad can spell for digits.

    Digits without letters yield no combinations.
    """
    if not digits:
        return []
    return ["".join(letters) for letters in product(*(_KEYPAD.get(d, "") for d in digits))]


def generate_parenthesis(n: int) -> list[str]:
    """All well-formed strings of n pairs of parentheses."""
    result: list[str] = []

    def build(prefix: str, opened: int, closed: int) -> None:
        if opened == n and closed == n:
            result.append(prefix)
            return
        if opened < n:
            build(prefix + "(", opened + 1, closed)
        if closed < opened:
            build(prefix + ")", opened, closed + 1)

    build("", 0, 0)
    return result


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Combinations of candidates, each reusable, that sum to target."""
    pool = list(candidates)
    if any(value <= 0 for value in pool):
        raise ValueError("candidates must be positive")
    result: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int, remain: int) -> None:
        if remain == 0:
            result.append(list(chosen))
            return
        if remain < 0:
            return
        for index, value in enumerate(pool[start:], start):
            chosen.append(value)
            search(index, remain - value)
            chosen.pop()

    search(0, target)
    return result


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Distinct combinations summing to target, each candidate used at most once."""
    pool = sorted(candidates)
    result: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int, remain: int) -> None:
        if remain == 0:
            result.append(list(chosen))
            return
        if remain < 0:
            return
        for index, value in enumerate(pool[start:], start):
            if index > start and value == pool[index - 1]:
                continue
            if value > remain:
                break
            chosen.append(value)
            search(index + 1, remain - value)
            chosen.pop()

    search(0, target)
    return result