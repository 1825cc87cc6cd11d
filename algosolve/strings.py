"""String problems: substrings, palindromes, brackets and sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import groupby, takewhile

_BRACKETS = {"(": ")", "{": "}", "[": "]"}


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    left = 0
    best = 0
    for right, char in enumerate(s):
        if last_seen.get(char, -1) >= left:
            left = last_seen[char] + 1
        last_seen[char] = right
        best = max(best, right - left + 1)
    return best


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the first one found wins a tie."""
    best = ""
    for center in range(len(s)):
        for low, high in ((center, center), (center, center + 1)):
            while low >= 0 and high < len(s) and s[low] == s[high]:
                low -= 1
                high += 1
            candidate = s[low + 1:high]
            if len(candidate) > len(best):
                best = candidate
    return best


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write s in a zigzag over num_rows rows and read it back row by row."""
    if num_rows < 1:
        raise ValueError(f"num_rows must be at least 1, got {num_rows}")
    if num_rows == 1:
        return s
    cycle = 2 * (num_rows - 1)
    parts: list[str] = []
    for row in range(num_rows):
        for index in range(row, len(s), cycle):
            parts.append(s[index])
            diagonal = index + cycle - 2 * row
            if 0 < row < num_rows - 1 and diagonal < len(s):
                parts.append(s[diagonal])
    return "".join(parts)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest prefix shared by every string; empty input gives ''."""
    if not strs:
        return ""
    shared = takewhile(lambda column: len(set(column)) == 1, zip(*strs))
    return "".join(column[0] for column in shared)


def is_valid_parentheses(s: str) -> bool:
    """True when every bracket in s is closed in the right order.

    Any character other than a matching closing bracket stays on the
    stack, so strings holding other characters are never valid.
    """
    stack: list[str] = []
    for char in s:
        if stack and _BRACKETS.get(stack[-1]) == char:
            stack.pop()
        else:
            stack.append(char)
    return not stack


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of needle in haystack, or -1.

    Only start positions inside haystack are tried, so an empty haystack
    never matches, not even an empty needle.
    """
    index = haystack.find(needle)
    return index if index < len(haystack) else -1


def find_substring(s: str, words: Sequence[str]) -> list[int]:
    """Start indices of substrings made of every word exactly once, in any order.

    All words must have the same length. Indices are grouped by their
    offset modulo the word length.
    """
    if not words or not s:
        return []
    width = len(words[0])
    if width == 0:
        return []
    wanted = Counter(words)
    total = len(words)
    result: list[int] = []
    for offset in range(width):
        left = offset
        seen: Counter[str] = Counter()
        matched = 0
        for right in range(offset, len(s) - width + 1, width):
            word = s[right:right + width]
            if word not in wanted:
                seen.clear()
                matched = 0
                left = right + width
                continue
            seen[word] += 1
            matched += 1
            while seen[word] > wanted[word]:
                seen[s[left:left + width]] -= 1
                matched -= 1
                left += width
            if matched == total:
                result.append(left)
    return result


def longest_valid_parentheses(s: str) -> int:
    """Length of the longest well-formed parentheses substring.

    Every character other than '(' is treated as ')'.
    """
    stack = [-1]
    best = 0
    for index, char in enumerate(s):
        if char == "(":
            stack.append(index)
            continue
        stack.pop()
        if stack:
            best = max(best, index - stack[-1])
        else:
            stack.append(index)
    return best


def count_and_say(n: int) -> str:
    """The n-th term of the count-and-say sequence; terms below 1 give '1'."""
    term = "1"
    for _ in range(n - 1):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term