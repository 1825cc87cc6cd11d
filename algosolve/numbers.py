"""Integer problems bounded by signed 32-bit arithmetic, and Roman numerals."""

from __future__ import annotations

from itertools import takewhile

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_NUMERALS = (
    ("M", 1000), ("CM", 900), ("D", 500), ("CD", 400),
    ("C", 100), ("XC", 90), ("L", 50), ("XL", 40),
    ("X", 10), ("IX", 9), ("V", 5), ("IV", 4), ("I", 1),
)
_SYMBOL_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_DIGITS = frozenset("0123456789")


def _clamp(value: int) -> int:
    return max(INT_MIN, min(INT_MAX, value))


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of x; 0 if the result leaves the 32-bit range."""
    sign = -1 if x < 0 else 1
    value = sign * int(str(abs(x))[::-1])
    return value if INT_MIN <= value <= INT_MAX else 0


def my_atoi(s: str) -> int:
    """Parse a leading signed integer after spaces, clamped to 32 bits."""
    text = s.lstrip(" ")
    sign = 1
    if text.startswith(("+", "-")):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = "".join(takewhile(lambda char: char in _DIGITS, text))
    return _clamp(sign * int(digits)) if digits else 0


def is_palindrome_number(x: int) -> bool:
    """True when x reads the same forwards and backwards; negatives never do."""
    if x < 0:
        return False
    text = str(x)
    return text == text[::-1]


def int_to_roman(num: int) -> str:
    """Roman numeral for num; numbers below 1 give ''."""
    if num <= 0:
        return ""
    parts: list[str] = []
    for symbol, value in _NUMERALS:
        count, num = divmod(num, value)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral."""
    try:
        values = [_SYMBOL_VALUES[char] for char in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral character: {exc.args[0]!r}") from None
    return sum(
        -value if value < following else value
        for value, following in zip(values, values[1:] + [0])
    )


def divide(dividend: int, divisor: int) -> int:
    """Integer division truncated toward zero using shifts and subtraction.

    The result is clamped to the signed 32-bit range.
    """
    if divisor == 0:
        raise ZeroDivisionError("division by zero is not allowed")
    if dividend == 0:
        return 0
    if dividend == INT_MIN and divisor == -1:
        return INT_MAX
    negative = (dividend < 0) != (divisor < 0)
    remaining = abs(dividend)
    base = abs(divisor)
    quotient = 0
    while remaining >= base:
        chunk, multiple = base, 1
        while remaining >= chunk << 1:
            chunk <<= 1
            multiple <<= 1
        remaining -= chunk
        quotient += multiple
    return _clamp(-quotient if negative else quotient)