"""Classic problems over strings."""

from __future__ import annotations

from collections import Counter
from itertools import groupby, islice

_ROMAN_VALUES: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_ROMAN_DIGITS: dict[str, int] = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_BRACKET_PAIRS: dict[str, str] = {")": "(", "}": "{", "]": "["}


def int_to_roman(num: int) -> str:
    """Write a non-negative integer as a Roman numeral."""
    if num < 0:
        raise ValueError(f"cannot write a negative number as a Roman numeral: {num}")
    parts: list[str] = []
    for value, symbol in _ROMAN_VALUES:
        if num == 0:
            break
        times, num = divmod(num, value)
        parts.append(symbol * times)
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Read a Roman numeral as an integer."""
    if not s:
        raise ValueError("an empty string is not a Roman numeral")
    try:
        values = [_ROMAN_DIGITS[char] for char in s]
    except KeyError as bad:
        raise ValueError(f"not a Roman digit: {bad.args[0]!r}") from None
    total = values[-1]
    for current, following in zip(values, values[1:]):
        total += current if current >= following else -current
    return total


def is_palindrome_text(s: str) -> bool:
    """Tell whether the ASCII letters and digits of ``s`` read the same both
    ways, ignoring case."""
    kept = [char.lower() for char in s if char.isascii() and char.isalnum()]
    return kept == kept[::-1]


def make_fancy_string(s: str) -> str:
    """Shorten every run of a repeated character to at most two."""
    return "".join(
        "".join(islice(run, 2)) for _, run in groupby(s)
    )


def is_valid_parentheses(s: str) -> bool:
    """Tell whether the brackets ``()[]{}`` in ``s`` are balanced and nested.

    Any character that is not an opening bracket counts as a closing one.
    """
    stack: list[str] = []
    for char in s:
        if char in "({[":
            stack.append(char)
        elif not stack or _BRACKET_PAIRS.get(char) != stack[-1]:
            return False
        else:
            stack.pop()
    return not stack


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of the characters of ``s``."""
    return sorted(s) == sorted(t)


def possible_string_count(word: str) -> int:
    """Count the strings that ``word`` may have been meant as, if at most one
    key was held down too long."""
    return 1 + sum(1 for before, after in zip(word, word[1:]) if before == after)


def max_parity_difference(s: str) -> int:
    """Largest odd character frequency minus smallest even one."""
    frequencies = Counter(s).values()
    odd = [count for count in frequencies if count % 2]
    even = [count for count in frequencies if count % 2 == 0]
    if not odd or not even:
        raise ValueError("need a character of odd and one of even frequency")
    return max(odd) - min(even)


def fizz_buzz(n: int) -> list[str]:
    """The numbers 1 to ``n`` with multiples of 3 as Fizz, of 5 as Buzz and of
    both as FizzBuzz."""
    result: list[str] = []
    for number in range(1, n + 1):
        if number % 15 == 0:
            result.append("FizzBuzz")
        elif number % 5 == 0:
            result.append("Buzz")
        elif number % 3 == 0:
            result.append("Fizz")
        else:
            result.append(str(number))
    return result


def _typed(text: str) -> list[str]:
    stack: list[str] = []
    for char in text:
        if char == "#":
            if stack:
                stack.pop()
        else:
            stack.append(char)
    return stack


def backspace_compare(s: str, t: str) -> bool:
    """Tell whether two strings come out equal when ``#`` erases a character."""
    return _typed(s) == _typed(t)