"""Classic problems over integers."""

from __future__ import annotations

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def maximum_69_number(num: int) -> int:
    """Turn the leftmost 6 of a number made of 6s and 9s into a 9."""
    return int(str(num).replace("6", "9", 1))


def digit_square_sum(n: int) -> int:
    """Sum of the squares of the decimal digits of ``n``."""
    return sum(int(digit) ** 2 for digit in str(abs(n)))


def is_happy(n: int) -> bool:
    """Tell whether repeated digit-square sums starting at ``n`` reach 1."""
    slow, fast = n, digit_square_sum(n)
    while fast != 1 and slow != fast:
        slow = digit_square_sum(slow)
        fast = digit_square_sum(digit_square_sum(fast))
    return fast == 1


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a power of two."""
    return n > 0 and n & (n - 1) == 0


def _is_power_of(n: int, base: int) -> bool:
    if n <= 0:
        return False
    while n % base == 0:
        n //= base
    return n == 1


def is_power_of_three(n: int) -> bool:
    """Tell whether ``n`` is a power of three."""
    return _is_power_of(n, 3)


def is_power_of_four(n: int) -> bool:
    """Tell whether ``n`` is a power of four."""
    return _is_power_of(n, 4)


def distribute_candies(n: int, limit: int) -> int:
    """Count the ways to give ``n`` candies to three children, none getting
    more than ``limit``."""
    lowest = max(0, n - 2 * limit)
    highest = min(n, limit)
    return sum(
        min(n - first, limit) - max(0, n - first - limit) + 1
        for first in range(lowest, highest + 1)
    )


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign; 0 when the result
    leaves the signed 32-bit range."""
    digits = int(str(abs(x))[::-1])
    result = -digits if x < 0 else digits
    return result if _INT_MIN <= result <= _INT_MAX else 0


def is_palindrome_number(x: int) -> bool:
    """Tell whether ``x`` reads the same both ways; negatives never do."""
    if x < 0:
        return False
    text = str(x)
    return text == text[::-1]