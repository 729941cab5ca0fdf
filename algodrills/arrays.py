"""Classic problems over sequences of integers."""

from __future__ import annotations

import operator
from collections import Counter
from collections.abc import Sequence
from itertools import accumulate


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices ``[i, j]`` with ``i < j`` whose values add up to ``target``.

    An empty list means no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return []


def _rising_runs(ratings: Sequence[int]) -> list[int]:
    runs: list[int] = []
    previous = None
    for rating in ratings:
        if runs and rating > previous:
            runs.append(runs[-1] + 1)
        else:
            runs.append(1)
        previous = rating
    return runs


def candy(ratings: Sequence[int]) -> int:
    """Fewest candies for children in a row, where a higher rating than a
    neighbour earns more candy than that neighbour and everyone gets one."""
    values = list(ratings)
    from_left = _rising_runs(values)
    from_right = _rising_runs(values[::-1])[::-1]
    return sum(map(max, from_left, from_right))


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triplet of values that sums to zero.

    Triplets come out sorted inside and in ascending order of their first value.
    """
    values = sorted(nums)
    size = len(values)
    if size < 3:
        return []
    results: list[list[int]] = []
    for index, first in enumerate(values):
        if index > 0 and first == values[index - 1]:
            continue
        target = -first
        low, high = index + 1, size - 1
        while low < high:
            pair = values[low] + values[high]
            if pair > target:
                high -= 1
            elif pair < target:
                low += 1
            else:
                while low < high and values[low] == values[low + 1]:
                    low += 1
                while low < high and values[high] == values[high - 1]:
                    high -= 1
                results.append([first, values[low], values[high]])
                low += 1
                high -= 1
    return results


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous run of ``nums``."""
    values = list(nums)
    if not values:
        raise ValueError("max_product needs at least one number")
    prefix = suffix = 1
    best: int | None = None
    for front, back in zip(values, reversed(values)):
        prefix = (prefix or 1) * front
        suffix = (suffix or 1) * back
        candidate = max(prefix, suffix)
        best = candidate if best is None else max(best, candidate)
    return best


def max_subsequence(nums: Sequence[int], k: int) -> list[int]:
    """The ``k`` values with the largest sum, kept in their original order."""
    values = list(nums)
    if not 0 <= k <= len(values):
        raise ValueError(f"k must be between 0 and {len(values)}, got {k}")
    ranked = sorted(enumerate(values), key=lambda pair: pair[1], reverse=True)[:k]
    return [value for _, value in sorted(ranked)]


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Tell whether any value appears more than once."""
    values = list(nums)
    return len(set(values)) != len(values)


def count_hill_valley(nums: Sequence[int]) -> int:
    """Count hills and valleys, treating runs of equal values as one point."""
    values = list(nums)
    if len(values) < 3:
        return 0
    count = 0
    anchor = values[0]
    for middle, after in zip(values[1:], values[2:]):
        if anchor < middle > after or anchor > middle < after:
            count += 1
            anchor = middle
    return count


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of all the other values."""
    values = list(nums)
    if not values:
        return []
    left = list(accumulate(values[:-1], operator.mul, initial=1))
    right = list(accumulate(reversed(values[1:]), operator.mul, initial=1))[::-1]
    return [before * after for before, after in zip(left, right)]


def max_adjacent_distance(nums: Sequence[int]) -> int:
    """Largest absolute difference between neighbours in a circular array."""
    values = list(nums)
    if not values:
        raise ValueError("max_adjacent_distance needs at least one number")
    rotated = values[1:] + values[:1]
    return max(abs(a - b) for a, b in zip(values, rotated))


def max_unique_sum(nums: Sequence[int]) -> int:
    """Largest sum of distinct values left after deleting any elements.

    Without positive values, the largest single value is the answer.
    """
    values = list(nums)
    if not values:
        raise ValueError("max_unique_sum needs at least one number")
    positives = {value for value in values if value > 0}
    if positives:
        return sum(positives)
    return max(values)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Binary search a sorted sequence for ``target`` or its insertion point."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return left


def search_insert_linear(nums: Sequence[int], target: int) -> int:
    """Index of the first value not below ``target``, or the length."""
    return next(
        (index for index, value in enumerate(nums) if value >= target), len(nums)
    )


def find_content_children(greed: Sequence[int], sizes: Sequence[int]) -> int:
    """Most children whose greed a cookie at least as large can satisfy."""
    children = sorted(greed)
    content = 0
    for cookie in sorted(sizes):
        if content == len(children):
            break
        if children[content] <= cookie:
            content += 1
    return content


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, the first greater value to its right in
    ``nums2``, or -1 where there is none."""
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in reversed(nums2):
        while stack and stack[-1] <= value:
            stack.pop()
        greater[value] = stack[-1] if stack else -1
        stack.append(value)
    try:
        return [greater[value] for value in nums1]
    except KeyError as missing:
        raise ValueError(f"{missing.args[0]} does not occur in nums2") from None


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``nums``."""
    best: int | None = None
    running = 0
    for value in nums:
        running += value
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray needs at least one number")
    return best


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Tell whether ``n`` flowers fit in the empty plots with no two adjacent.

    The given flowerbed is left unchanged.
    """
    if n == 0:
        return True
    bed = list(flowerbed)
    remaining = n
    previous = 0
    for plot, following in zip(bed, bed[1:] + [0]):
        if plot == 0 and previous == 0 and following == 0:
            remaining -= 1
            if remaining == 0:
                return True
            previous = 1
        else:
            previous = plot
    return False


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as its decimal digits, most significant first."""
    result = list(digits)
    for position in reversed(range(len(result))):
        if result[position] < 9:
            result[position] += 1
            return result
        result[position] = 0
    return [1, *result]


def num_subarray_product_less_than_k(nums: Sequence[int], k: int) -> int:
    """Count contiguous runs of positive values whose product is below ``k``."""
    if k <= 1:
        return 0
    values = list(nums)
    start = 0
    product = 1
    count = 0
    for end, value in enumerate(values):
        product *= value
        while product >= k:
            product //= values[start]
            start += 1
        count += end - start + 1
    return count


def total_fruit(fruits: Sequence[int]) -> int:
    """Length of the longest contiguous run holding at most two kinds."""
    values = list(fruits)
    basket: Counter[int] = Counter()
    start = 0
    best = 0
    for end, fruit in enumerate(values):
        basket[fruit] += 1
        if len(basket) <= 2:
            best = max(best, end - start + 1)
        else:
            dropped = values[start]
            basket[dropped] -= 1
            if basket[dropped] == 0:
                del basket[dropped]
            start += 1
    return best