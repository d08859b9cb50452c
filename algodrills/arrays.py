"""Array puzzles: windows, products, in-place filtering, rotations and pair sums."""

from __future__ import annotations

from itertools import accumulate
from operator import mul
from typing import Sequence


def min_sub_array_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest run of positive numbers summing to at
    least target, or 0 when no run reaches it."""
    best = 0
    total = 0
    start = 0
    for end, value in enumerate(nums):
        total += value
        while start <= end and total >= target:
            length = end - start + 1
            if best == 0 or length < best:
                best = length
            total -= nums[start]
            start += 1
    return best


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    if len(nums) < 2:
        raise ValueError("need at least two numbers")
    before = list(accumulate(nums, mul, initial=1))[:-1]
    after = list(accumulate(reversed(nums), mul, initial=1))[:-1][::-1]
    return [left * right for left, right in zip(before, after)]


def remove_duplicates(nums: list[int]) -> int:
    """Keep at most two of each run of equal values at the front of nums.

    Works in place and returns how many leading elements are kept; the
    elements after them are left as they were.
    """
    kept = 0
    run = 0
    for value in list(nums):
        if kept and nums[kept - 1] == value:
            if run >= 2:
                continue
            run += 1
        else:
            run = 1
        nums[kept] = value
        kept += 1
    return kept


def remove_element(nums: list[int], val: int) -> int:
    """Remove every occurrence of val from nums in place; return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def rotate(nums: list[int], k: int) -> None:
    """Rotate nums k places to the right, in place."""
    if k == 0 or not nums:
        return
    shift = k % len(nums)
    if shift:
        nums[:] = nums[-shift:] + nums[:-shift]


def _format_range(first: int, last: int) -> str:
    return str(first) if first == last else f"{first}->{last}"


def summary_ranges(nums: Sequence[int]) -> list[str]:
    """Describe runs of consecutive integers as "a->b", or "a" for a lone value."""
    if not nums:
        return []
    result: list[str] = []
    first = previous = nums[0]
    for value in nums[1:]:
        if value - 1 == previous:
            previous = value
            continue
        result.append(_format_range(first, previous))
        first = previous = value
    result.append(_format_range(first, previous))
    return result


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return the distinct ascending triples from nums that add up to zero.

    Three numbers are returned as given when they sum to zero. Triples are
    listed in ascending order.
    """
    if len(nums) < 3:
        return []
    if len(nums) == 3:
        return [list(nums)] if sum(nums) == 0 else []

    values = sorted(nums)
    if values[-1] < 0:
        return []
    if values[-3:] == [0, 0, 0]:
        return [[0, 0, 0]]

    found: set[tuple[int, int, int]] = set()
    top = len(values) - 1
    while top >= 2 and values[top] == values[top - 1]:
        top -= 1

    for high in range(top, 1, -1):
        if values[0] + values[1] + values[high] > 0:
            continue
        low, mid = 0, high - 1
        while low < mid:
            total = values[low] + values[mid] + values[high]
            if total == 0:
                found.add((values[low], values[mid], values[high]))
                low += 1
                mid -= 1
                while low < mid and values[low] == values[low - 1]:
                    low += 1
                while low < mid and values[mid] == values[mid + 1]:
                    mid -= 1
            elif total > 0:
                mid -= 1
            else:
                low += 1

    return [list(triple) for triple in sorted(found)]


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of the first pair of numbers that add up to target."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    raise ValueError(f"no two numbers add up to {target}")


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return the 1-based indices of a pair in ascending numbers summing to target."""
    low, high = 0, len(numbers) - 1
    while low < high:
        total = numbers[low] + numbers[high]
        if total == target:
            return [low + 1, high + 1]
        if total > target:
            high -= 1
        else:
            low += 1
    raise ValueError(f"no two numbers add up to {target}")


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers in nums."""
    values = set(nums)
    longest = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        longest = max(longest, end - value + 1)
    return longest