"""Classic one-dimensional array problems."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from functools import reduce
from typing import Sequence


@dataclass(frozen=True)
class MaxSubarray:
    """The contiguous run with the largest sum; ``end`` is inclusive."""

    total: int
    start: int
    end: int
    items: tuple[int, ...]


def two_sum(arr: Sequence[int], target: int) -> bool:
    """Tell whether two entries of a sorted sequence add up to ``target``."""
    left, right = 0, len(arr) - 1
    while left < right:
        total = arr[left] + arr[right]
        if total == target:
            return True
        if total < target:
            left += 1
        else:
            right -= 1
    return False


def is_sorted(arr: Sequence[int]) -> bool:
    """Tell whether the sequence is in non-decreasing order."""
    return all(prev <= cur for prev, cur in zip(arr, arr[1:]))


def find_missing(arr: Sequence[int], n: int) -> int:
    """Return the number in 1..n absent from ``arr``, which holds the other n - 1."""
    return reduce(operator.xor, range(1, n + 1), 0) ^ reduce(
        operator.xor, arr[: max(n - 1, 0)], 0
    )


def find_single(arr: Sequence[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(operator.xor, arr, 0)


def sorted_union(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into their sorted union without repeats."""
    union: list[int] = []

    def push(value: int) -> None:
        if not union or union[-1] != value:
            union.append(value)

    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            push(first[i])
            i += 1
        else:
            push(second[j])
            j += 1
    for value in first[i:]:
        push(value)
    for value in second[j:]:
        push(value)
    return union


def largest(arr: Sequence[int]) -> int:
    """Return the largest element."""
    if not arr:
        raise ValueError("largest() of an empty sequence")
    return max(arr)


def leaders(arr: Sequence[int]) -> list[int]:
    """Return the elements not smaller than anything to their right, right to left."""
    found: list[int] = []
    best: int | None = None
    for value in reversed(arr):
        if best is None or value >= best:
            best = value
            found.append(value)
    return found


def left_rotate_by_one(arr: Sequence[int]) -> list[int]:
    """Return the sequence rotated one place to the left."""
    items = list(arr)
    return items[1:] + items[:1]


def linear_search(arr: Sequence[int], target: int) -> int:
    """Return the index of the first ``target``, or -1 if absent."""
    return next((i for i, value in enumerate(arr) if value == target), -1)


def longest_consecutive(arr: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers present."""
    if not arr:
        return 0
    ordered = sorted(arr)
    longest = count = 1
    for prev, cur in zip(ordered, ordered[1:]):
        if cur == prev:
            continue
        count = count + 1 if cur == prev + 1 else 1
        longest = max(longest, count)
    return longest


def longest_subarray_with_sum(arr: Sequence[int], k: int) -> int:
    """Return the length of the longest contiguous run summing to ``k``."""
    first_seen: dict[int, int] = {}
    prefix = 0
    best = 0
    for i, value in enumerate(arr):
        prefix += value
        if prefix == k:
            best = max(best, i + 1)
        if prefix - k in first_seen:
            best = max(best, i - first_seen[prefix - k])
        first_seen.setdefault(prefix, i)
    return best


def majority_element(arr: Sequence[int]) -> int:
    """Return the candidate majority element found by Boyer-Moore voting."""
    if not arr:
        raise ValueError("majority_element() of an empty sequence")
    count = 0
    candidate = arr[0]
    for value in arr:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    return candidate


def max_consecutive_ones(arr: Sequence[int]) -> int:
    """Return the length of the longest run of ones."""
    best = count = 0
    for value in arr:
        count = count + 1 if value == 1 else 0
        best = max(best, count)
    return best


def move_zeroes(arr: Sequence[int]) -> list[int]:
    """Return the sequence with zeroes moved to the end, other order kept."""
    return [v for v in arr if v != 0] + [v for v in arr if v == 0]


def max_subarray(arr: Sequence[int]) -> MaxSubarray:
    """Find the first contiguous run with the largest sum (Kadane)."""
    if not arr:
        raise ValueError("max_subarray() of an empty sequence")
    best: int | None = None
    current = 0
    start = end = temp_start = 0
    for i, value in enumerate(arr):
        current += value
        if best is None or current > best:
            best, start, end = current, temp_start, i
        if current < 0:
            current = 0
            temp_start = i + 1
    assert best is not None
    return MaxSubarray(best, start, end, tuple(arr[start : end + 1]))


def rearrange_alternating(arr: Sequence[int]) -> list[int]:
    """Alternate non-negative and negative values in place order, starting non-negative."""
    items = list(arr)
    out_of_place = -1
    for index in range(len(items)):
        if out_of_place >= 0 and (items[index] >= 0) != (items[out_of_place] >= 0):
            items.insert(out_of_place, items.pop(index))
            if index - out_of_place >= 2:
                out_of_place += 2
            else:
                out_of_place = -1
        if out_of_place == -1 and (items[index] >= 0) == (index % 2 == 1):
            out_of_place = index
    return items


def remove_duplicates(arr: Sequence[int]) -> list[int]:
    """Return a sorted sequence with adjacent repeats dropped."""
    unique: list[int] = []
    for value in arr:
        if not unique or unique[-1] != value:
            unique.append(value)
    return unique


def second_largest(arr: Sequence[int]) -> int:
    """Return the largest value strictly below the maximum, or -1 if none."""
    top: int | None = None
    second: int | None = None
    for value in arr:
        if top is None or value > top:
            second, top = top, value
        elif value < top and (second is None or value > second):
            second = value
    return -1 if second is None else second


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one sell."""
    lowest = float("inf")
    best = 0
    for price in prices:
        if price < lowest:
            lowest = price
        else:
            best = max(best, int(price - lowest))
    return best


def next_permutation(nums: Sequence[int]) -> list[int]:
    """Return the next lexicographic permutation, wrapping to the smallest."""
    items = list(nums)
    i = len(items) - 2
    while i >= 0 and items[i] >= items[i + 1]:
        i -= 1
    if i >= 0:
        j = len(items) - 1
        while items[j] <= items[i]:
            j -= 1
        items[i], items[j] = items[j], items[i]
    items[i + 1 :] = reversed(items[i + 1 :])
    return items