"""Longest common and longest increasing subsequences."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cache

from galgo.searching import binary_search_range


def longest_common_subsequence_v1(text1: str, text2: str) -> int:
    """Length of the longest common subsequence of the UTF-8 bytes, memoised."""
    first, second = text1.encode(), text2.encode()

    @cache
    def length(i: int, j: int) -> int:
        if i == len(first) or j == len(second):
            return 0
        if first[i] == second[j]:
            return 1 + length(i + 1, j + 1)
        return max(length(i + 1, j), length(i, j + 1))

    return length(0, 0)


def longest_common_subsequence_v2(text1: str, text2: str) -> int:
    """Length of the longest common subsequence of the UTF-8 bytes, with a table."""
    first, second = text1.encode(), text2.encode()
    below = [0] * (len(second) + 1)
    for a in reversed(first):
        row = [0] * (len(second) + 1)
        for j in reversed(range(len(second))):
            row[j] = 1 + below[j + 1] if a == second[j] else max(below[j], row[j + 1])
        below = row
    return below[0]


def longest_increasing_subsequence_v1(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence, quadratic table.

    Only increasing pairs raise the answer, so a sequence without any gives 0.
    """
    lengths = [1] * len(nums)
    result = 0
    for i in range(1, len(nums)):
        for j in range(i):
            if nums[i] > nums[j]:
                lengths[i] = max(lengths[i], lengths[j] + 1)
                result = max(result, lengths[i])
    return result


def longest_increasing_subsequence_v2(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence by patience sorting."""
    tails: list[int] = []
    for num in nums:
        if not tails or tails[-1] < num:
            tails.append(num)
        else:
            tails[binary_search_range(tails, num, 0, len(tails) - 1, True)] = num
    return len(tails)