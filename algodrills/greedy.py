"""Greedy drills: stock trading, candies, queues, intervals, flowers and labels."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from itertools import accumulate, pairwise
from string import ascii_lowercase


def max_profit_single(prices: Sequence[int]) -> int:
    """Return the best profit from one purchase followed by one later sale."""
    if not prices:
        raise ValueError("prices must not be empty")
    best = 0
    lowest = prices[0]
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_multiple(prices: Sequence[int]) -> int:
    """Return the best profit when any number of non-overlapping trades is allowed."""
    return sum(max(today - yesterday, 0) for yesterday, today in pairwise(prices))


def candy(ratings: Sequence[int]) -> int:
    """Return the fewest candies so each child gets one and outranks lower-rated neighbours."""
    candies = [1] * len(ratings)
    for i in range(1, len(ratings)):
        if ratings[i - 1] < ratings[i]:
            candies[i] = candies[i - 1] + 1
    for i in range(len(ratings) - 2, -1, -1):
        if ratings[i] > ratings[i + 1] and candies[i] <= candies[i + 1]:
            candies[i] = candies[i + 1] + 1
    return sum(candies)


def answer_queries(nums: Sequence[int], queries: Sequence[int]) -> list[int]:
    """For each query, return the longest subsequence of ``nums`` whose sum does not exceed it."""
    prefix = [0, *accumulate(sorted(nums))]
    return [bisect_right(prefix, query) - 1 for query in queries]


def reconstruct_queue(people: Sequence[Sequence[int]]) -> list[list[int]]:
    """Rebuild a queue from ``[height, taller_or_equal_in_front]`` pairs."""
    ordered = sorted(people, key=lambda person: (-person[0], person[1]))
    queue: list[list[int]] = []
    for person in ordered:
        queue.insert(person[1], list(person))
    return queue


def erase_overlap_intervals(intervals: Sequence[Sequence[int]]) -> int:
    """Return the fewest intervals to remove so the rest do not overlap."""
    if not intervals:
        return 0
    ordered = sorted(intervals, key=lambda interval: interval[1])
    kept = 1
    right = ordered[0][1]
    for start, end in ordered[1:]:
        if start >= right:
            kept += 1
            right = end
    return len(ordered) - kept


def find_min_arrow_shots(points: Sequence[Sequence[int]]) -> int:
    """Return the fewest vertical arrows needed to burst every balloon span."""
    if not points:
        raise ValueError("points must not be empty")
    ordered = sorted(points, key=lambda point: point[0])
    arrows = 1
    right = ordered[0][1]
    for start, end in ordered:
        if start > right:
            arrows += 1
            right = end
        else:
            right = min(right, end)
    return arrows


def find_content_children(greed: Sequence[int], sizes: Sequence[int]) -> int:
    """Return how many children can be satisfied by cookies of the given sizes."""
    appetites = sorted(greed)
    satisfied = 0
    for size in sorted(sizes):
        if satisfied == len(appetites):
            break
        if appetites[satisfied] <= size:
            satisfied += 1
    return satisfied


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Tell whether ``n`` more flowers fit without any two being adjacent."""
    i = 0
    size = len(flowerbed)
    while i < size:
        if flowerbed[i] == 1:
            i += 2
        elif i + 1 == size or flowerbed[i + 1] == 0:
            n -= 1
            i += 2
        else:
            i += 3
    return n <= 0


def check_possibility(nums: Sequence[int]) -> bool:
    """Tell whether changing at most one element makes ``nums`` non-decreasing."""
    values = list(nums)
    changed = False
    for i in range(1, len(values)):
        if values[i] < values[i - 1]:
            if changed:
                return False
            changed = True
            if i == 1 or values[i] >= values[i - 2]:
                values[i - 1] = values[i]
            else:
                values[i] = values[i - 1]
    return True


def partition_labels(s: str) -> list[int]:
    """Split lower-case ``s`` into as many parts as possible, each letter in one part only."""
    stray = set(s) - set(ascii_lowercase)
    if stray:
        raise ValueError(f"only lower-case letters are allowed, got {sorted(stray)!r}")
    last = {letter: index for index, letter in enumerate(s)}
    sizes: list[int] = []
    start = end = 0
    for index, letter in enumerate(s):
        end = max(end, last[letter])
        if index == end:
            sizes.append(end - start + 1)
            start = index + 1
    return sizes