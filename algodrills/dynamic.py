"""Dynamic-programming drills: Fibonacci-style sequences, Pascal's triangle, robbery and stairs."""

from __future__ import annotations

from collections.abc import Sequence


def _require_non_negative(n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fib(0) == 0`` and ``fib(1) == 1``."""
    _require_non_negative(n, "n")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def tribonacci(n: int) -> int:
    """Return the ``n``-th Tribonacci number, starting from 0, 1, 1."""
    _require_non_negative(n, "n")
    a, b, c = 0, 1, 1
    for _ in range(n):
        a, b, c = b, c, a + b + c
    return a


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    _require_non_negative(num_rows, "num_rows")
    rows: list[list[int]] = []
    for i in range(num_rows):
        if i == 0:
            rows.append([1])
            continue
        previous = rows[-1]
        inner = [left + right for left, right in zip(previous, previous[1:])]
        rows.append([1, *inner, 1])
    return rows


def _rob_line(nums: Sequence[int]) -> int:
    """Best loot from houses in a row where no two adjacent houses are robbed."""
    before_previous, previous = 0, 0
    for amount in nums:
        before_previous, previous = previous, max(previous, before_previous + amount)
    return previous


def rob(nums: Sequence[int]) -> int:
    """Return the most money that can be taken from houses in a row without robbing neighbours."""
    if not nums:
        raise ValueError("at least one house is required")
    if len(nums) == 1:
        return nums[0]
    return _rob_line(nums)


def rob_circular(nums: Sequence[int]) -> int:
    """Like :func:`rob`, but the houses stand in a circle so the first and last are neighbours."""
    if not nums:
        raise ValueError("at least one house is required")
    if len(nums) == 1:
        return nums[0]
    if len(nums) == 2:
        return max(nums[0], nums[1])
    return max(_rob_line(nums[:-1]), _rob_line(nums[1:]))


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the cheapest way to the top, starting on step 0 or 1 and climbing one or two steps."""
    if len(cost) < 2:
        raise ValueError("at least two steps are required")
    two_back, one_back = cost[0], cost[1]
    for step_cost in cost[2:]:
        two_back, one_back = one_back, step_cost + min(one_back, two_back)
    return min(one_back, two_back)