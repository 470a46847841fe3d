"""Two-pointer drills: balanced trees, cycles, pair sums, subsequences, palindromes and merging."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from heapq import merge
from math import isqrt
from typing import Optional

from algodrills.structures import ListNode, TreeNode


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from ascending ``nums``; empty input gives None."""

    def build(left: int, right: int) -> Optional[TreeNode]:
        if left > right:
            return None
        mid = left + (right - left) // 2
        return TreeNode(nums[mid], build(left, mid - 1), build(mid + 1, right))

    return build(0, len(nums) - 1)


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the list's cycle begins, or None if the list ends."""
    fast = slow = head
    while True:
        if fast is None or fast.next is None:
            return None
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            break
    fast = head
    while fast is not slow:
        fast = fast.next
        slow = slow.next
    return fast


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return the 1-based positions of two entries of ascending ``numbers`` adding up to ``target``.

    Raises ValueError when no such pair exists.
    """
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return [left + 1, right + 1]
        if total < target:
            left += 1
        else:
            right -= 1
    raise ValueError(f"no two numbers add up to {target}")


def _is_subsequence(sub: str, target: str) -> bool:
    if len(sub) > len(target):
        return False
    remaining = iter(target)
    return all(char in remaining for char in sub)


def find_longest_word(s: str, dictionary: Iterable[str]) -> str:
    """Return the longest word of ``dictionary`` that is a subsequence of ``s``.

    Ties go to the lexicographically smallest word; no match gives an empty string.
    """
    for word in sorted(dictionary, key=lambda word: (-len(word), word)):
        if _is_subsequence(word, s):
            return word
    return ""


def judge_square_sum(c: int) -> bool:
    """Tell whether ``c`` is the sum of two perfect squares."""
    if c < 0:
        raise ValueError(f"c must not be negative, got {c}")
    for a in range(isqrt(c) + 1):
        rest = c - a * a
        if isqrt(rest) ** 2 == rest:
            return True
    return False


def _is_palindrome(s: str, left: int, right: int) -> bool:
    while left < right:
        if s[left] != s[right]:
            return False
        left += 1
        right -= 1
    return True


def valid_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways after deleting at most one character."""
    left, right = 0, len(s) - 1
    while left < right:
        if s[left] != s[right]:
            return _is_palindrome(s, left, right - 1) or _is_palindrome(s, left + 1, right)
        left += 1
        right -= 1
    return True


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1`` in place.

    The merged run fills the tail of ``nums1``; any positions before it are left as they were.
    """
    if not 0 <= m <= len(nums1) or not 0 <= n <= len(nums2):
        raise ValueError("m and n must lie within the lengths of their lists")
    if m + n > len(nums1):
        raise ValueError("nums1 has no room for the merged values")
    merged = list(merge(nums1[:m], nums2[:n]))
    if merged:
        nums1[len(nums1) - len(merged):] = merged