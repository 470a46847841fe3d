"""Linked lists, binary trees and the text forms used to show them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def linked_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def format_linked_list(head: Optional[ListNode]) -> str:
    """Show a linked list as ``[a->b->c]``, or ``[]`` when it is empty."""
    if head is None:
        return "[]"
    return "[" + "->".join(str(value) for value in head) + "]"


def _is_null(value: Optional[int]) -> bool:
    return value is None or value == 0


def build_tree(nodes: Sequence[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from its level-order form, where None or 0 marks a missing node."""
    if not nodes or _is_null(nodes[0]):
        return None
    root = TreeNode(nodes[0])
    pending: deque[TreeNode] = deque([root])
    values = iter(nodes[1:])
    while pending:
        node = pending.popleft()
        try:
            left = next(values)
        except StopIteration:
            break
        if not _is_null(left):
            node.left = TreeNode(left)
            pending.append(node.left)
        try:
            right = next(values)
        except StopIteration:
            break
        if not _is_null(right):
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def tree_to_string(root: Optional[TreeNode]) -> str:
    """Serialise a tree in level order as ``{a, b, null, c}``.

    Leaves contribute no child markers and trailing nulls are dropped.
    """
    if root is None:
        return "{}"
    parts = [str(root.val)]
    pending: deque[Optional[TreeNode]] = deque()
    if root.left is not None or root.right is not None:
        pending.extend((root.left, root.right))
    while pending:
        node = pending.popleft()
        if node is None:
            if pending:
                parts.append("null")
            continue
        parts.append(str(node.val))
        if node.left is not None or node.right is not None:
            pending.extend((node.left, node.right))
    return "{" + ", ".join(parts) + "}"


def _format_item(item: Any) -> str:
    if isinstance(item, (list, tuple)):
        return format_sequence(item)
    return str(item)


def format_sequence(items: Iterable[Any]) -> str:
    """Show a sequence as ``[a, b, c]``, or ``[]`` when it is empty."""
    return "[" + ", ".join(_format_item(item) for item in items) + "]"


def format_nested(rows: Iterable[Iterable[Any]]) -> str:
    """Show a sequence of rows, one row per line, each followed by a comma."""
    rows = list(rows)
    if not rows:
        return "[]"
    return "[" + "".join(format_sequence(row) + ",\n" for row in rows) + "]"