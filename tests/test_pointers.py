import pytest

from algodrills.pointers import (
    detect_cycle,
    find_longest_word,
    judge_square_sum,
    merge_sorted,
    sorted_array_to_bst,
    two_sum_sorted,
    valid_palindrome,
)
from algodrills.structures import linked_list


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.val] + _inorder(node.right)


def _height(node):
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _balanced(node):
    if node is None:
        return True
    return (
        abs(_height(node.left) - _height(node.right)) <= 1
        and _balanced(node.left)
        and _balanced(node.right)
    )


def test_sorted_array_to_bst_keeps_order_and_balance():
    nums = [-10, -3, 0, 5, 9]
    root = sorted_array_to_bst(nums)
    assert _inorder(root) == nums
    assert _balanced(root)
    assert root.val == nums[2]


@pytest.mark.parametrize("nums", [[1], [1, 2], list(range(16)), list(range(-7, 30, 3))])
def test_sorted_array_to_bst_invariants(nums):
    root = sorted_array_to_bst(nums)
    assert _inorder(root) == nums
    assert _balanced(root)


def test_sorted_array_to_bst_empty():
    assert sorted_array_to_bst([]) is None


def test_detect_cycle_without_cycle():
    head = linked_list([1, 2, 3, 4])
    assert detect_cycle(head) is None
    assert list(head) == [1, 2, 3, 4]


def test_detect_cycle_finds_entry():
    head = linked_list([1, 2, 3, 4])
    head.next.next.next.next = head.next
    entry = detect_cycle(head)
    assert entry is head.next
    assert entry.val == 2


def test_detect_cycle_self_loop_and_empty():
    head = linked_list([7])
    head.next = head
    assert detect_cycle(head) is head
    assert detect_cycle(None) is None


@pytest.mark.parametrize(
    "numbers, target",
    [([2, 7, 11, 15], 9), ([2, 3, 4], 6), ([-1, 0], -1), ([1, 3, 5, 8, 12], 20)],
)
def test_two_sum_sorted_positions_add_up(numbers, target):
    first, second = two_sum_sorted(numbers, target)
    assert 1 <= first < second <= len(numbers)
    assert numbers[first - 1] + numbers[second - 1] == target


def test_two_sum_sorted_missing_pair():
    with pytest.raises(ValueError):
        two_sum_sorted([1, 2, 3], 100)
    with pytest.raises(ValueError):
        two_sum_sorted([], 0)


@pytest.mark.parametrize(
    "dictionary, expected",
    [
        (["ale", "apple", "monkey", "plea"], "apple"),
        (["a", "b", "c"], "a"),
        (["z", "d", "h"], ""),
    ],
)
def test_find_longest_word_cases(dictionary, expected):
    assert find_longest_word("abpcplea", dictionary) == expected


def test_find_longest_word_leaves_dictionary_untouched():
    dictionary = ["plea", "monkey", "apple", "ale"]
    find_longest_word("abpcplea", dictionary)
    assert dictionary == ["plea", "monkey", "apple", "ale"]


def test_judge_square_sum():
    assert judge_square_sum(5) is True
    assert judge_square_sum(0) is True
    assert judge_square_sum(3) is False
    with pytest.raises(ValueError):
        judge_square_sum(-1)


@pytest.mark.parametrize("c", range(0, 60))
def test_judge_square_sum_matches_search(c):
    squares = {a * a for a in range(9)}
    assert judge_square_sum(c) == any(c - sq in squares for sq in squares if sq <= c)


@pytest.mark.parametrize(
    "s, expected",
    [
        ("aba", True),
        ("abca", True),
        ("abc", False),
        ("abcb", True),
        ("ebcbbececabbacecbbcbe", True),
        (
            "rdsiqgkvzkmhcmrfyizpqfaiwhkaznlhtlvlsjowubyujhwaehssheawhjuybuwojslvlthlnzakhwiaqpziyfrmchmkzvkgqisdr",
            True,
        ),
    ],
)
def test_valid_palindrome_cases(s, expected):
    assert valid_palindrome(s) is expected


def test_merge_sorted_in_place():
    nums1 = [1, 2, 3, 0, 0, 0]
    nums2 = [2, 5, 6]
    assert merge_sorted(nums1, 3, nums2, 3) is None
    assert nums1 == sorted([1, 2, 3] + nums2)


def test_merge_sorted_with_empty_parts():
    nums1 = [0, 0]
    merge_sorted(nums1, 0, [4, 9], 2)
    assert nums1 == [4, 9]
    nums1 = [3, 8]
    merge_sorted(nums1, 2, [], 0)
    assert nums1 == [3, 8]


def test_merge_sorted_rejects_short_target():
    with pytest.raises(ValueError):
        merge_sorted([1, 2], 2, [3], 1)