from hypothesis import given
from hypothesis import strategies as st

from algokit.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

INPUT = [9, 4, 7, 1, 3, 8, 2, 6, 5]
EXPECTED = [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_bubble_sort_source_input():
    nums = list(INPUT)
    assert bubble_sort(nums) is None
    assert nums == EXPECTED


def test_selection_sort_source_input():
    nums = list(INPUT)
    assert selection_sort(nums) is None
    assert nums == EXPECTED


def test_insertion_sort_source_input():
    nums = list(INPUT)
    assert insertion_sort(nums) is None
    assert nums == EXPECTED


def test_merge_sort_source_input():
    nums = list(INPUT)
    assert merge_sort(nums) is None
    assert nums == EXPECTED


def test_quick_sort_source_input():
    nums = list(INPUT)
    assert quick_sort(nums) is None
    assert nums == EXPECTED


def test_heap_sort_source_input():
    nums = list(INPUT)
    assert heap_sort(nums) is None
    assert nums == EXPECTED


def test_empty_and_single():
    empties = [[], [], [], [], [], []]
    bubble_sort(empties[0])
    selection_sort(empties[1])
    insertion_sort(empties[2])
    merge_sort(empties[3])
    quick_sort(empties[4])
    heap_sort(empties[5])
    assert empties == [[], [], [], [], [], []]

    singles = [[42], [42], [42], [42], [42], [42]]
    bubble_sort(singles[0])
    selection_sort(singles[1])
    insertion_sort(singles[2])
    merge_sort(singles[3])
    quick_sort(singles[4])
    heap_sort(singles[5])
    assert singles == [[42]] * 6


def test_duplicates_and_negatives():
    values = [3, -1, 3, 0, -1, 2, 2]
    expected = [-1, -1, 0, 2, 2, 3, 3]
    copies = [list(values) for _ in range(6)]
    bubble_sort(copies[0])
    selection_sort(copies[1])
    insertion_sort(copies[2])
    merge_sort(copies[3])
    quick_sort(copies[4])
    heap_sort(copies[5])
    assert copies == [expected] * 6


def test_already_sorted_large():
    expected = list(range(300))
    copies = [list(expected) for _ in range(6)]
    bubble_sort(copies[0])
    selection_sort(copies[1])
    insertion_sort(copies[2])
    merge_sort(copies[3])
    quick_sort(copies[4])
    heap_sort(copies[5])
    assert copies == [expected] * 6


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_matches_builtin_sorted(values):
    expected = sorted(values)
    copies = [list(values) for _ in range(6)]
    bubble_sort(copies[0])
    selection_sort(copies[1])
    insertion_sort(copies[2])
    merge_sort(copies[3])
    quick_sort(copies[4])
    heap_sort(copies[5])
    assert copies == [expected] * 6


def test_merge_sort_is_stable():
    class Item:
        def __init__(self, key, tag):
            self.key = key
            self.tag = tag

        def __lt__(self, other):
            return self.key < other.key

        def __le__(self, other):
            return self.key <= other.key

        def __gt__(self, other):
            return self.key > other.key

    items = [Item(2, "a"), Item(1, "b"), Item(2, "c"), Item(1, "d")]
    merge_sort(items)
    assert [i.tag for i in items] == ["b", "d", "a", "c"]