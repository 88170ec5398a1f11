import pytest

from leetkit.linked import (
    LRUCache,
    MyLinkedList,
    from_values,
    remove_elements,
    reverse_list,
    sort_list,
    swap_pairs,
    to_list,
)

SAMPLE = [1, 2, 6, 3, 4, 5, 6]


def test_round_trip():
    assert to_list(from_values(SAMPLE)) == SAMPLE


def test_empty_list():
    assert from_values([]) is None
    assert to_list(None) == []


def test_swap_pairs_even_length_swaps_neighbours():
    values = [10, 20, 30, 40]
    result = to_list(swap_pairs(from_values(values)))
    assert result == [20, 10, 40, 30]


def test_swap_pairs_twice_restores():
    assert to_list(swap_pairs(swap_pairs(from_values(SAMPLE)))) == SAMPLE


def test_swap_pairs_odd_keeps_last():
    result = to_list(swap_pairs(from_values(SAMPLE)))
    assert result[-1] == SAMPLE[-1]
    assert sorted(result) == sorted(SAMPLE)


def test_swap_pairs_short_lists():
    assert swap_pairs(None) is None
    assert to_list(swap_pairs(from_values([7]))) == [7]


def test_sort_list_matches_sorted():
    values = [4, 2, 1, 3, -5, 2, 0]
    assert to_list(sort_list(from_values(values))) == sorted(values)


def test_sort_list_keeps_nodes():
    head = from_values([3, 1, 2])
    originals = set()
    node = head
    while node:
        originals.add(id(node))
        node = node.next
    result = sort_list(head)
    seen = set()
    while result:
        seen.add(id(result))
        result = result.next
    assert seen == originals


def test_sort_list_trivial():
    assert sort_list(None) is None
    assert to_list(sort_list(from_values([5]))) == [5]


def test_remove_elements_sample():
    assert to_list(remove_elements(from_values(SAMPLE), 6)) == [1, 2, 3, 4, 5]


def test_remove_elements_all():
    assert remove_elements(from_values([7, 7, 7]), 7) is None


def test_remove_elements_absent_value():
    assert to_list(remove_elements(from_values(SAMPLE), 99)) == SAMPLE


def test_reverse_list():
    nums = [1, 3, 5, 7, 9]
    assert to_list(reverse_list(from_values(nums))) == nums[::-1]


def test_reverse_twice_restores():
    assert to_list(reverse_list(reverse_list(from_values(SAMPLE)))) == SAMPLE
    assert reverse_list(None) is None


def test_my_linked_list_sequence():
    lst = MyLinkedList()
    lst.add_at_head(1)
    lst.add_at_tail(3)
    lst.add_at_index(1, 2)
    assert list(lst) == [1, 2, 3]
    assert lst.get(1) == 2
    lst.delete_at_index(1)
    assert lst.get(1) == 3
    assert len(lst) == 2


def test_my_linked_list_get_out_of_range():
    lst = MyLinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.get(2)
    with pytest.raises(IndexError):
        lst.get(-1)


def test_add_at_index_bounds():
    lst = MyLinkedList([1, 2])
    lst.add_at_index(5, 9)
    assert list(lst) == [1, 2]
    lst.add_at_index(2, 3)
    assert list(lst) == [1, 2, 3]
    lst.add_at_index(-4, 0)
    assert list(lst) == [0, 1, 2, 3]


def test_delete_out_of_range_ignored():
    lst = MyLinkedList([1, 2])
    lst.delete_at_index(2)
    lst.delete_at_index(-1)
    assert list(lst) == [1, 2]
    assert len(lst) == 2


def test_lru_cache_eviction():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) is None
    cache.put(4, 4)
    assert cache.get(1) is None
    assert cache.get(3) == 3
    assert cache.get(4) == 4
    assert len(cache) == 2


def test_lru_update_refreshes():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 10)
    cache.put("c", 3)
    assert "b" not in cache
    assert cache.get("a") == 10


def test_lru_zero_capacity():
    cache = LRUCache(0)
    cache.put(1, 1)
    assert cache.get(1) is None
    assert len(cache) == 0