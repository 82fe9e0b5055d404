import pytest

from algokit.linked_list import ListNode, merge_k_lists, merge_k_lists_scan

MERGERS = [merge_k_lists, merge_k_lists_scan]


def _lists(*sequences):
    return [ListNode.from_iterable(seq) for seq in sequences]


def test_round_trip():
    values = [3, 1, 4, 1, 5]
    assert ListNode.from_iterable(values).to_list() == values


def test_from_empty_iterable_is_none():
    assert ListNode.from_iterable([]) is None


def test_from_generator():
    head = ListNode.from_iterable(x for x in (7, 8, 9))
    assert head.to_list() == [7, 8, 9]


@pytest.mark.parametrize("merge", MERGERS)
def test_merge_gives_sorted_union(merge):
    sequences = [[1, 2, 3], [4, 5], [5, 6], [7, 8]]
    merged = merge(_lists(*sequences))
    assert merged.to_list() == sorted(v for seq in sequences for v in seq)


@pytest.mark.parametrize("merge", MERGERS)
def test_merge_reuses_nodes(merge):
    heads = _lists([1, 3], [2, 4])
    original = {id(node) for head in heads for node in head.nodes()}
    merged = merge(heads)
    assert {id(node) for node in merged.nodes()} == original


@pytest.mark.parametrize("merge", MERGERS)
def test_merge_skips_empty_lists(merge):
    merged = merge([None, ListNode.from_iterable([2, 9]), None])
    assert merged.to_list() == [2, 9]


def test_merge_of_nothing_is_none():
    assert merge_k_lists([]) is None
    assert merge_k_lists([None, None]) is None
    assert merge_k_lists_scan([]) is None
    assert merge_k_lists_scan([None, None]) is None


@pytest.mark.parametrize("merge", MERGERS)
def test_ties_favour_earlier_list(merge):
    first = ListNode(5)
    second = ListNode(5)
    merged = merge([first, second])
    assert list(merged.nodes()) == [first, second]


def test_mergers_agree():
    sequences = [[0, 10, 20], [5, 15], [], [1, 2, 30]]
    scanned = merge_k_lists_scan(_lists(*sequences)).to_list()
    heaped = merge_k_lists(_lists(*sequences)).to_list()
    assert scanned == heaped