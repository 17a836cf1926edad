import random

import pytest

from dsakit.sorting import (
    bucket_sort,
    counting_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    reverse,
)

SAMPLES = [
    [],
    [7],
    [10, 20, 15, 17, 9, 21],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [3, 3, 1, 3, 2, 2],
    [-4, 0, 12, -7, 5, 5],
]


def _random_lists():
    rng = random.Random(1234)
    return [
        [rng.randrange(0, 1000) for _ in range(rng.randrange(0, 40))]
        for _ in range(20)
    ]


@pytest.mark.parametrize("sample", SAMPLES)
def test_heap_sort_samples(sample):
    assert heap_sort(sample) == sorted(sample)


@pytest.mark.parametrize("sample", SAMPLES)
def test_quick_sort_samples(sample):
    assert quick_sort(sample) == sorted(sample)


@pytest.mark.parametrize("sample", SAMPLES)
def test_insertion_sort_samples(sample):
    assert insertion_sort(sample) == sorted(sample)


@pytest.mark.parametrize("sample", SAMPLES)
def test_merge_sort_samples(sample):
    assert merge_sort(sample) == sorted(sample)


@pytest.mark.parametrize("sample", SAMPLES)
def test_counting_sort_samples(sample):
    assert counting_sort(sample) == sorted(sample)


def test_heap_sort_random_lists():
    for data in _random_lists():
        assert heap_sort(data) == sorted(data)


def test_quick_sort_random_lists():
    for data in _random_lists():
        assert quick_sort(data) == sorted(data)


def test_insertion_sort_random_lists():
    for data in _random_lists():
        assert insertion_sort(data) == sorted(data)


def test_merge_sort_random_lists():
    for data in _random_lists():
        assert merge_sort(data) == sorted(data)


def test_counting_sort_random_lists():
    for data in _random_lists():
        assert counting_sort(data) == sorted(data)


def test_radix_sort_random_lists():
    for data in _random_lists():
        assert radix_sort(data) == sorted(data)


def test_integer_sorts_leave_input_unmodified():
    data = [3, 1, 2]
    snapshot = list(data)
    assert heap_sort(data) == [1, 2, 3]
    assert quick_sort(data) == [1, 2, 3]
    assert insertion_sort(data) == [1, 2, 3]
    assert merge_sort(data) == [1, 2, 3]
    assert counting_sort(data) == [1, 2, 3]
    assert radix_sort(data) == [1, 2, 3]
    assert reverse(data) == [2, 1, 3]
    assert data == snapshot


def test_bucket_sort_leaves_input_unmodified():
    data = [0.3, 0.1, 0.2]
    snapshot = list(data)
    assert bucket_sort(data) == [0.1, 0.2, 0.3]
    assert data == snapshot


def test_radix_sort_multi_digit():
    data = [170, 45, 75, 90, 802, 24, 2, 66]
    assert radix_sort(data) == sorted(data)


def test_radix_sort_rejects_negatives():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_radix_sort_all_zero():
    assert radix_sort([0, 0, 0]) == [0, 0, 0]


def test_bucket_sort_fractions():
    data = [0.897, 0.565, 0.656, 0.1234, 0.665, 0.3434]
    assert bucket_sort(data) == sorted(data)


def test_bucket_sort_empty():
    assert bucket_sort([]) == []


@pytest.mark.parametrize("bad", [[0.5, 1.0], [0.2, 3.5], [0.1, -0.9]])
def test_bucket_sort_out_of_range(bad):
    with pytest.raises(ValueError):
        bucket_sort(bad)


def test_reverse_round_trip():
    data = [1, 5, 2, 8, 3]
    assert reverse(reverse(data)) == data


def test_reverse_ends_swap():
    data = [1, 5, 2, 8, 3]
    result = reverse(data)
    assert result[0] == data[-1]
    assert result[-1] == data[0]
    assert sorted(result) == sorted(data)


def test_reverse_of_sorted_is_descending():
    data = heap_sort([4, 9, 1, 7])
    assert reverse(data) == sorted(data, reverse=True)