import random

import pytest

from algokit.subarrays import kadane, max_subarray_cubic, max_subarray_quadratic, subarrays

SOURCE_ARRAY = [-2, -3, 4, -1, -2, 1, 5, -3]


def test_source_example_all_methods_agree():
    assert kadane(SOURCE_ARRAY) == 7
    assert max_subarray_quadratic(SOURCE_ARRAY) == 7
    assert max_subarray_cubic(SOURCE_ARRAY) == 7


def test_subarrays_small():
    assert subarrays([1, 2, 3]) == [[1, 2], [1, 2, 3], [2, 3]]


def test_subarrays_count_and_contiguity():
    data = list(range(10, 20))
    runs = subarrays(data)
    n = len(data)
    assert len(runs) == n * (n - 1) // 2
    assert all(len(run) >= 2 for run in runs)
    assert all(run[k + 1] == run[k] + 1 for run in runs for k in range(len(run) - 1))


def test_subarrays_too_short():
    assert subarrays([5]) == []
    assert subarrays([]) == []


def test_cubic_needs_two_values():
    with pytest.raises(ValueError):
        max_subarray_cubic([4])


def test_quadratic_needs_a_value():
    with pytest.raises(ValueError):
        max_subarray_quadratic([])


def test_quadratic_single_negative():
    assert max_subarray_quadratic([-9]) == -9


def test_kadane_floors_at_zero():
    assert kadane([-4, -1, -6]) == 0
    assert kadane([]) == 0


def test_all_positive_is_whole_sum():
    data = [3, 1, 4, 1, 5]
    assert kadane(data) == sum(data)
    assert max_subarray_quadratic(data) == sum(data)
    assert max_subarray_cubic(data) == sum(data)


def test_methods_agree_on_random_data():
    rng = random.Random(42)
    for size in range(2, 25):
        data = [rng.randint(-10, 10) for _ in range(size)]
        quadratic = max_subarray_quadratic(data)
        assert quadratic >= max(data)
        assert kadane(data) == max(quadratic, 0)
        assert max_subarray_cubic(data) <= quadratic
        assert max_subarray_cubic(data) == max(sum(run) for run in subarrays(data))