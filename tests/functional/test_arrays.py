from collections import Counter

import numpy as np
import pytest
from pydantic import ValidationError
from lowbar.functional.arrays import difference, intersection, range_, shuffle, zip_


def test_zip_pads_unequal_lengths():
    assert zip_(["a", "b"], [1, 2, 3]) == [["a", 1], ["b", 2], [None, 3]]


def test_zip_equal_lengths_and_edge_cases():
    assert zip_([1, 2], ["x", "y"], [True, False]) == [[1, "x", True], [2, "y", False]]
    assert zip_() == []
    assert zip_([1], None) == [[1, None]]


def test_intersection():
    assert intersection([1, 2, 3, 2], [2, 3, 4], [3, 2]) == [2, 3]
    assert intersection([1, 2], [3]) == []
    assert intersection([1, 1, 2]) == [1, 2]
    assert intersection() == []


def test_intersection_with_unhashable_values():
    assert intersection([[1], [2]], [[2], [3]]) == [[2]]


def test_difference():
    assert difference([1, 2, 3, 4, 5], [5, 2, 10]) == [1, 3, 4]
    assert difference([1, 2, 3, 4], [1], [4, 9]) == [2, 3]
    assert difference([1, 1, 2], [2]) == [1, 1]
    assert difference([1, 2], None) == [1, 2]
    assert difference(None, [1]) == []


def test_difference_keeps_nested_values_intact():
    assert difference([[1], [2], 3], [[1]]) == [[2], 3]


def test_range_single_argument():
    assert range_(5) == [0, 1, 2, 3, 4]
    assert range_(0) == []
    assert range_(-3) == []


def test_range_has_no_output(capsys):
    range_(3)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_range_start_stop_step():
    assert range_(2, 5) == [2, 3, 4]
    assert range_(0, 10, 3) == [0, 3, 6, 9]
    assert range_(5, 0, -2) == [5, 3, 1]


def test_range_rejects_invalid_arguments():
    with pytest.raises(ValueError):
        range_(1, 5, 0)
    with pytest.raises(ValidationError):
        range_(2.5)
    with pytest.raises(ValidationError):
        range_("3")


def test_shuffle_is_a_permutation():
    data = list(range(20))
    shuffled = shuffle(data, rng=np.random.default_rng(0))

    assert sorted(shuffled) == data
    assert data == list(range(20))
    assert shuffled is not data


def test_shuffle_is_reproducible_with_seeded_generator():
    data = list("abcdefgh")
    assert shuffle(data, rng=np.random.default_rng(7)) == shuffle(
        data, rng=np.random.default_rng(7)
    )


def test_shuffle_reaches_positions_beyond_ten():
    data = list(range(50))
    rng = np.random.default_rng(123)
    moved_far = any(shuffle(data, rng=rng)[0] >= 10 for _ in range(20))
    assert moved_far


def test_shuffle_is_unbiased():
    rng = np.random.default_rng(2024)
    counts = Counter(tuple(shuffle([1, 2, 3], rng=rng)) for _ in range(6000))

    assert len(counts) == 6
    for count in counts.values():
        assert 800 < count < 1200


def test_shuffle_edge_cases():
    assert shuffle(None) == []
    assert shuffle([]) == []
    assert shuffle([1]) == [1]
    assert sorted(shuffle({"a": 1, "b": 2})) == [1, 2]


def test_set_operations_accept_any_iterable():
    assert intersection(np.array([1, 2, 2, 3]), [2, 3, 4]) == [2, 3]
    assert intersection([1, 2, 3], {2, 3}, (x for x in [3, 2])) == [2, 3]
    assert difference(np.array([1, 2, 3]), {2}) == [1, 3]
    assert difference([1, 2, 3, 4], (x for x in [1, 4])) == [2, 3]


def test_set_operations_reject_scalars():
    with pytest.raises(TypeError):
        intersection([1, 2], 5)
    with pytest.raises(TypeError):
        difference([1, 2], "ab")


def test_shuffle_numpy_array():
    data = np.arange(10)
    shuffled = shuffle(data, rng=np.random.default_rng(3))

    assert sorted(int(x) for x in shuffled) == list(range(10))
    assert data.tolist() == list(range(10))
