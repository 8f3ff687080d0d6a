import numpy as np
import pytest
from lowbar.functional.chain import Chain, chain


@pytest.fixture
def stooges():
    return [
        {"name": "curly", "age": 25},
        {"name": "moe", "age": 21},
        {"name": "larry", "age": 23},
    ]


def test_chain_sort_pluck_first(stooges):
    youngest = chain(stooges).sort_by("age").pluck("name").first().value()
    assert youngest == "moe"


def test_chain_map_select_reduce():
    total = (
        chain([1, 2, 3, 4, 5, 6])
        .map(lambda x: x * x)
        .select(lambda x: x % 2 == 0)
        .reduce(lambda acc, x: acc + x)
        .value()
    )
    assert total == 4 + 16 + 36


def test_chain_accepts_underscore_names_and_returns_new_chain():
    start = chain([[1, 2], [2, 3]])
    flat = start.flatten()

    assert isinstance(flat, Chain)
    assert flat is not start
    assert flat.uniq().any_(lambda x: x > 2).value() is True
    assert start.value() == [[1, 2], [2, 3]]


def test_chain_tap_sees_intermediate_value():
    seen = []
    result = chain([3, 1, 2]).sort_by().tap(seen.append).last(2).value()

    assert seen == [[1, 2, 3]]
    assert result == [2, 3]


def test_chain_set_operations_and_shuffle():
    result = (
        chain([1, 2, 3, 4])
        .difference([4])
        .intersection([1, 2, 3, 9])
        .shuffle(rng=np.random.default_rng(1))
        .value()
    )
    assert sorted(result) == [1, 2, 3]


def test_chain_unknown_method():
    with pytest.raises(AttributeError):
        chain([1]).explode()


def test_chain_repr():
    assert repr(chain([1])) == "Chain([1])"
