import functools
from types import SimpleNamespace

import numpy as np
import pytest
from lowbar.functional.iteratee import (
    as_iteratee,
    field_getter,
    has_field,
    is_sequence,
    iter_items,
)


def test_as_iteratee_trims_arguments():
    assert as_iteratee(lambda: "none")(1, 2, 3) == "none"
    assert as_iteratee(lambda v: v)(1, 2, 3) == 1
    assert as_iteratee(lambda v, k: (v, k))(1, 2, 3) == (1, 2)
    assert as_iteratee(lambda *args: args)(1, 2, 3) == (1, 2, 3)


def test_as_iteratee_handles_builtins_and_partials():
    assert as_iteratee(len)("abc", 0, None) == 3
    assert as_iteratee(str.upper)("a", 0, None) == "A"
    add = functools.partial(lambda a, b: a + b, 10)
    assert as_iteratee(add)(5, 0, None) == 15


def test_as_iteratee_rejects_non_callable():
    with pytest.raises(TypeError):
        as_iteratee(42)


def test_is_sequence():
    assert is_sequence([1])
    assert is_sequence((1,))
    assert not is_sequence("abc")
    assert not is_sequence(b"abc")
    assert not is_sequence({"a": 1})


def test_iter_items():
    assert list(iter_items(["a", "b"])) == [(0, "a"), (1, "b")]
    assert list(iter_items({"x": 1})) == [("x", 1)]
    assert list(iter_items(None)) == []
    assert list(iter_items({3})) == [(0, 3)]
    assert list(iter_items(x * 2 for x in [1, 2])) == [(0, 2), (1, 4)]
    assert list(iter_items(np.array([7, 8]))) == [(0, 7), (1, 8)]


@pytest.mark.parametrize("scalar", [5, "abc", b"abc", 1.5])
def test_iter_items_rejects_scalars(scalar):
    with pytest.raises(TypeError):
        list(iter_items(scalar))


def test_field_access():
    record = SimpleNamespace(age=3)
    assert has_field({"age": 1}, "age")
    assert not has_field({}, "age")
    assert has_field(record, "age")
    assert field_getter("age")({"age": 1}) == 1
    assert field_getter("age")(record) == 3
