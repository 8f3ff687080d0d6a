"""Positional and set-like helpers for sequences."""

import logging
import typing as tp
from itertools import zip_longest

import numpy as np
from pydantic import ConfigDict, validate_call

from lowbar.core.config import settings
from lowbar.functional.collections import contains, uniq
from lowbar.functional.iteratee import iter_items

__all__ = [
    "zip_",
    "intersection",
    "difference",
    "range_",
    "shuffle",
]

logger = logging.getLogger(__name__)

_rng: tp.Optional[np.random.Generator] = None


def _values(obj: tp.Any) -> tp.List[tp.Any]:
    return [value for _, value in iter_items(obj)]


def _default_rng() -> np.random.Generator:
    """Process wide generator, seeded from ``LOWBAR_SHUFFLE_SEED`` when set."""
    global _rng
    if _rng is None:
        logger.debug(f"Creating shuffle generator (seed={settings.SHUFFLE_SEED})")
        _rng = np.random.default_rng(settings.SHUFFLE_SEED)
    return _rng


def zip_(*arrays: tp.Optional[tp.Sequence[tp.Any]]) -> tp.List[tp.List[tp.Any]]:
    """Group elements by position, padding shorter inputs with ``None``.

    Example:
        >>> zip_(["a", "b"], [1, 2, 3])
        [['a', 1], ['b', 2], [None, 3]]
    """
    columns = [array if array is not None else () for array in arrays]
    return [list(row) for row in zip_longest(*columns, fillvalue=None)]


def intersection(*arrays: tp.Optional[tp.Sequence[tp.Any]]) -> tp.List[tp.Any]:
    """Deduplicated values present in every array, in first-array order."""
    if not arrays:
        return []
    # Generators can only be walked once
    others = [_values(other) for other in arrays[1:]]
    return [value for value in uniq(arrays[0]) if all(contains(o, value) for o in others)]


def difference(
    array: tp.Optional[tp.Sequence[tp.Any]], *others: tp.Optional[tp.Sequence[tp.Any]]
) -> tp.List[tp.Any]:
    """Values of ``array`` found in none of ``others``.

    Order and repetitions of ``array`` are preserved.
    """
    excluded = uniq([value for other in others for value in _values(other)])
    return [value for _, value in iter_items(array) if not contains(excluded, value)]


@validate_call(config=ConfigDict(strict=True))
def range_(start: int, stop: tp.Optional[int] = None, step: int = 1) -> tp.List[int]:
    """List of integers from ``start`` to ``stop`` (exclusive) by ``step``.

    With a single argument the range runs from ``0`` to ``start``.

    Raises:
        pydantic.ValidationError: If an argument is not an integer.
        ValueError: If ``step`` is zero.
    """
    if step == 0:
        raise ValueError("range_ step must not be zero")
    if stop is None:
        start, stop = 0, start
    return list(range(start, stop, step))


def shuffle(
    obj: tp.Any, rng: tp.Optional[np.random.Generator] = None
) -> tp.List[tp.Any]:
    """Return the values of ``obj`` in uniformly random order.

    Fisher-Yates: walking from the end, position ``i`` is swapped with a
    position drawn uniformly from ``[0, i]``. The input is left untouched.

    Args:
        obj: Sequence or mapping; mappings shuffle their values.
        rng: Generator to draw from. Defaults to the process generator.

    Returns:
        A new list, ``[]`` for ``None``.
    """
    output = [value for _, value in iter_items(obj)]
    rng = rng if rng is not None else _default_rng()

    for i in range(len(output) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        output[i], output[j] = output[j], output[i]
    return output
