"""Helpers operating on sequences and mappings.

Every function accepts a mapping or any other non-string iterable (list,
tuple, set, numpy array, generator) and visits its values in order. Strings
and other scalars raise ``TypeError``. Iteratees are called with
``(value, key, collection)`` where ``key`` is the position for non-mappings;
callbacks taking fewer parameters get only the leading ones.

Absent input (``None``) never raises: each function documents what it returns
instead.

Examples:
    >>> from lowbar.functional.collections import map_, select, reduce_
    >>> map_([1, 2, 3], lambda x: x * 2)
    [2, 4, 6]
    >>> select({"a": 1, "b": 2}, lambda v: v > 1)
    [2]
    >>> reduce_(["a", "b"], lambda acc, x: acc + x, "")
    'ab'
"""

import typing as tp
from collections.abc import Hashable

from lowbar.core.types import Collection, Iteratee, Predicate
from lowbar.functional.iteratee import (
    as_iteratee,
    field_getter,
    has_field,
    is_sequence,
    iter_items,
)

__all__ = [
    "each",
    "contains",
    "map_",
    "pluck",
    "first",
    "last",
    "reduce_",
    "select",
    "reject",
    "every",
    "any_",
    "uniq",
    "group_by",
    "sort_by",
    "flatten",
]


def _values(obj: tp.Any) -> tp.List[tp.Any]:
    return [value for _, value in iter_items(obj)]


def _key_function(iteratee: tp.Union[Iteratee, str, None]) -> tp.Callable[..., tp.Any]:
    if iteratee is None:
        return lambda value, key, obj: value
    if isinstance(iteratee, str):
        getter = field_getter(iteratee)
        return lambda value, key, obj: getter(value)
    return as_iteratee(iteratee)


def each(obj: tp.Optional[Collection], iteratee: Iteratee) -> tp.Optional[Collection]:
    """Call ``iteratee(value, key, obj)`` for every element of ``obj``.

    Args:
        obj: Sequence or mapping to walk. ``None`` is a no-op.
        iteratee: Callback invoked once per element.

    Returns:
        ``obj`` itself.
    """
    call = as_iteratee(iteratee)
    for key, value in iter_items(obj):
        call(value, key, obj)
    return obj


def contains(obj: tp.Optional[Collection], target: tp.Any) -> bool:
    """Whether any value of ``obj`` equals ``target``."""
    return any(value == target for _, value in iter_items(obj))


def map_(obj: tp.Optional[Collection], iteratee: Iteratee) -> tp.List[tp.Any]:
    """Apply ``iteratee`` to every element and collect the results.

    Returns:
        A list with one result per element, ``[]`` for ``None``.
    """
    call = as_iteratee(iteratee)
    return [call(value, key, obj) for key, value in iter_items(obj)]


def pluck(obj: tp.Optional[Collection], name: str) -> tp.List[tp.Any]:
    """Extract field ``name`` from every record, skipping records without it.

    Records may be mappings (looked up by key) or plain objects (looked up by
    attribute).

    Example:
        >>> pluck([{"age": 30}, {"age": 41}, {}], "age")
        [30, 41]
    """
    getter = field_getter(name)
    return [getter(value) for value in _values(obj) if has_field(value, name)]


def first(array: tp.Optional[tp.Sequence[tp.Any]], n: tp.Optional[int] = None) -> tp.Any:
    """Return the first element, or a list of the first ``n`` elements.

    Args:
        array: Input sequence.
        n: Number of elements to take. Clamped to ``len(array)``; values
            ``<= 0`` give ``[]``.

    Returns:
        ``None`` for a ``None`` array. Without ``n``, the first element or
        ``None`` when empty. With ``n``, a new list.
    """
    if array is None:
        return None
    if n is None:
        return array[0] if len(array) else None
    if n <= 0:
        return []
    return list(array[:n])


def last(array: tp.Optional[tp.Sequence[tp.Any]], n: tp.Optional[int] = None) -> tp.Any:
    """Return the last element, or a list of the last ``n`` elements.

    Mirrors :func:`first`.
    """
    if array is None:
        return None
    if n is None:
        return array[-1] if len(array) else None
    if n <= 0:
        return []
    return list(array[-n:])


def reduce_(
    obj: tp.Optional[Collection],
    iteratee: Iteratee,
    initial: tp.Any = 0,
) -> tp.Any:
    """Fold ``obj`` from the left.

    Each step computes ``acc = iteratee(acc, value, key, obj)``. The seed is
    passed through as given, so strings, lists or dicts accumulate naturally.

    Args:
        obj: Sequence or mapping to fold.
        iteratee: Reducer callback.
        initial: Seed accumulator. Defaults to ``0``.

    Returns:
        The final accumulator; ``initial`` for empty or ``None`` input.
    """
    call = as_iteratee(iteratee, max_args=4)
    acc = initial
    for key, value in iter_items(obj):
        acc = call(acc, value, key, obj)
    return acc


def select(
    obj: tp.Optional[Collection], predicate: Predicate
) -> tp.Optional[tp.List[tp.Any]]:
    """Values passing ``predicate``, in order. ``None`` for ``None`` input."""
    if obj is None:
        return None
    call = as_iteratee(predicate)
    return [value for key, value in iter_items(obj) if call(value, key, obj)]


def reject(
    obj: tp.Optional[Collection], predicate: Predicate
) -> tp.Optional[tp.List[tp.Any]]:
    """Values failing ``predicate``, in order. ``None`` for ``None`` input."""
    if obj is None:
        return None
    call = as_iteratee(predicate)
    return [value for key, value in iter_items(obj) if not call(value, key, obj)]


def every(
    obj: tp.Optional[Collection], predicate: tp.Optional[Predicate] = None
) -> tp.Optional[bool]:
    """Whether every value passes ``predicate`` (truthiness by default).

    Returns:
        ``True`` for empty input and ``None`` for ``None`` input.
    """
    if obj is None:
        return None
    call = _key_function(predicate)
    return all(call(value, key, obj) for key, value in iter_items(obj))


def any_(
    obj: tp.Optional[Collection], predicate: tp.Optional[Predicate] = None
) -> tp.Optional[bool]:
    """Whether at least one value passes ``predicate`` (truthiness by default).

    Returns:
        ``False`` for empty input and ``None`` for ``None`` input.
    """
    if obj is None:
        return None
    call = _key_function(predicate)
    return any(call(value, key, obj) for key, value in iter_items(obj))


def uniq(array: tp.Optional[Collection]) -> tp.List[tp.Any]:
    """Duplicate-free copy of ``array`` keeping first-seen order.

    Equality is ``==``. Hashable values are tracked in a set; unhashable ones
    (lists, dicts) fall back to a linear scan.
    """
    output: tp.List[tp.Any] = []
    seen_hashable = set()
    seen_other: tp.List[tp.Any] = []

    for value in _values(array):
        if isinstance(value, Hashable):
            try:
                if value in seen_hashable:
                    continue
                seen_hashable.add(value)
                output.append(value)
                continue
            except TypeError:
                # e.g. a tuple holding a list
                pass
        if value not in seen_other:
            seen_other.append(value)
            output.append(value)
    return output


def group_by(
    obj: tp.Optional[Collection], iteratee: tp.Union[Iteratee, str]
) -> tp.Dict[tp.Any, tp.List[tp.Any]]:
    """Group values by the key ``iteratee`` computes.

    Example:
        >>> group_by([1.3, 2.1, 2.4], lambda x: int(x))
        {1: [1.3], 2: [2.1, 2.4]}
    """
    call = _key_function(iteratee)
    groups: tp.Dict[tp.Any, tp.List[tp.Any]] = {}
    for key, value in iter_items(obj):
        groups.setdefault(call(value, key, obj), []).append(value)
    return groups


def sort_by(
    obj: tp.Optional[Collection],
    iteratee: tp.Union[Iteratee, str, None] = None,
) -> tp.Optional[tp.List[tp.Any]]:
    """Stable sort of the values of ``obj`` by a computed key.

    Args:
        obj: Sequence or mapping. It is not modified.
        iteratee: Key callback, or a field name to sort records by. Records
            without the field are placed after all others. Defaults to the
            values themselves.

    Returns:
        A new sorted list, ``None`` for ``None`` input.
    """
    if obj is None:
        return None

    if isinstance(iteratee, str):
        values = _values(obj)
        getter = field_getter(iteratee)
        # Records without the field keep their relative order at the end
        present = [value for value in values if has_field(value, iteratee)]
        missing = [value for value in values if not has_field(value, iteratee)]
        return sorted(present, key=getter) + missing

    call = _key_function(iteratee)
    items = list(iter_items(obj))
    return [value for key, value in sorted(items, key=lambda kv: call(kv[1], kv[0], obj))]


def flatten(nested: tp.Optional[tp.Sequence[tp.Any]], shallow: bool = False) -> tp.List[tp.Any]:
    """Flatten nested lists/tuples into a single list.

    Args:
        nested: Arbitrarily nested sequence.
        shallow: Only remove a single level of nesting.

    Returns:
        Leaf values in order, ``[]`` for ``None``.
    """
    output: tp.List[tp.Any] = []
    if nested is None:
        return output

    # (iterator, depth) pairs; the stack replaces recursion so depth is unbounded
    stack = [(iter([value for _, value in iter_items(nested)]), 0)]
    while stack:
        values, depth = stack[-1]
        for value in values:
            if is_sequence(value) and (not shallow or depth == 0):
                stack.append((iter(value), depth + 1))
                break
            output.append(value)
        else:
            stack.pop()
    return output
