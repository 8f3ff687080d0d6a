"""Callback adaptation shared by the collection helpers.

Helpers call every iteratee with ``(value, key, collection)``. Python callables
have fixed arities, so the callback is wrapped once per operation and only
receives as many leading arguments as it accepts.
"""

import inspect
import typing as tp
from collections.abc import Iterable, Mapping, Sequence

__all__ = [
    "as_iteratee",
    "field_getter",
    "has_field",
    "is_sequence",
    "iter_items",
]


def _positional_capacity(func: tp.Callable[..., tp.Any]) -> int | None:
    """Number of positional arguments ``func`` accepts, ``None`` if unbounded."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Builtins such as ``str`` or ``len`` expose no signature
        return 1

    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


def as_iteratee(
    func: tp.Callable[..., tp.Any], max_args: int = 3
) -> tp.Callable[..., tp.Any]:
    """Wrap ``func`` so it can always be called with ``max_args`` arguments.

    Args:
        func: Caller supplied callback.
        max_args: Number of arguments the helper passes on every call.

    Returns:
        A callable forwarding only the leading arguments ``func`` accepts.

    Raises:
        TypeError: If ``func`` is not callable.
    """
    if not callable(func):
        raise TypeError(f"Expected a callable iteratee, got {type(func).__name__}")

    capacity = _positional_capacity(func)
    if capacity is None or capacity >= max_args:
        return func

    def call(*args: tp.Any) -> tp.Any:
        return func(*args[:capacity])

    return call


def is_sequence(obj: tp.Any) -> bool:
    """True for list-like containers; strings and bytes count as scalars."""
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


def iter_items(obj: tp.Any) -> tp.Iterator[tp.Tuple[tp.Any, tp.Any]]:
    """Yield ``(key, value)`` pairs of a mapping or any other iterable.

    Mappings yield their items; sequences, sets, numpy arrays and generators
    yield their position as key. ``None`` yields nothing.

    Raises:
        TypeError: For strings, bytes and non-iterable values.
    """
    if obj is None:
        return
    if isinstance(obj, Mapping):
        yield from obj.items()
    elif isinstance(obj, Iterable) and not isinstance(obj, (str, bytes, bytearray)):
        yield from enumerate(obj)
    else:
        raise TypeError(f"Expected a collection, got {type(obj).__name__}")


def has_field(record: tp.Any, name: str) -> bool:
    if isinstance(record, Mapping):
        return name in record
    return hasattr(record, name)


def field_getter(name: str) -> tp.Callable[[tp.Any], tp.Any]:
    """Return a callable reading ``name`` from a mapping key or an attribute."""

    def get(record: tp.Any) -> tp.Any:
        if isinstance(record, Mapping):
            return record[name]
        return getattr(record, name)

    return get
