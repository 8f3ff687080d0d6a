"""Chainable wrapper around the collection helpers.

Example:
    >>> from lowbar.functional.chain import chain
    >>> (
    ...     chain([{"name": "moe", "age": 40}, {"name": "larry", "age": 50}])
    ...     .sort_by("age")
    ...     .pluck("name")
    ...     .first()
    ...     .value()
    ... )
    'moe'
"""

import typing as tp

from lowbar.functional import arrays, collections, objects

__all__ = ["Chain", "chain"]

# Chain method name -> helper receiving the wrapped value as first argument
_CHAINABLE: tp.Dict[str, tp.Callable[..., tp.Any]] = {
    "each": collections.each,
    "contains": collections.contains,
    "map": collections.map_,
    "pluck": collections.pluck,
    "first": collections.first,
    "last": collections.last,
    "reduce": collections.reduce_,
    "select": collections.select,
    "reject": collections.reject,
    "every": collections.every,
    "any": collections.any_,
    "uniq": collections.uniq,
    "group_by": collections.group_by,
    "sort_by": collections.sort_by,
    "flatten": collections.flatten,
    "zip": arrays.zip_,
    "intersection": arrays.intersection,
    "difference": arrays.difference,
    "shuffle": arrays.shuffle,
    "extend": objects.extend,
    "defaults": objects.defaults,
}


class Chain:
    """Wraps a value so helpers can be applied fluently.

    Every helper method returns a new :class:`Chain`; the wrapped value is
    retrieved with :meth:`value`.
    """

    def __init__(self, wrapped: tp.Any):
        self._wrapped = wrapped

    def __getattr__(self, name: str) -> tp.Callable[..., "Chain"]:
        helper = _CHAINABLE.get(name.rstrip("_"))
        if helper is None:
            raise AttributeError(f"'{type(self).__name__}' has no chainable method '{name}'")

        def method(*args: tp.Any, **kwargs: tp.Any) -> "Chain":
            return Chain(helper(self._wrapped, *args, **kwargs))

        method.__name__ = name
        method.__doc__ = helper.__doc__
        return method

    def tap(self, interceptor: tp.Callable[[tp.Any], tp.Any]) -> "Chain":
        """Call ``interceptor`` with the wrapped value and keep chaining it."""
        interceptor(self._wrapped)
        return self

    def value(self) -> tp.Any:
        return self._wrapped

    def __dir__(self) -> tp.List[str]:
        return sorted(set(super().__dir__()) | set(_CHAINABLE))

    def __repr__(self) -> str:
        return f"Chain({self._wrapped!r})"


def chain(obj: tp.Any) -> Chain:
    """Start a chain of helper calls on ``obj``."""
    return Chain(obj)
