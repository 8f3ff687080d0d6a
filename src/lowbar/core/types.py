"""Reusable type definitions for the lowbar helpers.

Type Aliases:
    Collection: A sequence or a mapping accepted by the collection helpers.
    Iteratee: A callback receiving ``(value, key, collection)`` or a prefix of it.
    Predicate: An iteratee whose result is read for truthiness.
    Seconds: A non-negative delay or window length in seconds.
"""

from typing import Annotated, Any, Callable, Mapping, Sequence, Union

import annotated_types as at

__all__ = [
    "Collection",
    "Iteratee",
    "Predicate",
    "Seconds",
]

Collection = Union[Sequence[Any], Mapping[Any, Any]]

Iteratee = Callable[..., Any]

Predicate = Callable[..., Any]

# Delays and throttle windows cannot be negative
Seconds = Annotated[float, at.Ge(0)]
