"""Functional primitives for lowbar.

This package provides the collection and function helpers of the project.
Helpers are independent leaves: each is stateless apart from the wrappers
returned by ``once``, ``memoize`` and ``throttle``, which own their state.
Names shadowing builtins carry a trailing underscore (``map_``, ``reduce_``,
``any_``, ``zip_``, ``range_``).
"""

from lowbar.functional.arrays import difference, intersection, range_, shuffle, zip_
from lowbar.functional.chain import Chain, chain
from lowbar.functional.collections import (
    any_,
    contains,
    each,
    every,
    first,
    flatten,
    group_by,
    last,
    map_,
    pluck,
    reduce_,
    reject,
    select,
    sort_by,
    uniq,
)
from lowbar.functional.functions import (
    ScheduledTask,
    delay,
    memoize,
    once,
    throttle,
)
from lowbar.functional.objects import defaults, extend

__all__ = [
    "each",
    "contains",
    "map_",
    "pluck",
    "last",
    "first",
    "reduce_",
    "select",
    "reject",
    "every",
    "any_",
    "uniq",
    "group_by",
    "once",
    "memoize",
    "delay",
    "ScheduledTask",
    "extend",
    "defaults",
    "flatten",
    "sort_by",
    "zip_",
    "intersection",
    "difference",
    "range_",
    "shuffle",
    "chain",
    "Chain",
    "throttle",
]
