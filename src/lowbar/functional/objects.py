"""Shallow merging of mappings."""

import typing as tp

__all__ = ["extend", "defaults"]


def extend(
    obj: tp.Optional[tp.MutableMapping[tp.Any, tp.Any]],
    *sources: tp.Optional[tp.Mapping[tp.Any, tp.Any]],
) -> tp.Optional[tp.MutableMapping[tp.Any, tp.Any]]:
    """Copy every key of ``sources`` into ``obj``, later sources winning.

    Example:
        >>> extend({"a": 1}, {"b": 2}, {"a": 3})
        {'a': 3, 'b': 2}

    Args:
        obj: Target mapping, modified in place.
        *sources: Mappings to copy from. ``None`` entries are skipped.

    Returns:
        ``obj``, or ``None`` when ``obj`` is ``None``.
    """
    if obj is None:
        return None
    for source in sources:
        if source is not None:
            obj.update(source)
    return obj


def defaults(
    obj: tp.Optional[tp.MutableMapping[tp.Any, tp.Any]],
    *sources: tp.Optional[tp.Mapping[tp.Any, tp.Any]],
) -> tp.Optional[tp.MutableMapping[tp.Any, tp.Any]]:
    """Fill in keys missing from ``obj``; existing keys are never overwritten.

    The first source providing a key wins.
    """
    if obj is None:
        return None
    for source in sources:
        if source is None:
            continue
        for key, value in source.items():
            if key not in obj:
                obj[key] = value
    return obj
