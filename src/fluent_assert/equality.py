"""Structural equality for nested containers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fluent_assert.errors import InvalidArgumentError


def _same_sequence_family(a: Any, b: Any) -> bool:
    return (isinstance(a, list) and isinstance(b, list)) or (
        isinstance(a, tuple) and isinstance(b, tuple)
    )


def deep_equals(actual: Any, expected: Any) -> bool:
    """Compare two values element by element, recursing into containers.

    Lists and tuples are compared positionally (a list never equals a tuple),
    mappings key by key, and everything else with ``==``. Self-referencing
    containers are not supported and raise ``InvalidArgumentError``.
    """
    return _deep_equals(actual, expected, set())


def _deep_equals(a: Any, b: Any, active: set[tuple[int, int]]) -> bool:
    if a is b:
        return True

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        return _enter(a, b, active, _mappings_equal)

    if _same_sequence_family(a, b):
        return _enter(a, b, active, _sequences_equal)

    if isinstance(a, (list, tuple)) or isinstance(b, (list, tuple)):
        return False

    result = a == b
    if isinstance(result, bool):
        return result
    # array-likes return element-wise results
    all_ = getattr(result, "all", None)
    return bool(all_()) if callable(all_) else bool(result)


def _enter(a: Any, b: Any, active: set[tuple[int, int]], compare) -> bool:
    # revisiting a pair already on the stack only happens with cycles
    pair = (id(a), id(b))
    if pair in active:
        raise InvalidArgumentError("cyclic structures are not supported by deep equality")
    active.add(pair)
    try:
        return compare(a, b, active)
    finally:
        active.discard(pair)


def _sequences_equal(a: Any, b: Any, active: set[tuple[int, int]]) -> bool:
    if len(a) != len(b):
        return False
    return all(_deep_equals(x, y, active) for x, y in zip(a, b))


def _mappings_equal(a: Mapping, b: Mapping, active: set[tuple[int, int]]) -> bool:
    if a.keys() != b.keys():
        return False
    return all(_deep_equals(a[k], b[k], active) for k in a)
