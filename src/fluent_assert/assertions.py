"""Entry point that picks the assertion type for a value."""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Mapping, Sized
from typing import Any, overload

from fluent_assert.groups import CollectionAssert
from fluent_assert.numeric import NumberAssert
from fluent_assert.objects import ObjectAssert
from fluent_assert.throwables import ThrowableAssert


@overload
def assert_that(actual: BaseException) -> ThrowableAssert: ...


@overload
def assert_that(actual: numbers.Real) -> NumberAssert: ...


@overload
def assert_that(actual: Any) -> ObjectAssert | CollectionAssert: ...


def assert_that(actual):
    """Wrap ``actual`` in the most specific assertion type available.

    bool is excluded from numbers, and str/bytes/mappings are treated as plain
    objects rather than collections. ``None`` gets an ObjectAssert, which
    only fails once a predicate needs a value.
    """
    if isinstance(actual, BaseException):
        return ThrowableAssert(actual)
    if isinstance(actual, numbers.Real) and not isinstance(actual, bool):
        return NumberAssert(actual)
    if (
        isinstance(actual, Iterable)
        and isinstance(actual, Sized)
        and not isinstance(actual, (str, bytes, bytearray, Mapping))
    ):
        return CollectionAssert(actual)
    return ObjectAssert(actual)
