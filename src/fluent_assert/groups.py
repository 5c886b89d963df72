"""Assertions for groups of values: lists, tuples, sets and other collections."""

from __future__ import annotations

from typing import Any, Collection, Self

from fluent_assert.equality import deep_equals
from fluent_assert.errors import FailureKind
from fluent_assert.formatting import in_brackets
from fluent_assert.generic import GenericAssert
from fluent_assert.properties.extractor import PropertyExtractor


def _index_of(values: list[Any], value: Any) -> int:
    for i, candidate in enumerate(values):
        if deep_equals(candidate, value):
            return i
    return -1


def _missing(actual: list[Any], expected: tuple[Any, ...]) -> list[Any]:
    return [v for v in expected if _index_of(actual, v) < 0]


def _duplicates(values: list[Any]) -> list[Any]:
    found: list[Any] = []
    for i, value in enumerate(values):
        if _index_of(values[:i], value) >= 0 and _index_of(found, value) < 0:
            found.append(value)
    return found


class CollectionAssert(GenericAssert[Collection[Any]]):
    """Assertions for a sized collection of values.

    Membership is decided with deep equality, so unhashable elements such as
    nested lists are supported.
    """

    def _elements(self) -> list[Any]:
        self.is_not_null()
        return list(self.actual)

    def contains(self, *values: Any) -> Self:
        elements = self._elements()
        missing = _missing(elements, values)
        return self._fail_unless(
            not missing,
            lambda: f"{in_brackets(self.actual)} does not contain element(s):{in_brackets(missing)}",
            FailureKind.MISSING_ELEMENTS,
        )

    def contains_only(self, *values: Any) -> Self:
        elements = self._elements()
        missing = _missing(elements, values)
        self._fail_unless(
            not missing,
            lambda: f"{in_brackets(self.actual)} does not contain element(s):{in_brackets(missing)}",
            FailureKind.MISSING_ELEMENTS,
        )
        expected = list(values)
        extra = [e for e in elements if _index_of(expected, e) < 0]
        return self._fail_unless(
            not extra,
            lambda: f"unexpected element(s):{in_brackets(extra)} in {in_brackets(self.actual)}",
            FailureKind.UNEXPECTED_ELEMENTS,
        )

    def excludes(self, *values: Any) -> Self:
        elements = self._elements()
        found = [v for v in values if _index_of(elements, v) >= 0]
        return self._fail_unless(
            not found,
            lambda: f"{in_brackets(self.actual)} does not exclude element(s):{in_brackets(found)}",
            FailureKind.UNEXPECTED_ELEMENTS,
        )

    def does_not_have_duplicates(self) -> Self:
        duplicates = _duplicates(self._elements())
        return self._fail_unless(
            not duplicates,
            lambda: f"{in_brackets(self.actual)} contains duplicate(s):{in_brackets(duplicates)}",
            FailureKind.UNEXPECTED_ELEMENTS,
        )

    def has_size(self, expected: int) -> Self:
        self._require_argument(expected, "size")
        size = len(self._elements())
        return self._fail_unless(
            size == expected,
            lambda: f"expected size:<{expected}> but was:<{size}> for {in_brackets(self.actual)}",
            FailureKind.SIZE_MISMATCH,
        )

    def is_empty(self) -> Self:
        return self._fail_unless(
            not self._elements(),
            lambda: f"expecting empty, but was:{in_brackets(self.actual)}",
            FailureKind.EMPTINESS,
        )

    def is_not_empty(self) -> Self:
        return self._fail_unless(
            bool(self._elements()),
            "expecting a non-empty, but it was empty",
            FailureKind.EMPTINESS,
        )

    def has_all_elements_of_type(self, type_: type) -> Self:
        self._require_argument(type_, "type to check")
        elements = self._elements()
        return self._fail_unless(
            all(isinstance(e, type_) for e in elements),
            lambda: f"not all elements in:{in_brackets(self.actual)} belong to the type:{in_brackets(type_)}",
            FailureKind.TYPE_MISMATCH,
        )

    def has_at_least_one_element_of_type(self, type_: type) -> Self:
        self._require_argument(type_, "type to check")
        elements = self._elements()
        return self._fail_unless(
            any(isinstance(e, type_) for e in elements),
            lambda: f"{in_brackets(self.actual)} does not have any elements of type:{in_brackets(type_)}",
            FailureKind.TYPE_MISMATCH,
        )

    def is_null_or_empty(self) -> Self:
        if self.actual is None:
            return self
        return self.is_empty()

    def on_property(self, path: str) -> Self:
        """Wrap the value of ``path`` for every element in a new assertion of this type.

        Works with simple (``age``) and nested (``father.age``) paths::

            assert_that(people).on_property("father.age").contains_only(55, 46)

        Raises PropertyNotFoundError if any element lacks the property.
        """
        elements = self._elements()
        return type(self)(PropertyExtractor.from_settings().extract(path, elements))
