"""Base behavior shared by every assertion type."""

from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, NoReturn, Self, TypeVar

from fluent_assert.condition import Condition
from fluent_assert.description import Description
from fluent_assert.equality import deep_equals
from fluent_assert.errors import FailureKind, InvalidArgumentError
from fluent_assert.failures import DefaultMessage
from fluent_assert.formatting import (
    in_brackets,
    unexpected_equal,
    unexpected_not_equal,
    unexpected_not_null,
    unexpected_not_same,
    unexpected_null,
    unexpected_null_argument,
    unexpected_same,
)
from fluent_assert.state import AssertionState

logger = logging.getLogger(__name__)

A = TypeVar("A")


class GenericAssert(Generic[A]):
    """Chainable assertions on a single actual value.

    Every public method returns the assertion itself, typed as the concrete
    subclass, so ``assert_that(x).as_("label").is_not_null().is_equal_to(y)``
    keeps the subclass' predicates available at each step.
    """

    def __init__(self, actual: A | None):
        self.actual = actual
        self._state = AssertionState()

    # --- description and custom message ---

    def as_(self, description: str | Description | None) -> Self:
        self._state.set_description(description)
        return self

    def described_as(self, description: str | Description | None) -> Self:
        return self.as_(description)

    def overriding_error_message(self, message: str | None) -> Self:
        self._state.set_overriding_message(message)
        return self

    @property
    def description(self) -> str | None:
        return self._state.raw_description

    @property
    def custom_error_message(self) -> str | None:
        return self._state.overriding_message

    # --- failure primitives ---

    def _fail(self, default_message: DefaultMessage, kind: FailureKind) -> NoReturn:
        failure = self._state.build_failure(default_message, kind)
        logger.debug(f"Assertion failed ({kind.value}): {failure.message}")
        raise failure

    def _fail_unless(self, passed: bool, default_message: DefaultMessage, kind: FailureKind) -> Self:
        if not passed:
            self._fail(default_message, kind)
        return self

    @staticmethod
    def _require_argument(value: Any, name: str) -> None:
        if value is None:
            raise InvalidArgumentError(unexpected_null_argument(name))

    # --- null checks ---

    def is_null(self) -> Self:
        return self._fail_unless(
            self.actual is None,
            lambda: unexpected_not_null(self.actual),
            FailureKind.UNEXPECTED_VALUE,
        )

    def is_not_null(self) -> Self:
        return self._fail_unless(
            self.actual is not None, unexpected_null, FailureKind.NULL_SUBJECT
        )

    # --- identity ---

    def is_same_as(self, expected: Any) -> Self:
        return self._fail_unless(
            self.actual is expected,
            lambda: unexpected_not_same(self.actual, expected),
            FailureKind.IDENTITY_MISMATCH,
        )

    def is_not_same_as(self, expected: Any) -> Self:
        return self._fail_unless(
            self.actual is not expected,
            lambda: unexpected_same(self.actual),
            FailureKind.UNEXPECTED_IDENTITY,
        )

    # --- equality ---

    def is_equal_to(self, expected: Any) -> Self:
        return self._fail_unless(
            deep_equals(self.actual, expected),
            lambda: unexpected_not_equal(self.actual, expected),
            FailureKind.VALUE_MISMATCH,
        )

    def is_not_equal_to(self, expected: Any) -> Self:
        return self._fail_unless(
            not deep_equals(self.actual, expected),
            lambda: unexpected_equal(self.actual, expected),
            FailureKind.UNEXPECTED_EQUALITY,
        )

    def is_in(self, values: Iterable[Any]) -> Self:
        self._require_argument(values, "collection of values")
        values = list(values)
        return self._fail_unless(
            any(deep_equals(self.actual, v) for v in values),
            lambda: f"actual value:{in_brackets(self.actual)} should be in:{in_brackets(values)}",
            FailureKind.VALUE_MISMATCH,
        )

    def is_not_in(self, values: Iterable[Any]) -> Self:
        self._require_argument(values, "collection of values")
        values = list(values)
        return self._fail_unless(
            not any(deep_equals(self.actual, v) for v in values),
            lambda: f"actual value:{in_brackets(self.actual)} should not be in:{in_brackets(values)}",
            FailureKind.UNEXPECTED_EQUALITY,
        )

    # --- conditions ---

    def satisfies(self, condition: Condition[A]) -> Self:
        self._require_argument(condition, "condition")
        return self._fail_unless(
            condition.matches(self.actual),
            lambda: f"actual value:{in_brackets(self.actual)} should satisfy condition:<{condition}>",
            FailureKind.CONDITION_NOT_SATISFIED,
        )

    def does_not_satisfy(self, condition: Condition[A]) -> Self:
        self._require_argument(condition, "condition")
        return self._fail_unless(
            not condition.matches(self.actual),
            lambda: f"actual value:{in_brackets(self.actual)} should not satisfy condition:<{condition}>",
            FailureKind.CONDITION_UNEXPECTEDLY_SATISFIED,
        )

    def is_(self, condition: Condition[A]) -> Self:
        return self.satisfies(condition)

    def is_not(self, condition: Condition[A]) -> Self:
        return self.does_not_satisfy(condition)
