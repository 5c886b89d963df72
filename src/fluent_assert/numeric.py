from __future__ import annotations

import numbers
from typing import Any, Self

from fluent_assert.errors import FailureKind
from fluent_assert.formatting import in_brackets
from fluent_assert.generic import GenericAssert


class NumberAssert(GenericAssert[numbers.Real]):
    """Assertions for real numbers (int, float, Decimal, Fraction, ...)."""

    def _compare(self, passed: bool, relation: str, other: Any) -> Self:
        return self._fail_unless(
            passed,
            lambda: f"actual value:{in_brackets(self.actual)} should be {relation}:{in_brackets(other)}",
            FailureKind.VALUE_MISMATCH,
        )

    def is_zero(self) -> Self:
        self.is_not_null()
        return self._compare(self.actual == 0, "equal to", 0)

    def is_not_zero(self) -> Self:
        self.is_not_null()
        return self._fail_unless(
            self.actual != 0,
            lambda: f"actual value:{in_brackets(self.actual)} should not be equal to:<0>",
            FailureKind.UNEXPECTED_EQUALITY,
        )

    def is_positive(self) -> Self:
        return self.is_greater_than(0)

    def is_negative(self) -> Self:
        return self.is_less_than(0)

    def is_greater_than(self, other: numbers.Real) -> Self:
        self._require_argument(other, "value")
        self.is_not_null()
        return self._compare(self.actual > other, "greater than", other)

    def is_less_than(self, other: numbers.Real) -> Self:
        self._require_argument(other, "value")
        self.is_not_null()
        return self._compare(self.actual < other, "less than", other)

    def is_greater_than_or_equal_to(self, other: numbers.Real) -> Self:
        self._require_argument(other, "value")
        self.is_not_null()
        return self._compare(self.actual >= other, "greater than or equal to", other)

    def is_less_than_or_equal_to(self, other: numbers.Real) -> Self:
        self._require_argument(other, "value")
        self.is_not_null()
        return self._compare(self.actual <= other, "less than or equal to", other)
