from __future__ import annotations

from typing import Any, Self

from fluent_assert.errors import FailureKind, InvalidArgumentError
from fluent_assert.formatting import format_value, in_brackets, unexpected_null_argument
from fluent_assert.generic import GenericAssert


class ObjectAssert(GenericAssert[Any]):
    """Assertions for arbitrary objects."""

    def is_instance_of(self, type_: type) -> Self:
        self._require_argument(type_, "type")
        self.is_not_null()
        return self._fail_unless(
            isinstance(self.actual, type_),
            lambda: f"expected instance of:{in_brackets(type_)} but was instance of:{in_brackets(type(self.actual))}",
            FailureKind.TYPE_MISMATCH,
        )

    def is_instance_of_any(self, *types: type) -> Self:
        if not types:
            raise InvalidArgumentError(unexpected_null_argument("types"))
        self.is_not_null()
        return self._fail_unless(
            isinstance(self.actual, types),
            lambda: (
                f"expected instance of any:<({', '.join(format_value(t) for t in types)})> "
                f"but was instance of:{in_brackets(type(self.actual))}"
            ),
            FailureKind.TYPE_MISMATCH,
        )
