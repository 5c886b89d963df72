from __future__ import annotations

from typing import Self

from fluent_assert.description import Description
from fluent_assert.errors import FailureKind
from fluent_assert.formatting import in_brackets, unexpected_not_equal
from fluent_assert.generic import GenericAssert
from fluent_assert.objects import ObjectAssert


def exception_message(exc: BaseException) -> str | None:
    """The message an exception was raised with, or None when it had no arguments."""
    if not exc.args:
        return None
    if len(exc.args) == 1:
        return str(exc.args[0])
    return str(exc)


class ThrowableAssert(GenericAssert[BaseException]):
    """Assertions for exceptions.

    The cause checked by ``has_no_cause`` is ``__cause__`` (``raise ... from``),
    falling back to ``__context__`` unless context was suppressed.
    """

    def __init__(self, actual: BaseException | None):
        super().__init__(actual)
        self._object_assert = ObjectAssert(actual)

    def as_(self, description: str | Description | None) -> Self:
        self._object_assert.as_(description)
        return super().as_(description)

    def overriding_error_message(self, message: str | None) -> Self:
        self._object_assert.overriding_error_message(message)
        return super().overriding_error_message(message)

    def is_instance_of(self, type_: type[BaseException]) -> Self:
        self._object_assert.is_instance_of(type_)
        return self

    def is_exactly_instance_of(self, type_: type) -> Self:
        self.is_not_null()
        self._require_argument(type_, "type")
        current = type(self.actual)
        return self._fail_unless(
            current is type_,
            lambda: f"expected exactly the same type:{in_brackets(type_)} but was:{in_brackets(current)}",
            FailureKind.TYPE_MISMATCH,
        )

    def has_message(self, message: str | None) -> Self:
        self.is_not_null()
        actual_message = exception_message(self.actual)
        return self._fail_unless(
            actual_message == message,
            lambda: unexpected_not_equal(actual_message, message),
            FailureKind.VALUE_MISMATCH,
        )

    def has_no_cause(self) -> Self:
        self.is_not_null()
        cause = self.actual.__cause__
        if cause is None and not self.actual.__suppress_context__:
            cause = self.actual.__context__
        return self._fail_unless(
            cause is None,
            lambda: f"expected exception without cause, but cause was:{in_brackets(type(cause))}",
            FailureKind.UNEXPECTED_VALUE,
        )
