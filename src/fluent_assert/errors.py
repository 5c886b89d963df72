"""Failure and error types raised by assertions."""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    NULL_SUBJECT = "null-subject"
    UNEXPECTED_VALUE = "unexpected-value"
    VALUE_MISMATCH = "value-mismatch"
    UNEXPECTED_EQUALITY = "unexpected-equality"
    IDENTITY_MISMATCH = "identity-mismatch"
    UNEXPECTED_IDENTITY = "unexpected-identity"
    CONDITION_NOT_SATISFIED = "condition-not-satisfied"
    CONDITION_UNEXPECTEDLY_SATISFIED = "condition-unexpectedly-satisfied"
    TYPE_MISMATCH = "type-mismatch"
    SIZE_MISMATCH = "size-mismatch"
    MISSING_ELEMENTS = "missing-elements"
    UNEXPECTED_ELEMENTS = "unexpected-elements"
    EMPTINESS = "emptiness"


class Failure(AssertionError):
    """A failed expectation.

    Attributes:
        message: The final, fully composed failure text.
        kind: Which predicate failed, for callers that want to branch on it.
    """

    def __init__(self, message: str, kind: FailureKind = FailureKind.VALUE_MISMATCH):
        super().__init__(message)
        self.message = message
        self.kind = kind


class InvalidArgumentError(ValueError):
    """A required argument is missing or unusable.

    Signals a mistake in the test itself, so it never carries the assertion's
    description or overriding message.
    """


class InvalidPathError(InvalidArgumentError):
    """A property path is empty or contains an empty segment."""

    def __init__(self, path: object):
        super().__init__(f"invalid property path: {path!r}")
        self.path = path


class PropertyNotFoundError(AttributeError):
    """A segment of a property path could not be read from an object.

    ``value_is_none`` marks the case where ``segment`` itself was found on
    ``owner_type`` but held None, so the rest of the path could not be walked.
    """

    def __init__(self, path: str, owner_type: type, segment: str, value_is_none: bool = False):
        if value_is_none:
            message = f"'{segment}' of path '{path}' is None in {owner_type.__qualname__}"
        else:
            message = (
                f"unable to find property '{segment}' of path '{path}' "
                f"in {owner_type.__qualname__}"
            )
        super().__init__(message)
        self.path = path
        self.owner_type = owner_type
        self.segment = segment
        self.value_is_none = value_is_none
