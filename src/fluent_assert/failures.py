"""Construction of failures from description, default message and override.

These are plain functions of their arguments: every concrete assertion goes
through them, so an overriding message always beats the description and the
``[description] `` prefix is applied the same way everywhere.
"""

from __future__ import annotations

from typing import Callable, Union

from fluent_assert.description import Description
from fluent_assert.errors import Failure, FailureKind

DefaultMessage = Union[str, Callable[[], str]]


def format_message(description: Description | None, message: str) -> str:
    if description is None:
        return message
    text = description.value()
    if not text:
        return message
    return f"[{text}] {message}"


def failure_message(
    description: Description | None,
    overriding_message: str | None,
    default_message: DefaultMessage,
) -> str:
    """Compose the final text; a callable default is only invoked when no override is set."""
    if overriding_message is not None:
        return overriding_message
    if callable(default_message):
        default_message = default_message()
    return format_message(description, default_message)


def build_failure(
    description: Description | None,
    overriding_message: str | None,
    default_message: DefaultMessage,
    kind: FailureKind,
) -> Failure:
    return Failure(failure_message(description, overriding_message, default_message), kind)
