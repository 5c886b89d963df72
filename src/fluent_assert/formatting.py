"""Rendering of values and the default failure-message templates."""

from __future__ import annotations

from typing import Any

from fluent_assert.config import get_settings


def format_value(value: Any, max_length: int | None = None) -> str:
    """Render a value for a failure message.

    Strings are quoted, types are shown by qualified name, everything else
    uses ``repr``. When ``max_length`` is omitted the active settings decide.
    """
    if isinstance(value, type):
        text = value.__qualname__
    else:
        text = repr(value)

    if max_length is None:
        max_length = get_settings().max_repr_length
    if max_length is not None and len(text) > max_length:
        text = text[: max_length - 3] + "..."
    return text


def in_brackets(value: Any) -> str:
    return f"<{format_value(value)}>"


def unexpected_not_equal(actual: Any, expected: Any) -> str:
    return f"expected:{in_brackets(expected)} but was:{in_brackets(actual)}"


def unexpected_equal(actual: Any, expected: Any) -> str:
    return f"actual value:{in_brackets(actual)} should not be equal to:{in_brackets(expected)}"


def unexpected_not_same(actual: Any, expected: Any) -> str:
    return f"expected same instance but found:{in_brackets(actual)} and:{in_brackets(expected)}"


def unexpected_same(actual: Any) -> str:
    return f"given objects are same:{in_brackets(actual)}"


def unexpected_null() -> str:
    return "expecting actual value not to be null"


def unexpected_not_null(actual: Any) -> str:
    return f"{in_brackets(actual)} should be null"


def unexpected_null_argument(name: str) -> str:
    return f"the given {name} should not be null"
