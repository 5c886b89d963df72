"""Per-assertion mutable state."""

from __future__ import annotations

from dataclasses import dataclass

from fluent_assert.description import Description, to_description
from fluent_assert.errors import Failure, FailureKind
from fluent_assert.failures import DefaultMessage, build_failure


@dataclass
class AssertionState:
    """Description and overriding message of one assertion instance.

    Only ``set_description`` and ``set_overriding_message`` change it;
    building a failure reads it without side effects.
    """

    description: Description | None = None
    overriding_message: str | None = None

    def set_description(self, description: str | Description | None) -> None:
        self.description = to_description(description)

    def set_overriding_message(self, message: str | None) -> None:
        self.overriding_message = message

    @property
    def raw_description(self) -> str | None:
        return None if self.description is None else self.description.value()

    def build_failure(self, default_message: DefaultMessage, kind: FailureKind) -> Failure:
        return build_failure(self.description, self.overriding_message, default_message, kind)
