"""Caller-supplied predicates usable with ``satisfies`` and friends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class Condition(ABC, Generic[T]):
    """A named predicate on a value."""

    def __init__(self, description: str | None = None):
        self.description = description

    @abstractmethod
    def matches(self, value: T) -> bool: ...

    def as_(self, description: str) -> Condition[T]:
        self.description = description
        return self

    @classmethod
    def of(cls, predicate: Callable[[Any], bool], description: str | None = None) -> Condition[Any]:
        return _PredicateCondition(predicate, description or getattr(predicate, "__name__", None))

    def __str__(self) -> str:
        return self.description if self.description else type(self).__name__


class _PredicateCondition(Condition[Any]):
    def __init__(self, predicate: Callable[[Any], bool], description: str | None):
        super().__init__(description)
        self._predicate = predicate

    def matches(self, value: Any) -> bool:
        return bool(self._predicate(value))
