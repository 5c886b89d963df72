"""Labels attached to assertions and prefixed to their failure messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Description:
    """An immutable assertion label.

    Either fixed text, or a zero-argument callable that produces the text
    only when a failure actually needs it.
    """

    text: str | None = None
    supplier: Callable[[], str] | None = None

    def __post_init__(self) -> None:
        if (self.text is None) == (self.supplier is None):
            raise ValueError("Description needs exactly one of text or supplier")

    @classmethod
    def lazy(cls, supplier: Callable[[], str]) -> Description:
        return cls(supplier=supplier)

    def value(self) -> str:
        if self.supplier is not None:
            return str(self.supplier())
        return self.text

    def __str__(self) -> str:
        return self.value()


def to_description(description: str | Description | None) -> Description | None:
    if description is None or isinstance(description, Description):
        return description
    return Description(text=str(description))
