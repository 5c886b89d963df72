from __future__ import annotations

from dataclasses import dataclass

from fluent_assert.errors import InvalidPathError


@dataclass(frozen=True)
class PropertyPath:
    """A dotted property path split into its segments, e.g. ``father.age``."""

    text: str
    segments: tuple[str, ...]

    @classmethod
    def parse(cls, path: str | None) -> PropertyPath:
        """Split ``path`` on dots.

        Raises InvalidPathError for a missing or empty path and for any empty
        segment (leading, trailing or doubled dots).
        """
        if not isinstance(path, str) or not path:
            raise InvalidPathError(path)
        segments = tuple(path.split("."))
        if any(not s for s in segments):
            raise InvalidPathError(path)
        return cls(text=path, segments=segments)

    @property
    def is_nested(self) -> bool:
        return len(self.segments) > 1

    def __str__(self) -> str:
        return self.text


def parse(path: str | None) -> tuple[str, ...]:
    return PropertyPath.parse(path).segments


def is_nested(path: str | None) -> bool:
    return PropertyPath.parse(path).is_nested
