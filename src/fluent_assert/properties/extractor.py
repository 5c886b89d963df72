"""Extraction of a (possibly nested) property from every element of a group."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from fluent_assert.config import AssertionSettings, get_settings
from fluent_assert.errors import PropertyNotFoundError
from fluent_assert.properties.access import AttributeAccessor, ValueAccessor, unwrap_scalar
from fluent_assert.properties.path import PropertyPath

logger = logging.getLogger(__name__)


class PropertyExtractor:
    """Walks a property path over each source object through a ValueAccessor."""

    def __init__(self, accessor: ValueAccessor | None = None, unwrap_scalars: bool = True):
        self.accessor = accessor or AttributeAccessor()
        self.unwrap_scalars = unwrap_scalars

    @classmethod
    def from_settings(cls, settings: AssertionSettings | None = None) -> PropertyExtractor:
        settings = settings or get_settings()
        return cls(
            AttributeAccessor(settings.accessor_prefixes, settings.read_mapping_keys),
            unwrap_scalars=settings.unwrap_scalars,
        )

    def extract(self, path: str | PropertyPath, sources: Iterable[Any]) -> list[Any]:
        """Return the value of ``path`` for every source object, in order.

        An empty source yields an empty list without touching the path's
        targets. If any object lacks a segment, or an intermediate value is
        None, PropertyNotFoundError is raised and nothing is returned.
        """
        if not isinstance(path, PropertyPath):
            path = PropertyPath.parse(path)

        sources = list(sources)
        if not sources:
            return []

        logger.debug(f"Extracting '{path}' from {len(sources)} object(s)")
        return [self._walk(path, source) for source in sources]

    def _walk(self, path: PropertyPath, source: Any) -> Any:
        holder, current = None, source
        for i, segment in enumerate(path.segments):
            if current is None and i > 0:
                owner, previous = type(holder), path.segments[i - 1]
                logger.debug(f"Property '{previous}' of '{path}' is None on {owner.__qualname__}")
                raise PropertyNotFoundError(path.text, owner, previous, value_is_none=True)
            if not self.accessor.can_read(current, segment):
                owner = type(current)
                logger.debug(f"Property '{segment}' of '{path}' not readable on {owner.__qualname__}")
                raise PropertyNotFoundError(path.text, owner, segment)
            holder, current = current, self.accessor.read(current, segment)
        return unwrap_scalar(current) if self.unwrap_scalars else current


def property_values(path: str, sources: Iterable[Any]) -> list[Any]:
    return PropertyExtractor.from_settings().extract(path, sources)
