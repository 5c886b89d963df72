"""Property-path parsing and extraction."""

from fluent_assert.properties.access import AttributeAccessor, ValueAccessor, unwrap_scalar
from fluent_assert.properties.extractor import PropertyExtractor, property_values
from fluent_assert.properties.path import PropertyPath, is_nested, parse

__all__ = [
    "AttributeAccessor",
    "PropertyExtractor",
    "PropertyPath",
    "ValueAccessor",
    "is_nested",
    "parse",
    "property_values",
    "unwrap_scalar",
]
