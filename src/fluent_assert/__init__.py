"""Fluent, chainable assertions with property-path extraction."""

from fluent_assert.assertions import assert_that
from fluent_assert.condition import Condition
from fluent_assert.config import AssertionSettings, configure, get_settings, load_settings, reset_settings
from fluent_assert.description import Description
from fluent_assert.errors import (
    Failure,
    FailureKind,
    InvalidArgumentError,
    InvalidPathError,
    PropertyNotFoundError,
)
from fluent_assert.generic import GenericAssert
from fluent_assert.groups import CollectionAssert
from fluent_assert.numeric import NumberAssert
from fluent_assert.objects import ObjectAssert
from fluent_assert.properties import PropertyExtractor, PropertyPath, property_values
from fluent_assert.throwables import ThrowableAssert

__all__ = [
    "AssertionSettings",
    "CollectionAssert",
    "Condition",
    "Description",
    "Failure",
    "FailureKind",
    "GenericAssert",
    "InvalidArgumentError",
    "InvalidPathError",
    "NumberAssert",
    "ObjectAssert",
    "PropertyExtractor",
    "PropertyNotFoundError",
    "PropertyPath",
    "ThrowableAssert",
    "assert_that",
    "configure",
    "get_settings",
    "load_settings",
    "property_values",
    "reset_settings",
]
