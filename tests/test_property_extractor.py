"""Tests for property extraction over groups of objects."""

import ctypes
from dataclasses import dataclass
from decimal import Decimal

import pytest

from fluent_assert.config import AssertionSettings, configure
from fluent_assert.errors import InvalidPathError, PropertyNotFoundError
from fluent_assert.properties.access import AttributeAccessor, ValueAccessor, unwrap_scalar
from fluent_assert.properties.extractor import PropertyExtractor, property_values


@dataclass
class Parent:
    age: int


@dataclass
class Person:
    name: str
    father: Parent | None = None


class Account:
    """Exposes its state through getter methods only."""

    def __init__(self, balance, active):
        self._balance = balance
        self._active = active

    def get_balance(self):
        return self._balance

    def is_active(self):
        return self._active


class Sensor:
    __slots__ = ("reading",)

    def __init__(self, reading):
        self.reading = reading


@pytest.fixture
def people():
    return [Person("A", Parent(55)), Person("B", Parent(46))]


# --- simple and nested paths ---


def test_extracts_simple_property_in_order(people):
    assert PropertyExtractor().extract("name", people) == ["A", "B"]


def test_extracts_nested_property(people):
    assert PropertyExtractor().extract("father.age", people) == [55, 46]


def test_keeps_duplicates():
    sources = [Person("A"), Person("A"), Person("B")]
    assert property_values("name", sources) == ["A", "A", "B"]


def test_reads_mapping_keys():
    records = [{"name": "A", "father": {"age": 55}}, {"name": "B", "father": {"age": 46}}]
    assert PropertyExtractor().extract("father.age", records) == [55, 46]


def test_heterogeneous_sources():
    sources = [Person("A"), {"name": "B"}, Account(1, True)]
    assert PropertyExtractor().extract("name", sources[:2]) == ["A", "B"]
    assert PropertyExtractor().extract("balance", sources[2:]) == [1]


def test_getter_methods_are_called():
    accounts = [Account(10, True), Account(0, False)]
    assert PropertyExtractor().extract("balance", accounts) == [10, 0]
    assert PropertyExtractor().extract("active", accounts) == [True, False]


def test_slots_fields_are_read():
    assert PropertyExtractor().extract("reading", [Sensor(1), Sensor(2)]) == [1, 2]


def test_properties_are_read():
    class Box:
        @property
        def size(self):
            return 3

    assert PropertyExtractor().extract("size", [Box()]) == [3]


def test_properties_are_evaluated_once_per_object():
    class Counted:
        def __init__(self):
            self.calls = 0

        @property
        def age(self):
            self.calls += 1
            return 30

    counted = Counted()
    assert PropertyExtractor().extract("age", [counted]) == [30]
    assert counted.calls == 1


def test_cached_property_is_computed_once():
    from functools import cached_property

    class Report:
        computed = 0

        @cached_property
        def total(self):
            Report.computed += 1
            return 42

    assert PropertyExtractor().extract("total", [Report(), Report()]) == [42, 42]
    assert Report.computed == 2


def test_getter_needing_arguments_falls_back_to_attribute():
    class Label:
        def __init__(self):
            self.name = "A"

        def get_name(self, lang):
            return f"{self.name}-{lang}"

    assert PropertyExtractor().extract("name", [Label()]) == ["A"]


def test_getter_needing_arguments_without_attribute_is_not_found():
    class Label:
        def get_name(self, lang):
            return lang

    with pytest.raises(PropertyNotFoundError, match="unable to find property 'name'"):
        PropertyExtractor().extract("name", [Label()])


def test_dynamic_attributes_are_read():
    class Proxy:
        def __getattr__(self, name):
            if name == "colour":
                return "red"
            raise AttributeError(name)

    assert PropertyExtractor().extract("colour", [Proxy()]) == ["red"]
    with pytest.raises(PropertyNotFoundError):
        PropertyExtractor().extract("size", [Proxy()])


# --- empty source ---


def test_empty_source_returns_empty_result():
    assert PropertyExtractor().extract("father.age", []) == []


def test_empty_source_does_not_introspect():
    class NoReads:
        def can_read(self, obj, name):
            raise AssertionError("should not be called")

        def read(self, obj, name):
            raise AssertionError("should not be called")

    assert PropertyExtractor(NoReads()).extract("a.b", iter([])) == []


def test_invalid_path_rejected():
    with pytest.raises(InvalidPathError):
        PropertyExtractor().extract("father..age", [Person("A")])


# --- missing properties ---


def test_missing_property_aborts_whole_extraction(people):
    sources = people + [Person("C")]
    with pytest.raises(PropertyNotFoundError) as exc_info:
        PropertyExtractor().extract("father.age", sources)
    error = exc_info.value
    assert error.path == "father.age"
    assert "father.age" in str(error)


def test_missing_segment_names_owner_type():
    with pytest.raises(PropertyNotFoundError, match="Person") as exc_info:
        PropertyExtractor().extract("mother", [Person("A")])
    assert exc_info.value.owner_type is Person
    assert exc_info.value.segment == "mother"


def test_missing_mapping_key():
    with pytest.raises(PropertyNotFoundError, match="dict"):
        PropertyExtractor().extract("age", [{"name": "A"}])


def test_none_source_element():
    with pytest.raises(PropertyNotFoundError):
        PropertyExtractor().extract("name", [Person("A"), None])


def test_none_intermediate_value_names_the_none_segment():
    with pytest.raises(PropertyNotFoundError) as exc_info:
        PropertyExtractor().extract("father.age", [Person("A", None)])
    error = exc_info.value
    assert str(error) == "'father' of path 'father.age' is None in Person"
    assert error.value_is_none
    assert error.segment == "father"
    assert error.owner_type is Person


def test_extraction_does_not_mutate_sources(people):
    before = [(p.name, p.father.age) for p in people]
    PropertyExtractor().extract("father.age", people)
    assert [(p.name, p.father.age) for p in people] == before
    assert not hasattr(people[0], "age")


# --- scalar wrappers ---


def test_ctypes_values_are_unwrapped():
    sources = [Sensor(ctypes.c_int(7)), Sensor(ctypes.c_double(1.5))]
    assert PropertyExtractor().extract("reading", sources) == [7, 1.5]


def test_unwrap_can_be_disabled():
    wrapped = ctypes.c_int(7)
    values = PropertyExtractor(unwrap_scalars=False).extract("reading", [Sensor(wrapped)])
    assert values[0] is wrapped


def test_unwrap_scalar_leaves_plain_values_alone():
    assert unwrap_scalar(3) == 3
    assert unwrap_scalar("x") == "x"
    assert unwrap_scalar(Decimal("1.5")) == Decimal("1.5")


def test_unwrap_scalar_uses_item_for_numeric_scalars():
    import numbers

    class Int64:
        def __init__(self, v):
            self.v = v

        def item(self):
            return self.v

    numbers.Integral.register(Int64)
    assert unwrap_scalar(Int64(5)) == 5


def test_unwrap_scalar_handles_zero_dimensional_scalars():
    class BoolScalar:
        ndim = 0

        def __init__(self, v):
            self.v = v

        def item(self):
            return self.v

    class Vector:
        ndim = 1

        def item(self):
            raise ValueError("can only convert an array of size 1")

    assert unwrap_scalar(BoolScalar(True)) is True
    vector = Vector()
    assert unwrap_scalar(vector) is vector


# --- accessor configuration ---


def test_attribute_accessor_is_a_value_accessor():
    assert isinstance(AttributeAccessor(), ValueAccessor)


def test_accessor_without_prefixes_ignores_getters():
    extractor = PropertyExtractor(AttributeAccessor(prefixes=()))
    with pytest.raises(PropertyNotFoundError):
        extractor.extract("balance", [Account(10, True)])


def test_accessor_without_mapping_keys():
    extractor = PropertyExtractor(AttributeAccessor(read_mapping_keys=False))
    with pytest.raises(PropertyNotFoundError):
        extractor.extract("name", [{"name": "A"}])


def test_from_settings_uses_active_settings():
    configure(AssertionSettings(accessor_prefixes=["fetch_"], unwrap_scalars=False))

    class Thing:
        def fetch_value(self):
            return ctypes.c_int(1)

    values = property_values("value", [Thing()])
    assert isinstance(values[0], ctypes.c_int)
