"""Reading a single named property from an object."""

from __future__ import annotations

import ctypes
import inspect
import numbers
from collections.abc import Mapping
from typing import Any, Callable, Protocol, Sequence, runtime_checkable

_MISSING = object()


@runtime_checkable
class ValueAccessor(Protocol):
    def can_read(self, obj: Any, name: str) -> bool: ...

    def read(self, obj: Any, name: str) -> Any: ...


def _is_zero_argument(func: Callable[..., Any]) -> bool:
    try:
        inspect.signature(func).bind()
    except TypeError:
        return False
    except ValueError:
        # builtins without an introspectable signature
        return True
    return True


class AttributeAccessor:
    """Reads properties the way Python objects usually expose them.

    Lookup order for ``name``:

    1. the key ``name`` when ``obj`` is a mapping (if ``read_mapping_keys``);
    2. a zero-argument getter method ``<prefix><name>`` for each prefix;
    3. the attribute ``name`` itself (properties, instance fields, slots).

    ``can_read`` finds properties and fields statically, so a property is
    evaluated only when it is actually read. Attributes served by
    ``__getattr__`` have to be fetched to be found. Nothing is ever assigned
    on ``obj``.
    """

    def __init__(self, prefixes: Sequence[str] = ("get_", "is_"), read_mapping_keys: bool = True):
        self.prefixes = tuple(prefixes)
        self.read_mapping_keys = read_mapping_keys

    def _reader(self, obj: Any, name: str) -> Callable[[], Any] | None:
        if obj is None:
            return None

        if self.read_mapping_keys and isinstance(obj, Mapping):
            if name in obj:
                return lambda: obj[name]
            return None

        for prefix in self.prefixes:
            getter = getattr(obj, f"{prefix}{name}", None)
            if callable(getter) and _is_zero_argument(getter):
                return getter

        try:
            inspect.getattr_static(obj, name)
        except AttributeError:
            if not hasattr(type(obj), "__getattr__"):
                return None
            value = getattr(obj, name, _MISSING)
            if value is _MISSING:
                return None
            return lambda: value
        return lambda: getattr(obj, name)

    def can_read(self, obj: Any, name: str) -> bool:
        return self._reader(obj, name) is not None

    def read(self, obj: Any, name: str) -> Any:
        reader = self._reader(obj, name)
        if reader is None:
            raise AttributeError(name)
        return reader()


def unwrap_scalar(value: Any) -> Any:
    """Replace a scalar wrapper with the plain Python value it holds.

    Covers ``ctypes`` simple types (``c_int(3)`` -> ``3``), numeric scalars
    that expose ``item()``, and zero-dimensional array scalars such as
    numpy's (including ``numpy.bool_``). Other values pass through.
    """
    if isinstance(value, ctypes._SimpleCData):
        return value.value
    if isinstance(value, (bool, int, float, complex, str, bytes)):
        return value
    item = getattr(value, "item", None)
    if not callable(item):
        return value
    if isinstance(value, numbers.Number) or getattr(value, "ndim", None) == 0:
        return item()
    return value
