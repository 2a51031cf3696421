"""Numeric attribute bindings resolved by name on arbitrary target objects.

A binding is the only way a tween touches its target: it reads the current
value once when the tween is built, then writes interpolated values back,
coerced to the numeric kind the attribute held when it was resolved.
"""
from __future__ import annotations

import dataclasses
import logging
import math
import numbers
import types
from collections.abc import Mapping
from typing import Any, Protocol

import numpy as np

from tick_glide.types import BindingError, InvalidTargetError, NumericCoercionError

logger = logging.getLogger(__name__)

NUMERIC_KINDS: tuple[type, ...] = (
    int,
    float,
    np.int16,
    np.int32,
    np.int64,
    np.uint16,
    np.uint32,
    np.uint64,
    np.float32,
    np.float64,
)

_VALUE_TYPES = (numbers.Number, np.generic, str, bytes, tuple, frozenset)
_MISSING = object()


class PropertyAccessor(Protocol):
    """Read/write access to one numeric attribute, as consumed by Tween."""

    name: str

    def get(self) -> float: ...

    def set(self, value: float) -> None: ...


class Binding:
    """Resolved accessor for a numeric attribute on one target object."""

    __slots__ = ("_target", "name", "kind")

    def __init__(self, target: Any, name: str, kind: type) -> None:
        self._target = target
        self.name = name
        self.kind = kind

    def get(self) -> float:
        return float(getattr(self._target, self.name))

    def set(self, value: float) -> None:
        setattr(self._target, self.name, coerce(value, self.kind))

    def __repr__(self) -> str:
        return f"Binding({type(self._target).__name__}.{self.name}, {self.kind.__name__})"


def is_numeric(value: object) -> bool:
    """True for the supported numeric kinds. bool is deliberately excluded."""
    return type(value) in NUMERIC_KINDS


def validate_target(target: object) -> None:
    """Raise InvalidTargetError unless target has identity and mutable state."""
    if target is None or isinstance(target, _VALUE_TYPES):
        raise InvalidTargetError(target)
    if (
        dataclasses.is_dataclass(target)
        and not isinstance(target, type)
        and target.__dataclass_params__.frozen
    ):
        raise InvalidTargetError(target)


def coerce(value: float, kind: type) -> Any:
    """Convert an interpolated value to the attribute's native numeric kind.

    Integral kinds round half-to-even. Bounded numpy integers raise
    NumericCoercionError when the rounded value is out of range.
    """
    if kind is float:
        return float(value)
    if issubclass(kind, np.floating):
        return kind(value)
    if not math.isfinite(value):
        raise NumericCoercionError(f"Cannot store {value!r} as {kind.__name__}")
    rounded = np.rint(value)
    if kind is int:
        return int(rounded)
    info = np.iinfo(kind)
    if rounded < info.min or rounded > info.max:
        raise NumericCoercionError(
            f"{value!r} is out of range for {kind.__name__} [{info.min}, {info.max}]"
        )
    return kind(rounded)


def _class_attribute(cls: type, name: str) -> Any:
    for klass in cls.__mro__:
        if name in vars(klass):
            return vars(klass)[name]
    return _MISSING


def _fail(target: Any, name: str, message: str) -> BindingError:
    logger.debug("binding %r on %s failed: %s", name, type(target).__name__, message)
    return BindingError(name, message)


def resolve(target: Any, name: str, require_writable: bool = True) -> Binding:
    """Bind the instance-level numeric attribute `name` on `target`.

    Instance attributes (``__dict__`` entries and ``__slots__`` members) are
    always readable and writable. Properties need a getter, plus a setter
    when `require_writable` is set. Class attributes that the instance does
    not shadow are not instance-level and do not resolve. To tween a class
    attribute, pass the class itself as `target`.
    """
    owner = type(target)
    descriptor = _class_attribute(owner, name)
    access = "read/write" if require_writable else "readable"

    if isinstance(descriptor, property):
        if descriptor.fget is None or (require_writable and descriptor.fset is None):
            raise _fail(
                target, name,
                f"Field or {access} property {name!r} not found on object of type "
                f"{owner.__qualname__}.",
            )
    elif isinstance(descriptor, types.MemberDescriptorType):
        if not hasattr(target, name):
            raise _fail(target, name, f"Slot {name!r} on {owner.__qualname__} is unset.")
    elif name not in getattr(target, "__dict__", {}):
        raise _fail(
            target, name,
            f"Field or {access} property {name!r} not found on object of type "
            f"{owner.__qualname__}.",
        )

    value = getattr(target, name)
    if not is_numeric(value):
        raise _fail(
            target, name,
            f"Property is invalid: ({name} on {owner.__qualname__}) holds "
            f"{type(value).__name__}, not a numeric kind.",
        )
    return Binding(target, name, type(value))


def _public_attribute_names(source: object) -> list[str] | None:
    names: list[str] = []
    found = False
    attributes = getattr(source, "__dict__", None)
    if attributes is not None:
        found = True
        names.extend(attributes)
    for klass in type(source).__mro__:
        slots = vars(klass).get("__slots__")
        if slots is None:
            continue
        found = True
        for name in (slots,) if isinstance(slots, str) else slots:
            if name not in names and hasattr(source, name):
                names.append(name)
    if not found:
        return None
    return [name for name in names if not name.startswith("_")]


def read_values(source: Mapping[str, Any] | object | None) -> dict[str, float]:
    """Collect named target values from a mapping or a plain object.

    Mapping values must be numeric. For an object, each public instance
    attribute (``__dict__`` entries and set ``__slots__`` members) is
    resolved with a read-only binding.
    """
    if source is None:
        return {}
    if isinstance(source, Mapping):
        values: dict[str, float] = {}
        for name, value in source.items():
            if not isinstance(name, str):
                raise BindingError(str(name), f"Property name must be a string, got {name!r}")
            if not is_numeric(value):
                raise BindingError(
                    name, f"Value for {name!r} is not numeric: {type(value).__name__}"
                )
            values[name] = float(value)
        return values

    names = _public_attribute_names(source)
    if names is None:
        raise _fail(
            source, type(source).__name__,
            f"Values must be a mapping or an object with attributes, got "
            f"{type(source).__name__}",
        )
    return {name: resolve(source, name, require_writable=False).get() for name in names}
