"""Exception types and callback aliases for tick-glide."""
from __future__ import annotations

from typing import Callable

Callback = Callable[[], None]
UpdateCallback = Callable[[float], None]
Easing = Callable[[float], float]


class InvalidTargetError(TypeError):
    """Raised when a tween target is a value-like object without identity."""

    def __init__(self, target: object) -> None:
        self.target = target
        super().__init__(
            f"Target of tween cannot be a value type: {type(target).__name__}"
        )


class BindingError(AttributeError):
    """Raised when a named attribute cannot be bound as a numeric property."""

    def __init__(self, name: str, message: str) -> None:
        self.property_name = name
        super().__init__(message)


class NumericCoercionError(OverflowError):
    """Raised when an interpolated value does not fit the attribute's numeric kind."""
