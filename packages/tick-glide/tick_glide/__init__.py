"""tick-glide - Property tweening with a staged, per-target tween registry."""
from __future__ import annotations

from tick_glide.binding import Binding, PropertyAccessor, resolve
from tick_glide.config import TweenerConfig
from tick_glide.easing import EASINGS
from tick_glide.systems import make_tween_system
from tick_glide.tween import Tween
from tick_glide.tweener import Tweener, default_tweener
from tick_glide.types import BindingError, InvalidTargetError, NumericCoercionError

__all__ = [
    "Tweener",
    "Tween",
    "TweenerConfig",
    "EASINGS",
    "Binding",
    "PropertyAccessor",
    "resolve",
    "default_tweener",
    "make_tween_system",
    "BindingError",
    "InvalidTargetError",
    "NumericCoercionError",
]
