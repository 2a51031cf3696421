"""Tweener configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TweenerConfig:
    """Immutable behavior switches for a Tweener.

    Attributes:
        carry_delay_overflow: Spend the part of a tick that overshoots the
            remaining delay on running the tween in that same tick. When
            False the overshoot is dropped.
        finish_on_cancel_and_complete: Make cancel_and_complete write the
            final values and call on_complete. When False it only marks the
            tween finished and removes it.
    """

    carry_delay_overflow: bool = False
    finish_on_cancel_and_complete: bool = False
