"""System factory that drives a Tweener from a tick engine loop."""
from __future__ import annotations

from typing import Any, Callable, Protocol

from tick_glide.tweener import Tweener


class _Context(Protocol):
    dt: float


def make_tween_system(tweener: Tweener) -> Callable[[Any, _Context], None]:
    """Return a system that advances `tweener` by the tick's ``ctx.dt``."""

    def tween_system(world: Any, ctx: _Context) -> None:
        tweener.update(ctx.dt)

    return tween_system
