"""Tests for the tick engine system wrapper."""

from dataclasses import dataclass
from types import SimpleNamespace

from tick_glide import Tweener, make_tween_system


@dataclass
class Position:
    x: float = 0.0


def test_system_advances_by_context_dt():
    """Each system call advances the tweener by ctx.dt."""
    tweener = Tweener()
    pos = Position()
    tweener.tween(pos, {"x": 100}, 1)
    system = make_tween_system(tweener)
    ctx = SimpleNamespace(tick_number=1, dt=0.25)

    system(None, ctx)
    assert pos.x == 25.0

    for _ in range(3):
        system(None, ctx)
    assert pos.x == 100.0
    assert len(tweener) == 0


def test_system_drives_timer_callbacks():
    tweener = Tweener()
    fired = []
    tweener.timer(0.1).on_complete(lambda: fired.append(True))
    system = make_tween_system(tweener)

    system(None, SimpleNamespace(dt=0.05))
    system(None, SimpleNamespace(dt=0.05))
    assert fired == [True]
