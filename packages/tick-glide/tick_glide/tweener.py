"""Tweener - owns live tweens keyed by target and advances them each frame."""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from operator import methodcaller
from typing import Any

from tick_glide.binding import read_values, resolve, validate_target
from tick_glide.config import TweenerConfig
from tick_glide.tween import Tween

logger = logging.getLogger(__name__)


class Tweener:
    """Registry and scheduler for tweens.

    Structural changes never touch the live table during a sweep: additions
    and removals are staged and reconciled after every tween has been
    advanced, so callbacks may freely add, cancel or complete tweens. Targets
    are keyed by identity, which also allows unhashable objects.
    """

    def __init__(self, config: TweenerConfig | None = None) -> None:
        self._config = config if config is not None else TweenerConfig()
        self._tweens: dict[int, list[Tween]] = {}
        self._to_add: list[Tween] = []
        self._to_remove: list[Tween] = []
        self._timer_target = object()

    @property
    def config(self) -> TweenerConfig:
        return self._config

    @property
    def pending(self) -> int:
        """Number of tweens staged for addition on the next update."""
        return len(self._to_add)

    def __len__(self) -> int:
        return sum(len(tweens) for tweens in self._tweens.values())

    def tweens_for(self, target: Any) -> list[Tween]:
        """Live tweens currently keyed under `target`, in insertion order."""
        return list(self._tweens.get(id(target), ()))

    # -- creation ----------------------------------------------------------

    def tween(
        self,
        target: Any,
        values: Mapping[str, float] | object | None,
        duration: float,
        delay: float = 0.0,
    ) -> Tween:
        """Tween numeric attributes of `target` to `values` over `duration` seconds.

        Every property is bound before the tween is staged; if any binding
        fails, nothing is registered. Passing no values creates a bare timer.
        """
        validate_target(target)
        tween = Tween(target, duration, delay)

        ends = read_values(values)
        if ends:
            bindings = [resolve(target, name) for name in ends]
            tween._track(bindings, list(ends.values()))

        self.add_tween(tween)
        return tween

    def timer(self, duration: float, delay: float = 0.0) -> Tween:
        """Start a property-less tween, useful for scheduling callbacks."""
        return self.tween(self._timer_target, None, duration, delay)

    def add_tween(self, tween: Tween) -> None:
        """Adopt an externally built tween, such as a Tween subclass."""
        validate_target(tween.target)
        tween._parent = self
        tween._removed = False
        self._to_add.append(tween)
        logger.debug("staged %r", tween)

    # -- stepping ----------------------------------------------------------

    def update(self, dt: float) -> None:
        """Advance every live tween by `dt` seconds, then apply staged changes.

        Changes staged between updates are applied first, so a tween created
        before this call runs in it. Changes staged by callbacks during the
        sweep only take effect once the sweep is over.
        """
        self._add_and_remove()
        for tween in list(self._iter_tweens()):
            tween.advance(dt)
        self._add_and_remove()

    def _iter_tweens(self) -> Iterator[Tween]:
        for tweens in self._tweens.values():
            yield from tweens

    def _remove(self, tween: Tween) -> None:
        tween._removed = True
        self._to_remove.append(tween)

    def _cancel_and_complete(self, tween: Tween) -> None:
        # Completed or cancelled tweens stay listed until the next reconcile.
        if tween._removed:
            return
        self._remove(tween)
        tween._force_complete(self._config.finish_on_cancel_and_complete)

    def _add_and_remove(self) -> None:
        if not self._to_add and not self._to_remove:
            return

        for tween in self._to_add:
            self._tweens.setdefault(id(tween.target), []).append(tween)

        removed = 0
        for tween in self._to_remove:
            key = id(tween.target)
            tweens = self._tweens.get(key)
            if tweens is None or tween not in tweens:
                continue
            tweens.remove(tween)
            removed += 1
            if not tweens:
                del self._tweens[key]

        logger.debug("reconciled: %d added, %d removed", len(self._to_add), removed)
        self._to_add.clear()
        self._to_remove.clear()

    # -- bulk control ------------------------------------------------------

    def _apply_all(self, action: Callable[[Tween], None]) -> None:
        for tween in list(self._iter_tweens()):
            action(tween)

    def _apply_targets(self, targets: tuple[Any, ...], action: Callable[[Tween], None]) -> None:
        for target in targets:
            for tween in list(self._tweens.get(id(target), ())):
                action(tween)

    def cancel(self) -> None:
        """Remove every tween without calling on_complete."""
        self._apply_all(self._remove)

    def cancel_and_complete(self) -> None:
        """Mark every tween finished and remove it."""
        self._apply_all(self._cancel_and_complete)

    def pause(self) -> None:
        self._apply_all(methodcaller("pause"))

    def pause_toggle(self) -> None:
        self._apply_all(methodcaller("pause_toggle"))

    def resume(self) -> None:
        self._apply_all(methodcaller("resume"))

    def target_cancel(self, *targets: Any) -> None:
        """Cancel the tweens of each given target. Unknown targets are ignored."""
        logger.debug("cancelling tweens of %d target(s)", len(targets))
        self._apply_targets(targets, self._remove)

    def target_cancel_and_complete(self, *targets: Any) -> None:
        self._apply_targets(targets, self._cancel_and_complete)

    def target_pause(self, *targets: Any) -> None:
        self._apply_targets(targets, methodcaller("pause"))

    def target_pause_toggle(self, *targets: Any) -> None:
        self._apply_targets(targets, methodcaller("pause_toggle"))

    def target_resume(self, *targets: Any) -> None:
        self._apply_targets(targets, methodcaller("resume"))


_default: Tweener | None = None


def default_tweener() -> Tweener:
    """Process-wide Tweener, created on first use."""
    global _default
    if _default is None:
        _default = Tweener()
    return _default
