"""Tween - one property animation with its own timing state and callbacks."""
from __future__ import annotations

import enum
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

import numpy as np

from tick_glide.binding import PropertyAccessor, read_values, resolve
from tick_glide.easing import EASINGS
from tick_glide.types import Callback, Easing, UpdateCallback

if TYPE_CHECKING:
    from tick_glide.tweener import Tweener

_ZERO = np.float32(0.0)
_ONE = np.float32(1.0)
_FULL_TURN = np.float32(360.0)


class Behavior(enum.Flag):
    NONE = 0
    REFLECT = enum.auto()
    ROTATION = enum.auto()
    ROUND = enum.auto()


class Tween:
    """Interpolates bound numeric properties from their start to end values.

    Timing and per-property values are single precision. The start, range
    and end arrays are index-aligned with the bindings list: index ``i``
    describes the same property in all four.

    Tweens are normally created by ``Tweener.tween`` or ``Tweener.timer``.
    Subclasses can be adopted with ``Tweener.add_tween`` and may override
    ``interpolate`` to change how values are written back.
    """

    def __init__(self, target: Any, duration: float, delay: float = 0.0) -> None:
        if duration < 0:
            raise ValueError("duration must be non-negative")
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self._target = target
        self._duration = np.float32(duration)
        self._delay = np.float32(delay)
        self._time = _ZERO
        self._repeat_count = 0
        self._behavior = Behavior.NONE
        self._paused = False

        self._ease: Easing | None = None
        self._begin: Callback | None = None
        self._complete: Callback | None = None
        self._update: UpdateCallback | None = None

        self._bindings: list[PropertyAccessor] = []
        self._start = np.empty(0, dtype=np.float32)
        self._range = np.empty(0, dtype=np.float32)
        self._end = np.empty(0, dtype=np.float32)

        self._parent: Tweener | None = None
        self._removed = False

    # -- observers ---------------------------------------------------------

    @property
    def target(self) -> Any:
        return self._target

    @property
    def duration(self) -> float:
        return float(self._duration)

    @property
    def delay(self) -> float:
        """Delay left before the tween starts running. May dip below zero."""
        return float(self._delay)

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def repeat_count(self) -> int:
        return self._repeat_count

    @property
    def looping(self) -> bool:
        return self._repeat_count != 0

    @property
    def time_remaining(self) -> float:
        return float(self._duration - self._time)

    @property
    def completion(self) -> float:
        """Fraction of the current cycle elapsed, clamped to [0, 1]."""
        if self._duration == 0:
            return 1.0
        c = float(self._time / self._duration)
        return 0.0 if c < 0 else (1.0 if c > 1 else c)

    @property
    def endpoints(self) -> dict[str, tuple[float, float]]:
        """Current (start, end) pair per tracked property, keyed by name."""
        return {
            binding.name: (float(start), float(start + rng))
            for binding, start, rng in zip(self._bindings, self._start, self._range)
        }

    def __repr__(self) -> str:
        names = ", ".join(binding.name for binding in self._bindings)
        return (
            f"<{type(self).__name__} target={type(self._target).__name__} "
            f"[{names}] {self.completion:.2f}>"
        )

    # -- stepping ----------------------------------------------------------

    def advance(self, dt: float) -> None:
        """Step the tween by `dt` seconds. Called once per Tweener sweep."""
        if self._paused:
            return

        dt = np.float32(dt)
        if self._delay > 0:
            self._delay -= dt
            if self._delay >= 0 or not self._carries_delay_overflow():
                return
            dt = -self._delay
            self._delay = _ZERO

        if self._time == 0 and self._begin is not None:
            self._begin()

        if self._update is not None:
            self._update(self.completion)

        self._time += dt
        t = self._time / self._duration if self._duration > 0 else _ONE
        do_complete = False

        if self._time >= self._duration:
            if self._repeat_count != 0:
                if self._repeat_count > 0:
                    self._repeat_count -= 1
                else:
                    do_complete = True
                self._time = t = _ZERO
                if Behavior.REFLECT in self._behavior:
                    self.reverse()
            else:
                self._time = self._duration
                t = _ONE
                if self._parent is not None:
                    self._parent._remove(self)
                do_complete = True

        if self._ease is not None:
            t = np.float32(self._ease(float(t)))

        self.interpolate(t)

        if do_complete and self._complete is not None:
            self._complete()

    def interpolate(self, t: float) -> None:
        """Write ``start + range * t`` to every bound property."""
        values = self._start + self._range * np.float32(t)
        if Behavior.ROUND in self._behavior:
            values = np.rint(values)
        if Behavior.ROTATION in self._behavior:
            values = np.mod(values, _FULL_TURN)
            values = np.where(values >= _FULL_TURN, values - _FULL_TURN, values)

        i = len(self._bindings)
        while i > 0:
            i -= 1
            self._bindings[i].set(float(values[i]))

    def _carries_delay_overflow(self) -> bool:
        return self._parent is not None and self._parent.config.carry_delay_overflow

    def _track(self, bindings: Sequence[PropertyAccessor], ends: Sequence[float]) -> None:
        start = np.array([binding.get() for binding in bindings], dtype=np.float32)
        end = np.array(ends, dtype=np.float32)
        self._bindings.extend(bindings)
        self._start = np.concatenate((self._start, start))
        self._range = np.concatenate((self._range, end - start))
        self._end = np.concatenate((self._end, end))

    def _index_of(self, name: str) -> int | None:
        for i, binding in enumerate(self._bindings):
            if binding.name == name:
                return i
        return None

    def _force_complete(self, finish: bool) -> None:
        self._time = self._duration
        self._update = None
        if not finish:
            return
        t = self._ease(1.0) if self._ease is not None else _ONE
        self.interpolate(t)
        if self._complete is not None:
            self._complete()

    # -- behavior ----------------------------------------------------------

    def from_(self, values: Mapping[str, float] | object) -> Tween:
        """Apply starting values to the target before tweening.

        Tracked properties are re-anchored: the new value is written and the
        range recomputed against the unchanged end. Untracked properties are
        simply set on the target.
        """
        pending = []
        for name, value in read_values(values).items():
            index = self._index_of(name)
            binding = self._bindings[index] if index is not None else resolve(self._target, name)
            pending.append((index, binding, value))

        for index, binding, value in pending:
            binding.set(value)
            if index is not None:
                self._start[index] = binding.get()
                self._range[index] = self._end[index] - self._start[index]
        return self

    def ease(self, ease: Easing | str) -> Tween:
        """Set the easing function, either a callable or a name from EASINGS."""
        self._ease = EASINGS[ease] if isinstance(ease, str) else ease
        return self

    def on_begin(self, callback: Callback) -> Tween:
        """Call `callback` when a cycle starts running, after any delay."""
        self._begin = callback
        return self

    def on_complete(self, callback: Callback) -> Tween:
        """Call `callback` when the tween finishes.

        An infinitely repeating tween calls it at the end of every cycle; a
        finite repeat only once the last repeat is done.
        """
        self._complete = callback
        return self

    def on_update(self, callback: UpdateCallback) -> Tween:
        """Call `callback(completion)` on every running step, before time moves."""
        self._update = callback
        return self

    def repeat(self, times: int = -1) -> Tween:
        """Repeat `times` more cycles. Negative repeats forever."""
        self._repeat_count = times
        return self

    def reflect(self) -> Tween:
        """Swap direction every time the tween repeats."""
        self._behavior |= Behavior.REFLECT
        return self

    def reverse(self) -> Tween:
        """Swap the start and end values of every tracked property."""
        old_start = self._start
        self._start = old_start + self._range
        self._range = old_start - self._start
        self._end = old_start.copy()
        return self

    def rotation(self) -> Tween:
        """Treat properties as angles in degrees and take the shorter way round.

        Ranges are recomputed now, so call this after the end values are set.
        Near a half turn (179 to 181 degrees) the range snaps to 180.
        """
        self._behavior |= Behavior.ROTATION
        delta = (self._start + self._range) - self._start
        size = np.abs(delta)
        shorter = (_FULL_TURN - size) * np.where(delta > 0, -1, 1)
        self._range = np.where(
            size > 181, shorter, np.where(size < 179, delta, 180)
        ).astype(np.float32)
        return self

    def round(self) -> Tween:
        """Round interpolated values to whole numbers."""
        self._behavior |= Behavior.ROUND
        return self

    # -- control -----------------------------------------------------------

    def cancel(self) -> None:
        """Remove from the tweener without calling on_complete."""
        if self._parent is not None:
            self._parent._remove(self)

    def cancel_and_complete(self) -> None:
        """Mark the cycle finished and remove from the tweener.

        By default neither the final values nor on_complete are applied; see
        ``TweenerConfig.finish_on_cancel_and_complete``. A tweener ignores
        tweens that have already completed or been cancelled.
        """
        if self._parent is not None:
            self._parent._cancel_and_complete(self)
        else:
            self._force_complete(finish=False)

    def pause(self) -> None:
        """Stop updating. Delay does not tick down while paused."""
        self._paused = True

    def pause_toggle(self) -> None:
        self._paused = not self._paused

    def resume(self) -> None:
        self._paused = False
