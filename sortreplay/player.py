"""Player — cursor over a recorded trace with timer-driven playback."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Sequence

from .operation import Number, Operation, OperationType
from .player_types import PlayerConfig, PlayerMetrics, PlayerState, PlayerStatus
from .replay import apply_operation, replay
from .scheduler import AsyncioScheduler, Scheduler, TickHandle
from .trace_stats import count_type

logger = logging.getLogger(__name__)

StateObserver = Callable[[PlayerState], None]
MetricsObserver = Callable[[PlayerMetrics], None]


class AlgorithmPlayer:
    """Scrub forward and backward through a trace.

    ``current_array`` is always the replay of the first ``current_step``
    operations against ``original_array``.  Stepping forward applies one
    operation; every other cursor move rebuilds from the original.

    Boundary conditions never raise: stepping past either end, seeking out of
    range and out-of-range speeds are clamped or ignored.
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        config: PlayerConfig = PlayerConfig(),
    ):
        self._scheduler = scheduler or AsyncioScheduler()
        self._config = config
        self._observers: list[tuple[StateObserver, Optional[MetricsObserver]]] = []
        self._tick_handle: Optional[TickHandle] = None

        self._loaded = False
        self._is_playing = False
        self._speed = config.clamp_speed(config.speed)
        self._operations: tuple[Operation, ...] = ()
        self._original: tuple[Number, ...] = ()
        self._current: list[Number] = []
        self._step = 0

    # ── Observers ────────────────────────────────────────────────

    def subscribe(
        self,
        on_state: StateObserver,
        on_metrics: Optional[MetricsObserver] = None,
    ) -> None:
        self._observers.append((on_state, on_metrics))

    def unsubscribe(self, on_state: StateObserver) -> None:
        self._observers = [
            entry for entry in self._observers if entry[0] != on_state
        ]

    # ── Properties ───────────────────────────────────────────────

    @property
    def status(self) -> PlayerStatus:
        if not self._loaded:
            return PlayerStatus.IDLE
        return PlayerStatus.PLAYING if self._is_playing else PlayerStatus.READY

    @property
    def is_playing(self) -> bool:
        return self._is_playing

    @property
    def current_step(self) -> int:
        return self._step

    @property
    def total_steps(self) -> int:
        return len(self._operations)

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def current_array(self) -> list[Number]:
        return list(self._current)

    @property
    def at_end(self) -> bool:
        return self._step >= self.total_steps

    @property
    def tick_interval(self) -> float:
        """Seconds between playback ticks at the current speed."""
        return self._config.base_tick_ms / self._speed / 1000.0

    # ── Loading ──────────────────────────────────────────────────

    def set_array(self, array: Iterable[Number]) -> None:
        """Snapshot *array* as the original and drop any installed trace."""
        self._cancel_tick()
        self._is_playing = False
        self._loaded = False
        self._original = tuple(array)
        self._current = list(self._original)
        self._operations = ()
        self._step = 0
        logger.debug("Loaded array of %d elements", len(self._original))
        self._emit(metrics=True)

    load = set_array

    def set_operations(self, operations: Sequence[Operation]) -> None:
        """Install a trace recorded against the current array."""
        self._cancel_tick()
        self._is_playing = False
        self._operations = tuple(operations)
        self._loaded = True
        self._step = 0
        self._current = list(self._original)
        logger.debug("Installed %d operations", len(self._operations))
        self._emit(metrics=True)

    # ── Cursor ───────────────────────────────────────────────────

    def step_forward(self) -> None:
        if not self._loaded or self.at_end:
            return
        apply_operation(self._current, self._operations[self._step])
        self._step += 1
        self._emit(metrics=True)

    def step_backward(self) -> None:
        if not self._loaded or self._step == 0:
            return
        self._rebuild(self._step - 1)
        self._emit(metrics=True)

    def seek(self, step: int) -> None:
        """Move the cursor to *step*, clamped to ``[0, total_steps]``."""
        if not self._loaded:
            return
        self._rebuild(step)
        self._emit(metrics=True)

    def _rebuild(self, step: int) -> None:
        self._step = max(0, min(step, self.total_steps))
        self._current = replay(self._original, self._operations, self._step)

    # ── Playback ─────────────────────────────────────────────────

    def play(self) -> None:
        if not self._loaded or self._is_playing or self.total_steps == 0:
            return
        if self.at_end:
            self._rebuild(0)
        self._is_playing = True
        logger.debug("Playing from step %d at %.2fx", self._step, self._speed)
        self._schedule_tick()
        self._emit(metrics=True)

    def pause(self) -> None:
        self._cancel_tick()
        if not self._is_playing:
            return
        self._is_playing = False
        logger.debug("Paused at step %d", self._step)
        self._emit()

    def toggle(self) -> None:
        if self._is_playing:
            self.pause()
        else:
            self.play()

    def reset(self) -> None:
        self.pause()
        self.seek(0)

    def set_speed(self, speed: float) -> None:
        """Set the playback multiplier; the pending tick keeps its delay."""
        self._speed = self._config.clamp_speed(speed)
        self._emit()

    def destroy(self) -> None:
        self.pause()
        self._observers.clear()

    def _schedule_tick(self) -> None:
        self._tick_handle = self._scheduler.call_later(self.tick_interval, self._tick)

    def _cancel_tick(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None

    def _tick(self) -> None:
        self._tick_handle = None
        if not self._is_playing:
            return
        self.step_forward()
        if self.at_end:
            self._is_playing = False
            logger.debug("Playback finished at step %d", self._step)
            self._emit()
            return
        self._schedule_tick()

    # ── Snapshots ────────────────────────────────────────────────

    def get_state(self) -> PlayerState:
        return PlayerState(
            status=self.status,
            is_playing=self._is_playing,
            current_step=self._step,
            total_steps=self.total_steps,
            speed=self._speed,
            operations=self._operations,
            current_array=tuple(self._current),
            original_array=self._original,
        )

    def get_metrics(self) -> PlayerMetrics:
        return PlayerMetrics(
            comparisons=count_type(self._operations, OperationType.COMPARE, self._step),
            swaps=count_type(self._operations, OperationType.SWAP, self._step),
            elapsed_time=self._step,
            current_step=self._step,
            total_steps=self.total_steps,
        )

    def _emit(self, metrics: bool = False) -> None:
        if not self._observers:
            return
        state = self.get_state()
        snapshot = self.get_metrics() if metrics else None
        for on_state, on_metrics in list(self._observers):
            on_state(state)
            if snapshot is not None and on_metrics is not None:
                on_metrics(snapshot)
