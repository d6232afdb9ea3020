"""Player data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .operation import Number, Operation
from . import constants


class PlayerStatus(Enum):
    """Playback state machine; a paused player is READY."""

    IDLE = "idle"
    READY = "ready"
    PLAYING = "playing"


@dataclass(frozen=True)
class PlayerConfig:
    """Groups playback configuration."""

    speed: float = constants.DEFAULT_SPEED
    min_speed: float = constants.MIN_SPEED
    max_speed: float = constants.MAX_SPEED
    base_tick_ms: float = constants.BASE_TICK_MS

    def clamp_speed(self, speed: float) -> float:
        return max(self.min_speed, min(self.max_speed, speed))


@dataclass(frozen=True)
class PlayerState:
    """Snapshot of a player, handed to observers."""

    status: PlayerStatus
    is_playing: bool
    current_step: int
    total_steps: int
    speed: float
    operations: tuple[Operation, ...]
    current_array: tuple[Number, ...]
    original_array: tuple[Number, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "is_playing": self.is_playing,
            "current_step": self.current_step,
            "total_steps": self.total_steps,
            "speed": self.speed,
            "current_array": list(self.current_array),
            "original_array": list(self.original_array),
        }


@dataclass(frozen=True)
class PlayerMetrics:
    comparisons: int = 0
    swaps: int = 0
    elapsed_time: int = 0  # measured in steps, not wall-clock time
    current_step: int = 0
    total_steps: int = 0
