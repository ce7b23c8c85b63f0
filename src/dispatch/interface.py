from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Tuple


class Decision(Enum):
    OFFLINE = "offline"
    IDLE = "idle"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class DispatchSnapshot:
    """Read-only view of the elevator and floors for direction decisions."""

    current_floor: int
    direction: int
    onboard_destinations: Tuple[int, ...]
    is_full: bool
    stop_requested: bool
    waiting_per_floor: Tuple[int, ...]  # index 0 is floor 1

    @property
    def onboard_count(self) -> int:
        return len(self.onboard_destinations)

    @property
    def total_waiting(self) -> int:
        return sum(self.waiting_per_floor)

    @property
    def can_pickup(self) -> bool:
        return not self.is_full and not self.stop_requested


class DirectionPolicy(Protocol):
    """Strategy interface for choosing the elevator's next move."""

    def decide(self, snapshot: DispatchSnapshot) -> Decision:
        """
        Return the next decision for the elevator.

        Called with the engine lock held, after riders have been
        unloaded and loaded at the current floor.
        """
        ...
