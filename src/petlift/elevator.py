from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .rider import Rider


class ElevatorStatus(Enum):
    OFFLINE = "OFFLINE"
    IDLE = "IDLE"
    LOADING = "LOADING"
    MOVING_UP = "UP"
    MOVING_DOWN = "DOWN"


@dataclass
class Elevator:
    """The car itself: position, riders on board and run state."""

    max_capacity: int
    max_weight: int
    status: ElevatorStatus = ElevatorStatus.OFFLINE
    current_floor: int = 1
    onboard: List[Rider] = field(default_factory=list)
    onboard_weight: int = 0
    stop_requested: bool = False
    direction: int = 0  # last travel direction, kept across LOADING stops

    @property
    def onboard_count(self) -> int:
        return len(self.onboard)

    @property
    def is_full(self) -> bool:
        return len(self.onboard) >= self.max_capacity or self.onboard_weight >= self.max_weight

    def can_admit(self, rider: Rider) -> bool:
        return (
            len(self.onboard) < self.max_capacity
            and self.onboard_weight + rider.weight <= self.max_weight
        )

    def admit(self, rider: Rider) -> None:
        self.onboard.append(rider)
        self.onboard_weight += rider.weight

    def try_admit(self, rider: Rider) -> bool:
        """Board ``rider`` if it fits; report whether it did."""
        if not self.can_admit(rider):
            return False
        self.admit(rider)
        return True

    def has_dropoff_here(self) -> bool:
        return any(r.destination_floor == self.current_floor for r in self.onboard)

    def unload_here(self) -> List[Rider]:
        leaving = [r for r in self.onboard if r.destination_floor == self.current_floor]
        if leaving:
            self.onboard = [r for r in self.onboard if r.destination_floor != self.current_floor]
            self.onboard_weight -= sum(r.weight for r in leaving)
        return leaving

    def reset(self) -> None:
        self.current_floor = 1
        self.onboard.clear()
        self.onboard_weight = 0
        self.stop_requested = False
        self.direction = 0

    def verify(self) -> bool:
        return (
            len(self.onboard) <= self.max_capacity
            and self.onboard_weight <= self.max_weight
            and self.onboard_weight == sum(r.weight for r in self.onboard)
            and (self.status is not ElevatorStatus.OFFLINE or not self.onboard)
        )
