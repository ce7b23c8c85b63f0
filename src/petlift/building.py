from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from dispatch import DispatchSnapshot

from .config import ElevatorConstraints
from .elevator import Elevator
from .floor import FloorQueue
from .rider import Rider, validate_request

logger = logging.getLogger(__name__)


@dataclass
class Building:
    """Container for the floor queues, the elevator and the running totals.

    Nothing here locks; the engine holds its lock around every call.
    """

    constraints: ElevatorConstraints = field(default_factory=ElevatorConstraints)
    elevator: Elevator = field(init=False)
    floors: List[FloorQueue] = field(init=False)
    total_waiting: int = 0
    total_serviced: int = 0
    _next_rider_id: int = 0

    def __post_init__(self) -> None:
        self.floors = [FloorQueue(number) for number in range(1, self.constraints.num_floors + 1)]
        self.elevator = Elevator(
            max_capacity=self.constraints.max_capacity,
            max_weight=self.constraints.max_weight,
        )

    @property
    def num_floors(self) -> int:
        return self.constraints.num_floors

    def get_floor(self, floor_number: int) -> FloorQueue:
        return self.floors[floor_number - 1]

    def add_rider(self, origin: int, destination: int, category: int) -> Rider:
        rider_category = validate_request(origin, destination, category, self.num_floors)
        rider = Rider(
            rider_id=self._next_rider_id,
            category=rider_category,
            origin_floor=origin,
            destination_floor=destination,
        )
        self._next_rider_id += 1
        self.get_floor(origin).add(rider)
        self.total_waiting += 1
        return rider

    def needs_service(self) -> bool:
        """True when the elevator has a reason to open its doors here."""
        elevator = self.elevator
        if elevator.has_dropoff_here():
            return True
        if elevator.stop_requested or elevator.is_full:
            return False
        return any(
            r.destination_floor != elevator.current_floor
            for r in self.get_floor(elevator.current_floor)
        )

    def exchange_riders(self) -> Tuple[List[Rider], List[Rider]]:
        """Unload riders for this floor, then board whoever fits."""
        elevator = self.elevator
        unloaded = elevator.unload_here()
        self.total_serviced += len(unloaded)
        for rider in unloaded:
            logger.debug("Rider %d (%s) left at floor %d", rider.rider_id, rider.label, elevator.current_floor)

        boarded: List[Rider] = []
        if not elevator.stop_requested and not elevator.is_full:
            floor = self.get_floor(elevator.current_floor)
            boarded = floor.board(elevator.try_admit)
            for rider in boarded:
                logger.debug("Rider %d (%s) boarded at floor %d", rider.rider_id, rider.label, floor.number)
            self.total_waiting -= len(boarded)
        return unloaded, boarded

    def snapshot(self) -> DispatchSnapshot:
        elevator = self.elevator
        return DispatchSnapshot(
            current_floor=elevator.current_floor,
            direction=elevator.direction,
            onboard_destinations=tuple(r.destination_floor for r in elevator.onboard),
            is_full=elevator.is_full,
            stop_requested=elevator.stop_requested,
            waiting_per_floor=tuple(floor.waiting_count for floor in self.floors),
        )

    def as_dict(self) -> dict:
        elevator = self.elevator
        return {
            "status": elevator.status.value,
            "current_floor": elevator.current_floor,
            "load": elevator.onboard_weight,
            "onboard": [r.label for r in elevator.onboard],
            "stop_requested": elevator.stop_requested,
            "floors": [
                {"floor": floor.number, "waiting": floor.waiting_count, "riders": floor.labels()}
                for floor in self.floors
            ],
            "total_waiting": self.total_waiting,
            "total_serviced": self.total_serviced,
        }

    def drain(self) -> List[Rider]:
        """Drop every queued and onboard rider, e.g. on teardown."""
        elevator = self.elevator
        discarded = list(elevator.onboard)
        elevator.onboard.clear()
        elevator.onboard_weight = 0
        for floor in self.floors:
            discarded.extend(floor.drain())
        self.total_waiting = 0
        return discarded

    def verify(self) -> bool:
        return (
            self.elevator.verify()
            and 1 <= self.elevator.current_floor <= self.num_floors
            and all(floor.verify() for floor in self.floors)
            and self.total_waiting == sum(floor.waiting_count for floor in self.floors)
        )
