from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Iterator, List

from .rider import Rider


@dataclass
class FloorQueue:
    """Riders waiting at one floor, in boarding order."""

    number: int
    riders: Deque[Rider] = field(default_factory=deque)
    waiting_count: int = 0
    waiting_weight: int = 0

    def add(self, rider: Rider) -> None:
        self.riders.append(rider)
        self.waiting_count += 1
        self.waiting_weight += rider.weight

    def board(self, admit: Callable[[Rider], bool]) -> List[Rider]:
        """Hand riders from the front of the queue to ``admit`` until it refuses one.

        ``admit`` takes the rider when it returns True, so each check sees
        the riders already handed over.

        Riders headed for this very floor are left in place and skipped.
        The first rider ``admit`` refuses ends the scan, so nobody behind
        them is let on ahead of them.
        """
        boarded: List[Rider] = []
        skipped: List[Rider] = []
        while self.riders:
            rider = self.riders[0]
            if rider.destination_floor == self.number:
                skipped.append(self.riders.popleft())
                continue
            if not admit(rider):
                break
            self.riders.popleft()
            self.waiting_count -= 1
            self.waiting_weight -= rider.weight
            boarded.append(rider)
        self.riders.extendleft(reversed(skipped))
        return boarded

    def drain(self) -> List[Rider]:
        drained = list(self.riders)
        self.riders.clear()
        self.waiting_count = 0
        self.waiting_weight = 0
        return drained

    def labels(self) -> List[str]:
        return [rider.label for rider in self.riders]

    def verify(self) -> bool:
        return self.waiting_count == len(self.riders) and self.waiting_weight == sum(
            rider.weight for rider in self.riders
        )

    def __iter__(self) -> Iterator[Rider]:
        return iter(self.riders)

    def __len__(self) -> int:
        return self.waiting_count
