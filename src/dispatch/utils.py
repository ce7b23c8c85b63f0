from __future__ import annotations

from .interface import DispatchSnapshot


def waiting_above(snapshot: DispatchSnapshot) -> bool:
    return any(snapshot.waiting_per_floor[snapshot.current_floor:])


def waiting_below(snapshot: DispatchSnapshot) -> bool:
    return any(snapshot.waiting_per_floor[: snapshot.current_floor - 1])


def riders_going_up(snapshot: DispatchSnapshot) -> bool:
    return any(dest > snapshot.current_floor for dest in snapshot.onboard_destinations)


def riders_going_down(snapshot: DispatchSnapshot) -> bool:
    return any(dest < snapshot.current_floor for dest in snapshot.onboard_destinations)
