"""Plain-text status report for the elevator."""

from __future__ import annotations

from typing import List

from .building import Building


def render_status(building: Building) -> str:
    """Render the status report for ``building``.

    The caller is expected to hold the engine lock; nothing is modified.
    """

    elevator = building.elevator
    onboard = " ".join(rider.label for rider in elevator.onboard) or "empty"

    lines: List[str] = [
        f"Elevator state: {elevator.status.value}",
        f"Current floor: {elevator.current_floor}",
        f"Current load: {elevator.onboard_weight} lbs",
        f"Elevator status: {onboard}",
    ]
    for floor in reversed(building.floors):
        marker = "*" if floor.number == elevator.current_floor else " "
        line = f"[{marker}] Floor {floor.number}: {floor.waiting_count}"
        labels = floor.labels()
        if labels:
            line += " " + " ".join(labels)
        lines.append(line)
    lines.extend(
        [
            f"Number of pets: {elevator.onboard_count}",
            f"Number of pets waiting: {building.total_waiting}",
            f"Number of pets serviced: {building.total_serviced}",
        ]
    )
    return "\n".join(lines) + "\n"
