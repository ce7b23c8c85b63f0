from __future__ import annotations

from .interface import Decision, DispatchSnapshot
from .utils import riders_going_down, riders_going_up, waiting_above, waiting_below


class DirectionalSweepPolicy:
    """Keeps travelling one way while anything justifies it, then turns around.

    Deliveries win over pickups, and no new pickups are chased once a stop
    has been requested.
    """

    def decide(self, snapshot: DispatchSnapshot) -> Decision:
        if snapshot.stop_requested and snapshot.onboard_count == 0:
            return Decision.OFFLINE
        if snapshot.onboard_count == 0 and (snapshot.total_waiting == 0 or snapshot.stop_requested):
            return Decision.IDLE

        going_up = riders_going_up(snapshot)
        going_down = riders_going_down(snapshot)
        pickup = snapshot.can_pickup

        if snapshot.direction > 0 and (going_up or (pickup and waiting_above(snapshot))):
            return Decision.UP
        if snapshot.direction < 0 and (going_down or (pickup and waiting_below(snapshot))):
            return Decision.DOWN

        if going_up:
            return Decision.UP
        if going_down:
            return Decision.DOWN
        if pickup and waiting_above(snapshot):
            return Decision.UP
        if pickup and waiting_below(snapshot):
            return Decision.DOWN
        return Decision.IDLE
