from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Callable, Optional

from dispatch import Decision, DirectionalSweepPolicy, DirectionPolicy

from .building import Building
from .config import EngineConfig
from .elevator import ElevatorStatus
from .errors import CommandResult, RequestValidationError
from .report import render_status

logger = logging.getLogger(__name__)


class DispatchEngine:
    """Runs the elevator in a background task and serves caller commands.

    One asyncio lock guards the building. The control loop releases it for
    every loading and travel hold, so commands and status reads only ever
    wait for short critical sections.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        policy: Optional[DirectionPolicy] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.policy = policy or DirectionalSweepPolicy()
        self.building = Building(constraints=self.config.constraints)
        self._lock = asyncio.Lock()
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> CommandResult:
        async with self._lock:
            elevator = self.building.elevator
            if elevator.status is not ElevatorStatus.OFFLINE:
                result = CommandResult.ALREADY_ACTIVE
            else:
                elevator.reset()
                elevator.status = ElevatorStatus.IDLE
                result = CommandResult.OK
        if result.ok:
            logger.info("Elevator started")
        else:
            logger.warning("Start rejected: elevator already active")
        return result

    async def submit_request(self, origin: int, destination: int, category: int) -> CommandResult:
        async with self._lock:
            try:
                rider = self.building.add_rider(origin, destination, category)
            except RequestValidationError as exc:
                logger.warning("Request %s -> %s (category %s) rejected: %s", origin, destination, category, exc)
                return exc.result
            except MemoryError:
                logger.error("Out of memory creating rider %s -> %s", origin, destination)
                return CommandResult.RESOURCE_EXHAUSTED
        logger.info(
            "%s added to floor %d -> %d", rider.category.display_name, rider.origin_floor, rider.destination_floor
        )
        return CommandResult.OK

    async def request_stop(self) -> CommandResult:
        async with self._lock:
            elevator = self.building.elevator
            if elevator.stop_requested or elevator.status is ElevatorStatus.OFFLINE:
                result = CommandResult.ALREADY_STOPPING_OR_OFFLINE
            else:
                elevator.stop_requested = True
                result = CommandResult.OK
        if result.ok:
            logger.info("Stop requested")
        else:
            logger.warning("Stop rejected: already stopping or offline")
        return result

    async def report(self) -> str:
        async with self._lock:
            return render_status(self.building)

    async def snapshot(self) -> dict:
        async with self._lock:
            return self.building.as_dict()

    async def launch(self) -> None:
        if self._task is None:
            self._task = asyncio.create_task(self._run())

    async def shutdown(self) -> int:
        """Stop the control loop and discard every outstanding rider."""
        if self._task:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None
        async with self._lock:
            discarded = self.building.drain()
            self.building.elevator.status = ElevatorStatus.OFFLINE
            self.building.elevator.direction = 0
        logger.info("Engine shut down, %d rider(s) discarded", len(discarded))
        return len(discarded)

    async def wait_until(
        self, predicate: Callable[[Building], bool], timeout: Optional[float] = None, poll: float = 0.01
    ) -> None:
        async def _poll() -> None:
            while True:
                async with self._lock:
                    if predicate(self.building):
                        return
                await asyncio.sleep(poll)

        await asyncio.wait_for(_poll(), timeout)

    async def wait_for_status(self, *statuses: ElevatorStatus, timeout: Optional[float] = None) -> None:
        await self.wait_until(lambda building: building.elevator.status in statuses, timeout)

    async def run_cycle(self) -> None:
        """Run one pass of the control loop."""
        ticks = self.config.ticks
        elevator = self.building.elevator

        async with self._lock:
            parked = elevator.status is ElevatorStatus.OFFLINE
            service = not parked and self.building.needs_service()
            if service:
                elevator.status = ElevatorStatus.LOADING
        if parked:
            await asyncio.sleep(ticks.idle_poll)
            return

        if service:
            await asyncio.sleep(ticks.loading_tick)

        async with self._lock:
            if service:
                self.building.exchange_riders()
            step = self._decide()

        if step:
            await asyncio.sleep(ticks.travel_tick)
            async with self._lock:
                elevator.current_floor += step
                logger.debug("Elevator reached floor %d", elevator.current_floor)

        await asyncio.sleep(ticks.cycle_delay)

    async def _run(self) -> None:
        while True:
            await self.run_cycle()

    def _decide(self) -> int:
        """Apply the policy's decision and return the floor step to travel."""
        elevator = self.building.elevator
        decision = self.policy.decide(self.building.snapshot())

        if decision is Decision.OFFLINE:
            elevator.status = ElevatorStatus.OFFLINE
            elevator.direction = 0
            logger.info("Elevator offline at floor %d", elevator.current_floor)
            return 0
        if decision is Decision.IDLE:
            elevator.status = ElevatorStatus.IDLE
            elevator.direction = 0
            return 0
        if decision is Decision.UP:
            elevator.status = ElevatorStatus.MOVING_UP
            elevator.direction = 1
            return 1 if elevator.current_floor < self.building.num_floors else 0
        elevator.status = ElevatorStatus.MOVING_DOWN
        elevator.direction = -1
        return -1 if elevator.current_floor > 1 else 0
