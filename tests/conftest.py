"""
Shared pytest fixtures for petlift tests.
"""

import asyncio

import pytest

from petlift import DispatchEngine, EngineConfig, TickConfig


@pytest.fixture
def instant_config() -> EngineConfig:
    """Engine config with every hold set to zero, for stepping cycles by hand."""
    return EngineConfig(ticks=TickConfig(loading_tick=0, travel_tick=0, idle_poll=0, cycle_delay=0))


@pytest.fixture
def fast_config() -> EngineConfig:
    """Engine config with millisecond holds, for running the background loop."""
    return EngineConfig(
        ticks=TickConfig(loading_tick=0.001, travel_tick=0.002, idle_poll=0.001, cycle_delay=0.001)
    )


@pytest.fixture
def engine(instant_config) -> DispatchEngine:
    return DispatchEngine(instant_config)


def run(coro):
    return asyncio.run(coro)


async def run_until(engine: DispatchEngine, predicate, max_cycles: int = 100) -> int:
    """Step the engine until ``predicate(building)`` holds; return cycles used."""
    for cycle in range(max_cycles):
        if predicate(engine.building):
            return cycle
        await engine.run_cycle()
        assert engine.building.verify()
    raise AssertionError(f"condition not reached after {max_cycles} cycles")
