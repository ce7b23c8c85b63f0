"""Pet elevator dispatch engine."""

from .building import Building
from .config import ElevatorConstraints, EngineConfig, TickConfig
from .elevator import Elevator, ElevatorStatus
from .engine import DispatchEngine
from .errors import (
    CommandResult,
    ConfigError,
    InvalidCategoryError,
    InvalidFloorError,
    PetliftError,
    RequestValidationError,
    SameFloorError,
)
from .floor import FloorQueue
from .logging_config import configure_from_env, enable_console_logging
from .report import render_status
from .rider import Rider, RiderCategory

__all__ = [
    "Building",
    "CommandResult",
    "ConfigError",
    "DispatchEngine",
    "Elevator",
    "ElevatorConstraints",
    "ElevatorStatus",
    "EngineConfig",
    "FloorQueue",
    "InvalidCategoryError",
    "InvalidFloorError",
    "PetliftError",
    "RequestValidationError",
    "Rider",
    "RiderCategory",
    "SameFloorError",
    "TickConfig",
    "configure_from_env",
    "enable_console_logging",
    "render_status",
]
