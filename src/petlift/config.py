from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping

from .errors import ConfigError
from .rider import RiderCategory


@dataclass(frozen=True)
class ElevatorConstraints:
    """Building size and admission limits used by the engine."""

    num_floors: int = 5
    max_capacity: int = 5
    max_weight: int = 50

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{item.name} must be an integer, got {value!r}")
        if self.num_floors < 2:
            raise ConfigError("num_floors must be at least 2")
        if self.max_capacity < 1:
            raise ConfigError("max_capacity must be positive")
        heaviest = max(category.weight for category in RiderCategory)
        if self.max_weight < heaviest:
            raise ConfigError(f"max_weight must be at least {heaviest} so every pet can board")


@dataclass(frozen=True)
class TickConfig:
    """Simulated delays, in seconds."""

    loading_tick: float = 1.0
    travel_tick: float = 2.0
    idle_poll: float = 1.0
    cycle_delay: float = 0.1

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{item.name} must be a number, got {value!r}")
            if value < 0:
                raise ConfigError(f"{item.name} must not be negative")


@dataclass(frozen=True)
class EngineConfig:
    constraints: ElevatorConstraints = field(default_factory=ElevatorConstraints)
    ticks: TickConfig = field(default_factory=TickConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EngineConfig":
        unknown = set(data) - {"constraints", "ticks"}
        if unknown:
            raise ConfigError(f"Unknown engine option(s): {', '.join(sorted(unknown))}")
        return cls(
            constraints=_build(ElevatorConstraints, data.get("constraints", {})),
            ticks=_build(TickConfig, data.get("ticks", {})),
        )

    def as_dict(self) -> Dict[str, Dict[str, Any]]:
        return {
            "constraints": {f.name: getattr(self.constraints, f.name) for f in fields(self.constraints)},
            "ticks": {f.name: getattr(self.ticks, f.name) for f in fields(self.ticks)},
        }


def _build(cls, options: Mapping[str, Any]):
    if not isinstance(options, Mapping):
        raise ConfigError(f"{cls.__name__} options must be a mapping")
    allowed = {f.name for f in fields(cls)}
    unknown = set(options) - allowed
    if unknown:
        raise ConfigError(
            f"Unknown {cls.__name__} option(s): {', '.join(sorted(unknown))}. "
            f"Available: {', '.join(sorted(allowed))}"
        )
    return cls(**options)
