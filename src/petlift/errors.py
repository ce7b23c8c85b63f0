from __future__ import annotations

from enum import IntEnum


class CommandResult(IntEnum):
    """Return codes for engine commands."""

    OK = 0
    ALREADY_ACTIVE = 1
    ALREADY_STOPPING_OR_OFFLINE = 2
    INVALID_FLOOR = 3
    INVALID_CATEGORY = 4
    SAME_FLOOR = 5
    RESOURCE_EXHAUSTED = 6

    @property
    def ok(self) -> bool:
        return self is CommandResult.OK


class PetliftError(Exception):
    """Base class for petlift errors."""


class ConfigError(PetliftError, ValueError):
    """Raised for malformed engine or scenario configuration."""


class RequestValidationError(PetliftError, ValueError):
    """A rider request was rejected before touching engine state."""

    result: CommandResult


class InvalidFloorError(RequestValidationError):
    result = CommandResult.INVALID_FLOOR


class InvalidCategoryError(RequestValidationError):
    result = CommandResult.INVALID_CATEGORY


class SameFloorError(RequestValidationError):
    result = CommandResult.SAME_FLOOR
