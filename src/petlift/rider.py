from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .errors import InvalidCategoryError, InvalidFloorError, SameFloorError


class RiderCategory(IntEnum):
    CHIHUAHUA = 0
    PUG = 1
    PUGHUAHUA = 2
    DACHSHUND = 3

    @property
    def code(self) -> str:
        return _CATEGORY_TABLE[self][0]

    @property
    def weight(self) -> int:
        return _CATEGORY_TABLE[self][1]

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


# category -> (report code, weight in lbs)
_CATEGORY_TABLE = {
    RiderCategory.CHIHUAHUA: ("C", 3),
    RiderCategory.PUG: ("P", 14),
    RiderCategory.PUGHUAHUA: ("H", 10),
    RiderCategory.DACHSHUND: ("D", 16),
}


@dataclass(frozen=True)
class Rider:
    """A pet waiting for, or riding in, the elevator."""

    rider_id: int
    category: RiderCategory
    origin_floor: int
    destination_floor: int

    def __post_init__(self) -> None:
        if self.origin_floor == self.destination_floor:
            raise SameFloorError(f"origin and destination are both floor {self.origin_floor}")

    @property
    def weight(self) -> int:
        return self.category.weight

    @property
    def label(self) -> str:
        return f"{self.category.code}{self.destination_floor}"


def validate_request(origin: int, destination: int, category: int, num_floors: int) -> RiderCategory:
    """Check a raw request and return its category.

    Floors are checked first, then the category, then origin against
    destination, so each request maps to exactly one rejection.
    """

    for floor in (origin, destination):
        if not 1 <= floor <= num_floors:
            raise InvalidFloorError(f"floor {floor} is outside 1..{num_floors}")
    try:
        rider_category = RiderCategory(category)
    except ValueError:
        raise InvalidCategoryError(f"unknown pet category {category!r}") from None
    if origin == destination:
        raise SameFloorError(f"origin and destination are both floor {origin}")
    return rider_category
