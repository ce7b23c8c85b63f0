import pytest

from petlift import (
    CommandResult,
    InvalidCategoryError,
    InvalidFloorError,
    Rider,
    RiderCategory,
    SameFloorError,
)
from petlift.rider import validate_request


@pytest.mark.parametrize(
    "category, code, weight",
    [
        (RiderCategory.CHIHUAHUA, "C", 3),
        (RiderCategory.PUG, "P", 14),
        (RiderCategory.PUGHUAHUA, "H", 10),
        (RiderCategory.DACHSHUND, "D", 16),
    ],
)
def test_category_table(category, code, weight):
    assert category.code == code
    assert category.weight == weight


def test_rider_weight_and_label_follow_category():
    rider = Rider(rider_id=0, category=RiderCategory.PUG, origin_floor=1, destination_floor=5)
    assert rider.weight == 14
    assert rider.label == "P5"


def test_rider_is_immutable():
    rider = Rider(rider_id=0, category=RiderCategory.PUG, origin_floor=1, destination_floor=5)
    with pytest.raises(AttributeError):
        rider.destination_floor = 2


def test_rider_rejects_same_floor():
    with pytest.raises(SameFloorError):
        Rider(rider_id=0, category=RiderCategory.PUG, origin_floor=2, destination_floor=2)


@pytest.mark.parametrize(
    "origin, destination, category, error, result",
    [
        (3, 3, 0, SameFloorError, CommandResult.SAME_FLOOR),
        (0, 2, 0, InvalidFloorError, CommandResult.INVALID_FLOOR),
        (6, 2, 0, InvalidFloorError, CommandResult.INVALID_FLOOR),
        (1, 6, 0, InvalidFloorError, CommandResult.INVALID_FLOOR),
        (1, 2, 9, InvalidCategoryError, CommandResult.INVALID_CATEGORY),
        (1, 2, -1, InvalidCategoryError, CommandResult.INVALID_CATEGORY),
        # floors are checked before the category
        (0, 2, 9, InvalidFloorError, CommandResult.INVALID_FLOOR),
    ],
)
def test_validate_request_rejections(origin, destination, category, error, result):
    with pytest.raises(error) as excinfo:
        validate_request(origin, destination, category, num_floors=5)
    assert excinfo.value.result is result
    assert isinstance(excinfo.value, ValueError)


def test_validate_request_returns_category():
    assert validate_request(1, 2, 3, num_floors=5) is RiderCategory.DACHSHUND
