import math

import pytest

from customerlocator.core.geo import (
    DUBLIN,
    EARTH_RADIUS_KM,
    Coordinate,
    CoordinateParseError,
    haversine_km,
    parse_coordinate,
)
from customerlocator.core.units import DistanceKm

NEW_YORK = Coordinate(40.7128, -74.0059)
SANTIAGO = Coordinate(-33.4489, -70.6693)
SYDNEY = Coordinate(-33.8688, 151.2093)


@pytest.mark.parametrize(
    "a,b",
    [
        (DUBLIN, NEW_YORK),
        (NEW_YORK, SANTIAGO),
        (SANTIAGO, SYDNEY),
        (Coordinate(0.0, 0.0), Coordinate(0.0, 180.0)),
        (Coordinate(89.9, 10.0), Coordinate(-89.9, -170.0)),
    ],
)
def test_distance_is_symmetric(a, b):
    assert a.distance_from(b).value == pytest.approx(b.distance_from(a).value, rel=1e-9)


@pytest.mark.parametrize("point", [DUBLIN, NEW_YORK, SYDNEY, Coordinate(95.0, 200.0)])
def test_distance_to_self_is_zero(point):
    assert point.distance_from(point) == DistanceKm(0.0)


def test_dublin_to_new_york_reference_distance():
    assert DUBLIN.distance_from(NEW_YORK).value == pytest.approx(5115.306, abs=0.01)


def test_antipodal_points_are_half_the_circumference_apart():
    d = haversine_km(Coordinate(0.0, 0.0), Coordinate(0.0, 180.0))
    assert d == pytest.approx(math.pi * EARTH_RADIUS_KM, rel=1e-9)


def test_non_finite_coordinates_give_nan_instead_of_raising():
    assert math.isnan(Coordinate(float("nan"), 0.0).distance_from(DUBLIN).value)
    assert math.isnan(DUBLIN.distance_from(Coordinate(0.0, float("inf"))).value)


def test_out_of_range_latitude_is_not_rejected():
    far = Coordinate(120.0, 400.0)
    assert math.isfinite(far.distance_from(DUBLIN).value)


def test_dublin_helpers():
    assert Coordinate.dublin() == DUBLIN
    assert Coordinate(53.3393, -6.2576841).is_dublin()
    assert not NEW_YORK.is_dublin()


def test_coordinate_display():
    assert str(Coordinate(1.5, -2.0)) == "Location(1.5, -2.0)"


def test_parse_coordinate_accepts_lat_lon_text():
    assert parse_coordinate("53.3393,-6.2576841") == DUBLIN
    assert parse_coordinate(" 40.7128 , -74.0059 ") == NEW_YORK
    # Trailing elements are ignored.
    assert parse_coordinate("1,2,3") == Coordinate(1.0, 2.0)


def test_parse_coordinate_requires_two_elements():
    with pytest.raises(CoordinateParseError, match="missing element latitude,longitude"):
        parse_coordinate("53.3393")


def test_parse_coordinate_rejects_non_numeric_elements():
    with pytest.raises(CoordinateParseError, match="Location parse error"):
        parse_coordinate("north,-6.25")
    # Callers that only know about ValueError still catch it.
    with pytest.raises(ValueError):
        parse_coordinate("53.3,west")
