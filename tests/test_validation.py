from datetime import datetime, timedelta, timezone

import pytest

from pvtracker.exceptions import ValidationError
from pvtracker.services import validation


@pytest.mark.parametrize("latitude", [-90.01, 90.5, -180, 1000])
def test_latitude_out_of_range_rejected(latitude):
    with pytest.raises(ValidationError, match="Latitude"):
        validation.validate_latitude(latitude)


@pytest.mark.parametrize("latitude", [-90, 0, 90])
def test_latitude_bounds_accepted(latitude):
    validation.validate_latitude(latitude)


@pytest.mark.parametrize("longitude", [-180.5, 180.01, 361])
def test_longitude_out_of_range_rejected(longitude):
    with pytest.raises(ValidationError, match="Longitude"):
        validation.validate_longitude(longitude)


def test_longitude_bounds_accepted():
    validation.validate_longitude(-180)
    validation.validate_longitude(180)


def test_address_limits():
    validation.validate_address("a" * 1024)
    with pytest.raises(ValidationError, match="Address is too long"):
        validation.validate_address("a" * 1025)
    with pytest.raises(ValidationError, match="Address cannot be empty"):
        validation.validate_address(None)


def test_owner_name_limits():
    validation.validate_owner_name("o" * 512)
    with pytest.raises(ValidationError, match="Name is too long"):
        validation.validate_owner_name("o" * 513)
    with pytest.raises(ValidationError, match="Owner cannot be empty"):
        validation.validate_owner_name(None)


def test_comments_optional_but_bounded():
    validation.validate_comments(None)
    validation.validate_comments("c" * 1024)
    with pytest.raises(ValidationError, match="Comments"):
        validation.validate_comments("c" * 1025)


def test_first_failing_field_is_reported():
    # latitude is checked before longitude
    with pytest.raises(ValidationError, match="Latitude"):
        validation.validate_installation(500, 500, None, None)


@pytest.mark.parametrize(
    "kwargs, label",
    [
        (dict(produced=-1, household=0, battery=0, grid=0), "Produced"),
        (dict(produced=0, household=-0.5, battery=0, grid=0), "Household"),
        (dict(produced=0, household=0, battery=-2, grid=0), "Battery"),
        (dict(produced=0, household=0, battery=0, grid=-3), "Grid"),
    ],
)
def test_negative_wattage_names_field(kwargs, label):
    with pytest.raises(ValidationError, match=f"{label} Wattage cannot be negative"):
        validation.validate_wattages(**kwargs)


def test_zero_wattages_accepted():
    validation.validate_wattages(0, 0, 0, 0)


def test_duration_and_page():
    validation.validate_duration(0)
    validation.validate_page(1)
    with pytest.raises(ValidationError, match="Duration"):
        validation.validate_duration(-1)
    with pytest.raises(ValidationError, match="Page"):
        validation.validate_page(0)


def test_normalize_timestamp_converts_to_naive_utc():
    aware = datetime(2023, 5, 26, 10, 30, tzinfo=timezone(timedelta(hours=2)))
    assert validation.normalize_timestamp(aware) == datetime(2023, 5, 26, 8, 30)
    naive = datetime(2023, 5, 26, 8, 30)
    assert validation.normalize_timestamp(naive) is naive


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_coordinates_rejected(value):
    with pytest.raises(ValidationError, match="Latitude"):
        validation.validate_latitude(value)
    with pytest.raises(ValidationError, match="Longitude"):
        validation.validate_longitude(value)


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_non_finite_wattage_names_field(value):
    with pytest.raises(ValidationError, match="Household Wattage has to be a finite number"):
        validation.validate_wattages(produced=1, household=value, battery=1, grid=1)
