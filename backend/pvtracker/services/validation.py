"""Field checks run before any write. Each raises ValidationError naming the field."""

import math
from datetime import datetime, timezone
from typing import Optional

from pvtracker.exceptions import ValidationError

MAX_ADDRESS_LENGTH = 1024
MAX_OWNER_NAME_LENGTH = 512
MAX_COMMENTS_LENGTH = 1024


def validate_latitude(latitude: float) -> None:
    if not math.isfinite(latitude) or latitude < -90 or latitude > 90:
        raise ValidationError("Latitude has to be between -90 and 90")


def validate_longitude(longitude: float) -> None:
    if not math.isfinite(longitude) or longitude < -180 or longitude > 180:
        raise ValidationError("Longitude has to be between -180 and 180")


def validate_address(address: Optional[str]) -> None:
    if address is None:
        raise ValidationError("Address cannot be empty")
    if len(address) > MAX_ADDRESS_LENGTH:
        raise ValidationError(f"Address is too long; enter a maximum of {MAX_ADDRESS_LENGTH} characters!")


def validate_owner_name(owner_name: Optional[str]) -> None:
    if owner_name is None:
        raise ValidationError("Name of the Owner cannot be empty")
    if len(owner_name) > MAX_OWNER_NAME_LENGTH:
        raise ValidationError(f"Name is too long; enter a maximum of {MAX_OWNER_NAME_LENGTH} characters!")


def validate_comments(comments: Optional[str]) -> None:
    if comments is not None and len(comments) > MAX_COMMENTS_LENGTH:
        raise ValidationError(f"Comments are too long; enter a maximum of {MAX_COMMENTS_LENGTH} characters!")


def validate_installation(longitude: float, latitude: float, address: Optional[str],
                          owner_name: Optional[str], comments: Optional[str] = None) -> None:
    validate_latitude(latitude)
    validate_longitude(longitude)
    validate_address(address)
    validate_owner_name(owner_name)
    validate_comments(comments)


def validate_wattage(label: str, value: float) -> None:
    if not math.isfinite(value):
        raise ValidationError(f"{label} Wattage has to be a finite number!")
    if value < 0:
        raise ValidationError(f"{label} Wattage cannot be negative!")


def validate_wattages(produced: float, household: float, battery: float, grid: float) -> None:
    validate_wattage("Battery", battery)
    validate_wattage("Grid", grid)
    validate_wattage("Household", household)
    validate_wattage("Produced", produced)


def validate_duration(duration: int) -> None:
    if duration < 0:
        raise ValidationError("Duration has to be greater than or equal to 0!")


def validate_page(page: int) -> None:
    if page < 1:
        raise ValidationError("Page has to be greater than or equal to 1!")


def normalize_timestamp(ts: datetime) -> datetime:
    """Convert aware datetimes to naive UTC so they compare with stored timestamps."""
    if ts.tzinfo is not None:
        ts = ts.astimezone(timezone.utc).replace(tzinfo=None)
    return ts
