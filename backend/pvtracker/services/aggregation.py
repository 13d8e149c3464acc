from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from pvtracker.exceptions import ValidationError
from pvtracker.repository import ReportRepository
from pvtracker.services.registry import get_installation
from pvtracker.services.validation import normalize_timestamp, validate_duration


def sum_produced(db: Session, installation_id: int, window_start: datetime, duration_minutes: int) -> float:
    """Total produced wattage over [window_start, window_start + duration). Empty windows sum to 0."""
    validate_duration(duration_minutes)
    get_installation(db, installation_id)
    window_start = normalize_timestamp(window_start)
    try:
        window_end = window_start + timedelta(minutes=duration_minutes)
    except OverflowError:
        raise ValidationError("Duration is too large for the given timestamp!")
    return ReportRepository(db).sum_produced(installation_id, window_start, window_end)
