import logging
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy.orm import Session

from pvtracker.models.report import ProductionReport
from pvtracker.repository import ReportRepository
from pvtracker.services.registry import get_installation
from pvtracker.services.validation import validate_wattages

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def current_minute(clock: Callable[[], datetime] = utc_now) -> datetime:
    """Start of the current minute as naive UTC."""
    now = clock()
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc).replace(tzinfo=None)
    return now.replace(second=0, microsecond=0)


def ingest(db: Session, installation_id: int, produced_wattage: float, household_wattage: float,
           battery_wattage: float, grid_wattage: float,
           clock: Callable[[], datetime] = utc_now) -> ProductionReport:
    """Store a production report stamped with the current minute of the processing clock."""
    validate_wattages(produced_wattage, household_wattage, battery_wattage, grid_wattage)
    get_installation(db, installation_id)

    report = ReportRepository(db).insert(
        ProductionReport(
            timestamp=current_minute(clock),
            produced_wattage=produced_wattage,
            household_wattage=household_wattage,
            battery_wattage=battery_wattage,
            grid_wattage=grid_wattage,
            installation_id=installation_id,
        )
    )
    logger.info("Stored report %s for installation %s at %s", report.id, installation_id, report.timestamp.isoformat())
    return report
