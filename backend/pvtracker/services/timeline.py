from datetime import datetime, timedelta
from typing import Dict, List

from sqlalchemy.orm import Session

from pvtracker.exceptions import ValidationError
from pvtracker.models.report import ProductionReport, placeholder_report
from pvtracker.repository import ReportRepository
from pvtracker.services.registry import get_installation
from pvtracker.services.validation import normalize_timestamp, validate_duration, validate_page

PAGE_SIZE = 60  # minutes per page

ONE_MINUTE = timedelta(minutes=1)


def page_bounds(start_timestamp: datetime, duration_minutes: int, page: int):
    """Return (page_start, end) for a 1-indexed page.

    The end is capped by the whole requested duration counted from
    start_timestamp, not from the page start. For page > 1 with a short
    duration the end can fall before page_start, which yields an empty page.
    Offsets past the datetime range raise ValidationError.
    """
    try:
        end = start_timestamp + timedelta(minutes=min(duration_minutes, PAGE_SIZE * page))
    except OverflowError:
        # duration >= the capped offset, so the duration is always out of range here
        raise ValidationError("Duration is too large for the given timestamp!")
    try:
        page_start = start_timestamp + timedelta(minutes=PAGE_SIZE * (page - 1))
    except OverflowError:
        raise ValidationError("Page is too large for the given timestamp!")
    return page_start, end


def fill_gaps(reports: List[ProductionReport], page_start: datetime, end: datetime) -> List[dict]:
    """One entry per minute in [page_start, end), placeholders where no report exists.

    Reports are bucketed by their whole-minute offset from page_start. If more
    than one report lands in a minute, the last one written wins.
    """
    by_slot: Dict[int, ProductionReport] = {}
    for report in reports:
        slot = (report.timestamp - page_start) // ONE_MINUTE
        current = by_slot.get(slot)
        if current is None or report.id > current.id:
            by_slot[slot] = report

    timeline = []
    slot, minute = 0, page_start
    while minute < end:
        report = by_slot.get(slot)
        timeline.append(report.to_dict() if report is not None else placeholder_report(minute))
        slot += 1
        minute += ONE_MINUTE
    return timeline


def get_timeline(db: Session, installation_id: int, start_timestamp: datetime,
                 duration_minutes: int, page: int) -> List[dict]:
    validate_duration(duration_minutes)
    validate_page(page)
    get_installation(db, installation_id)

    page_start, end = page_bounds(normalize_timestamp(start_timestamp), duration_minutes, page)
    if end <= page_start:
        return []
    reports = ReportRepository(db).query_by_range(installation_id, page_start, end)
    return fill_gaps(reports, page_start, end)
