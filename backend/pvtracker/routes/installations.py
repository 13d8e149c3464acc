from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from pvtracker.database import get_db
from pvtracker.exceptions import InstallationNotFound, ValidationError
from pvtracker.schemas import InstallationCreate, ProductionReportCreate
from pvtracker.services import aggregation, ingestion, registry, timeline
from pvtracker.services.cache import get_cache, installation_key, invalidate_installation, set_cache

router = APIRouter()


def _bad_request(e: ValidationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def _not_found(e: InstallationNotFound) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/installations")
def register_installation(body: InstallationCreate, db: Session = Depends(get_db)) -> int:
    """Register an installation and return its id."""
    try:
        return registry.register(
            db,
            longitude=body.longitude,
            latitude=body.latitude,
            address=body.address,
            owner_name=body.owner_name,
            comments=body.comments,
        )
    except ValidationError as e:
        raise _bad_request(e)


@router.post("/installations/{installation_id}/deactivate")
def deactivate_installation(installation_id: int, db: Session = Depends(get_db)):
    try:
        installation = registry.deactivate(db, installation_id)
    except InstallationNotFound as e:
        raise _not_found(e)
    invalidate_installation(installation_id)
    return installation.to_dict()


@router.post("/installations/{installation_id}/reports")
def add_report(installation_id: int, body: ProductionReportCreate, db: Session = Depends(get_db)):
    try:
        report = ingestion.ingest(
            db,
            installation_id,
            produced_wattage=body.produced_wattage,
            household_wattage=body.household_wattage,
            battery_wattage=body.battery_wattage,
            grid_wattage=body.grid_wattage,
        )
    except ValidationError as e:
        raise _bad_request(e)
    except InstallationNotFound as e:
        raise _not_found(e)
    invalidate_installation(installation_id)
    return report.to_dict()


@router.get("/installations/{installation_id}/reports")
def get_produced_sum(
    installation_id: int,
    timestamp: datetime = Query(...),
    duration: int = Query(..., description="Window length in minutes"),
    db: Session = Depends(get_db),
) -> float:
    """Sum of produced wattage over [timestamp, timestamp + duration)."""
    cache_key = installation_key(installation_id, "sum", timestamp.isoformat(), duration)
    data = get_cache(cache_key)
    if data is not None:
        return data
    try:
        total = aggregation.sum_produced(db, installation_id, timestamp, duration)
    except ValidationError as e:
        raise _bad_request(e)
    except InstallationNotFound as e:
        raise _not_found(e)
    set_cache(cache_key, total)
    return total


@router.get("/installations/{installation_id}/timeline")
def get_timeline(
    installation_id: int,
    start_timestamp: datetime = Query(..., alias="startTimestamp"),
    duration: int = Query(..., description="Requested span in minutes"),
    page: int = Query(..., description="1-indexed page of 60 minutes"),
    db: Session = Depends(get_db),
):
    """Minute-by-minute reports for one page, with placeholders for missing minutes."""
    cache_key = installation_key(installation_id, "timeline", start_timestamp.isoformat(), duration, page)
    data = get_cache(cache_key)
    if data is not None:
        return data
    try:
        out = timeline.get_timeline(db, installation_id, start_timestamp, duration, page)
    except ValidationError as e:
        raise _bad_request(e)
    except InstallationNotFound as e:
        raise _not_found(e)
    set_cache(cache_key, out)
    return out
