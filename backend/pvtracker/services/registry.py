import logging
from typing import Optional

from sqlalchemy.orm import Session

from pvtracker.exceptions import InstallationNotFound
from pvtracker.models.installation import Installation
from pvtracker.repository import InstallationRepository
from pvtracker.services.validation import validate_installation

logger = logging.getLogger(__name__)


def get_installation(db: Session, installation_id: int) -> Installation:
    installation = InstallationRepository(db).find(installation_id)
    if installation is None:
        raise InstallationNotFound(installation_id)
    return installation


def register(db: Session, longitude: float, latitude: float, address: Optional[str],
             owner_name: Optional[str], comments: Optional[str] = None) -> int:
    """Validate and store a new installation. New installations are always active."""
    validate_installation(longitude, latitude, address, owner_name, comments)
    installation = InstallationRepository(db).insert(
        Installation(
            longitude=longitude,
            latitude=latitude,
            address=address,
            owner_name=owner_name,
            is_active=True,
            comments=comments,
        )
    )
    logger.info("Registered installation %s for %s", installation.id, owner_name)
    return installation.id


def deactivate(db: Session, installation_id: int) -> Installation:
    """Mark an installation inactive. Already inactive installations are left as they are."""
    installation = get_installation(db, installation_id)
    installation.is_active = False
    installation = InstallationRepository(db).update(installation)
    logger.info("Deactivated installation %s", installation_id)
    return installation
