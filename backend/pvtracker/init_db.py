import argparse
import logging

from pvtracker.database import SessionLocal, Base, engine

# Import all models to ensure they are registered with SQLAlchemy
from pvtracker.models.installation import Installation
from pvtracker.models.report import ProductionReport  # noqa: F401

logger = logging.getLogger(__name__)

SAMPLE_INSTALLATIONS = [
    dict(
        longitude=14.2858,
        latitude=48.3069,
        address="Hauptplatz 1, 4020 Linz",
        owner_name="Linz Community Solar",
        comments="Rooftop array, 30 kWp",
    ),
    dict(
        longitude=16.3738,
        latitude=48.2082,
        address="Stephansplatz 3, 1010 Wien",
        owner_name="Anna Huber",
        comments=None,
    ),
]


def init_db(bind=engine, session_factory=SessionLocal, seed: bool = False) -> int:
    """Create all tables and optionally add sample installations. Returns the number seeded."""
    Base.metadata.create_all(bind=bind)
    if not seed:
        return 0

    db = session_factory()
    try:
        # Check if we already have installations
        existing = db.query(Installation).first()
        if existing is not None:
            logger.info("Database already contains installations. Skipping seed.")
            return 0
        for sample in SAMPLE_INSTALLATIONS:
            db.add(Installation(is_active=True, **sample))
        db.commit()
        logger.info("Seeded %d sample installations", len(SAMPLE_INSTALLATIONS))
        return len(SAMPLE_INSTALLATIONS)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the PV tracker tables.")
    parser.add_argument("--seed", action="store_true", help="add sample installations to an empty database")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    logger.info("Initializing database...")
    init_db(seed=args.seed)
    logger.info("Database initialization completed!")


if __name__ == "__main__":
    main()
