from pvtracker.init_db import SAMPLE_INSTALLATIONS, init_db
from pvtracker.models import Installation


def test_creates_tables_without_seeding(engine, session_factory, db):
    assert init_db(bind=engine, session_factory=session_factory) == 0
    assert db.query(Installation).count() == 0


def test_seed_only_into_empty_database(engine, session_factory, db):
    assert init_db(bind=engine, session_factory=session_factory, seed=True) == len(SAMPLE_INSTALLATIONS)
    assert init_db(bind=engine, session_factory=session_factory, seed=True) == 0
    installations = db.query(Installation).all()
    assert len(installations) == len(SAMPLE_INSTALLATIONS)
    assert all(i.is_active for i in installations)
