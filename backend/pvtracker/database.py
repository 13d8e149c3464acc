from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from pvtracker.config import DATABASE_URL

# Initialize Base class for declarative models
Base = declarative_base()

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}  # Needed for SQLite

engine = create_engine(DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)


@event.listens_for(engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on
    if engine.dialect.name == "sqlite":
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(autoflush=False, bind=engine)

__all__ = ['Base', 'SessionLocal', 'engine', 'get_db']


def get_db():
    """Yield one session per request and close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
