from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from config import DATABASE_URL, SQL_ECHO


def is_sqlite_url(url: str) -> bool:
    """Return True when the SQLAlchemy URL points at SQLite."""
    return url.startswith("sqlite")


def _engine_kwargs(url: str) -> dict:
    kwargs = {"echo": SQL_ECHO}
    if is_sqlite_url(url):
        kwargs["connect_args"] = {"check_same_thread": False}  # Required for SQLite with FastAPI
    return kwargs


engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))


@event.listens_for(engine, "connect")
def enable_sqlite_foreign_keys(dbapi_conn, connection_record):
    """Turn on FK enforcement so channel rows cascade with their lineup."""
    if not is_sqlite_url(DATABASE_URL):
        return

    cursor = dbapi_conn.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db():
    """Dependency for getting database sessions in FastAPI routes."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Initialize the database and create all tables."""
    # Import models here to ensure they're registered with Base
    from models import Lineup, LineupChannel  # noqa: F401

    Base.metadata.create_all(bind=engine)
