import logging
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str):
    """
    Create a SQLAlchemy engine suited to the configured backend.

    SQLite connections are shared across FastAPI's threadpool, so the
    same-thread check is disabled. Server databases get a pre-pinged pool.
    SQL echo is controlled through logging (see setup_logging).
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=10,  # Connection pool size
        max_overflow=20  # Allow up to 20 connections beyond pool_size
    )


# Create SQLAlchemy engine
engine = build_engine(settings.DATABASE_URL)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def ensure_sqlite_directory(database_url) -> None:
    """
    Create the parent directory of a file-backed SQLite database.

    SQLite creates the file itself on first connect but not missing
    directories. In-memory and non-SQLite URLs are left alone.
    """
    url = make_url(database_url)
    if not url.drivername.startswith("sqlite"):
        return
    if not url.database or url.database == ":memory:":
        return

    db_dir = Path(url.database).parent
    if not db_dir.exists():
        logger.info(f"Database directory {db_dir} does not exist, creating it...")
        db_dir.mkdir(parents=True, exist_ok=True)


def init_db(bind=None):
    """
    Initialize database.

    Provisions the SQLite directory if needed and creates any missing tables.
    Deployments that manage schema with Alembic can run "alembic upgrade head"
    instead; create_all never touches tables that already exist.
    """
    bind = bind if bind is not None else engine
    from app.models import opening  # noqa: F401  Import models to register them

    ensure_sqlite_directory(bind.url)
    Base.metadata.create_all(bind=bind)
