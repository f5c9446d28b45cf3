from sqlmodel import SQLModel, create_engine
from sqlalchemy.engine import make_url
from app.core.config import get_settings
import logging

settings = get_settings()
logger = logging.getLogger(__name__)

def _engine_options(database_url: str) -> dict:
    """Pool options for the configured backend.

    SQLite has no server-side pool, so the sizing knobs only apply to
    networked databases.
    """
    if make_url(database_url).get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
    }

engine = create_engine(
    settings.database_url,
    echo=settings.DEBUG,
    **_engine_options(settings.database_url),
)

def create_db_and_tables():
    # Import models here to ensure they are registered with SQLModel metadata
    from app.models import Organization, Inventory, Playbook, Job
    SQLModel.metadata.create_all(engine)
    logger.info("Database tables ready")

def dispose_engine():
    """Closes every pooled connection."""
    engine.dispose()
    logger.info("Database connection pool closed")
