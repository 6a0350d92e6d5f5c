import logging
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.exc import SQLAlchemyError
from app.core.config import settings
from app.core.errors import StorageError

logger = logging.getLogger("storefront.db")

# check_same_thread is needed for SQLite, remove for PostgreSQL
connect_args = {"check_same_thread": False} if "sqlite" in settings.DATABASE_URL else {}
engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)

def get_session():
    with Session(engine) as session:
        yield session

def create_db_and_tables():
    # Import models so their tables are registered on SQLModel.metadata
    import app.models  # noqa: F401
    SQLModel.metadata.create_all(engine)

def commit_or_raise(session: Session, action: str):
    """Commit the unit of work, rolling back and raising StorageError on failure."""
    try:
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Storage failure while trying to %s", action)
        raise StorageError(f"Failed to {action}")
