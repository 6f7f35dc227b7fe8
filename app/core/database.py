"""
Database connection and session management
"""
from sqlalchemy import create_engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.orm.exc import StaleDataError
from app.core.config import settings
from app.core.errors import ConcurrentUpdate, PersistenceFailure

connect_args = {}
if "sqlite" in settings.DATABASE_URL:
    connect_args = {"check_same_thread": False}

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=connect_args,
    pool_pre_ping=True,
    echo=settings.DEBUG  # Log SQL in debug mode
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency to get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Initialize database tables"""
    from app.models import job, application, user  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)


def commit_or_raise(db, what: str) -> None:
    """
    Commit the pending unit of work. On failure everything is rolled back, so
    a status change never lands without its log entry (or the other way round).
    """
    try:
        db.commit()
    except StaleDataError as exc:
        db.rollback()
        raise ConcurrentUpdate(f"{what} was modified concurrently, please retry", exc)
    except SQLAlchemyError as exc:
        db.rollback()
        raise PersistenceFailure(f"Failed to save {what}", exc)
