"""
Repair legacy applications stored without an experience value.

The bot skips such applications, so they never advance. This sets their
experience to 0 so they re-enter the pipeline. Safe to run repeatedly.

    python fix_missing_experience.py
"""
import logging

from sqlalchemy.orm import Session

from app.core.database import SessionLocal, commit_or_raise
from app.core.logging_config import setup_logging
from app.models.application import Application

logger = logging.getLogger("fix_missing_experience")


def count_missing(db: Session) -> int:
    return db.query(Application).filter(Application.experience.is_(None)).count()


def fix_missing_experience(db: Session) -> int:
    """Set experience to 0 where it is missing; returns how many rows changed"""
    missing = db.query(Application).filter(Application.experience.is_(None)).all()
    logger.info("Found %d applications with missing experience field", len(missing))

    for application in missing:
        application.experience = 0
    if missing:
        commit_or_raise(db, "applications")
        logger.info("Updated %d applications", len(missing))
    return len(missing)


def main() -> None:
    setup_logging()
    db = SessionLocal()
    try:
        fix_missing_experience(db)
        remaining = count_missing(db)
        if remaining:
            logger.error("Still %d applications with missing experience field", remaining)
        else:
            logger.info("All applications now have an experience value")
    finally:
        db.close()
        logger.info("Database connection closed")


if __name__ == "__main__":
    main()
