"""
Bot API Endpoints
Trigger an automation pass and inspect what the bot has done
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from app.core.database import get_db
from app.core.security import Actor, Surface, require
from app.schemas.application import ApplicationResponse
from app.schemas.bot import BotPassResponse, BotActivityEntry
from app.services.application_service import application_service
from app.services.bot_automation import BotAutomationDriver, bot_driver
from app.services.reporting import reporting_service

router = APIRouter(prefix="/bot", tags=["Bot"])


def get_bot_driver() -> BotAutomationDriver:
    """Dependency so tests can swap in a driver with a fixed random source"""
    return bot_driver


@router.post("/trigger", response_model=BotPassResponse)
def trigger_bot(
    db: Session = Depends(get_db),
    driver: BotAutomationDriver = Depends(get_bot_driver),
    actor: Actor = Depends(require(Surface.RUN_BOT_PASS))
):
    """
    Run one automation pass
    Every technical application not yet at Offer/Rejected moves one step
    """
    return driver.run_pass(db)


@router.get("/technical-applications", response_model=List[ApplicationResponse])
def list_technical_applications(
    db: Session = Depends(get_db),
    actor: Actor = Depends(require(Surface.VIEW_BOT_ACTIVITY))
):
    return application_service.list_applications(db, is_technical=True)


@router.get("/logs", response_model=List[BotActivityEntry])
def bot_logs(
    db: Session = Depends(get_db),
    actor: Actor = Depends(require(Surface.VIEW_BOT_ACTIVITY))
):
    """Bot-authored log entries, newest first"""
    return reporting_service.bot_activity(db)
