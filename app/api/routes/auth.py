"""
Profile registration
Tokens and passwords are issued by the auth gateway, not here
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.user import UserRegister, UserResponse
from app.services.user_service import user_service

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, db: Session = Depends(get_db)):
    return user_service.register(db, payload.name, payload.email, payload.role)
