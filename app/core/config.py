"""
Configuration settings for the ATS workflow service
Values are read from the environment or a local .env file
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "ATS Workflow Service"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database (SQLite locally, PostgreSQL in production)
    DATABASE_URL: str = "sqlite:///./ats.db"

    # Frontends allowed to call the API (applicant, admin and bot clients)
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
        "http://localhost:3002",
        "http://localhost:5173",
    ]

    # Bot automation
    BOT_OFFER_PROBABILITY: float = 0.7  # Chance an interview ends in an offer
    BOT_AUTORUN_INTERVAL_SECONDS: int = 30
    BOT_USER_ID: str = "bot"
    API_BASE_URL: str = "http://localhost:8000"

    # Dashboard
    RECENT_APPLICATIONS_LIMIT: int = 5

    class Config:
        env_file = ".env"
        extra = "allow"


settings = Settings()
