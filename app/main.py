"""
ATS Workflow Service
====================
Application tracking backend: applicants apply for job roles, admins manage
job roles and review non-technical applications, and a bot moves technical
applications through the status pipeline.

Flow:
1. Admin creates job roles
2. Applicants apply (status Applied)
3. Non-technical applications are moved by admins
4. Technical applications are moved by bot passes:
   Applied -> Reviewed -> Interview -> Offer | Rejected
Every status change is written to the application's audit log.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import api_router
from app.core.config import settings
from app.core.database import init_db
from app.core.errors import ATSError, ErrorCode
from app.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup"""
    setup_logging()
    logger.info("Starting %s", settings.APP_NAME)
    init_db()
    logger.info("Database initialized")
    yield
    logger.info("Shutting down")


def register_exception_handlers(app: FastAPI) -> None:
    """Translate domain errors into JSON responses"""

    @app.exception_handler(ATSError)
    async def ats_error_handler(request: Request, exc: ATSError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={
                "message": "Invalid request",
                "code": ErrorCode.VALIDATION_ERROR.value,
                "errors": jsonable_errors(exc),
            },
        )


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        description="""
## ATS Workflow API

### Roles
- **applicant**: apply for job roles, track own applications
- **admin**: manage job roles, update non-technical applications, dashboard
- **bot**: run automation passes over technical applications

The caller is identified by the `X-User-Id` and `X-User-Role` headers set by
the authentication gateway.
        """,
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": settings.APP_NAME}

    @app.get("/")
    def root():
        """Root endpoint with API info"""
        return {
            "service": settings.APP_NAME,
            "version": "1.0.0",
            "docs": "/docs",
            "endpoints": {
                "jobRoles": "/api/admin/job-roles",
                "applications": "/api/applications",
                "admin": "/api/admin",
                "bot": "/api/bot"
            }
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
