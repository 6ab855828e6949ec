# /app/main.py

# --- Core FastAPI Imports ---
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

# --- Application-specific Router Imports ---
from .routers import classes_router, students_router

from .core.config import Settings, get_settings
from .core.logging_config import configure_logging
from .db.database import Database
from .models.common_model import HealthStatus

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Builds the application. Passing `database` skips creating one from
    `settings.DATABASE_URL`; the caller then owns its lifecycle.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    # --- Application Lifecycle Management ---
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # This code runs ONCE when the application starts up.
        owns_database = database is None
        app.state.database = database or Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)
        app.state.database.create_all()
        logger.info("%s %s started", settings.PROJECT_NAME, settings.API_VERSION)
        yield
        # This code runs ONCE when the application shuts down.
        if owns_database:
            app.state.database.dispose()

    # --- FastAPI Application Instance Creation ---
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="REST API for managing students, classes, and class assignments.",
        version=settings.API_VERSION,
        lifespan=lifespan
    )

    # --- Middleware Configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Bad Request",
                "message": "Invalid request data",
                "data": jsonable_encoder(exc.errors()),
            },
        )

    # --- API Router Inclusion ---
    app.include_router(students_router.router, prefix=f"{API_PREFIX}/students", tags=["Students"])
    app.include_router(classes_router.router, prefix=f"{API_PREFIX}/classes", tags=["Classes"])

    # --- Root / Health Check Endpoints ---
    @app.get("/", tags=["Health Check"])
    async def read_root():
        """A simple banner confirming the API is online."""
        return {"message": f"{settings.PROJECT_NAME} is running", "version": app.version, "docs": "/docs"}

    @app.get(f"{API_PREFIX}/health", response_model=HealthStatus, tags=["Health Check"])
    async def health():
        return HealthStatus(
            message=f"{settings.PROJECT_NAME} is running",
            version=app.version,
            timestamp=datetime.now(timezone.utc).isoformat(),
            status="healthy",
        )

    return app


app = create_app()


if __name__ == "__main__":
    # Local development server: python -m app.main
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
