"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import get_settings
from app.routers import health_router, logs_router
from app.services import LogStore, sample_logs

# Configure logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Environment: {'DEBUG' if settings.debug else 'PRODUCTION'}")
    logger.info(f"Log store holds {len(app.state.log_store)} entries")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}...")


def create_app(store: Optional[LogStore] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The log store is owned by the application instance (``app.state``) and
    handed to request handlers through the ``get_log_store`` dependency.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="""
        ## Log Management System API

        In-memory log entries with create, update and delete.

        ### Endpoints:
        - **GET /api/logs**: list every entry
        - **POST /api/logs**: create an entry (`owner`, `logText`)
        - **PUT /api/logs/{id}**: partial update
        - **DELETE /api/logs/{id}**: remove an entry
        """,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json"
    )

    if store is None:
        store = LogStore(sample_logs() if settings.seed_sample_logs else None)
    app.state.log_store = store

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(logs_router)

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "error": str(exc)}
        )

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
