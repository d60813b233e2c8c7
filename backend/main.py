import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import CORS_ORIGINS, LOG_LEVEL
from database import init_db
from routers import hdhr, health, lineups
from services.errors import (
    CollaboratorError,
    LineupNotFoundError,
    LineupValidationError,
    StorageError,
)


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup: Initialize the database
    init_db()
    logger.info("Database initialized")
    yield
    # Shutdown: Cleanup if needed


app = FastAPI(
    title="Lineup API",
    description="Virtual HDHomeRun lineups and their discovery documents",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LineupNotFoundError)
async def lineup_not_found_handler(request: Request, exc: LineupNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


@app.exception_handler(LineupValidationError)
async def lineup_validation_handler(request: Request, exc: LineupValidationError):
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"detail": exc.message})


@app.exception_handler(CollaboratorError)
async def collaborator_error_handler(request: Request, exc: CollaboratorError):
    logger.error("Channel lookup failed during %s", exc.operation, exc_info=exc)
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": exc.message})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error("Storage failure during %s", exc.operation, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": exc.message},
    )


# Include routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(lineups.router, prefix="/api/v1/lineups", tags=["lineups"])
app.include_router(hdhr.router, prefix="/lineup", tags=["hdhr"])
app.include_router(hdhr.advertised_router, tags=["hdhr"])


@app.get("/")
async def root():
    return {"message": "Welcome to Lineup API"}
