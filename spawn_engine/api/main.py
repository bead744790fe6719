"""FastAPI main application."""

import logging
from typing import Optional

import structlog
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..config import settings
from ..core.allocator import SpawnAllocator
from ..core.errors import GameEngineError
from ..core.models import SpawnAllocation, SpawnRequest, SpawnReservation, WireModel
from ..core.options import SpawnOptions
from ..db.connection import db
from ..db.queries import SqlSpawnStore


def configure_logging(level: str = settings.log_level, fmt: str = settings.log_format):
    """Route structlog through stdlib logging with JSON or console output."""
    logging.basicConfig(format="%(message)s", level=level.upper())
    renderer = (
        structlog.dev.ConsoleRenderer()
        if fmt == "console"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure logging
configure_logging()

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Spawn Location API",
    description="Spawn location allocation for new and relocating player bases",
    version="0.1.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.allowed_origins.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Response models
class SpawnAllocationData(SpawnAllocation):
    """Allocated spawn location plus a status message."""

    message: str = "Optimal spawn location calculated"


class SpawnAllocationResponse(BaseModel):
    """Envelope for a successful allocation."""

    success: bool = True
    data: SpawnAllocationData


class ReservationResponse(BaseModel):
    """Envelope for a reservation lookup."""

    success: bool = True
    data: SpawnReservation


class ErrorBody(WireModel):
    code: str
    message: str
    details: dict = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    success: bool = False
    error: ErrorBody


# Dependencies
def get_allocator() -> SpawnAllocator:
    """Allocator wired to the relational store."""
    return SpawnAllocator(SqlSpawnStore(db), SpawnOptions.from_settings(settings))


# Error handlers
@app.exception_handler(GameEngineError)
async def game_engine_error_handler(request: Request, exc: GameEngineError):
    logger.error("Request failed", path=request.url.path, code=exc.code, error=exc.message)
    body = ErrorResponse(error=ErrorBody(**exc.to_dict()))
    return JSONResponse(status_code=500, content=body.model_dump(by_alias=True))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Invalid request", path=request.url.path, errors=len(exc.errors()))
    body = ErrorResponse(
        error=ErrorBody(
            code="VALIDATION_ERROR",
            message="Invalid request format",
            details={"errors": [
                {"loc": list(e.get("loc", ())), "msg": e.get("msg", "")}
                for e in exc.errors()
            ]},
        )
    )
    return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))


# Event handlers
@app.on_event("startup")
async def startup_event():
    """Initialize database on startup."""
    logger.info("Starting Spawn Location API")
    if not db.initialized:
        db.initialize()
    logger.info("API startup complete")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown."""
    logger.info("Shutting down Spawn Location API")
    db.dispose()


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Spawn Location API",
        "version": "0.1.0",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    try:
        db.ping()
        return {"status": "healthy", "database": "connected"}
    except Exception as e:
        logger.error("Health check failed", error=str(e))
        raise HTTPException(status_code=503, detail="Service unhealthy")


@app.post(
    "/spawn-locations/calculate",
    response_model=SpawnAllocationResponse,
    response_model_by_alias=True,
)
async def calculate_spawn_location(
    request: SpawnRequest, allocator: SpawnAllocator = Depends(get_allocator)
):
    """
    Calculate a spawn location for a player and reserve it.

    The reservation is advisory and expires after ``validFor`` seconds.
    """
    allocation = await allocator.allocate(request)
    return SpawnAllocationResponse(
        data=SpawnAllocationData(
            spawn_location=allocation.spawn_location,
            valid_for=allocation.valid_for,
        )
    )


@app.get(
    "/spawn-locations/{spawn_location_id}",
    response_model=ReservationResponse,
    response_model_by_alias=True,
)
async def get_spawn_reservation(
    spawn_location_id: str, allocator: SpawnAllocator = Depends(get_allocator)
):
    """Get the unexpired reservation behind a spawn location offer."""
    reservation: Optional[SpawnReservation] = await allocator.reservations.lookup(
        spawn_location_id
    )
    if reservation is None:
        raise HTTPException(status_code=404, detail="Spawn location not available")
    return ReservationResponse(data=reservation)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
