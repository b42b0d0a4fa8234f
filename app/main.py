from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import os
from dotenv import load_dotenv

# Load .env variables
load_dotenv()

# Configure base logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger("app")

from app.routers import (
    auth,
    players,
    courts,
    opening_hours,
    schedule,
    matches,
    time_slot_requests,
)
from app.database import engine, Base, SessionLocal
from app.exceptions import SchedulingError
from app.init_db import create_initial_admin, seed_default_data
from app import models  # noqa: F401
import uvicorn


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables
    Base.metadata.create_all(bind=engine)

    logger.info("Initializing database with initial admin...")
    db = SessionLocal()
    try:
        create_initial_admin(db)
        if os.getenv("SEED_DEFAULT_DATA", "true").lower() in {"1", "true", "yes"}:
            seed_default_data(db)
    finally:
        db.close()
    yield


app = FastAPI(
    title="Padel Club API",
    description="API for booking padel courts and organizing matches at the club",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, replace with specific origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router, prefix="/auth", tags=["authentication"])
app.include_router(players.router, prefix="/players", tags=["players"])
app.include_router(courts.router, prefix="/courts", tags=["courts"])
app.include_router(
    opening_hours.router, prefix="/opening-hours", tags=["opening-hours"]
)
app.include_router(schedule.router, prefix="/schedule", tags=["schedule"])
app.include_router(matches.router, prefix="/matches", tags=["matches"])
app.include_router(
    time_slot_requests.router, prefix="/time-slot-requests", tags=["time-slot-requests"]
)


@app.get("/")
def read_root():
    return {"message": "Welcome to Padel Club API"}


@app.exception_handler(SchedulingError)
async def scheduling_error_handler(request: Request, exc: SchedulingError):
    logger.info(
        "Rejected | path=%s | method=%s | error=%s | detail=%s",
        request.url.path,
        request.method,
        exc.kind,
        exc.detail,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "error": exc.kind},
    )


# Global unhandled exception handler -> logs ERROR
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled error | path=%s | method=%s | client=%s",
        request.url.path,
        request.method,
        request.client.host if request.client else "unknown",
    )
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=5009, reload=True)
