from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging
import uvicorn

from tennisclub import config
from tennisclub import models  # noqa: F401  registra los modelos en Base
from tennisclub.database import Base, SessionLocal, engine
from tennisclub.exceptions import TennisClubError
from tennisclub.init_db import create_initial_data
from tennisclub.routers import courts, reservations, surfaces, users

# Configure base logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger("tennisclub")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables
    Base.metadata.create_all(bind=engine)

    if config.APP_DATA_INIT:
        logger.info("Initializing database with demo surfaces and courts...")
        db = SessionLocal()
        try:
            create_initial_data(db)
        finally:
            db.close()

    yield


app = FastAPI(
    title="Tennis Club API",
    description="API for managing tennis courts, surfaces and reservations",
    version="1.0.0",
    lifespan=lifespan,
)

# Include routers
app.include_router(surfaces.router, prefix="/surfaces", tags=["surfaces"])
app.include_router(courts.router, prefix="/courts", tags=["courts"])
app.include_router(users.router, prefix="/users", tags=["users"])
app.include_router(reservations.router, prefix="/reservations", tags=["reservations"])


@app.get("/")
def read_root():
    return {"message": "Welcome to Tennis Club API"}


@app.exception_handler(TennisClubError)
async def tennis_club_error_handler(request: Request, exc: TennisClubError):
    logger.info(
        "Request rejected | path=%s | method=%s | status=%s | detail=%s",
        request.url.path,
        request.method,
        exc.status_code,
        exc.detail,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


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
    uvicorn.run("tennisclub.main:app", host="0.0.0.0", port=8080, reload=True)
