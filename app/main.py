from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from app.api.v1 import routers
import logging
from app.core.config import settings
from app.core.exceptions import EntityValidationException
from app.db.session import connect_db_pool, close_db_pool

logging.basicConfig(level=settings.LOG_LEVEL)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await connect_db_pool()
    yield
    await close_db_pool()

app = FastAPI(
    title="aiKart Deck API",
    description="Decks of flashcards: list, fetch, create, update and delete.",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(routers.router)


@app.exception_handler(EntityValidationException)
async def entity_validation_handler(request: Request, exc: EntityValidationException):
    logger.warning(f"Validation failed for {type(exc.entity).__name__}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unknown error occurred."},
    )


@app.get("/")
async def root():
    return {"message": "Welcome to aiKart Deck API"}
