# app/api/v1/routers.py
from fastapi import APIRouter
from app.core.config import settings
from app.api.v1.endpoints import decks

router = APIRouter(prefix=settings.API_PREFIX)

router.include_router(decks.router)
