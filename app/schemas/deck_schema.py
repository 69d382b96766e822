# app/schemas/deck_schema.py

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field

from app.schemas.card_schema import CardOut


class AddDeckIn(BaseModel):
    name: str = Field(..., max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    is_public: bool = Field(False, alias="isPublic")
    creator_id: int = Field(..., alias="creatorId")

    model_config = {
        "populate_by_name": True
    }


class UpdateDeckIn(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    is_public: Optional[bool] = Field(None, alias="isPublic")

    model_config = {
        "populate_by_name": True
    }


class DeckOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    is_public: bool
    creator_id: Optional[int] = None
    created_at: Optional[datetime] = None
    last_edited: Optional[datetime] = None
    cards: List[CardOut] = []

    model_config = {
        "from_attributes": True
    }
