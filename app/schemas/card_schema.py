# app/schemas/card_schema.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class CardOut(BaseModel):
    """Card as returned by the API."""
    id: int
    deck_id: int
    question: str
    answer: str
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }
