# app/models/deck.py

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class Card:
    id: Optional[int]
    deck_id: int
    question: str
    answer: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, record) -> "Card":
        return cls(
            id=record["id"],
            deck_id=record["deck_id"],
            question=record["question"],
            answer=record["answer"],
            created_at=record["created_at"],
        )


@dataclass
class Deck:
    id: Optional[int]
    name: str
    description: Optional[str] = None
    is_public: bool = False
    creator_id: Optional[int] = None
    created_at: Optional[datetime] = None
    last_edited: Optional[datetime] = None
    cards: list[Card] = field(default_factory=list)

    @classmethod
    def from_record(cls, record, cards: Optional[list[Card]] = None) -> "Deck":
        return cls(
            id=record["id"],
            name=record["name"],
            description=record["description"],
            is_public=record["is_public"],
            creator_id=record["creator_id"],
            created_at=record["created_at"],
            last_edited=record["last_edited"],
            cards=cards or [],
        )


@dataclass
class UserDeck:
    user_id: int
    deck_id: int
    added_at: Optional[datetime] = None
