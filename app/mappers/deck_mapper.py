# app/mappers/deck_mapper.py
"""Conversions between the API schemas and the domain dataclasses."""

from datetime import datetime, timezone
from typing import Iterable, List

from app.models.deck import Card, Deck
from app.schemas.card_schema import CardOut
from app.schemas.deck_schema import AddDeckIn, DeckOut, UpdateDeckIn

# columns that cannot be cleared through an update payload
_REQUIRED_FIELDS = {"name", "is_public"}


def card_to_out(card: Card) -> CardOut:
    return CardOut(
        id=card.id,
        deck_id=card.deck_id,
        question=card.question,
        answer=card.answer,
        created_at=card.created_at,
    )


def cards_to_out(cards: Iterable[Card]) -> List[CardOut]:
    return [card_to_out(card) for card in cards]


def deck_to_out(deck: Deck) -> DeckOut:
    return DeckOut(
        id=deck.id,
        name=deck.name,
        description=deck.description,
        is_public=deck.is_public,
        creator_id=deck.creator_id,
        created_at=deck.created_at,
        last_edited=deck.last_edited,
        cards=cards_to_out(deck.cards),
    )


def decks_to_out(decks: Iterable[Deck]) -> List[DeckOut]:
    return [deck_to_out(deck) for deck in decks]


def add_in_to_deck(body: AddDeckIn) -> Deck:
    return Deck(
        id=None,
        name=body.name,
        description=body.description,
        is_public=body.is_public,
        creator_id=body.creator_id,
    )


def apply_update(body: UpdateDeckIn, deck: Deck) -> Deck:
    """Copy the fields the client actually sent onto ``deck``.

    Fields left out of the payload keep their current value. ``last_edited``
    is stamped only when something changed.
    """
    changes = body.model_dump(exclude_unset=True)
    changed = False
    for field_name, value in changes.items():
        if value is None and field_name in _REQUIRED_FIELDS:
            continue
        if getattr(deck, field_name) != value:
            setattr(deck, field_name, value)
            changed = True
    if changed:
        deck.last_edited = datetime.now(timezone.utc)
    return deck
