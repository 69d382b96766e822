import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from app.api.v1.deps import get_deck_logger, get_deck_service, get_user_deck_service
from app.core.exceptions import DeckNotFoundException, EntityValidationException, PersistenceException
from app.mappers.deck_mapper import (
    add_in_to_deck,
    apply_update,
    cards_to_out,
    deck_to_out,
    decks_to_out,
)
from app.models.deck import UserDeck
from app.schemas.card_schema import CardOut
from app.schemas.deck_schema import AddDeckIn, DeckOut, UpdateDeckIn
from app.services.deck_service import DeckService
from app.services.user_deck_service import UserDeckService

router = APIRouter(prefix="/decks", tags=["decks"])


@router.get("/", response_model=List[DeckOut])
async def get_all_decks(deck_service: DeckService = Depends(get_deck_service)):
    decks = await deck_service.get_all_decks_including_cards()
    return decks_to_out(decks)


@router.get("/cardlist/{deck_id}", response_model=List[CardOut])
async def get_cards_in_deck(deck_id: int, deck_service: DeckService = Depends(get_deck_service)):
    if not await deck_service.deck_exists_by_id(deck_id):
        raise DeckNotFoundException()

    cards = await deck_service.get_cards_in_deck(deck_id)
    return cards_to_out(cards)


@router.get("/{deck_id}", response_model=DeckOut)
async def get_deck(deck_id: int, deck_service: DeckService = Depends(get_deck_service)):
    if not await deck_service.deck_exists_by_id(deck_id):
        raise DeckNotFoundException()

    deck = await deck_service.get_deck_by_id(deck_id)
    if deck is None:
        raise DeckNotFoundException()

    return deck_to_out(deck)


@router.post("/", response_model=DeckOut, status_code=status.HTTP_201_CREATED)
async def add_deck(
        request: Request,
        response: Response,
        body: Optional[AddDeckIn] = Body(None),
        deck_service: DeckService = Depends(get_deck_service),
        user_deck_service: UserDeckService = Depends(get_user_deck_service),
        logger: logging.Logger = Depends(get_deck_logger),
):
    if body is None:
        logger.error("Deck data was not provided")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                            detail="Deck data must be provided.")

    deck = add_in_to_deck(body)

    if not deck.name or not deck.name.strip():
        raise EntityValidationException(deck, "Deck name must not be empty.")

    if await deck_service.deck_exists_by_name(deck.name):
        raise EntityValidationException(deck, f"Deck with name: {deck.name} already exists")

    if not await deck_service.add_deck(deck):
        raise PersistenceException("Something went wrong while saving the deck")

    user_deck = UserDeck(user_id=body.creator_id, deck_id=deck.id)
    if not await user_deck_service.add_user_deck(user_deck):
        logger.error(f"Linking deck {deck.id} to user {body.creator_id} failed, removing the deck")
        await deck_service.delete_deck(deck)
        raise PersistenceException("Something went wrong linking the deck to its creator")

    response.headers["Location"] = str(request.url_for("get_deck", deck_id=deck.id))
    return deck_to_out(deck)


@router.put("/{deck_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_deck(
        deck_id: int,
        body: Optional[UpdateDeckIn] = Body(None),
        deck_service: DeckService = Depends(get_deck_service),
):
    if body is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                            detail="Update data must be provided.")

    if not await deck_service.deck_exists_by_id(deck_id):
        raise DeckNotFoundException()

    deck = await deck_service.get_deck_by_id(deck_id)
    if deck is None:
        raise DeckNotFoundException()

    apply_update(body, deck)

    if not await deck_service.update_deck(deck):
        raise PersistenceException("Something went wrong updating deck")

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{deck_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_deck(deck_id: int, deck_service: DeckService = Depends(get_deck_service)):
    if not await deck_service.deck_exists_by_id(deck_id):
        raise DeckNotFoundException()

    deck_to_delete = await deck_service.get_deck_by_id(deck_id)
    if deck_to_delete is None:
        raise DeckNotFoundException()

    if not await deck_service.delete_deck(deck_to_delete):
        raise PersistenceException("Something went wrong while deleting the deck")

    return Response(status_code=status.HTTP_204_NO_CONTENT)
