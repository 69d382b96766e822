# app/services/deck_service.py

import logging
from typing import Callable, Iterable, List, Optional

from app.models.deck import Card, Deck
from app.repositories.deck_repo import DeckRepositoryProtocol

DeckListener = Callable[[Deck], None]


def log_deck_event(logger: logging.Logger, action: str) -> DeckListener:
    """Build a listener that records the id of the affected deck."""
    def _listener(deck: Deck) -> None:
        logger.info(f"Deck {action} with ID: {deck.id}")
    return _listener


class DeckService:
    def __init__(
        self,
        deck_repo: DeckRepositoryProtocol,
        on_created: Optional[Iterable[DeckListener]] = None,
        on_updated: Optional[Iterable[DeckListener]] = None,
    ):
        self.deck_repo = deck_repo
        self.on_created: List[DeckListener] = list(on_created or [])
        self.on_updated: List[DeckListener] = list(on_updated or [])

    async def get_all_decks_including_cards(self) -> List[Deck]:
        return await self.deck_repo.get_decks()

    async def get_deck_by_id(self, deck_id: int) -> Optional[Deck]:
        return await self.deck_repo.get_deck(deck_id)

    async def get_cards_in_deck(self, deck_id: int) -> List[Card]:
        return await self.deck_repo.get_deck_cards(deck_id)

    async def deck_exists_by_id(self, deck_id: int) -> bool:
        return await self.deck_repo.deck_exists_by_id(deck_id)

    async def deck_exists_by_name(self, name: str) -> bool:
        return await self.deck_repo.deck_exists_by_name(name)

    async def add_deck(self, deck: Deck) -> bool:
        added = await self.deck_repo.add_deck(deck)
        if added:
            self._notify(self.on_created, deck)
        return added

    async def update_deck(self, deck: Deck) -> bool:
        updated = await self.deck_repo.update_deck(deck)
        if updated:
            self._notify(self.on_updated, deck)
        return updated

    async def delete_deck(self, deck: Deck) -> bool:
        return await self.deck_repo.delete_deck(deck)

    @staticmethod
    def _notify(listeners: List[DeckListener], deck: Deck) -> None:
        for listener in listeners:
            listener(deck)
