"""
Pytest configuration and fixtures.

The API is exercised against in-memory repositories injected through
``app.dependency_overrides`` so no database is needed.
"""

import copy
from datetime import datetime, timezone
from typing import Dict, List, Optional, Set

import pytest
from fastapi.testclient import TestClient

from app.api.v1.deps import get_deck_repo, get_user_deck_repo
from app.main import app as fastapi_app
from app.models.deck import Card, Deck, UserDeck


class InMemoryDeckRepository:
    """DeckRepositoryProtocol backed by a dict."""

    def __init__(self):
        self.decks: Dict[int, Deck] = {}
        self.cards: Dict[int, List[Card]] = {}
        self._next_id = 1
        self.fail_writes = False
        # ids that pass the existence check but disappear before the fetch
        self.vanishing_ids: Set[int] = set()
        self.saves = 0

    def seed(self, name: str, cards: Optional[List[tuple]] = None, **fields) -> Deck:
        deck = Deck(id=self._next_id, name=name, created_at=datetime.now(timezone.utc), **fields)
        self._next_id += 1
        self.decks[deck.id] = deck
        self.cards[deck.id] = [
            Card(id=i, deck_id=deck.id, question=q, answer=a)
            for i, (q, a) in enumerate(cards or [], start=1)
        ]
        return copy.deepcopy(deck)

    async def get_decks(self) -> List[Deck]:
        return [await self.get_deck(deck_id) for deck_id in sorted(self.decks)]

    async def get_deck_cards(self, deck_id: int) -> List[Card]:
        return copy.deepcopy(self.cards.get(deck_id, []))

    async def get_deck(self, deck_id: int) -> Optional[Deck]:
        if deck_id in self.vanishing_ids or deck_id not in self.decks:
            return None
        deck = copy.deepcopy(self.decks[deck_id])
        deck.cards = await self.get_deck_cards(deck_id)
        return deck

    async def deck_exists_by_id(self, deck_id: int) -> bool:
        return deck_id in self.decks

    async def deck_exists_by_name(self, name: str) -> bool:
        return any(d.name == name for d in self.decks.values())

    async def add_deck(self, deck: Deck) -> bool:
        if self.fail_writes:
            return False
        deck.id = self._next_id
        deck.created_at = datetime.now(timezone.utc)
        self._next_id += 1
        self.decks[deck.id] = copy.deepcopy(deck)
        self.cards[deck.id] = []
        return await self.save()

    async def delete_deck(self, deck: Deck) -> bool:
        if self.fail_writes:
            return False
        self.decks.pop(deck.id, None)
        self.cards.pop(deck.id, None)
        return await self.save()

    async def update_deck(self, deck: Deck) -> bool:
        if self.fail_writes:
            return False
        stored = copy.deepcopy(deck)
        stored.cards = []
        self.decks[deck.id] = stored
        return await self.save()

    async def save(self) -> bool:
        self.saves += 1
        return True


class InMemoryUserDeckRepository:

    def __init__(self):
        self.links: List[UserDeck] = []

    async def add_user_deck(self, user_deck: UserDeck) -> bool:
        user_deck.added_at = datetime.now(timezone.utc)
        self.links.append(user_deck)
        return True


@pytest.fixture
def deck_repo():
    return InMemoryDeckRepository()


@pytest.fixture
def user_deck_repo():
    return InMemoryUserDeckRepository()


@pytest.fixture
def app(deck_repo, user_deck_repo):
    """FastAPI application wired to the in-memory repositories."""
    fastapi_app.dependency_overrides[get_deck_repo] = lambda: deck_repo
    fastapi_app.dependency_overrides[get_user_deck_repo] = lambda: user_deck_repo
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Test client; the lifespan (database pool) is not started."""
    return TestClient(app)
