import logging
from typing import List, Optional, Protocol

from asyncpg import Connection, PostgresError
from asyncpg.transaction import Transaction

from app.models.deck import Card, Deck

logger = logging.getLogger(__name__)


class DeckRepositoryProtocol(Protocol):
    """Persistence contract for decks and the cards they hold."""

    async def get_decks(self) -> List[Deck]:
        """All decks, each with its cards loaded."""
        ...

    async def get_deck_cards(self, deck_id: int) -> List[Card]:
        ...

    async def get_deck(self, deck_id: int) -> Optional[Deck]:
        ...

    async def deck_exists_by_id(self, deck_id: int) -> bool:
        ...

    async def deck_exists_by_name(self, name: str) -> bool:
        ...

    async def add_deck(self, deck: Deck) -> bool:
        """Insert ``deck`` and commit. Sets ``deck.id`` on success."""
        ...

    async def delete_deck(self, deck: Deck) -> bool:
        ...

    async def update_deck(self, deck: Deck) -> bool:
        ...

    async def save(self) -> bool:
        """Commit pending writes. Returns False if the commit failed."""
        ...


class DeckRepository:
    """asyncpg implementation of DeckRepositoryProtocol."""

    def __init__(self, conn: Connection):
        self.conn = conn
        self._tx: Transaction | None = None

    # ------------------ Retrieval Methods ------------------ #

    async def get_decks(self) -> List[Deck]:
        deck_rows = await self.conn.fetch("SELECT * FROM decks ORDER BY id;")
        card_rows = await self.conn.fetch("SELECT * FROM cards ORDER BY deck_id, id;")

        cards_by_deck: dict[int, List[Card]] = {}
        for row in card_rows:
            cards_by_deck.setdefault(row["deck_id"], []).append(Card.from_record(row))

        return [Deck.from_record(row, cards_by_deck.get(row["id"])) for row in deck_rows]

    async def get_deck_cards(self, deck_id: int) -> List[Card]:
        sql = "SELECT * FROM cards WHERE deck_id = $1 ORDER BY id;"
        records = await self.conn.fetch(sql, deck_id)
        return [Card.from_record(record) for record in records]

    async def get_deck(self, deck_id: int) -> Optional[Deck]:
        sql = "SELECT * FROM decks WHERE id = $1;"
        record = await self.conn.fetchrow(sql, deck_id)
        if not record:
            return None
        return Deck.from_record(record, await self.get_deck_cards(deck_id))

    async def deck_exists_by_id(self, deck_id: int) -> bool:
        sql = "SELECT EXISTS(SELECT 1 FROM decks WHERE id = $1);"
        return bool(await self.conn.fetchval(sql, deck_id))

    async def deck_exists_by_name(self, name: str) -> bool:
        sql = "SELECT EXISTS(SELECT 1 FROM decks WHERE name = $1);"
        return bool(await self.conn.fetchval(sql, name))

    # ------------------ Write Methods ------------------ #

    async def add_deck(self, deck: Deck) -> bool:
        sql = """
            INSERT INTO decks (name, description, is_public, creator_id)
            VALUES ($1, $2, $3, $4)
            RETURNING id, created_at;
        """
        await self._begin()
        try:
            record = await self.conn.fetchrow(
                sql, deck.name, deck.description, deck.is_public, deck.creator_id
            )
        except PostgresError as e:
            logger.error(f"Failed to insert deck {deck.name!r}: {e}")
            await self._rollback()
            return False

        if not await self.save():
            return False
        deck.id = record["id"]
        deck.created_at = record["created_at"]
        return True

    async def update_deck(self, deck: Deck) -> bool:
        sql = """
            UPDATE decks
            SET name = $1, description = $2, is_public = $3, last_edited = $4
            WHERE id = $5;
        """
        await self._begin()
        try:
            await self.conn.execute(
                sql, deck.name, deck.description, deck.is_public, deck.last_edited, deck.id
            )
        except PostgresError as e:
            logger.error(f"Failed to update deck {deck.id}: {e}")
            await self._rollback()
            return False
        return await self.save()

    async def delete_deck(self, deck: Deck) -> bool:
        await self._begin()
        try:
            await self.conn.execute("DELETE FROM decks WHERE id = $1;", deck.id)
        except PostgresError as e:
            logger.error(f"Failed to delete deck {deck.id}: {e}")
            await self._rollback()
            return False
        return await self.save()

    async def save(self) -> bool:
        if self._tx is None:
            return True
        tx, self._tx = self._tx, None
        try:
            await tx.commit()
        except PostgresError as e:
            logger.error(f"Commit failed: {e}")
            return False
        return True

    # ------------------ Transaction Helpers ------------------ #

    async def _begin(self) -> None:
        if self._tx is None:
            self._tx = self.conn.transaction()
            await self._tx.start()

    async def _rollback(self) -> None:
        if self._tx is not None:
            tx, self._tx = self._tx, None
            await tx.rollback()
