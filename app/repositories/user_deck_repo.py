import logging
from asyncpg import Connection, PostgresError

from app.models.deck import UserDeck

logger = logging.getLogger(__name__)


class UserDeckRepository:

    def __init__(self, conn: Connection):
        self.conn = conn

    async def add_user_deck(self, user_deck: UserDeck) -> bool:
        sql = """
            INSERT INTO user_decks (user_id, deck_id)
            VALUES ($1, $2)
            RETURNING added_at;
        """
        try:
            record = await self.conn.fetchrow(sql, user_deck.user_id, user_deck.deck_id)
        except PostgresError as e:
            logger.error(
                f"Failed to link user {user_deck.user_id} to deck {user_deck.deck_id}: {e}"
            )
            return False
        user_deck.added_at = record["added_at"]
        return True

