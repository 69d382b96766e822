# app/db/seed.py
import asyncio
import logging
import random

from faker import Faker
from tqdm import tqdm

from app.db.session import connect_db_pool, get_pool, close_db_pool

logger = logging.getLogger(__name__)

fake = Faker()

NUM_USERS = 20
NUM_DECKS = 200
MIN_CARDS_PER_DECK = 5
MAX_CARDS_PER_DECK = 40
BATCH_CARDS = 2000


async def insert_deck(conn, name: str, description: str, is_public: bool, creator_id: int) -> int:
    sql = """
    INSERT INTO decks (name, description, is_public, creator_id)
    VALUES ($1, $2, $3, $4)
    RETURNING id;
    """
    rec = await conn.fetchrow(sql, name, description, is_public, creator_id)
    return rec["id"]


async def link_user_deck(conn, user_id: int, deck_id: int):
    sql = "INSERT INTO user_decks (user_id, deck_id) VALUES ($1, $2);"
    await conn.execute(sql, user_id, deck_id)


def unique_deck_name(taken: set[str]) -> str:
    while True:
        name = " ".join(fake.words(nb=random.randint(2, 4))).title()
        if name not in taken:
            taken.add(name)
            return name


async def seed():
    await connect_db_pool()
    pool = await get_pool()
    if pool is None:
        raise RuntimeError("Database pool could not be initialized")

    async with pool.acquire() as conn:
        logger.info("Creating decks...")
        user_ids = list(range(1, NUM_USERS + 1))
        taken: set[str] = set()
        deck_ids = []

        for _ in range(NUM_DECKS):
            creator_id = random.choice(user_ids)
            deck_id = await insert_deck(
                conn,
                unique_deck_name(taken),
                fake.sentence(nb_words=8),
                random.random() < 0.5,
                creator_id,
            )
            await link_user_deck(conn, creator_id, deck_id)
            deck_ids.append(deck_id)

        if not deck_ids:
            raise RuntimeError("No decks created, aborting seed")

        logger.info("Creating cards...")
        card_sql = "INSERT INTO cards (deck_id, question, answer) VALUES ($1, $2, $3)"
        card_batch = []

        for deck_id in tqdm(deck_ids, desc="Generating cards"):
            for _ in range(random.randint(MIN_CARDS_PER_DECK, MAX_CARDS_PER_DECK)):
                question = fake.sentence(nb_words=random.randint(5, 12)).rstrip(".") + "?"
                card_batch.append((deck_id, question, fake.sentence(nb_words=6)))

            if len(card_batch) >= BATCH_CARDS:
                await conn.executemany(card_sql, card_batch)
                card_batch.clear()

        if card_batch:
            await conn.executemany(card_sql, card_batch)

        logger.info("Seed complete.")

    await close_db_pool()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())
