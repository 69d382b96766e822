import logging

import pytest

from app.models.deck import Deck, UserDeck
from app.services.deck_service import DeckService, log_deck_event
from app.services.user_deck_service import UserDeckService


@pytest.mark.asyncio
async def test_add_deck_notifies_created_listeners(deck_repo):
    seen = []
    service = DeckService(deck_repo, on_created=[seen.append])

    deck = Deck(id=None, name="Fresh")
    assert await service.add_deck(deck) is True

    assert seen == [deck]
    assert deck.id == 1


@pytest.mark.asyncio
async def test_failed_writes_do_not_notify(deck_repo):
    created, updated = [], []
    service = DeckService(deck_repo, on_created=[created.append], on_updated=[updated.append])
    deck_repo.fail_writes = True

    assert await service.add_deck(Deck(id=None, name="Nope")) is False
    assert await service.update_deck(Deck(id=1, name="Nope")) is False

    assert created == []
    assert updated == []


@pytest.mark.asyncio
async def test_update_notifies_every_listener_in_order(deck_repo):
    calls = []
    service = DeckService(
        deck_repo,
        on_updated=[lambda d: calls.append(("first", d.id)), lambda d: calls.append(("second", d.id))],
    )
    deck = deck_repo.seed("Ordered")

    await service.update_deck(deck)

    assert calls == [("first", deck.id), ("second", deck.id)]


@pytest.mark.asyncio
async def test_delete_does_not_notify(deck_repo):
    calls = []
    service = DeckService(deck_repo, on_created=[calls.append], on_updated=[calls.append])
    deck = deck_repo.seed("Quiet")

    assert await service.delete_deck(deck) is True
    assert calls == []
    assert not await service.deck_exists_by_id(deck.id)


@pytest.mark.asyncio
async def test_queries_pass_through_to_repository(deck_repo):
    service = DeckService(deck_repo)
    deck = deck_repo.seed("Geo", cards=[("Tallest mountain?", "Everest")])

    assert await service.deck_exists_by_name("Geo")
    assert not await service.deck_exists_by_name("geo")
    assert (await service.get_deck_by_id(deck.id)).name == "Geo"
    assert [c.answer for c in await service.get_cards_in_deck(deck.id)] == ["Everest"]
    assert len(await service.get_all_decks_including_cards()) == 1


def test_log_deck_event_records_id(caplog):
    logger = logging.getLogger("tests.decks")
    caplog.set_level(logging.INFO, logger="tests.decks")

    log_deck_event(logger, "created")(Deck(id=12, name="Logged"))

    assert "Deck created with ID: 12" in caplog.text


@pytest.mark.asyncio
async def test_user_deck_service_links_user(user_deck_repo):
    service = UserDeckService(user_deck_repo)

    assert await service.add_user_deck(UserDeck(user_id=4, deck_id=9)) is True
    assert [(l.user_id, l.deck_id) for l in user_deck_repo.links] == [(4, 9)]
