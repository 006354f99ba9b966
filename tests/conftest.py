from collections.abc import Callable
from typing import Any

import pytest

from deckrules.models.card import CardRecord
from deckrules.models.deck import DeckEntry

CardFactory = Callable[..., CardRecord]


def make_card(name: str, **fields: Any) -> CardRecord:
    """Build a CardRecord keyed by a slug of its name."""
    card_id = fields.pop("id", name.lower().replace(" ", "-").replace(",", ""))
    return CardRecord(id=card_id, name=name, **fields)


@pytest.fixture
def card_factory() -> CardFactory:
    return make_card


@pytest.fixture
def atraxa() -> CardRecord:
    return make_card(
        "Atraxa, Praetors' Voice",
        type_line="Legendary Creature — Phyrexian Angel Horror",
        mana_cost="{G}{W}{U}{B}",
        cmc=4,
        colors=["W", "U", "B", "G"],
        color_identity=["W", "U", "B", "G"],
        keywords=["Flying", "Vigilance", "Deathtouch", "Lifelink", "Proliferate"],
        oracle_text=(
            "Flying, vigilance, deathtouch, lifelink\n"
            "At the beginning of your end step, proliferate."
        ),
        rarity="mythic",
    )


@pytest.fixture
def card_db() -> dict[str, CardRecord]:
    """Small card lookup keyed by card id."""
    cards = [
        make_card(
            "Sol Ring",
            type_line="Artifact",
            mana_cost="{1}",
            cmc=1,
            oracle_text="{T}: Add {C}{C}.",
            tags=["ramp", "fast-mana"],
        ),
        make_card(
            "Lightning Bolt",
            type_line="Instant",
            mana_cost="{R}",
            cmc=1,
            colors=["R"],
            color_identity=["R"],
            oracle_text="Lightning Bolt deals 3 damage to any target.",
            tags=["removal-spot"],
        ),
        make_card(
            "Counterspell",
            type_line="Instant",
            mana_cost="{U}{U}",
            cmc=2,
            colors=["U"],
            color_identity=["U"],
            oracle_text="Counter target spell.",
            tags=["counterspell"],
        ),
        make_card(
            "Llanowar Elves",
            type_line="Creature — Elf Druid",
            mana_cost="{G}",
            cmc=1,
            colors=["G"],
            color_identity=["G"],
            oracle_text="{T}: Add {G}.",
            tags=["ramp"],
        ),
        make_card(
            "Forest",
            type_line="Basic Land — Forest",
            color_identity=["G"],
            oracle_text="({T}: Add {G}.)",
        ),
    ]
    return {card.id: card for card in cards}


@pytest.fixture
def sample_entries() -> list[DeckEntry]:
    return [
        DeckEntry(card_id="sol-ring"),
        DeckEntry(card_id="lightning-bolt"),
        DeckEntry(card_id="counterspell"),
        DeckEntry(card_id="llanowar-elves"),
        DeckEntry(card_id="forest", quantity=10),
    ]
