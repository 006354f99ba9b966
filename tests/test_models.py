"""Tests for card and deck models."""

import pytest
from pydantic import ValidationError

from deckrules.models.card import CardRecord, normalize_colors
from deckrules.models.deck import Deck, DeckEntry, InvalidDeckEntryError
from deckrules.models.tags import DeckTag, TagCategory


class TestCardRecord:
    def test_defaults(self) -> None:
        card = CardRecord(id="bears", name="Grizzly Bears")
        assert card.type_line == ""
        assert card.oracle_text == ""
        assert card.cmc == 0
        assert card.colors == ()
        assert card.tags == frozenset()
        assert card.rarity == "common"

    def test_colors_are_normalized(self) -> None:
        card = CardRecord(id="x", name="X", colors="gw", color_identity=["u", "W"])
        assert card.colors == ("W", "G")
        assert card.color_identity == ("W", "U")

    def test_tags_are_lowercased(self) -> None:
        card = CardRecord(id="x", name="X", tags=["Ramp", "DRAW"])
        assert card.tags == frozenset({"ramp", "draw"})

    def test_is_frozen(self) -> None:
        card = CardRecord(id="x", name="X")
        with pytest.raises(ValidationError):
            card.name = "Y"

    def test_type_helpers(self) -> None:
        card = CardRecord(
            id="dryad", name="Dryad Arbor", type_line="Land Creature — Forest Dryad"
        )
        assert card.is_land
        assert card.is_creature
        assert card.has_type("FOREST")
        assert not card.has_type("artifact")

    def test_normalize_colors_none(self) -> None:
        assert normalize_colors(None) == ()


class TestDeckEntry:
    def test_default_quantity(self) -> None:
        assert DeckEntry("opt").quantity == 1

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_rejects_non_positive_quantity(self, quantity: int) -> None:
        with pytest.raises(InvalidDeckEntryError) as exc_info:
            DeckEntry("opt", quantity)
        assert exc_info.value.card_id == "opt"
        assert exc_info.value.quantity == quantity

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            DeckEntry("opt", 0)


class TestDeck:
    def test_boards(self) -> None:
        deck = Deck(
            entries=[
                DeckEntry("atraxa", is_commander=True),
                DeckEntry("forest", 30),
                DeckEntry("negate", 2, is_sideboard=True),
            ]
        )
        assert [entry.card_id for entry in deck.mainboard()] == ["atraxa", "forest"]
        assert [entry.card_id for entry in deck.sideboard()] == ["negate"]
        assert deck.total_cards() == 33

    def test_commander_from_flag(self) -> None:
        deck = Deck(entries=[DeckEntry("forest", 30), DeckEntry("atraxa", is_commander=True)])
        commander = deck.commander_entry()
        assert commander is not None
        assert commander.card_id == "atraxa"

    def test_explicit_commander_id_wins(self) -> None:
        deck = Deck(
            entries=[DeckEntry("atraxa", is_commander=True), DeckEntry("kenrith")],
            commander_id="kenrith",
        )
        commander = deck.commander_entry()
        assert commander is not None
        assert commander.card_id == "kenrith"

    def test_commander_id_not_in_entries(self) -> None:
        deck = Deck(entries=[DeckEntry("forest", 30)], commander_id="atraxa")
        assert deck.commander_entry() == DeckEntry("atraxa", is_commander=True)

    def test_no_commander(self) -> None:
        assert Deck(entries=[DeckEntry("forest", 20)], format="standard").commander_entry() is None


class TestDeckTag:
    def test_to_dict(self) -> None:
        tag = DeckTag("Elf Tribal", TagCategory.THEME, 0.9)
        assert tag.to_dict() == {"name": "Elf Tribal", "category": "theme", "confidence": 0.9}
