"""
Analyze a deck from JSON files.

Usage:
    python -m deckrules.jobs.analyze_deck cards.json deck.json

cards.json holds an array of Scryfall-shaped card objects; deck.json holds a
deck description (see deckrules.parsers.deck_list). The combined analysis is
printed as JSON.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from deckrules.config import settings
from deckrules.parsers.card_records import load_card_lookup
from deckrules.parsers.deck_list import load_deck
from deckrules.services.deck_analyzer import analyze_deck

logger = logging.getLogger(__name__)


def run_analysis(cards_path: Path, deck_path: Path, key: str = "id") -> dict:
    """
    Load card data and a deck, then analyze the deck.

    Args:
        cards_path: JSON array of card objects
        deck_path: JSON deck description
        key: Card field deck entries refer to ("id" or "name")

    Returns:
        Analysis as a JSON-serializable dict
    """
    logger.info("Loading card data from %s", cards_path)
    card_data = load_card_lookup(cards_path, key=key)
    logger.info("Loaded %d cards", len(card_data))

    deck = load_deck(deck_path)
    analysis = analyze_deck(deck, card_data, settings)
    return analysis.to_dict()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Analyze a deck's tags, power and legality.")
    parser.add_argument("cards", type=Path, help="JSON array of card objects")
    parser.add_argument("deck", type=Path, help="JSON deck description")
    parser.add_argument(
        "--key",
        choices=["id", "name"],
        default="id",
        help="Card field the deck's card_id values refer to",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        result = run_analysis(args.cards, args.deck, key=args.key)
    except (OSError, KeyError, ValueError) as e:
        logger.error("Failed to analyze deck: %s", e)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
