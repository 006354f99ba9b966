from dataclasses import dataclass, field


class InvalidDeckEntryError(ValueError):
    """Raised when a deck entry has a non-positive quantity."""

    def __init__(self, card_id: str, quantity: int) -> None:
        self.card_id = card_id
        self.quantity = quantity
        super().__init__(f"Invalid quantity {quantity} for '{card_id}': must be at least 1")


@dataclass(frozen=True, slots=True)
class DeckEntry:
    """
    One line of a deck list.

    Attributes:
        card_id: Key into the card-data lookup
        quantity: Number of copies (always >= 1)
        is_commander: True for the deck's commander
        is_sideboard: True for sideboard cards
    """

    card_id: str
    quantity: int = 1
    is_commander: bool = False
    is_sideboard: bool = False

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise InvalidDeckEntryError(self.card_id, self.quantity)


@dataclass
class Deck:
    """
    An ordered deck list.

    Attributes:
        entries: Deck entries in list order
        format: Format name (e.g., "commander", "standard")
        commander_id: Card id of the commander, if any
        name: Deck name
    """

    entries: list[DeckEntry] = field(default_factory=list)
    format: str = "commander"
    commander_id: str | None = None
    name: str = ""

    def mainboard(self) -> list[DeckEntry]:
        """Entries outside the sideboard, commander included."""
        return [entry for entry in self.entries if not entry.is_sideboard]

    def sideboard(self) -> list[DeckEntry]:
        return [entry for entry in self.entries if entry.is_sideboard]

    def commander_entry(self) -> DeckEntry | None:
        """The commander's entry: explicit commander_id first, then the is_commander flag."""
        if self.commander_id is not None:
            for entry in self.entries:
                if entry.card_id == self.commander_id:
                    return entry
            return DeckEntry(card_id=self.commander_id, is_commander=True)

        for entry in self.entries:
            if entry.is_commander:
                return entry
        return None

    def total_cards(self) -> int:
        """Total number of cards (counting quantities)."""
        return sum(entry.quantity for entry in self.entries)
