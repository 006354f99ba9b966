"""
Mana symbol and mana cost models.

A ManaCost is an ordered sequence of ManaSymbols parsed from a cost string
such as "{2}{W}{W/U}{X}". All numeric properties are derived from the symbols
on access; nothing is cached or mutated after construction.

Hybrid symbols are weighted differently depending on the question asked:
- color_requirements counts each half of a hybrid symbol as 0.5 ("what do I
  need to cast this")
- devotion_contribution counts each half as a full point ("how much does this
  permanent add to devotion")
Generic-hybrid symbols ({2/W}) count toward neither.
"""

from dataclasses import dataclass, field
from enum import Enum

COLORS: tuple[str, ...] = ("W", "U", "B", "R", "G")


class SymbolKind(str, Enum):
    """Kinds of mana symbol."""

    COLORED = "colored"  # {W}
    GENERIC = "generic"  # {3}
    COLORLESS = "colorless"  # {C}
    HYBRID = "hybrid"  # {W/U}
    GENERIC_HYBRID = "generic_hybrid"  # {2/W}
    PHYREXIAN = "phyrexian"  # {W/P}
    VARIABLE = "variable"  # {X}
    SPECIAL = "special"  # {S}, {E}, {T}, ...


@dataclass(frozen=True, slots=True)
class ManaSymbol:
    """
    One token from a mana cost string.

    Attributes:
        text: Symbol body without braces (e.g., "W/U", "2", "X")
        kind: Classification of the symbol
        colors: Color letters appearing in the symbol, in order of appearance
        generic: Numeric amount for generic and generic-hybrid symbols
    """

    text: str
    kind: SymbolKind
    colors: tuple[str, ...] = ()
    generic: int = 0

    @property
    def mana_value(self) -> int:
        """Contribution of this symbol to the mana value."""
        if self.kind == SymbolKind.GENERIC:
            return self.generic
        if self.kind == SymbolKind.GENERIC_HYBRID:
            return 2
        if self.kind in (
            SymbolKind.COLORED,
            SymbolKind.COLORLESS,
            SymbolKind.HYBRID,
            SymbolKind.PHYREXIAN,
        ):
            return 1
        return 0

    def __str__(self) -> str:
        return f"{{{self.text}}}"


@dataclass(frozen=True, slots=True)
class ManaCost:
    """
    A parsed mana cost.

    Attributes:
        symbols: Symbols in the order they appeared in the source string
    """

    symbols: tuple[ManaSymbol, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.symbols)

    def __str__(self) -> str:
        return "".join(str(symbol) for symbol in self.symbols)

    @property
    def is_empty(self) -> bool:
        """True when no symbol was recognized."""
        return not self.symbols

    @property
    def mana_value(self) -> int:
        """Total mana value (CMC). X, Y and Z count as zero."""
        return sum(symbol.mana_value for symbol in self.symbols)

    @property
    def color_requirements(self) -> dict[str, float]:
        """Colored mana needed to cast, hybrid halves weighted at 0.5."""
        requirements = dict.fromkeys(COLORS, 0.0)

        for symbol in self.symbols:
            if symbol.kind == SymbolKind.COLORED:
                requirements[symbol.colors[0]] += 1
            elif symbol.kind == SymbolKind.HYBRID:
                for color in symbol.colors:
                    requirements[color] += 0.5
            elif symbol.kind == SymbolKind.PHYREXIAN and symbol.colors:
                requirements[symbol.colors[0]] += 1

        return requirements

    @property
    def devotion_contribution(self) -> dict[str, int]:
        """Devotion added per color; hybrid and Phyrexian pips count fully."""
        devotion = dict.fromkeys(COLORS, 0)

        for symbol in self.symbols:
            if symbol.kind in (SymbolKind.COLORED, SymbolKind.HYBRID, SymbolKind.PHYREXIAN):
                for color in symbol.colors:
                    devotion[color] += 1

        return devotion

    @property
    def has_hybrid(self) -> bool:
        return any(
            symbol.kind in (SymbolKind.HYBRID, SymbolKind.GENERIC_HYBRID)
            for symbol in self.symbols
        )

    @property
    def has_phyrexian(self) -> bool:
        return any(symbol.kind == SymbolKind.PHYREXIAN for symbol in self.symbols)

    @property
    def has_variable(self) -> bool:
        return any(symbol.kind == SymbolKind.VARIABLE for symbol in self.symbols)

    @property
    def color_identity(self) -> tuple[str, ...]:
        """Every color appearing in any symbol, in WUBRG order."""
        present = {color for symbol in self.symbols for color in symbol.colors}
        return tuple(color for color in COLORS if color in present)

    def covers(self, other: "ManaCost") -> bool:
        """
        Check whether this cost demands at least as much as another.

        True when every color requirement is at least the other's and the
        mana value is at least the other's.
        """
        ours = self.color_requirements
        theirs = other.color_requirements

        for color in COLORS:
            if ours[color] < theirs[color]:
                return False

        return self.mana_value >= other.mana_value
