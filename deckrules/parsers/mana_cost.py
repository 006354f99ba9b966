"""
Mana cost string parser.

Tokenizes Scryfall-style mana costs ("{2}{W}{W/U}{X}") and bare shorthand
("2WW") into ManaSymbols.

The parser never raises. Unknown or malformed spans are skipped, so a string
with no recognizable symbols parses to an empty cost with mana value 0.
Braced numbers too long to convert are kept as special symbols.
"""

from deckrules.models.mana import COLORS, ManaCost, ManaSymbol, SymbolKind

# Characters accepted outside braces
BARE_SYMBOLS = frozenset("WUBRG0123456789XYZ")

VARIABLE_SYMBOLS = frozenset({"X", "Y", "Z"})


def parse_mana_cost(cost: str | None) -> ManaCost:
    """
    Parse a mana cost string.

    Args:
        cost: Cost string such as "{1}{G}{G}", "2WW" or "" (None is accepted)

    Returns:
        ManaCost with symbols in source order
    """
    if not cost:
        return ManaCost()

    symbols: list[ManaSymbol] = []
    i = 0

    while i < len(cost):
        char = cost[i]

        if char == "{":
            end = cost.find("}", i)
            if end == -1:
                # Unclosed brace: drop it and keep scanning
                i += 1
                continue

            body = cost[i + 1 : end].strip().upper()
            if body:
                symbols.append(classify_symbol(body))
            i = end + 1
        elif char in BARE_SYMBOLS:
            symbols.append(classify_symbol(char))
            i += 1
        else:
            i += 1

    return ManaCost(symbols=tuple(symbols))


def classify_symbol(body: str) -> ManaSymbol:
    """
    Classify one symbol body (the text between braces).

    Args:
        body: Upper-case symbol text, e.g. "W", "12", "2/W", "G/U/P"

    Returns:
        ManaSymbol with kind, colors and generic amount set
    """
    if body.isascii() and body.isdigit():
        try:
            return ManaSymbol(text=body, kind=SymbolKind.GENERIC, generic=int(body))
        except ValueError:
            # Past the interpreter's int conversion limit
            return ManaSymbol(text=body, kind=SymbolKind.SPECIAL)

    if body in COLORS:
        return ManaSymbol(text=body, kind=SymbolKind.COLORED, colors=(body,))

    if body == "C":
        return ManaSymbol(text=body, kind=SymbolKind.COLORLESS)

    if "/" in body:
        parts = body.split("/")
        colors = tuple(part for part in parts if part in COLORS)

        if "P" in parts[1:]:
            return ManaSymbol(text=body, kind=SymbolKind.PHYREXIAN, colors=colors)
        if parts[0] == "2":
            return ManaSymbol(text=body, kind=SymbolKind.GENERIC_HYBRID, colors=colors, generic=2)
        return ManaSymbol(text=body, kind=SymbolKind.HYBRID, colors=colors)

    if body in VARIABLE_SYMBOLS:
        return ManaSymbol(text=body, kind=SymbolKind.VARIABLE)

    return ManaSymbol(text=body, kind=SymbolKind.SPECIAL)
