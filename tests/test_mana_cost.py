"""Tests for mana cost parsing and derived properties."""

import sys

import pytest

from deckrules.models.mana import ManaCost, SymbolKind
from deckrules.parsers.mana_cost import classify_symbol, parse_mana_cost


class TestTokenizing:
    def test_braced_symbols(self) -> None:
        cost = parse_mana_cost("{2}{W}{W/U}{X}")
        assert [symbol.text for symbol in cost.symbols] == ["2", "W", "W/U", "X"]

    def test_bare_shorthand(self) -> None:
        cost = parse_mana_cost("2WW")
        assert [symbol.text for symbol in cost.symbols] == ["2", "W", "W"]
        assert cost.mana_value == 4

    def test_empty_string(self) -> None:
        cost = parse_mana_cost("")
        assert cost.symbols == ()
        assert cost.mana_value == 0
        assert cost.is_empty

    def test_none(self) -> None:
        assert parse_mana_cost(None) == ManaCost()

    def test_garbage_never_raises(self) -> None:
        """Unrecognized characters are skipped."""
        cost = parse_mana_cost("hello, world!")
        assert cost.is_empty
        assert cost.mana_value == 0

    def test_unclosed_brace_is_skipped(self) -> None:
        """The dangling brace is dropped; what follows is scanned normally."""
        cost = parse_mana_cost("{2")
        assert [symbol.text for symbol in cost.symbols] == ["2"]

    def test_empty_braces_yield_nothing(self) -> None:
        assert parse_mana_cost("{}{G}").mana_value == 1
        assert len(parse_mana_cost("{}{G}")) == 1

    def test_lowercase_braced_symbol(self) -> None:
        assert parse_mana_cost("{g}").color_identity == ("G",)

    def test_multi_digit_generic(self) -> None:
        assert parse_mana_cost("{15}").mana_value == 15

    def test_reparse_is_structurally_equal(self) -> None:
        assert parse_mana_cost("{2}{W/U}{B/P}") == parse_mana_cost("{2}{W/U}{B/P}")

    def test_str_is_canonical_brace_form(self) -> None:
        assert str(parse_mana_cost("2WW")) == "{2}{W}{W}"

    def test_non_ascii_digit_is_not_generic(self) -> None:
        cost = parse_mana_cost("{²}{W}")
        assert [symbol.kind for symbol in cost.symbols] == [SymbolKind.SPECIAL, SymbolKind.COLORED]
        assert cost.mana_value == 1

    def test_oversized_generic_does_not_raise(self) -> None:
        limit = sys.get_int_max_str_digits()
        if limit == 0:
            pytest.skip("int conversion limit disabled")

        cost = parse_mana_cost("{" + "9" * (limit + 1) + "}{G}")

        assert cost.symbols[0].kind == SymbolKind.SPECIAL
        assert cost.mana_value == 1


class TestClassifySymbol:
    @pytest.mark.parametrize(
        ("body", "kind"),
        [
            ("3", SymbolKind.GENERIC),
            ("W", SymbolKind.COLORED),
            ("C", SymbolKind.COLORLESS),
            ("W/U", SymbolKind.HYBRID),
            ("2/W", SymbolKind.GENERIC_HYBRID),
            ("B/P", SymbolKind.PHYREXIAN),
            ("G/U/P", SymbolKind.PHYREXIAN),
            ("X", SymbolKind.VARIABLE),
            ("S", SymbolKind.SPECIAL),
            ("T", SymbolKind.SPECIAL),
        ],
    )
    def test_kinds(self, body: str, kind: SymbolKind) -> None:
        assert classify_symbol(body).kind == kind

    def test_hybrid_colors(self) -> None:
        assert classify_symbol("W/U").colors == ("W", "U")


class TestManaValue:
    def test_generic_and_colored(self) -> None:
        assert parse_mana_cost("{3}{U}{U}").mana_value == 5

    def test_colorless_symbol(self) -> None:
        assert parse_mana_cost("{C}{C}").mana_value == 2

    def test_generic_hybrid_counts_two(self) -> None:
        assert parse_mana_cost("{2/W}{2/W}").mana_value == 4

    def test_hybrid_and_phyrexian_count_one(self) -> None:
        assert parse_mana_cost("{W/U}{B/P}").mana_value == 2

    def test_variable_counts_zero(self) -> None:
        assert parse_mana_cost("{X}{X}{R}").mana_value == 1
        assert parse_mana_cost("{X}{Y}{Z}").mana_value == 0

    def test_special_symbols_count_zero(self) -> None:
        assert parse_mana_cost("{S}{1}").mana_value == 1

    def test_sum_of_mixed_cost(self) -> None:
        # 2 + 1 + 1 + 2 + 1 + 0
        assert parse_mana_cost("{2}{W}{C}{2/U}{B/G}{X}").mana_value == 7


class TestColorRequirements:
    def test_plain_colors(self) -> None:
        requirements = parse_mana_cost("{1}{W}{W}{U}").color_requirements
        assert requirements == {"W": 2.0, "U": 1.0, "B": 0.0, "R": 0.0, "G": 0.0}

    def test_hybrid_counts_half(self) -> None:
        requirements = parse_mana_cost("{W/U}").color_requirements
        assert requirements["W"] == 0.5
        assert requirements["U"] == 0.5

    def test_phyrexian_counts_full(self) -> None:
        assert parse_mana_cost("{B/P}").color_requirements["B"] == 1

    def test_generic_hybrid_counts_nothing(self) -> None:
        assert sum(parse_mana_cost("{2/W}").color_requirements.values()) == 0


class TestDevotionContribution:
    def test_plain_colors(self) -> None:
        assert parse_mana_cost("{B}{B}{1}").devotion_contribution["B"] == 2

    def test_hybrid_counts_both_colors(self) -> None:
        devotion = parse_mana_cost("{W/U}{W/U}").devotion_contribution
        assert devotion["W"] == 2
        assert devotion["U"] == 2

    def test_phyrexian_counts(self) -> None:
        assert parse_mana_cost("{R/P}").devotion_contribution["R"] == 1

    def test_generic_hybrid_counts_nothing(self) -> None:
        assert sum(parse_mana_cost("{2/W}").devotion_contribution.values()) == 0


class TestHybridWeightingRegression:
    """Pins the different hybrid weighting of requirements and devotion."""

    def test_standard_hybrid(self) -> None:
        cost = parse_mana_cost("{G/U}")
        assert cost.color_requirements["G"] == 0.5
        assert cost.devotion_contribution["G"] == 1

    def test_generic_hybrid(self) -> None:
        cost = parse_mana_cost("{2/G}")
        assert cost.color_requirements["G"] == 0
        assert cost.devotion_contribution["G"] == 0
        assert cost.color_identity == ("G",)


class TestFlagsAndIdentity:
    def test_flags(self) -> None:
        cost = parse_mana_cost("{X}{W/U}{B/P}")
        assert cost.has_variable
        assert cost.has_hybrid
        assert cost.has_phyrexian

    def test_generic_hybrid_is_hybrid(self) -> None:
        assert parse_mana_cost("{2/W}").has_hybrid

    def test_phyrexian_is_not_hybrid(self) -> None:
        assert not parse_mana_cost("{B/P}").has_hybrid

    def test_plain_cost_has_no_flags(self) -> None:
        cost = parse_mana_cost("{3}{G}")
        assert not (cost.has_variable or cost.has_hybrid or cost.has_phyrexian)

    def test_generic_hybrid_identity(self) -> None:
        assert set(parse_mana_cost("{2/W}{2/W}").color_identity) == {"W"}

    def test_identity_includes_hybrid_halves_in_wubrg_order(self) -> None:
        assert parse_mana_cost("{G}{R/W}{U}").color_identity == ("W", "U", "R", "G")

    def test_colorless_cost_has_empty_identity(self) -> None:
        assert parse_mana_cost("{4}{C}").color_identity == ()


class TestCovers:
    def test_bigger_cost_covers_smaller(self) -> None:
        assert parse_mana_cost("{2}{U}{U}").covers(parse_mana_cost("{U}{U}"))

    def test_missing_color_does_not_cover(self) -> None:
        assert not parse_mana_cost("{5}{U}").covers(parse_mana_cost("{R}"))

    def test_lower_mana_value_does_not_cover(self) -> None:
        assert not parse_mana_cost("{U}").covers(parse_mana_cost("{3}{U}"))
