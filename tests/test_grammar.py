"""Tests for the chord grammar."""

import pytest

from chord_notation.constants import ChordType, Modifier
from chord_notation.errors import ChordParseError
from chord_notation.grammar import ChordAST, parse


class TestChordSymbols:
    def test_simple_major(self) -> None:
        assert parse("C") == ChordAST(chord_type=ChordType.SYMBOL, base="C")

    def test_sharp_root_with_suffix(self) -> None:
        ast = parse("F#m7")
        assert ast.chord_type is ChordType.SYMBOL
        assert ast.base == "F"
        assert ast.modifier is Modifier.SHARP
        assert ast.suffix == "m7"

    def test_flat_root(self) -> None:
        ast = parse("Bbsus4")
        assert ast.base == "B"
        assert ast.modifier is Modifier.FLAT
        assert ast.suffix == "sus4"

    def test_slash_chord(self) -> None:
        ast = parse("Esus4/G#")
        assert ast.suffix == "sus4"
        assert ast.bass_base == "G"
        assert ast.bass_modifier is Modifier.SHARP

    def test_unicode_modifiers(self) -> None:
        ast = parse("B♭/D♯")
        assert ast.modifier is Modifier.FLAT
        assert ast.bass_modifier is Modifier.SHARP

    def test_six_nine_is_not_a_bass(self) -> None:
        ast = parse("C6/9")
        assert ast.suffix == "6/9"
        assert ast.bass_base is None

    def test_bass_only(self) -> None:
        ast = parse("/G")
        assert ast.base is None
        assert ast.bass_base == "G"

    @pytest.mark.parametrize(
        "text",
        ["Cmaj7", "Dm7b5", "G7#9", "Aadd9", "C°7", "Cø", "C+", "C7(b9)", "Cmin", "C-7", "F5", "Gsus", "CΔ7"],
    )
    def test_suffixes(self, text: str) -> None:
        assert parse(text).suffix == text[1:]


class TestOtherNotations:
    def test_numeral(self) -> None:
        ast = parse("#IV")
        assert ast.chord_type is ChordType.NUMERAL
        assert ast.base == "IV"
        assert ast.modifier is Modifier.SHARP

    def test_lowercase_numeral_with_suffix(self) -> None:
        ast = parse("vii°7")
        assert ast.base == "vii"
        assert ast.suffix == "°7"

    def test_numeral_slash_chord(self) -> None:
        ast = parse("V7/VII")
        assert ast.suffix == "7"
        assert ast.bass_base == "VII"

    def test_numeric(self) -> None:
        ast = parse("1sus4/#3")
        assert ast.chord_type is ChordType.NUMERIC
        assert ast.base == "1"
        assert ast.suffix == "sus4"
        assert ast.bass_base == "3"
        assert ast.bass_modifier is Modifier.SHARP

    def test_numeric_trailing_modifier(self) -> None:
        ast = parse("4b")
        assert ast.base == "4"
        assert ast.modifier is Modifier.FLAT
        assert ast.suffix is None

    def test_numeric_leading_modifier(self) -> None:
        ast = parse("b7")
        assert ast.base == "7"
        assert ast.modifier is Modifier.FLAT

    def test_solfege(self) -> None:
        ast = parse("Rem7/Fa#")
        assert ast.chord_type is ChordType.SOLFEGE
        assert ast.base == "Re"
        assert ast.suffix == "m7"
        assert ast.bass_base == "Fa"
        assert ast.bass_modifier is Modifier.SHARP

    def test_do_is_solfege_not_d(self) -> None:
        assert parse("Do").chord_type is ChordType.SOLFEGE


class TestInvalidInput:
    @pytest.mark.parametrize(
        "text",
        ["", "not a chord", "Hello", "H", "Every", "Cmaj7/", "IIV", "8", "#b4", "/"],
    )
    def test_rejected(self, text: str) -> None:
        with pytest.raises(ChordParseError):
            parse(text)

    def test_long_string(self) -> None:
        with pytest.raises(ChordParseError, match="Not a chord"):
            parse("C" + "7" * 40)
