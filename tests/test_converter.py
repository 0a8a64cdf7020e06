"""Tests for pychord and Harte interop."""

import pytest

from chord_notation.chord import Chord
from chord_notation.converter import (
    SUFFIX_TO_PYCHORD_QUALITY,
    chord_components,
    from_harte,
    from_pychord,
    harte_quality_to_pychord,
    pychord_notation,
    pychord_quality_to_harte,
    to_harte,
    to_pychord,
)
from chord_notation.errors import ChordNotationError, ChordParseError


class TestQualityMapping:
    @pytest.mark.parametrize(
        ("pychord_quality", "harte_quality"),
        [("", "maj"), ("m", "min"), ("m7", "min7"), ("maj7", "maj7"), ("7", "7"), ("dim7", "dim7"), ("m7-5", "hdim7")],
    )
    def test_pychord_to_harte(self, pychord_quality, harte_quality):
        assert pychord_quality_to_harte(pychord_quality) == harte_quality

    @pytest.mark.parametrize(
        ("harte_quality", "pychord_quality"),
        [("maj", ""), ("min", "m"), ("min7", "m7"), ("hdim7", "m7b5"), ("maj(9)", "add9")],
    )
    def test_harte_to_pychord(self, harte_quality, pychord_quality):
        assert harte_quality_to_pychord(harte_quality) == pychord_quality

    def test_unknown_pychord_quality_raises(self):
        with pytest.raises(ValueError, match="Unknown pychord quality"):
            pychord_quality_to_harte("unknown_quality")

    def test_unknown_harte_quality_raises(self):
        with pytest.raises(ValueError, match="Unknown Harte quality"):
            harte_quality_to_pychord("unknown_quality")


class TestPychord:
    def test_notation(self):
        assert pychord_notation(Chord.parse("Gm7")) == "Gm7"

    def test_notation_renames_suffix(self):
        assert pychord_notation(Chord.parse("Esus2/G#")) == "Esus2/G#"
        assert pychord_notation(Chord.parse("Dsus4")) == "Dsus4"
        assert pychord_notation(Chord.parse("Bø")) == "Bm7-5"

    def test_notation_from_numerals(self):
        assert pychord_notation(Chord.parse("ii7"), "Bb") == "Cm7"

    def test_notation_needs_a_root(self):
        with pytest.raises(ChordNotationError, match="no root"):
            pychord_notation(Chord.parse("/G"))

    def test_to_pychord(self):
        pychord_chord = to_pychord(Chord.parse("vi7"), "C")
        assert str(pychord_chord.root) == "A"
        assert str(pychord_chord.quality) == "m7"

    def test_from_pychord(self):
        assert str(from_pychord("Gm7/F")) == "Gm7/F"
        assert str(from_pychord(to_pychord(Chord.parse("Bbmaj7")))) == "Bbmaj7"

    def test_from_pychord_invalid(self):
        with pytest.raises(ChordParseError):
            from_pychord("not a chord")

    def test_components(self):
        assert chord_components(Chord.parse("Am")) == ["A", "C", "E"]
        assert chord_components(Chord.parse("V7"), "C") == ["G", "B", "D", "F"]


class TestHarte:
    def test_to_harte(self):
        assert to_harte(Chord.parse("Gm7")) == "G:min7"
        assert to_harte(Chord.parse("C")) == "C:maj"

    def test_to_harte_with_bass(self):
        assert to_harte(Chord.parse("C/E")) == "C:maj/3"
        assert to_harte(Chord.parse("C/Bb")) == "C:maj/b7"

    def test_to_harte_from_numerals(self):
        assert to_harte(Chord.parse("vi7"), "C") == "A:min7"

    @pytest.mark.parametrize(
        ("suffix", "harte_chord"),
        [
            ("sus", "C:sus4"),
            ("2", "C:sus2"),
            ("7sus", "C:7sus4"),
            ("9sus", "C:sus4(b7,9)"),
            ("m7b5", "C:hdim7"),
            ("m(maj7)", "C:minmaj7"),
            ("7#5", "C:aug7"),
            ("6/9", "C:maj6(9)"),
        ],
    )
    def test_to_harte_renamed_suffixes(self, suffix, harte_chord):
        assert suffix in SUFFIX_TO_PYCHORD_QUALITY
        assert to_harte(Chord.parse(f"C{suffix}")) == harte_chord

    def test_renamed_suffixes_are_covered(self):
        for suffix in SUFFIX_TO_PYCHORD_QUALITY:
            assert to_harte(Chord.parse(f"C{suffix}")).startswith("C:")

    def test_to_harte_without_pychord_support(self):
        assert to_harte(Chord.parse("Cmaj11")) == "C:maj11"
        assert to_harte(Chord.parse("Fdim7")) == "F:dim7"
        assert to_harte(Chord.parse("Aaug7")) == "A:aug7"

    def test_from_harte(self):
        pytest.importorskip("harte")
        assert str(from_harte("C:maj")) == "C"
        assert str(from_harte("G:min7")) == "Gm7"
        assert str(from_harte("Bb:min7")) == "Bbm7"

    def test_from_harte_with_bass(self):
        pytest.importorskip("harte")
        assert str(from_harte("C:maj/3")) == "C/E"
