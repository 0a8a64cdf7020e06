"""Tests for the suffix, key and capo tables."""

import pytest

from chord_notation.constants import SOLFEGE_FAMILY, SYMBOL_FAMILY
from chord_notation.mappings import (
    CAPOS,
    KEY_LISTS,
    MAJOR_KEYS,
    MAX_CAPO,
    MINOR_KEYS,
    normalize_chord_suffix,
    symbol_to_solfege,
)


@pytest.mark.parametrize(
    ("suffix", "expected"),
    [
        ("sus2", "2"),
        ("sus4", "sus"),
        ("7sus4", "7sus"),
        ("min", "m"),
        ("-7", "m7"),
        ("mM7", "m(maj7)"),
        ("M7", "maj7"),
        ("Δ", "maj7"),
        ("ø", "m7b5"),
        ("+", "aug"),
        ("69", "6/9"),
        ("no3", "5"),
    ],
)
def test_normalize_chord_suffix(suffix, expected):
    assert normalize_chord_suffix(suffix) == expected


@pytest.mark.parametrize("suffix", ["maj", "major", "M", None, ""])
def test_blank_suffixes(suffix):
    assert normalize_chord_suffix(suffix) is None


def test_unknown_suffix_passes_through():
    assert normalize_chord_suffix("7b9#11") == "7b9#11"


def test_canonical_suffixes_are_stable():
    for canonical in ("m", "m7", "maj7", "sus", "2", "m7b5", "aug", "6/9", "5"):
        assert normalize_chord_suffix(canonical) == canonical


def test_symbol_to_solfege():
    assert symbol_to_solfege("C") == "Do"
    assert symbol_to_solfege("F#m") == "Fa#m"
    assert symbol_to_solfege("Bb") == "Sib"


class TestTables:
    def test_every_key_has_capos(self):
        for key_name in MAJOR_KEYS + MINOR_KEYS:
            assert len(CAPOS[SYMBOL_FAMILY][key_name]) == MAX_CAPO
            assert symbol_to_solfege(key_name) in CAPOS[SOLFEGE_FAMILY]

    def test_capo_shapes_keep_mode(self):
        assert all(shape.endswith("m") for shape in CAPOS[SYMBOL_FAMILY]["Em"].values())
        assert not any(shape.endswith("m") for shape in CAPOS[SYMBOL_FAMILY]["E"].values())

    def test_capo_shapes(self):
        assert CAPOS[SYMBOL_FAMILY]["F"]["1"] == "E"
        assert CAPOS[SYMBOL_FAMILY]["Bb"]["3"] == "G"
        assert CAPOS[SOLFEGE_FAMILY]["Sib"]["3"] == "Sol"

    def test_key_lists(self):
        assert KEY_LISTS[SYMBOL_FAMILY][False] == MAJOR_KEYS
        assert KEY_LISTS[SYMBOL_FAMILY][True] == MINOR_KEYS
        assert KEY_LISTS[SOLFEGE_FAMILY][True][0] == "Fa#m"
