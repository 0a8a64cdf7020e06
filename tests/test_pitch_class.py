"""Tests for pitch class arithmetic and spelling."""

import pytest

from chord_notation.constants import Modifier
from chord_notation.pitch_class import (
    interval_degree,
    is_theoretical,
    note_to_pc,
    pitch_class,
    preferred_modifier,
    spell,
    spell_note,
)


@pytest.mark.parametrize(
    ("note", "expected"),
    [("C", 0), ("C#", 1), ("Db", 1), ("E♭", 3), ("F#", 6), ("Bb", 10), ("B", 11), ("Cb", 11)],
)
def test_note_to_pc(note, expected):
    assert note_to_pc(note) == expected


@pytest.mark.parametrize("note", ["", "H", "Cx", "c"])
def test_note_to_pc_invalid(note):
    with pytest.raises(ValueError, match="Unknown note"):
        note_to_pc(note)


def test_pitch_class_wraps():
    assert pitch_class(6, Modifier.SHARP) == 0
    assert pitch_class(0, Modifier.FLAT) == 11


class TestSpell:
    def test_naturals_win(self):
        assert spell(4, Modifier.FLAT) == (2, Modifier.NONE)
        assert spell(4, Modifier.SHARP) == (2, Modifier.NONE)

    def test_sharp_by_default(self):
        assert spell(1) == (0, Modifier.SHARP)

    def test_flat(self):
        assert spell(1, Modifier.FLAT) == (1, Modifier.FLAT)

    def test_wraps(self):
        assert spell(-2, Modifier.FLAT) == (6, Modifier.FLAT)
        assert spell(13) == (0, Modifier.SHARP)

    def test_spell_note_single_accidental(self):
        assert spell_note(5, 10) == (5, Modifier.SHARP)
        assert spell_note(6, 10) == (6, Modifier.FLAT)
        assert spell_note(9, 4) == (2, Modifier.NONE)

    def test_spell_note_double_accidental_falls_back(self):
        assert spell_note(3, 7, Modifier.SHARP) == (4, Modifier.NONE)
        assert spell_note(0, 3, Modifier.FLAT) == (2, Modifier.FLAT)


class TestEnharmonicRules:
    @pytest.mark.parametrize(
        ("note", "modifier", "expected"),
        [
            (0, Modifier.FLAT, True),
            (3, Modifier.FLAT, True),
            (2, Modifier.SHARP, True),
            (6, Modifier.SHARP, True),
            (6, Modifier.FLAT, False),
            (5, Modifier.SHARP, False),
            (0, Modifier.NONE, False),
        ],
    )
    def test_is_theoretical(self, note, modifier, expected):
        assert is_theoretical(note, modifier) is expected

    def test_tritone_degree(self):
        assert interval_degree(6, minor=False) == 3
        assert interval_degree(6, minor=True) == 4

    def test_interval_degree_wraps(self):
        assert interval_degree(-2, minor=False) == 6

    @pytest.mark.parametrize(
        ("note", "modifier", "minor", "expected"),
        [
            (0, Modifier.NONE, False, Modifier.SHARP),
            (3, Modifier.NONE, False, Modifier.FLAT),
            (0, Modifier.NONE, True, Modifier.FLAT),
            (5, Modifier.NONE, True, Modifier.SHARP),
            (6, Modifier.FLAT, False, Modifier.FLAT),
            (3, Modifier.SHARP, True, Modifier.SHARP),
        ],
    )
    def test_preferred_modifier(self, note, modifier, minor, expected):
        assert preferred_modifier(note, modifier, minor) is expected
