"""Notation constants shared by keys and chords."""

from enum import Enum


class ChordType(Enum):
    """The four parallel notations a key or chord can be written in.

    Values match the ``chord_style`` metadata strings of a song.
    """

    SYMBOL = "symbol"
    NUMERAL = "numeral"
    NUMERIC = "number"
    SOLFEGE = "solfege"

    @property
    def is_relative(self) -> bool:
        """Whether the notation is relative to a tonic (numerals and numbers)."""
        return self in (ChordType.NUMERAL, ChordType.NUMERIC)


class Modifier(Enum):
    """Accidental attached to a key."""

    SHARP = "#"
    FLAT = "b"
    NONE = ""

    @property
    def offset(self) -> int:
        """Semitone offset applied to the natural note."""
        return MODIFIER_OFFSETS[self]

    @property
    def unicode(self) -> str:
        """Display glyph (``♯`` / ``♭``)."""
        return UNICODE_MODIFIERS[self]

    @classmethod
    def from_string(cls, text: str | None) -> "Modifier":
        """Resolve an ASCII or Unicode accidental; None and '' mean no modifier."""
        if not text:
            return cls.NONE
        if text in ("#", "♯"):
            return cls.SHARP
        if text in ("b", "♭"):
            return cls.FLAT
        msg = f"Unknown modifier: {text}"
        raise ValueError(msg)


MODIFIER_OFFSETS: dict[Modifier, int] = {
    Modifier.SHARP: 1,
    Modifier.FLAT: -1,
    Modifier.NONE: 0,
}

UNICODE_MODIFIERS: dict[Modifier, str] = {
    Modifier.SHARP: "♯",
    Modifier.FLAT: "♭",
    Modifier.NONE: "",
}

# Chord families that share a capo/key table
SYMBOL_FAMILY = "symbol"
SOLFEGE_FAMILY = "solfege"
