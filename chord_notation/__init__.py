"""Chord and key notation library.

This library models chords and keys in four notations (chord symbols like
``A#``, numerals like ``#IV``, numbers like ``#4`` and solfège like ``La#``)
and converts between them, with transposition, enharmonic normalization and
suffix canonicalization.

Examples
--------
>>> from chord_notation import Chord, Key

>>> # Parse and transpose
>>> str(Chord.parse("A#").transpose(-1))
'A'

>>> # Convert between notations
>>> str(Chord.parse("#4").to_numeral("E"))
'#IV'
>>> str(Chord.parse("A#").to_numeric("E"))
'#4'

>>> # Measure distances between keys
>>> Key.distance("C", "D")
2

>>> # Render a chord for a song with a capo
>>> from chord_notation import LineContext, SongContext, render_chord
>>> render_chord("G", LineContext(), SongContext(key="G", capo=2))
'F'
"""

from chord_notation.chord import Chord, parse_chord
from chord_notation.constants import ChordType, Modifier
from chord_notation.errors import (
    ChordNotationError,
    ChordParseError,
    InvalidKeyError,
    MissingReferenceKeyError,
)
from chord_notation.helpers import (
    LineContext,
    SongContext,
    get_capos,
    get_keys,
    render_chord,
    transpose_distance,
)
from chord_notation.key import Key

__all__ = [
    "Chord",
    "ChordNotationError",
    "ChordParseError",
    "ChordType",
    "InvalidKeyError",
    "Key",
    "LineContext",
    "MissingReferenceKeyError",
    "Modifier",
    "SongContext",
    "get_capos",
    "get_keys",
    "parse_chord",
    "render_chord",
    "transpose_distance",
]
