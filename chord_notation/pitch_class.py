"""Pitch class arithmetic and spelling.

A key is stored as a natural note index (0-6) plus an accidental. Letters,
scale degrees, numerals and solfège syllables all share the same seven
natural positions, so a single table of natural grades serves every
notation: C D E F G A B lie on the same semitones as degrees 1 2 3 4 5 6 7
of a major scale.
"""

from __future__ import annotations

from chord_notation.constants import Modifier

# Semitone (pitch class) of each natural note index
NATURAL_GRADES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

LETTERS: tuple[str, ...] = ("C", "D", "E", "F", "G", "A", "B")
NUMBERS: tuple[str, ...] = ("1", "2", "3", "4", "5", "6", "7")
NUMERALS: tuple[str, ...] = ("I", "II", "III", "IV", "V", "VI", "VII")
SOLFEGE_SYLLABLES: tuple[str, ...] = ("Do", "Re", "Mi", "Fa", "Sol", "La", "Si")

# Interval above the tonic (in semitones) to the scale degree index it is
# conventionally spelled as. Chromatic notes use b2, b3, #4, b6 and b7 in
# major keys; minor keys spell the tritone as b5.
MAJOR_INTERVAL_DEGREES: dict[int, int] = {
    0: 0,
    1: 1,
    2: 1,
    3: 2,
    4: 2,
    5: 3,
    6: 3,
    7: 4,
    8: 5,
    9: 5,
    10: 6,
    11: 6,
}

MINOR_INTERVAL_DEGREES: dict[int, int] = {**MAJOR_INTERVAL_DEGREES, 6: 4}


def pitch_class(note: int, modifier: Modifier) -> int:
    """Return the pitch class (0-11) of a spelled note.

    Examples
    --------
    >>> pitch_class(5, Modifier.SHARP)  # A#
    10
    >>> pitch_class(3, Modifier.FLAT)  # Fb
    4
    """
    return (NATURAL_GRADES[note] + modifier.offset) % 12


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb", "E♭").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Cb")
    11
    """
    if note and note[0] in LETTERS:
        try:
            modifier = Modifier.from_string(note[1:])
        except ValueError:
            pass
        else:
            return pitch_class(LETTERS.index(note[0]), modifier)
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def spell(grade: int, modifier: Modifier = Modifier.NONE) -> tuple[int, Modifier]:
    """Spell a pitch class using naturals where possible.

    Accidentals lean on ``modifier``; without one, sharps are used.

    Parameters
    ----------
    grade : int
        Pitch class, any integer (wrapped modulo 12).
    modifier : Modifier
        Preferred accidental for notes that need one.

    Returns
    -------
    tuple[int, Modifier]
        Natural note index and accidental.

    Examples
    --------
    >>> spell(10, Modifier.FLAT)
    (6, <Modifier.FLAT: 'b'>)
    >>> spell(4, Modifier.FLAT)
    (2, <Modifier.NONE: ''>)
    """
    grade %= 12
    if grade in NATURAL_GRADES:
        return NATURAL_GRADES.index(grade), Modifier.NONE
    if modifier is Modifier.FLAT:
        return NATURAL_GRADES.index((grade + 1) % 12), Modifier.FLAT
    return NATURAL_GRADES.index((grade - 1) % 12), Modifier.SHARP


def spell_note(note: int, grade: int, fallback: Modifier = Modifier.NONE) -> tuple[int, Modifier]:
    """Spell ``grade`` on the natural note ``note`` if one accidental suffices.

    Falls back to :func:`spell` with ``fallback`` when the note is more than
    a semitone away (double accidentals are never produced).

    Examples
    --------
    >>> spell_note(5, 10)  # A + 1 semitone
    (5, <Modifier.SHARP: '#'>)
    >>> spell_note(3, 7, Modifier.SHARP)  # F## collapses to G
    (4, <Modifier.NONE: ''>)
    """
    note %= 7
    difference = (grade - NATURAL_GRADES[note]) % 12
    if difference == 0:
        return note, Modifier.NONE
    if difference == 1:
        return note, Modifier.SHARP
    if difference == 11:
        return note, Modifier.FLAT
    return spell(grade, fallback)


def is_theoretical(note: int, modifier: Modifier) -> bool:
    """Whether the spelling is one of Cb, Fb, E# or B# (or their degrees).

    Examples
    --------
    >>> is_theoretical(3, Modifier.FLAT)  # Fb
    True
    >>> is_theoretical(5, Modifier.SHARP)  # A#
    False
    """
    if modifier is Modifier.SHARP:
        return note in (2, 6)
    if modifier is Modifier.FLAT:
        return note in (0, 3)
    return False


def interval_degree(interval: int, minor: bool) -> int:
    """Scale degree index a chromatic interval above a tonic is spelled on."""
    table = MINOR_INTERVAL_DEGREES if minor else MAJOR_INTERVAL_DEGREES
    return table[interval % 12]


# Natural tonics whose key signatures use flats: F major; C, D, F and G minor
FLAT_NATURAL_TONICS: dict[bool, tuple[int, ...]] = {
    False: (3,),
    True: (0, 1, 3, 4),
}


def preferred_modifier(note: int, modifier: Modifier, minor: bool) -> Modifier:
    """Accidental a key signature leans on.

    Keys spelled with an accidental prefer that accidental; natural keys
    prefer sharps unless their signature has flats.

    Examples
    --------
    >>> preferred_modifier(3, Modifier.NONE, False)  # F
    <Modifier.FLAT: 'b'>
    >>> preferred_modifier(4, Modifier.NONE, False)  # G
    <Modifier.SHARP: '#'>
    """
    if modifier is not Modifier.NONE:
        return modifier
    return Modifier.FLAT if note in FLAT_NATURAL_TONICS[minor] else Modifier.SHARP
