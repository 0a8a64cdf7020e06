"""Static lookup tables: suffix normalization, key lists and capos.

The tables are module-level constants built once at import time and never
mutated afterwards.
"""

from __future__ import annotations

from chord_notation.constants import SOLFEGE_FAMILY, SYMBOL_FAMILY
from chord_notation.pitch_class import LETTERS, SOLFEGE_SYLLABLES, note_to_pc

# Sentinel meaning "drop the suffix entirely"
BLANK_SUFFIX = "[blank]"

# Mapping from raw chord suffixes to their canonical spelling
SUFFIX_MAPPING: dict[str, str] = {
    # Major
    "maj": BLANK_SUFFIX,
    "major": BLANK_SUFFIX,
    "Maj": BLANK_SUFFIX,
    "M": BLANK_SUFFIX,
    "ma": BLANK_SUFFIX,
    # Minor
    "min": "m",
    "mi": "m",
    "minor": "m",
    "-": "m",
    "min7": "m7",
    "mi7": "m7",
    "-7": "m7",
    "min6": "m6",
    "mi6": "m6",
    "-6": "m6",
    "min9": "m9",
    "mi9": "m9",
    "-9": "m9",
    "min11": "m11",
    "mi11": "m11",
    "-11": "m11",
    "minadd9": "madd9",
    "m(add9)": "madd9",
    "mM7": "m(maj7)",
    "mmaj7": "m(maj7)",
    "mMaj7": "m(maj7)",
    "m(M7)": "m(maj7)",
    "minmaj7": "m(maj7)",
    "-maj7": "m(maj7)",
    # Major seventh family
    "M7": "maj7",
    "Maj7": "maj7",
    "ma7": "maj7",
    "j7": "maj7",
    "Δ": "maj7",
    "Δ7": "maj7",
    "△": "maj7",
    "△7": "maj7",
    "M9": "maj9",
    "Maj9": "maj9",
    "ma9": "maj9",
    "Δ9": "maj9",
    "M13": "maj13",
    "Maj13": "maj13",
    # Dominant
    "dom7": "7",
    "dom9": "9",
    "7(9)": "9",
    "7(13)": "13",
    # Suspended
    "sus4": "sus",
    "sus2": "2",
    "7sus4": "7sus",
    "9sus4": "9sus",
    # Diminished and half-diminished
    "°": "dim",
    "dim5": "dim",
    "°7": "dim7",
    "ø": "m7b5",
    "ø7": "m7b5",
    "m7-5": "m7b5",
    "m7(b5)": "m7b5",
    "min7b5": "m7b5",
    "-7b5": "m7b5",
    # Augmented
    "+": "aug",
    "#5": "aug",
    "(#5)": "aug",
    "+5": "aug",
    "aug7": "7#5",
    "+7": "7#5",
    "7+": "7#5",
    "7+5": "7#5",
    # Added tones
    "(add9)": "add9",
    "69": "6/9",
    "6add9": "6/9",
    "6(9)": "6/9",
    # Power chords
    "no3": "5",
    "(no3)": "5",
}


def normalize_chord_suffix(suffix: str | None) -> str | None:
    """Look up the canonical spelling of a chord suffix.

    Parameters
    ----------
    suffix : str | None
        The raw suffix (e.g., "sus2", "min7").

    Returns
    -------
    str | None
        The canonical suffix, the raw suffix when it has no mapping, or None
        when the suffix maps to the blank sentinel.

    Examples
    --------
    >>> normalize_chord_suffix("sus2")
    '2'
    >>> normalize_chord_suffix("maj") is None
    True
    >>> normalize_chord_suffix("7b9")
    '7b9'
    """
    if not suffix:
        return None
    normalized = SUFFIX_MAPPING.get(suffix, suffix)
    if normalized == BLANK_SUFFIX:
        return None
    return normalized


# Keys offered as transpose targets, in display order
MAJOR_KEYS: tuple[str, ...] = (
    "A",
    "Bb",
    "B",
    "C",
    "C#",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "F#",
    "Gb",
    "G",
    "G#",
    "Ab",
)

MINOR_KEYS: tuple[str, ...] = (
    "F#m",
    "Gm",
    "G#m",
    "Am",
    "Bbm",
    "Bm",
    "Cm",
    "C#m",
    "Dm",
    "D#m",
    "Ebm",
    "Em",
    "Fm",
)

# Chord shape played for each pitch class when a capo is used
MAJOR_CAPO_SHAPES: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "F#", "G", "Ab", "A", "Bb", "B")
MINOR_CAPO_SHAPES: tuple[str, ...] = ("Cm", "C#m", "Dm", "Ebm", "Em", "Fm", "F#m", "Gm", "G#m", "Am", "Bbm", "Bm")

MAX_CAPO = 9


def symbol_to_solfege(key_name: str) -> str:
    """Rename a symbol key to its fixed-do solfège spelling.

    Examples
    --------
    >>> symbol_to_solfege("Bbm")
    'Sibm'
    """
    return SOLFEGE_SYLLABLES[LETTERS.index(key_name[0])] + key_name[1:]


def _key_pitch_class(key_name: str) -> tuple[int, bool]:
    minor = key_name.endswith("m")
    return note_to_pc(key_name[:-1] if minor else key_name), minor


def _build_capos(key_names: tuple[str, ...]) -> dict[str, dict[str, str]]:
    capos: dict[str, dict[str, str]] = {}
    for key_name in key_names:
        grade, minor = _key_pitch_class(key_name)
        shapes = MINOR_CAPO_SHAPES if minor else MAJOR_CAPO_SHAPES
        capos[key_name] = {str(capo): shapes[(grade - capo) % 12] for capo in range(1, MAX_CAPO + 1)}
    return capos


def _solfege_capos(symbol_capos: dict[str, dict[str, str]]) -> dict[str, dict[str, str]]:
    return {
        symbol_to_solfege(key_name): {capo: symbol_to_solfege(shape) for capo, shape in table.items()}
        for key_name, table in symbol_capos.items()
    }


_SYMBOL_CAPOS = _build_capos(MAJOR_KEYS + MINOR_KEYS)

# Capo number -> effective key, per chord family and key
CAPOS: dict[str, dict[str, dict[str, str]]] = {
    SYMBOL_FAMILY: _SYMBOL_CAPOS,
    SOLFEGE_FAMILY: _solfege_capos(_SYMBOL_CAPOS),
}

KEY_LISTS: dict[str, dict[bool, tuple[str, ...]]] = {
    SYMBOL_FAMILY: {False: MAJOR_KEYS, True: MINOR_KEYS},
    SOLFEGE_FAMILY: {
        False: tuple(symbol_to_solfege(k) for k in MAJOR_KEYS),
        True: tuple(symbol_to_solfege(k) for k in MINOR_KEYS),
    },
}
