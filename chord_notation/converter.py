"""Interop with pychord and Harte notation.

Chords in any notation can be handed to pychord (e.g., to list their
component notes) or written in Harte notation (e.g., ``G:min7``) once a
reference key turns them into chord symbols.

Examples
--------
>>> from chord_notation import Chord
>>> to_harte(Chord.parse("vi7"), "C")
'A:min7'
>>> chord_components(Chord.parse("Am"))
['A', 'C', 'E']
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_notation.chord import Chord
from chord_notation.errors import ChordNotationError
from chord_notation.key import Key, KeyLike
from chord_notation.mappings import normalize_chord_suffix

if TYPE_CHECKING:
    from pychord import Chord as PyChord

# Canonical suffixes pychord spells differently
SUFFIX_TO_PYCHORD_QUALITY: dict[str, str] = {
    "sus": "sus4",
    "2": "sus2",
    "7sus": "7sus4",
    "9sus": "9sus4",
    "m7b5": "m7-5",
    "m(maj7)": "mmaj7",
    "7#5": "7+5",
    "6/9": "69",
}

# Mapping from pychord quality names to Harte shorthand
PYCHORD_TO_HARTE_QUALITY: dict[str, str] = {
    "": "maj",
    "m": "min",
    "m7": "min7",
    "7": "7",
    "maj7": "maj7",
    "M7": "maj7",
    "dim": "dim",
    "dim7": "dim7",
    "dim6": "dim6",
    "aug": "aug",
    "aug7": "aug7",
    "7+5": "aug7",
    "m7-5": "hdim7",
    "m7b5": "hdim7",
    "sus4": "sus4",
    "sus2": "sus2",
    "7sus4": "7sus4",
    "7sus2": "7sus2",
    "9sus4": "sus4(b7,9)",
    "sus47": "sus4(b7)",
    "sus27": "sus2(b7)",
    "add9": "maj(9)",
    "madd9": "min(9)",
    "9": "9",
    "m9": "min9",
    "maj9": "maj9",
    "11": "11",
    "m11": "min11",
    "maj11": "maj11",
    "13": "13",
    "m13": "min13",
    "maj13": "maj13",
    "6": "maj6",
    "m6": "min6",
    "69": "maj6(9)",
    "mmaj7": "minmaj7",
    "mM7": "minmaj7",
    "5": "5",
}

# Reverse mapping from Harte shorthand to pychord quality
HARTE_TO_PYCHORD_QUALITY: dict[str, str] = {
    "maj": "",
    "min": "m",
    "min7": "m7",
    "7": "7",
    "maj7": "maj7",
    "dim": "dim",
    "dim7": "dim7",
    "dim6": "dim6",
    "aug": "aug",
    "aug7": "7+5",
    "hdim7": "m7b5",
    "sus4": "sus4",
    "sus2": "sus2",
    "7sus4": "7sus4",
    "7sus2": "7sus2",
    "sus4(b7,9)": "9sus4",
    "sus4(b7)": "7sus4",
    "sus2(b7)": "7sus2",
    "maj(9)": "add9",
    "min(9)": "madd9",
    "9": "9",
    "min9": "m9",
    "maj9": "maj9",
    "11": "11",
    "min11": "m11",
    "maj11": "maj11",
    "13": "13",
    "min13": "m13",
    "maj13": "maj13",
    "maj6": "6",
    "min6": "m6",
    "maj6(9)": "69",
    "minmaj7": "mmaj7",
    "5": "5",
}


def pychord_quality_to_harte(pychord_quality: str) -> str:
    """Convert a pychord quality string to Harte shorthand.

    Raises
    ------
    ValueError
        If the quality is not recognized.

    Examples
    --------
    >>> pychord_quality_to_harte("m7")
    'min7'
    >>> pychord_quality_to_harte("")
    'maj'
    """
    if pychord_quality in PYCHORD_TO_HARTE_QUALITY:
        return PYCHORD_TO_HARTE_QUALITY[pychord_quality]
    msg = f"Unknown pychord quality: {pychord_quality}"
    raise ValueError(msg)


def harte_quality_to_pychord(harte_quality: str) -> str:
    """Convert a Harte shorthand to pychord quality string.

    Raises
    ------
    ValueError
        If the quality is not recognized.

    Examples
    --------
    >>> harte_quality_to_pychord("min7")
    'm7'
    >>> harte_quality_to_pychord("maj")
    ''
    """
    if harte_quality in HARTE_TO_PYCHORD_QUALITY:
        return HARTE_TO_PYCHORD_QUALITY[harte_quality]
    msg = f"Unknown Harte quality: {harte_quality}"
    raise ValueError(msg)


def _as_chord_symbol(chord: Chord, reference_key: KeyLike | None) -> Chord:
    symbol = chord.to_chord_symbol(reference_key).normalize()
    if symbol.root is None:
        msg = f"Chord has no root: {chord}"
        raise ChordNotationError(msg)
    return symbol


def _pychord_quality(symbol: Chord) -> str:
    suffix = normalize_chord_suffix(symbol.suffix) or ""
    return SUFFIX_TO_PYCHORD_QUALITY.get(suffix, suffix)


def pychord_notation(chord: Chord, reference_key: KeyLike | None = None) -> str:
    """Spell a chord the way pychord expects it.

    Examples
    --------
    >>> pychord_notation(Chord.parse("Esus2/G#"))
    'Esus2/G#'
    >>> pychord_notation(Chord.parse("ii7"), "Bb")
    'Cm7'
    """
    symbol = _as_chord_symbol(chord, reference_key)
    result = symbol.root.to_string(show_minor=False) + _pychord_quality(symbol)
    if symbol.bass:
        result = f"{result}/{symbol.bass}"
    return result


def to_pychord(chord: Chord, reference_key: KeyLike | None = None) -> PyChord:
    """Convert a chord into a ``pychord.Chord``.

    Parameters
    ----------
    chord : Chord
        The chord, in any notation.
    reference_key : Key | str | None
        Key to interpret numeral, numeric and solfège chords in.

    Returns
    -------
    pychord.Chord
        The pychord chord.

    Raises
    ------
    ValueError
        If pychord does not know the chord quality.
    """
    from pychord import Chord as PyChord

    return PyChord(pychord_notation(chord, reference_key))


def from_pychord(value: PyChord | str) -> Chord:
    """Build a chord from a ``pychord.Chord`` or pychord notation string.

    Examples
    --------
    >>> str(from_pychord("Gm7/F"))
    'Gm7/F'
    """
    return Chord.parse_or_fail(str(value))


def chord_components(chord: Chord, reference_key: KeyLike | None = None) -> list[str]:
    """List the note names of a chord, via pychord.

    Examples
    --------
    >>> chord_components(Chord.parse("V7"), "C")
    ['G', 'B', 'D', 'F']
    """
    return to_pychord(chord, reference_key).components()


def to_harte(chord: Chord, reference_key: KeyLike | None = None) -> str:
    """Convert a chord to Harte notation.

    The bass is written as an interval above the root, as Harte requires.
    The quality is looked up by name, so qualities pychord cannot build
    (e.g., ``maj11``) still convert.

    Raises
    ------
    ValueError
        If the quality has no Harte shorthand.

    Examples
    --------
    >>> to_harte(Chord.parse("C/E"))
    'C:maj/3'
    >>> to_harte(Chord.parse("Bbm7"))
    'Bb:min7'
    """
    symbol = _as_chord_symbol(chord, reference_key)
    root = symbol.root.to_string(show_minor=False)

    result = f"{root}:{pychord_quality_to_harte(_pychord_quality(symbol))}"
    if symbol.bass:
        result = f"{result}/{symbol.bass.to_numeric(root)}"
    return result


def from_harte(chord_str: str) -> Chord:
    """Parse a Harte notation string into a chord.

    Parameters
    ----------
    chord_str : str
        Chord in Harte notation (e.g., "G:min7", "C:maj/3").

    Returns
    -------
    Chord
        The chord symbol.

    Raises
    ------
    ValueError
        If the quality or bass interval is not supported.
    """
    from harte.harte import Harte

    hc = Harte(chord_str)
    root = hc.get_root()
    shorthand = hc.get_shorthand() or "maj"
    chord = Chord.parse_or_fail(root + harte_quality_to_pychord(shorthand))

    if "/" in chord_str:
        interval = chord_str.split("/")[-1]
        bass = Key.parse(interval)
        if bass is None or not bass.is_numeric():
            msg = f"Unsupported Harte bass interval: {interval}"
            raise ValueError(msg)
        root_key = Key.wrap_or_fail(root)
        chord = chord.set(bass=bass.to_chord_symbol(root_key))
    return chord
