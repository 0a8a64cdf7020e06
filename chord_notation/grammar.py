"""Regex grammar turning chord text into a flat syntax tree.

The grammar recognises chord symbols (``Esus4/G#``), numeric chords
(``1sus4/#3``), numeral chords (``#IVmaj7``) and solfège chords
(``Rem7/Fa#``). It only splits the text into its parts; resolving the
parts into keys is left to :class:`chord_notation.chord.Chord`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chord_notation.constants import ChordType, Modifier
from chord_notation.errors import ChordParseError

# Constants for chord detection
MAX_CHORD_LENGTH = 32

ACCIDENTAL = r"[#b♯♭]"

# A suffix is a run of known quality/extension tokens
SUFFIX_TOKEN = (
    r"(?:"
    r"major|minor|maj|Maj|min|dim|aug|sus|add|alt|omit|dom|no|"  # words
    r"mi|ma|m|M|j|"  # short qualities
    r"6/9|"  # six-nine, not a slash bass
    r"[0-9]|"  # extensions
    r"[#b♯♭+\-°øΔ△()^,.]"  # alterations and symbols
    r")"
)
SUFFIX = rf"(?P<suffix>{SUFFIX_TOKEN}*)"

SYMBOL_BASE = r"[A-G]"
SOLFEGE_BASE = r"(?:Do|Re|Mi|Fa|Sol|La|Si|Ti)"
NUMERAL_BASE = r"(?:VII|VI|V|IV|III|II|I|vii|vi|v|iv|iii|ii|i)"
NUMERIC_BASE = r"[1-7]"

# Regex patterns per chord type: optional root with suffix, optional bass
CHORD_PATTERNS: dict[ChordType, re.Pattern[str]] = {
    ChordType.SOLFEGE: re.compile(
        rf"(?:(?P<base>{SOLFEGE_BASE})(?P<modifier>{ACCIDENTAL})?{SUFFIX})?"
        rf"(?:/(?P<bass_base>{SOLFEGE_BASE})(?P<bass_modifier>{ACCIDENTAL})?)?"
    ),
    ChordType.SYMBOL: re.compile(
        rf"(?:(?P<base>{SYMBOL_BASE})(?P<modifier>{ACCIDENTAL})?{SUFFIX})?"
        rf"(?:/(?P<bass_base>{SYMBOL_BASE})(?P<bass_modifier>{ACCIDENTAL})?)?"
    ),
    ChordType.NUMERAL: re.compile(
        rf"(?:(?P<modifier>{ACCIDENTAL})?(?P<base>{NUMERAL_BASE}){SUFFIX})?"
        rf"(?:/(?P<bass_modifier>{ACCIDENTAL})?(?P<bass_base>{NUMERAL_BASE}))?"
    ),
    ChordType.NUMERIC: re.compile(
        rf"(?:(?P<modifier>{ACCIDENTAL})?(?P<base>{NUMERIC_BASE})"
        rf"(?P<post_modifier>{ACCIDENTAL}(?=/|$))?{SUFFIX})?"
        rf"(?:/(?P<bass_modifier>{ACCIDENTAL})?(?P<bass_base>{NUMERIC_BASE})(?P<bass_post_modifier>{ACCIDENTAL})?)?"
    ),
}

# Solfège is tried before symbols so that ``Do`` is not read as ``D`` + ``o``
PARSE_ORDER: tuple[ChordType, ...] = (
    ChordType.SOLFEGE,
    ChordType.SYMBOL,
    ChordType.NUMERAL,
    ChordType.NUMERIC,
)


@dataclass(frozen=True)
class ChordAST:
    """Parts of a chord as written.

    Parameters
    ----------
    chord_type : ChordType
        The notation the chord was written in.
    base : str | None
        The root token (e.g., "A", "IV", "4", "Re"), or None for a bass-only chord.
    modifier : Modifier
        The root accidental.
    suffix : str | None
        The raw quality/extension text.
    bass_base : str | None
        The slash bass token.
    bass_modifier : Modifier
        The bass accidental.
    """

    chord_type: ChordType
    base: str | None = None
    modifier: Modifier = Modifier.NONE
    suffix: str | None = None
    bass_base: str | None = None
    bass_modifier: Modifier = Modifier.NONE


def _modifier(prefix: str | None, postfix: str | None, text: str) -> Modifier:
    if prefix and postfix:
        msg = f"Chord has two accidentals on one note: {text}"
        raise ChordParseError(msg)
    return Modifier.from_string(prefix or postfix)


def _build_ast(chord_type: ChordType, match: re.Match[str], text: str) -> ChordAST:
    groups = match.groupdict()
    if not groups["base"] and not groups["bass_base"]:
        msg = f"Chord has neither a root nor a bass: {text!r}"
        raise ChordParseError(msg)

    return ChordAST(
        chord_type=chord_type,
        base=groups["base"],
        modifier=_modifier(groups["modifier"], groups.get("post_modifier"), text),
        suffix=groups["suffix"] or None,
        bass_base=groups["bass_base"],
        bass_modifier=_modifier(groups["bass_modifier"], groups.get("bass_post_modifier"), text),
    )


def parse(text: str) -> ChordAST:
    """Parse chord text into a :class:`ChordAST`.

    Parameters
    ----------
    text : str
        The chord text, without surrounding whitespace.

    Returns
    -------
    ChordAST
        The parts of the chord.

    Raises
    ------
    ChordParseError
        If the text is not a chord in any supported notation.

    Examples
    --------
    >>> ast = parse("Esus4/G#")
    >>> ast.base, ast.suffix, ast.bass_base, ast.bass_modifier
    ('E', 'sus4', 'G', <Modifier.SHARP: '#'>)
    >>> parse("#IV").chord_type
    <ChordType.NUMERAL: 'numeral'>
    """
    if not text or len(text) > MAX_CHORD_LENGTH:
        msg = f"Not a chord: {text!r}"
        raise ChordParseError(msg)

    for chord_type in PARSE_ORDER:
        match = CHORD_PATTERNS[chord_type].fullmatch(text)
        if match:
            return _build_ast(chord_type, match, text)

    msg = f"Not a chord: {text!r}"
    raise ChordParseError(msg)
