"""Rendering helpers combining chords with song and line context.

Formatters call :func:`render_chord` once per chord token. The song and
line contexts carry the only state the chord engine needs from a chord
sheet: the song key, capo and chord style, and a line's local key or
transpose target.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass

from chord_notation.chord import Chord
from chord_notation.constants import SOLFEGE_FAMILY, SYMBOL_FAMILY, ChordType, Modifier
from chord_notation.key import Key, KeyLike
from chord_notation.mappings import CAPOS, KEY_LISTS

logger = logging.getLogger(__name__)

# Song metadata names
KEY = "key"
CAPO = "capo"
CHORD_STYLE = "chord_style"

SEMITONES_RE = re.compile(r"^\d+$")


@dataclass(frozen=True)
class SongContext:
    """Song-level settings that affect chord rendering.

    Parameters
    ----------
    key : str | None
        The song key (e.g., "E", "F#m").
    capo : int | None
        Capo fret, or None without a capo.
    chord_style : ChordType | None
        Notation to render chords in, or None to keep them as written.
    """

    key: str | None = None
    capo: int | None = None
    chord_style: ChordType | None = None

    @classmethod
    def from_metadata(cls, metadata: Mapping[str, str | None]) -> SongContext:
        """Build a context from song metadata strings.

        Examples
        --------
        >>> song = SongContext.from_metadata({"key": "E", "capo": "2", "chord_style": "numeral"})
        >>> song.capo, song.chord_style
        (2, <ChordType.NUMERAL: 'numeral'>)
        """
        capo = metadata.get(CAPO)
        chord_style = metadata.get(CHORD_STYLE)
        return cls(
            key=metadata.get(KEY) or None,
            capo=int(capo) if capo else None,
            chord_style=ChordType(chord_style) if chord_style else None,
        )


@dataclass(frozen=True)
class LineContext:
    """Line-level settings: a local key change and a transpose target.

    Parameters
    ----------
    key : str | None
        The key in effect on this line, if it differs from the song key.
    transpose_key : str | None
        Transpose target for this line: a key name or a number of semitones.
    """

    key: str | None = None
    transpose_key: str | None = None


def transpose_distance(transpose_key: str, song_key: KeyLike) -> int:
    """Semitones to transpose a song in ``song_key`` to reach ``transpose_key``.

    Parameters
    ----------
    transpose_key : str
        A key name, or a plain number of semitones.
    song_key : Key | str
        The song key.

    Returns
    -------
    int
        The transpose distance.

    Examples
    --------
    >>> transpose_distance("3", "C")
    3
    >>> transpose_distance("G", "C")
    7
    """
    if SEMITONES_RE.match(transpose_key):
        return int(transpose_key)
    return Key.distance(song_key, transpose_key)


def chord_transpose_distance(
    capo: int | None,
    transpose_key: str | None,
    song_key: str | None,
    render_key: KeyLike | None,
) -> int:
    """Effective transposition from capo, transpose target and render key.

    A capo raises the sounding pitch, so it is subtracted. Transpose target
    and render key only apply when the song has a key to measure from.
    """
    transpose = -1 * (capo or 0)

    if song_key:
        if transpose_key:
            transpose += transpose_distance(transpose_key, song_key)

        if render_key:
            transpose += Key.distance(song_key, render_key)

    return transpose


def change_chord_type(chord: Chord, chord_type: ChordType | None, reference_key: KeyLike | None) -> Chord:
    """Convert ``chord`` to ``chord_type``; no chord type leaves it unchanged."""
    if chord_type is None:
        return chord
    return chord.to_type(chord_type, reference_key)


def render_chord(
    chord_string: str,
    line: LineContext,
    song: SongContext,
    *,
    render_key: KeyLike | None = None,
    use_unicode_modifier: bool = False,
    normalize_chords: bool = True,
) -> str:
    """Render a chord as it should appear for a song and line.

    The chord is transposed by the capo, transpose target and render key,
    normalized against the resulting key and converted to the song's chord
    style. A resulting key missing from the key lists is respelled first,
    so ``Em`` with capo 3 plays in ``C#m`` rather than ``Dbm``. Text that is not a chord is returned unchanged.

    Parameters
    ----------
    chord_string : str
        The chord as written in the chord sheet.
    line : LineContext
        The line the chord appears on.
    song : SongContext
        The song the chord belongs to.
    render_key : Key | str | None
        Key to render the song in, overriding the song key.
    use_unicode_modifier : bool
        Render accidentals as ``♯`` / ``♭``.
    normalize_chords : bool
        Normalize chords against the effective key after transposing.

    Returns
    -------
    str
        The rendered chord.

    Examples
    --------
    >>> render_chord("A#", LineContext(), SongContext(key="E", chord_style=ChordType.NUMERAL))
    '#IV'
    >>> render_chord("D", LineContext(), SongContext(key="D", capo=2))
    'C'
    >>> render_chord("(riff)", LineContext(), SongContext())
    '(riff)'
    """
    chord = Chord.parse(chord_string)
    if chord is None:
        logger.debug("Rendering %r unchanged: not a chord", chord_string)
        return chord_string

    song_key = song.key
    if render_key is not None:
        render_key = Key.wrap_or_fail(render_key)

    distance = chord_transpose_distance(song.capo, line.transpose_key, song_key, render_key)
    effective_key = render_key
    if effective_key is None:
        context_key = Key.wrap(line.key or song_key)
        effective_key = _common_spelling(context_key.transpose(distance)) if context_key else None

    transposed = chord.transpose(distance)
    normalized = transposed.normalize(effective_key) if normalize_chords else transposed

    return change_chord_type(normalized, song.chord_style, effective_key).to_string(
        use_unicode_modifier=use_unicode_modifier
    )


def _chord_family(key: Key) -> str:
    return SOLFEGE_FAMILY if key.is_solfege() else SYMBOL_FAMILY


def _common_spelling(key: Key) -> Key:
    """Respell a key missing from the key lists, e.g. ``Dbm`` as ``C#m``."""
    if key.chord_type.is_relative:
        return key
    names = KEY_LISTS[_chord_family(key)][key.is_minor()]
    if str(key) in names:
        return key
    respelled = key.use_modifier(Modifier.FLAT if key.modifier is Modifier.SHARP else Modifier.SHARP)
    return respelled if str(respelled) in names else key


def get_capos(key: KeyLike) -> dict[str, str]:
    """Return the applicable capos for ``key``.

    Parameters
    ----------
    key : Key | str
        The key to get capos for.

    Returns
    -------
    dict[str, str]
        Capo numbers mapped to the key whose shapes are played with that capo.

    Examples
    --------
    >>> get_capos("C")["3"]
    'A'
    """
    key_obj = Key.wrap_or_fail(key)
    return dict(CAPOS[_chord_family(key_obj)].get(str(key_obj), {}))


def get_keys(key: KeyLike) -> list[str]:
    """Return the keys a song in ``key`` can be transposed to.

    Minor keys offer minor keys, major keys major ones; ``key`` itself is
    left out.

    Examples
    --------
    >>> get_keys("Dm")[:4]
    ['F#m', 'Gm', 'G#m', 'Am']
    """
    key_obj = Key.wrap_or_fail(key)
    keys = KEY_LISTS[_chord_family(key_obj)][key_obj.is_minor()]
    return [candidate for candidate in keys if candidate != str(key_obj)]
