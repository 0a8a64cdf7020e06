"""Chord value type.

A :class:`Chord` is a root :class:`~chord_notation.key.Key`, an optional
suffix (quality/extensions) and an optional slash bass key. It delegates
per-note work to :class:`Key` and adds suffix normalization on top.

Examples
--------
>>> chord = Chord.parse("Esus4/G#")
>>> str(chord.transpose(2))
'F#sus4/A#'
>>> str(Chord.parse("A#").to_numeral("E"))
'#IV'
>>> str(Chord.parse("vi7").to_chord_symbol("C"))
'Am7'
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from chord_notation import grammar
from chord_notation.constants import ChordType, Modifier
from chord_notation.grammar import ChordAST
from chord_notation.key import Key, KeyLike, require_family
from chord_notation.mappings import normalize_chord_suffix

logger = logging.getLogger(__name__)

MINOR_MARKER = "m"


def _has_minor_marker(suffix: str | None) -> bool:
    """Whether a suffix marks the chord as minor (``m7``, ``min``, ``-7``)."""
    normalized = normalize_chord_suffix(suffix)
    return bool(normalized) and normalized.startswith(MINOR_MARKER) and not normalized.startswith("maj")


def _strip_minor_marker(suffix: str | None) -> str | None:
    """Drop the leading minor marker of a normalized suffix (``m7`` -> ``7``)."""
    if _has_minor_marker(suffix):
        return suffix[len(MINOR_MARKER) :] or None
    return suffix


def _is_minor(base: str | int, chord_type: ChordType, suffix: str | None) -> bool:
    if chord_type is ChordType.NUMERAL:
        return str(base).islower()
    return _has_minor_marker(suffix)


@dataclass(frozen=True)
class Chord:
    """A chord: root key, suffix and slash bass.

    Parameters
    ----------
    root : Key | None
        The chord root, None only for bass-only chords such as ``/G``.
    suffix : str | None
        The quality/extension text as written (e.g., "sus4", "m7").
    bass : Key | None
        The slash bass note. Only a numeral bass can be minor, shown by
        its case.

    Notes
    -----
    Chords are equal when their suffixes are identical and their roots and
    basses are equal keys. Every transformation returns a new chord whose
    keys are copies, never shared with the source.

    Examples
    --------
    >>> chord = Chord.parse("Am7")
    >>> chord.is_minor()
    True
    >>> chord == Chord.parse("  Am7 ")
    True
    """

    root: Key | None = None
    suffix: str | None = None
    bass: Key | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "suffix", self.suffix or None)
        if self.root is not None and self.bass is not None and self.root.chord_type is not self.bass.chord_type:
            msg = (
                f"Root and bass must share a notation, got {self.root.chord_type.value} "
                f"and {self.bass.chord_type.value}"
            )
            raise ValueError(msg)

    # Construction

    @classmethod
    def parse(cls, chord_string: str) -> Chord | None:
        """Try to parse a chord string into a chord.

        Leading and trailing whitespace is removed first, so ``"  E/G# \\n"``
        is valid.

        Parameters
        ----------
        chord_string : str
            The chord text, e.g. ``"Esus4/G#"`` or ``"1sus4/#3"``.

        Returns
        -------
        Chord | None
            The chord, or None if the text is not a chord.

        Examples
        --------
        >>> Chord.parse("not a chord") is None
        True
        """
        try:
            return cls.parse_or_fail(chord_string)
        except ValueError as exc:
            logger.debug("Could not parse chord %r: %s", chord_string, exc)
            return None

    @classmethod
    def parse_or_fail(cls, chord_string: str) -> Chord:
        """Parse a chord string, raising on failure.

        Raises
        ------
        ChordParseError
            If the text is not a chord.
        """
        return cls.from_ast(grammar.parse(chord_string.strip()))

    @classmethod
    def from_ast(cls, ast: ChordAST) -> Chord:
        """Build a chord from a grammar syntax tree."""
        return cls.from_parts(
            base=ast.base,
            modifier=ast.modifier,
            suffix=ast.suffix,
            bass_base=ast.bass_base,
            bass_modifier=ast.bass_modifier,
            chord_type=ast.chord_type,
        )

    @classmethod
    def from_parts(
        cls,
        *,
        base: str | int | None = None,
        modifier: Modifier = Modifier.NONE,
        suffix: str | None = None,
        bass_base: str | int | None = None,
        bass_modifier: Modifier = Modifier.NONE,
        chord_type: ChordType | None = None,
    ) -> Chord:
        """Build a chord from raw base tokens and accidentals.

        Parameters
        ----------
        base : str | int | None
            Root token (e.g., "A", "IV", 4, "Re").
        modifier : Modifier
            Root accidental.
        suffix : str | None
            Quality/extension text.
        bass_base : str | int | None
            Bass token.
        bass_modifier : Modifier
            Bass accidental.
        chord_type : ChordType | None
            The notation of ``base`` and ``bass_base``.

        Raises
        ------
        ValueError
            If a base is given without a chord type.
        InvalidKeyError
            If a base is not valid for the chord type.

        Examples
        --------
        >>> str(Chord.from_parts(base="A", suffix="m7", bass_base="G", chord_type=ChordType.SYMBOL))
        'Am7/G'
        """
        if (base or bass_base) and chord_type is None:
            msg = "Can't resolve a chord without a chord type"
            raise ValueError(msg)

        root = None
        if base:
            root = Key.resolve(base, chord_type, _is_minor(base, chord_type, suffix), modifier)

        bass = None
        if bass_base:
            bass = Key.resolve(bass_base, chord_type, False, bass_modifier)

        return cls(root=root, suffix=suffix, bass=bass)

    def set(self, **properties: Any) -> Chord:
        """Return a copy with ``properties`` overridden.

        Root and bass are copied before the overrides are applied.
        """
        values: dict[str, Any] = {
            "root": self.root.clone() if self.root else None,
            "suffix": self.suffix,
            "bass": self.bass.clone() if self.bass else None,
        }
        values.update(properties)
        return Chord(**values)

    def clone(self) -> Chord:
        """Return a deep copy of the chord."""
        return self.set()

    # Predicates

    @property
    def chord_type(self) -> ChordType | None:
        """The notation of the chord, None for an empty chord."""
        key = self.root or self.bass
        return key.chord_type if key else None

    def is_(self, chord_type: ChordType) -> bool:
        """Whether every present key is written in ``chord_type``."""
        return all(key is None or key.is_(chord_type) for key in (self.root, self.bass))

    def is_chord_symbol(self) -> bool:
        return self.is_(ChordType.SYMBOL)

    def is_chord_solfege(self) -> bool:
        return self.is_(ChordType.SOLFEGE)

    def is_numeric(self) -> bool:
        return self.is_(ChordType.NUMERIC)

    def is_numeral(self) -> bool:
        return self.is_(ChordType.NUMERAL)

    def is_minor(self) -> bool:
        return self.root.is_minor() if self.root else False

    def make_minor(self) -> Chord:
        """Return a minor version of the chord.

        Outside numerals the minor marker lives in the suffix, so it is
        added there when missing.
        """
        suffix = self.suffix
        if self.root and not self.root.is_numeral() and not _has_minor_marker(suffix):
            suffix = MINOR_MARKER + (suffix or "")
        return self.set(root=self.root.make_minor() if self.root else None, suffix=suffix)

    def equals(self, other_chord: Chord) -> bool:
        """Structural equality, same as ``==``."""
        return self == other_chord

    # Notation conversion

    def to_type(self, chord_type: ChordType, reference_key: KeyLike | None = None) -> Chord:
        """Convert the chord into ``chord_type``.

        Root and bass are converted independently and the suffix is
        normalized. Numerals carry minority through case, so the suffix's
        minor marker is dropped going into numerals and restored coming out.
        Chord symbol and solfège results are finally normalized against the
        reference key; the order convert, restore minority, normalize matters
        for the spelling of minor chords.

        Parameters
        ----------
        chord_type : ChordType
            The target notation.
        reference_key : Key | str | None
            The key the chord is interpreted in. Required unless converting
            between numerals and numbers.

        Returns
        -------
        Chord
            The converted chord, or a copy if already in ``chord_type``.

        Raises
        ------
        MissingReferenceKeyError
            If the reference key is required and absent.
        """
        if self.is_(chord_type):
            return self.clone()

        source_type = self.chord_type
        key = None
        if not (source_type.is_relative and chord_type.is_relative):
            key = Key.wrap_or_fail(reference_key)

        suffix = normalize_chord_suffix(self.suffix)
        if chord_type is ChordType.NUMERAL and self.is_minor():
            suffix = _strip_minor_marker(suffix)

        converted = Chord(
            root=self.root.to_type(chord_type, key) if self.root else None,
            suffix=suffix,
            bass=replace(self.bass.to_type(chord_type, key), minor=False) if self.bass else None,
        )

        if chord_type is not ChordType.NUMERAL and self.is_minor():
            converted = converted.make_minor()

        if not chord_type.is_relative:
            converted = converted.normalize(key)
        return converted

    def to_relative(self, chord_type: ChordType, reference_key: KeyLike) -> Chord:
        """Convert into numerals or numbers relative to ``reference_key``.

        Examples
        --------
        >>> str(Chord.parse("Am7/G").to_relative(ChordType.NUMERAL, "C"))
        'vi7/V'
        """
        require_family(chord_type, relative=True)
        return self.to_type(chord_type, Key.wrap_or_fail(reference_key))

    def to_absolute(self, chord_type: ChordType, reference_key: KeyLike) -> Chord:
        """Convert into chord symbols or solfège, reading the chord in ``reference_key``."""
        require_family(chord_type, relative=False)
        return self.to_type(chord_type, Key.wrap_or_fail(reference_key))

    def to_chord_symbol(self, reference_key: KeyLike | None = None) -> Chord:
        """Convert to a chord symbol; numeric ``#4`` in ``E`` becomes ``A#``."""
        return self.to_type(ChordType.SYMBOL, reference_key)

    def to_chord_solfege(self, reference_key: KeyLike | None = None) -> Chord:
        """Convert to a fixed-do solfège chord; ``A#m`` in ``E`` becomes ``La#m``."""
        return self.to_type(ChordType.SOLFEGE, reference_key)

    def to_numeric(self, reference_key: KeyLike | None = None) -> Chord:
        """Convert to a numeric chord; ``A#`` in ``E`` becomes ``#4``."""
        return self.to_type(ChordType.NUMERIC, reference_key)

    def to_numeral(self, reference_key: KeyLike | None = None) -> Chord:
        """Convert to a numeral chord; ``A#`` in ``E`` becomes ``#IV``."""
        return self.to_type(ChordType.NUMERAL, reference_key)

    def to_chord_symbol_string(self, reference_key: KeyLike | None = None) -> str:
        return str(self.to_chord_symbol(reference_key))

    def to_chord_solfege_string(self, reference_key: KeyLike | None = None) -> str:
        return str(self.to_chord_solfege(reference_key))

    def to_numeric_string(self, reference_key: KeyLike | None = None) -> str:
        return str(self.to_numeric(reference_key))

    def to_numeral_string(self, reference_key: KeyLike | None = None) -> str:
        return str(self.to_numeral(reference_key))

    # Normalization and transposition

    def normalize(self, key: KeyLike | None = None, *, normalize_suffix: bool = True) -> Chord:
        """Normalize the root, bass and suffix.

        - ``Fb`` becomes ``E``, ``Cb`` becomes ``B``, ``B#`` becomes ``C``
          and ``E#`` becomes ``F`` (and likewise for degrees, e.g. ``b4``
          becomes ``3``).
        - With ``key``, the root is spelled the way ``key`` spells it.
        - The bass is spelled relative to the normalized root, not the key:
          ``Em/A#`` becomes ``Em/Bb``.
        - With ``normalize_suffix``, the suffix is canonicalized:
          ``sus2`` becomes ``2``, ``sus4`` becomes ``sus``.

        Parameters
        ----------
        key : Key | str | None
            The key to spell the root in.
        normalize_suffix : bool
            Whether to canonicalize the suffix.

        Returns
        -------
        Chord
            The normalized chord.

        Examples
        --------
        >>> str(Chord.parse("Fbsus2").normalize())
        'E2'
        >>> str(Chord.parse("A#").normalize("F"))
        'Bb'
        >>> str(Chord.parse("Em/A#").normalize())
        'Em/Bb'
        """
        suffix = normalize_chord_suffix(self.suffix) if normalize_suffix else self.suffix

        root = self.root
        if root is not None:
            root = root.normalize()
            if key:
                root = root.normalize_enharmonics(key)

        return self.set(
            suffix=suffix,
            root=root,
            bass=self.bass.normalize().normalize_enharmonics(root) if self.bass else None,
        )

    def _transform(self, transform_func: Callable[[Key], Key]) -> Chord:
        return self.set(
            root=transform_func(self.root) if self.root else None,
            bass=transform_func(self.bass) if self.bass else None,
        )

    def transpose(self, delta: int) -> Chord:
        """Transpose the chord by ``delta`` semitones."""
        return self._transform(lambda key: key.transpose(delta))

    def transpose_up(self) -> Chord:
        """Transpose up a semitone: ``A`` becomes ``A#``, ``Eb`` becomes ``E``."""
        return self._transform(Key.transpose_up)

    def transpose_down(self) -> Chord:
        """Transpose down a semitone: ``A#`` becomes ``A``, ``E`` becomes ``Eb``."""
        return self._transform(Key.transpose_down)

    def use_modifier(self, modifier: Modifier) -> Chord:
        """Respell accidentals with ``modifier`` (``Modifier.SHARP`` or ``Modifier.FLAT``)."""
        return self._transform(lambda key: key.use_modifier(modifier))

    # Rendering

    def to_string(self, use_unicode_modifier: bool = False) -> str:
        """Render the chord, e.g. ``Esus4/G#`` or ``1sus4/#3``.

        The root's minor marker is left out when the suffix already carries
        it, so ``Am7`` does not become ``Amm7``. A numeral bass keeps its case,
        as in ``I/vi``.
        """
        suffix = self.suffix or ""
        show_minor = not (suffix.startswith(MINOR_MARKER) or _has_minor_marker(suffix))

        chord_string = ""
        if self.root:
            chord_string = self.root.to_string(show_minor=show_minor, use_unicode_modifier=use_unicode_modifier) + suffix

        if self.bass:
            bass = self.bass.to_string(show_minor=False, use_unicode_modifier=use_unicode_modifier)
            return f"{chord_string}/{bass}"
        return chord_string

    def __str__(self) -> str:
        return self.to_string()


def parse_chord(chord_string: str) -> Chord | None:
    """Parse a chord string, returning None if it is not a chord.

    Deprecated in favour of ``Chord.parse``.

    Examples
    --------
    >>> parse_chord("Gm7").is_minor()
    True
    >>> parse_chord("") is None
    True
    """
    warnings.warn("parse_chord is deprecated, use Chord.parse instead", DeprecationWarning, stacklevel=2)
    return Chord.parse(chord_string)
