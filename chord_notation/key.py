"""Key value type.

A :class:`Key` is a single pitch reference in one of the four notations:
a chord symbol letter (``A#``), a numeric degree (``#4``), a numeral
(``#IV``) or a fixed-do solfège syllable (``La#``). Symbol and solfège keys
are absolute; numeric and numeral keys are relative to a tonic and need a
reference key to be turned into absolute ones.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from chord_notation import grammar
from chord_notation.constants import ChordType, Modifier
from chord_notation.errors import (
    ChordNotationError,
    ChordParseError,
    InvalidKeyError,
    MissingReferenceKeyError,
)
from chord_notation.mappings import normalize_chord_suffix
from chord_notation.pitch_class import (
    LETTERS,
    NUMBERS,
    NUMERALS,
    SOLFEGE_SYLLABLES,
    interval_degree,
    is_theoretical,
    pitch_class,
    preferred_modifier,
    spell,
    spell_note,
)

# Display base per natural note index, per notation
KEY_BASES: dict[ChordType, tuple[str, ...]] = {
    ChordType.SYMBOL: LETTERS,
    ChordType.NUMERIC: NUMBERS,
    ChordType.NUMERAL: NUMERALS,
    ChordType.SOLFEGE: SOLFEGE_SYLLABLES,
}

# Alternative base tokens accepted when resolving
BASE_ALIASES: dict[ChordType, dict[str, int]] = {
    ChordType.SOLFEGE: {"Ti": 6},
}

KeyLike = Union["Key", str]


@dataclass(frozen=True, eq=False)
class Key:
    """A pitch or scale-degree reference.

    Parameters
    ----------
    note : int
        Natural note index 0-6: C-B for symbols, 1-7 for numbers, I-VII for
        numerals, Do-Si for solfège.
    modifier : Modifier
        The accidental.
    minor : bool
        Whether the key is a minor tonic or scale degree.
    chord_type : ChordType
        The notation the key is written in.

    Notes
    -----
    Two keys are equal when they share grade, minor flag and chord type;
    the spelling (``A#`` versus ``Bb``) only affects display.

    Examples
    --------
    >>> key = Key.parse("A#")
    >>> key.grade
    10
    >>> key == Key.parse("Bb")
    True
    >>> str(key.transpose(-1))
    'A'
    """

    note: int
    modifier: Modifier = Modifier.NONE
    minor: bool = False
    chord_type: ChordType = ChordType.SYMBOL

    def __post_init__(self) -> None:
        if not 0 <= self.note < 7:
            msg = f"Note index out of range: {self.note}"
            raise InvalidKeyError(msg)

    @property
    def grade(self) -> int:
        """Semitone class 0-11, absolute for symbols and solfège, relative otherwise."""
        return pitch_class(self.note, self.modifier)

    # Construction

    @classmethod
    def resolve(
        cls,
        base: str | int,
        key_type: ChordType,
        minor: bool = False,
        modifier: Modifier = Modifier.NONE,
    ) -> Key:
        """Resolve a raw base token into a key.

        Parameters
        ----------
        base : str | int
            The base token (e.g., "A", "IV", "vi", 4, "Re").
        key_type : ChordType
            The notation the token is written in.
        minor : bool
            Whether the key is minor. Lowercase numerals are always minor.
        modifier : Modifier
            The accidental.

        Returns
        -------
        Key
            The resolved key.

        Raises
        ------
        InvalidKeyError
            If the token is not a base of ``key_type``.

        Examples
        --------
        >>> str(Key.resolve("vi", ChordType.NUMERAL))
        'vi'
        >>> str(Key.resolve(4, ChordType.NUMERIC, modifier=Modifier.SHARP))
        '#4'
        """
        token = str(base)
        if key_type is ChordType.NUMERAL:
            minor = minor or token.islower()
            token = token.upper()

        bases = KEY_BASES[key_type]
        if token in bases:
            note = bases.index(token)
        elif token in BASE_ALIASES.get(key_type, {}):
            note = BASE_ALIASES[key_type][token]
        else:
            msg = f"Cannot resolve {base!r} as a {key_type.value} key"
            raise InvalidKeyError(msg)

        return cls(note=note, modifier=modifier, minor=minor, chord_type=key_type)

    @classmethod
    def parse(cls, key_string: str | None) -> Key | None:
        """Parse a key string such as ``"F#m"``, ``"Eb"``, ``"vi"`` or ``"Rem"``.

        Returns
        -------
        Key | None
            The parsed key, or None if the string is not a key.
        """
        if not key_string:
            return None
        try:
            ast = grammar.parse(key_string.strip())
        except ChordParseError:
            return None

        if ast.base is None or ast.bass_base is not None:
            return None
        suffix = normalize_chord_suffix(ast.suffix)
        if suffix not in (None, "m"):
            return None

        try:
            return cls.resolve(ast.base, ast.chord_type, suffix == "m", ast.modifier)
        except InvalidKeyError:
            return None

    @classmethod
    def wrap(cls, key: KeyLike | None) -> Key | None:
        """Return ``key`` as a :class:`Key`, parsing strings; None stays None."""
        if key is None or isinstance(key, Key):
            return key
        return cls.parse(key)

    @classmethod
    def wrap_or_fail(cls, key: KeyLike | None = None) -> Key:
        """Return ``key`` as a :class:`Key`.

        Raises
        ------
        MissingReferenceKeyError
            If ``key`` is None.
        InvalidKeyError
            If ``key`` is a string that does not parse.
        """
        if key is None:
            msg = "A key is required but none was given"
            raise MissingReferenceKeyError(msg)
        key_obj = cls.wrap(key)
        if key_obj is None:
            msg = f"Failed to parse key: {key!r}"
            raise InvalidKeyError(msg)
        return key_obj

    @classmethod
    def to_string_of(cls, key: KeyLike) -> str:
        """Stringify a key-like value, e.g. ``Key.to_string_of("A#")``."""
        return str(cls.wrap_or_fail(key))

    @staticmethod
    def equals(one_key: Key | None, other_key: Key | None) -> bool:
        """Compare two optional keys; two absent keys are equal."""
        if one_key is None:
            return other_key is None
        if other_key is None:
            return False
        return one_key == other_key

    @classmethod
    def distance(cls, one_key: KeyLike, other_key: KeyLike) -> int:
        """Upward semitone distance from ``one_key`` to ``other_key``.

        Examples
        --------
        >>> Key.distance("C", "D")
        2
        >>> Key.distance("D", "C")
        10
        """
        return cls.wrap_or_fail(one_key).distance_to(other_key)

    def distance_to(self, other_key: KeyLike) -> int:
        """Upward semitone distance in ``[0, 12)`` from this key to ``other_key``."""
        other = Key.wrap_or_fail(other_key)
        if other.chord_type.is_relative != self.chord_type.is_relative:
            msg = f"Cannot measure distance between {self.chord_type.value} and {other.chord_type.value} keys"
            raise ChordNotationError(msg)
        return (other.grade - self.grade) % 12

    def clone(self) -> Key:
        """Return a copy of this key."""
        return replace(self)

    # Predicates

    def is_(self, chord_type: ChordType) -> bool:
        """Whether this key is written in ``chord_type``."""
        return self.chord_type is chord_type

    def is_chord_symbol(self) -> bool:
        return self.is_(ChordType.SYMBOL)

    def is_numeric(self) -> bool:
        return self.is_(ChordType.NUMERIC)

    def is_numeral(self) -> bool:
        return self.is_(ChordType.NUMERAL)

    def is_solfege(self) -> bool:
        return self.is_(ChordType.SOLFEGE)

    def is_minor(self) -> bool:
        return self.minor

    def make_minor(self) -> Key:
        """Return a minor copy of this key."""
        return replace(self, minor=True)

    # Notation conversion

    def to_type(self, chord_type: ChordType, reference_key: KeyLike | None = None) -> Key:
        """Convert this key into ``chord_type``.

        Parameters
        ----------
        chord_type : ChordType
            The target notation.
        reference_key : Key | str | None
            The tonic relative numbers and numerals are interpreted against.
            Required for every conversion except between the two relative
            notations (numeral, numeric).

        Returns
        -------
        Key
            The converted key.

        Raises
        ------
        MissingReferenceKeyError
            If a required reference key is absent or not absolute.
        """
        if chord_type is self.chord_type:
            return self.clone()
        if chord_type.is_relative and self.chord_type.is_relative:
            return replace(self, chord_type=chord_type)
        if not chord_type.is_relative and not self.chord_type.is_relative:
            Key.wrap_or_fail(reference_key)
            return replace(self, chord_type=chord_type)
        if self.chord_type.is_relative:
            return self._relative_to_absolute(chord_type, reference_key)
        return self._absolute_to_relative(chord_type, reference_key)

    def to_chord_symbol(self, reference_key: KeyLike | None = None) -> Key:
        """Convert to a chord symbol key; ``#4`` in ``E`` becomes ``A#``."""
        return self.to_type(ChordType.SYMBOL, reference_key)

    def to_solfege(self, reference_key: KeyLike | None = None) -> Key:
        """Convert to a fixed-do solfège key; ``A#`` becomes ``La#``."""
        return self.to_type(ChordType.SOLFEGE, reference_key)

    def to_numeric(self, reference_key: KeyLike | None = None) -> Key:
        """Convert to a numeric key; ``A#`` in ``E`` becomes ``#4``."""
        return self.to_type(ChordType.NUMERIC, reference_key)

    def to_numeral(self, reference_key: KeyLike | None = None) -> Key:
        """Convert to a numeral key; ``A#`` in ``E`` becomes ``#IV``."""
        return self.to_type(ChordType.NUMERAL, reference_key)

    def to_relative(self, chord_type: ChordType, reference_key: KeyLike) -> Key:
        """Convert into a numeral or numeric key, read in ``reference_key``.

        Raises
        ------
        ValueError
            If ``chord_type`` is not a relative notation.
        """
        require_family(chord_type, relative=True)
        return self.to_type(chord_type, Key.wrap_or_fail(reference_key))

    def to_absolute(self, chord_type: ChordType, reference_key: KeyLike) -> Key:
        """Convert into a chord symbol or solfège key, reading this key in ``reference_key``.

        Raises
        ------
        ValueError
            If ``chord_type`` is not an absolute notation.
        """
        require_family(chord_type, relative=False)
        return self.to_type(chord_type, Key.wrap_or_fail(reference_key))

    def _relative_to_absolute(self, chord_type: ChordType, reference_key: KeyLike | None) -> Key:
        tonic = _absolute_reference(reference_key)
        fallback = self.modifier if self.modifier is not Modifier.NONE else tonic.modifier
        note, modifier = spell_note(tonic.note + self.note, tonic.grade + self.grade, fallback)
        return replace(self, note=note, modifier=modifier, chord_type=chord_type)

    def _absolute_to_relative(self, chord_type: ChordType, reference_key: KeyLike | None) -> Key:
        tonic = _absolute_reference(reference_key)
        note, modifier = spell_note(self.note - tonic.note, self.grade - tonic.grade, self.modifier)
        return replace(self, note=note, modifier=modifier, chord_type=chord_type)

    # Transposition and spelling

    def transpose(self, delta: int) -> Key:
        """Transpose by ``delta`` semitones, wrapping around the octave.

        Accidentals keep the key's sharp/flat bias; natural keys lean sharp
        when going up and flat when going down.

        Examples
        --------
        >>> str(Key.parse("A").transpose(1))
        'A#'
        >>> str(Key.parse("A").transpose(-1))
        'Ab'
        >>> str(Key.parse("Eb").transpose(1))
        'E'
        """
        if delta == 0:
            return self.clone()
        bias = self.modifier
        if bias is Modifier.NONE:
            bias = Modifier.SHARP if delta > 0 else Modifier.FLAT
        note, modifier = spell(self.grade + delta, bias)
        return replace(self, note=note, modifier=modifier)

    def transpose_up(self) -> Key:
        return self.transpose(1)

    def transpose_down(self) -> Key:
        return self.transpose(-1)

    def use_modifier(self, modifier: Modifier) -> Key:
        """Respell an accidental with ``modifier``; naturals are unchanged."""
        if self.modifier is Modifier.NONE or modifier is Modifier.NONE:
            return self.clone()
        note, new_modifier = spell(self.grade, modifier)
        return replace(self, note=note, modifier=new_modifier)

    def normalize(self) -> Key:
        """Collapse theoretical spellings to their common equivalent.

        ``Fb`` becomes ``E``, ``Cb`` becomes ``B``, ``B#`` becomes ``C`` and
        ``E#`` becomes ``F``; degrees follow suit (``b4`` to ``3``, ``b1`` to
        ``7``, ``#7`` to ``1``, ``#3`` to ``4``).
        """
        if not is_theoretical(self.note, self.modifier):
            return self.clone()
        note, modifier = spell(self.grade, self.modifier)
        return replace(self, note=note, modifier=modifier)

    def normalize_enharmonics(self, key: KeyLike | None) -> Key:
        """Spell this key the way ``key`` conventionally spells it.

        The accidental is chosen by the scale degree this key occupies above
        ``key``: b2, b3, #4, b6 and b7 in major keys, b5 instead of #4 in
        minor keys. Spellings that would be theoretical fall back to the
        sharp/flat preference of ``key``.

        Parameters
        ----------
        key : Key | str | None
            The song key, or the chord root when spelling a bass note. Without
            a key, or with a relative key for an absolute note, the key is
            returned unchanged.

        Examples
        --------
        >>> str(Key.parse("A#").normalize_enharmonics("F"))
        'Bb'
        >>> str(Key.parse("Bb").normalize_enharmonics("E"))
        'A#'
        >>> str(Key.parse("A#").normalize_enharmonics("Em"))
        'Bb'
        """
        if key is None:
            return self.clone()
        reference = Key.wrap_or_fail(key)

        if reference.chord_type.is_relative == self.chord_type.is_relative:
            tonic_note, tonic_grade = reference.note, reference.grade
        elif self.chord_type.is_relative:
            tonic_note, tonic_grade = 0, 0
        else:
            return self.clone()

        fallback = preferred_modifier(reference.note, reference.modifier, reference.minor)
        degree = interval_degree(self.grade - tonic_grade, reference.minor)
        note, modifier = spell_note(tonic_note + degree, self.grade, fallback)
        if is_theoretical(note, modifier):
            note, modifier = spell(self.grade, fallback)
        return replace(self, note=note, modifier=modifier)

    # Rendering

    def to_string(self, show_minor: bool = True, use_unicode_modifier: bool = False) -> str:
        """Render the key.

        Parameters
        ----------
        show_minor : bool
            Append the ``m`` minor marker for minor symbol, numeric and
            solfège keys. Numerals always show minority through case.
        use_unicode_modifier : bool
            Render accidentals as ``♯`` / ``♭``.

        Examples
        --------
        >>> Key.parse("Bbm").to_string(use_unicode_modifier=True)
        'B♭m'
        >>> Key.parse("Bbm").to_string(show_minor=False)
        'Bb'
        """
        modifier = self.modifier.unicode if use_unicode_modifier else self.modifier.value
        base = KEY_BASES[self.chord_type][self.note]

        if self.chord_type is ChordType.NUMERAL:
            return modifier + (base.lower() if self.minor else base)

        minor = "m" if self.minor and show_minor else ""
        if self.chord_type is ChordType.NUMERIC:
            return f"{modifier}{base}{minor}"
        return f"{base}{modifier}{minor}"

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self.grade == other.grade and self.minor == other.minor and self.chord_type is other.chord_type

    def __hash__(self) -> int:
        return hash((self.grade, self.minor, self.chord_type))


def require_family(chord_type: ChordType, relative: bool) -> None:
    if chord_type.is_relative != relative:
        kind = "a relative" if relative else "an absolute"
        msg = f"{chord_type.value} is not {kind} notation"
        raise ValueError(msg)


def _absolute_reference(reference_key: KeyLike | None) -> Key:
    """Resolve the tonic for relative conversions as a chord symbol key."""
    tonic = Key.wrap_or_fail(reference_key)
    if tonic.chord_type.is_relative:
        msg = f"Reference key must be a chord symbol or solfège key, got {tonic}"
        raise MissingReferenceKeyError(msg)
    return tonic
