"""Exceptions raised by chord-notation.

All errors derive from ``ValueError`` so callers that already guard chord
handling with ``except ValueError`` keep working.
"""


class ChordNotationError(ValueError):
    """Base class for chord-notation errors."""


class ChordParseError(ChordNotationError):
    """Raised when chord text cannot be parsed."""


class InvalidKeyError(ChordNotationError):
    """Raised when a key token or key string cannot be resolved."""


class MissingReferenceKeyError(ChordNotationError):
    """Raised when a conversion relative to a tonic gets no usable key."""
