"""Transliteration schemes and the errors raised when converting between them."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "Scheme",
    "LipiError",
    "UnsupportedPairError",
    "InvalidInputError",
    "UnmappableCharError",
]


class Scheme(Enum):
    """Writing schemes known to the transliterator.

    PREETI and KANTIPUR are legacy font encodings with partial, one-way
    support only (legacy encoding to Devanagari).
    """

    DEVANAGARI = "Devanagari"
    IAST = "Iast"
    PREETI = "Preeti"
    KANTIPUR = "Kantipur"

    def __str__(self) -> str:
        return self.value


class LipiError(Exception):
    """Base class for transliteration errors."""


class UnsupportedPairError(LipiError):
    """No conversion path exists from ``source`` to ``target``."""

    def __init__(self, source: Scheme, target: Scheme) -> None:
        self.source = source
        self.target = target
        super().__init__(f"unsupported transliteration: {source} -> {target}")


class InvalidInputError(LipiError):
    """The input is not valid text in ``scheme``."""

    def __init__(self, scheme: Scheme, detail: str) -> None:
        self.scheme = scheme
        self.detail = detail
        super().__init__(f"invalid input for scheme {scheme}: {detail}")


class UnmappableCharError(LipiError):
    """A character has no mapping in ``scheme``."""

    def __init__(self, char: str, scheme: Scheme) -> None:
        self.char = char
        self.scheme = scheme
        super().__init__(f"unmappable character '{char}' in scheme {scheme}")