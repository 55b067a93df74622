"""Partial, one-way decoding of Preeti and Kantipur legacy font text.

Only common single-character mappings are covered; multi-character
sequences, ligature reordering and positional variants are not handled.
Unmapped characters pass through unchanged.
"""

from __future__ import annotations

__all__ = ["preeti_to_unicode", "kantipur_to_unicode"]

_I_MATRA = "ि"
_I_MATRA_KEYS = frozenset("fF")

_PREETI: dict[str, str] = {
    # Consonants
    "s": "स", "j": "ज", "b": "ब", "v": "व", "k": "क", "l": "ल",
    "d": "द", "h": "ह", "g": "ग", "r": "र", "t": "त", "n": "न",
    "p": "प", "y": "य", "q": "ट", "w": "ध", "e": "भ", "u": "म",
    "i": "ष", "o": "ड", "c": "छ", "x": "ख", "z": "श",
    "a": "ा",  # aa matra
    ";": "ं",  # anusvara
    # Aspirated consonants and special signs
    "Q": "ठ", "W": "ढ", "E": "घ", "R": "झ", "T": "ञ", "Y": "ङ",
    "U": "थ", "I": "ण", "O": "फ",
    "P": "ँ",  # chandrabindu
    "S": "ृ",  # ri matra
    "D": "्",  # halanta
    "G": "।",  # danda
    # Independent vowels
    "H": "अ", "J": "आ", "K": "इ", "L": "ई", ":": "उ", '"': "ऊ",
    "Z": "ए", "C": "ऐ", "V": "ओ", "B": "औ", "N": "ऋ", "X": "ॐ",
    # Matras
    "F": "ि", "[": "ी", "]": "ू", "\\": "ु",
    "/": "्र",  # ra with halanta
    "m": "े", "M": "ै", "A": "ो", ">": "ौ",
    # Numerals
    "0": "०", "1": "१", "2": "२", "3": "३", "4": "४",
    "5": "५", "6": "६", "7": "७", "8": "८", "9": "९",
    # Punctuation
    ".": "।", ",": ",", "!": "!", "?": "?", "-": "-",
}

_KANTIPUR = str.maketrans(
    {
        "s": "स", "j": "ज", "b": "ब", "v": "व", "k": "क", "l": "ल",
        "d": "द", "h": "ह", "g": "ग", "r": "र", "t": "त", "n": "न",
        "p": "प", "y": "य",
        "0": "०", "1": "१", "2": "२", "3": "३", "4": "४",
        "5": "५", "6": "६", "7": "७", "8": "८", "9": "९",
    }
)


def preeti_to_unicode(text: str) -> str:
    """Decode Preeti-encoded text to Unicode Devanagari.

    The i-matra (``f`` or ``F``) precedes its consonant in Preeti but follows
    it in Unicode, so it is held back and emitted after the next mapped
    character. Before an unmapped character, or at the end, it is emitted
    as is.
    """
    parts: list[str] = []
    pending_i_matra = False

    for c in text:
        if c in _I_MATRA_KEYS:
            if pending_i_matra:
                parts.append(_I_MATRA)
            pending_i_matra = True
            continue

        mapped = _PREETI.get(c)
        if pending_i_matra:
            if mapped is not None:
                parts.append(mapped)
                parts.append(_I_MATRA)
            else:
                parts.append(_I_MATRA)
                parts.append(c)
            pending_i_matra = False
        else:
            parts.append(c if mapped is None else mapped)

    if pending_i_matra:
        parts.append(_I_MATRA)
    return "".join(parts)


def kantipur_to_unicode(text: str) -> str:
    """Decode Kantipur-encoded text (basic consonants and numerals only)."""
    return text.translate(_KANTIPUR)