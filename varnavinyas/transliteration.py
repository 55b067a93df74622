"""Transliteration between Devanagari, IAST and legacy font encodings."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from .legacy import kantipur_to_unicode, preeti_to_unicode
from .scheme import Scheme, UnsupportedPairError

__all__ = [
    "transliterate",
    "detect_scheme",
    "devanagari_to_iast",
    "iast_to_devanagari",
]

_VIRAMA = "्"

# Devanagari -> IAST

_DEV_IAST_VOWELS: dict[str, str] = {
    "औ": "au", "ऐ": "ai", "आ": "ā", "इ": "i", "ई": "ī", "उ": "u", "ऊ": "ū",
    "ऋ": "ṛ", "ॠ": "ṝ", "ऌ": "ḷ", "ॡ": "ḹ", "ए": "e", "ओ": "o", "अ": "a",
}

_DEV_IAST_MATRAS: dict[str, str] = {
    "ौ": "au", "ै": "ai", "ा": "ā", "ि": "i", "ी": "ī", "ु": "u", "ू": "ū",
    "ृ": "ṛ", "ॄ": "ṝ", "े": "e", "ो": "o",
}

_DEV_IAST_CONSONANTS: dict[str, str] = {
    "क": "k", "ख": "kh", "ग": "g", "घ": "gh", "ङ": "ṅ",
    "च": "c", "छ": "ch", "ज": "j", "झ": "jh", "ञ": "ñ",
    "ट": "ṭ", "ठ": "ṭh", "ड": "ḍ", "ढ": "ḍh", "ण": "ṇ",
    "त": "t", "थ": "th", "द": "d", "ध": "dh", "न": "n",
    "प": "p", "फ": "ph", "ब": "b", "भ": "bh", "म": "m",
    "य": "y", "र": "r", "ल": "l", "व": "v",
    "श": "ś", "ष": "ṣ", "स": "s", "ह": "h",
}

_DEV_IAST_SPECIAL: dict[str, str] = {
    "ं": "ṃ", "ः": "ḥ", "ँ": "m̐", "ऽ": "'", "।": "|", "॥": "||",
    _VIRAMA: "",  # a bare virama has no sound of its own
}

_DEV_IAST_NUMERALS: dict[str, str] = {
    "०": "0", "१": "1", "२": "2", "३": "3", "४": "4",
    "५": "5", "६": "6", "७": "7", "८": "8", "९": "9",
}

# IAST -> Devanagari

_IAST_DEV_CONSONANTS: dict[str, str] = {
    "kh": "ख", "gh": "घ", "ch": "छ", "jh": "झ", "ṭh": "ठ", "ḍh": "ढ",
    "th": "थ", "dh": "ध", "ph": "फ", "bh": "भ",
    "ṅ": "ङ", "ñ": "ञ", "ṭ": "ट", "ḍ": "ड", "ṇ": "ण", "ś": "श", "ṣ": "ष",
    "k": "क", "g": "ग", "c": "च", "j": "ज", "t": "त", "d": "द", "n": "न",
    "p": "प", "b": "ब", "m": "म", "y": "य", "r": "र", "l": "ल", "v": "व",
    "s": "स", "h": "ह",
}

_IAST_DEV_VOWELS: dict[str, str] = {
    "au": "औ", "ai": "ऐ", "ā": "आ", "ī": "ई", "ū": "ऊ", "ṛ": "ऋ", "ṝ": "ॠ",
    "ḷ": "ऌ", "ḹ": "ॡ", "a": "अ", "i": "इ", "u": "उ", "e": "ए", "o": "ओ",
}

_IAST_DEV_MATRAS: dict[str, str] = {
    "au": "ौ", "ai": "ै", "ā": "ा", "ī": "ी", "ū": "ू", "ṛ": "ृ", "ṝ": "ॄ",
    "a": "",  # inherent vowel
    "i": "ि", "u": "ु", "e": "े", "o": "ो",
}

_IAST_DEV_SPECIAL: dict[str, str] = {
    "ṃ": "ं", "ḥ": "ः", "m̐": "ँ", "'": "ऽ", "||": "॥", "|": "।",
}

_IAST_DEV_NUMERALS: dict[str, str] = {
    "0": "०", "1": "१", "2": "२", "3": "३", "4": "४",
    "5": "५", "6": "६", "7": "७", "8": "८", "9": "९",
}

_IAST_DIACRITICS = frozenset("āīūṛṝṃḥṣśṅñṭḍṇĀĪŪṚṜṂḤṢŚṄÑṬḌṆ")

_CONVERTERS: dict[tuple[Scheme, Scheme], Callable[[str], str]] = {}


def _longest_match(
    text: str, pos: int, table: Mapping[str, str]
) -> tuple[str, str] | None:
    """Return the longest key of ``table`` starting at ``pos`` and its value."""
    longest = max(map(len, table))
    for size in range(min(longest, len(text) - pos), 0, -1):
        key = text[pos : pos + size]
        if key in table:
            return key, table[key]
    return None


def devanagari_to_iast(text: str) -> str:
    """Transliterate Devanagari to IAST; unmapped characters pass through."""
    out: list[str] = []
    n = len(text)
    i = 0
    while i < n:
        c = text[i]
        consonant = _DEV_IAST_CONSONANTS.get(c)
        if consonant is not None:
            out.append(consonant)
            i += 1
            if i < n:
                nxt = text[i]
                matra = _DEV_IAST_MATRAS.get(nxt)
                if matra is not None:
                    out.append(matra)
                    i += 1
                elif nxt == _VIRAMA:
                    i += 1
                else:
                    out.append("a")
            else:
                out.append("a")
            continue

        for table in (_DEV_IAST_VOWELS, _DEV_IAST_SPECIAL, _DEV_IAST_NUMERALS):
            match = _longest_match(text, i, table)
            if match is not None:
                key, value = match
                out.append(value)
                i += len(key)
                break
        else:
            out.append(c)
            i += 1
    return "".join(out)


def iast_to_devanagari(text: str) -> str:
    """Transliterate IAST to Devanagari; unmapped characters pass through.

    A consonant not followed by a vowel receives a virama.
    """
    out: list[str] = []
    n = len(text)
    i = 0
    while i < n:
        special = _longest_match(text, i, _IAST_DEV_SPECIAL)
        if special is not None:
            out.append(special[1])
            i += len(special[0])
            continue

        consonant = _longest_match(text, i, _IAST_DEV_CONSONANTS)
        if consonant is not None:
            out.append(consonant[1])
            i += len(consonant[0])
            matra = _longest_match(text, i, _IAST_DEV_MATRAS)
            if matra is not None:
                out.append(matra[1])
                i += len(matra[0])
            else:
                out.append(_VIRAMA)
            continue

        for table in (_IAST_DEV_VOWELS, _IAST_DEV_NUMERALS):
            match = _longest_match(text, i, table)
            if match is not None:
                out.append(match[1])
                i += len(match[0])
                break
        else:
            out.append(text[i])
            i += 1
    return "".join(out)


_CONVERTERS.update(
    {
        (Scheme.DEVANAGARI, Scheme.IAST): devanagari_to_iast,
        (Scheme.IAST, Scheme.DEVANAGARI): iast_to_devanagari,
        (Scheme.PREETI, Scheme.DEVANAGARI): preeti_to_unicode,
        (Scheme.KANTIPUR, Scheme.DEVANAGARI): kantipur_to_unicode,
    }
)


def transliterate(text: str, source: Scheme, target: Scheme) -> str:
    """Convert ``text`` from ``source`` to ``target``.

    Raises UnsupportedPairError when no conversion path exists.
    """
    if not text:
        return ""
    if source == target:
        return text
    try:
        convert = _CONVERTERS[(source, target)]
    except KeyError:
        raise UnsupportedPairError(source, target) from None
    return convert(text)


def detect_scheme(text: str) -> Scheme | None:
    """Guess the scheme of ``text``, or return None if it is unclear."""
    if not text:
        return None
    devanagari = 0
    latin = 0
    diacritics = 0
    for c in text:
        if "\u0900" <= c <= "\u097f":
            devanagari += 1
        elif ("a" <= c <= "z") or ("A" <= c <= "Z"):
            latin += 1
        elif c in _IAST_DIACRITICS:
            diacritics += 1
            latin += 1
    total = len(text)
    if devanagari * 2 > total:
        return Scheme.DEVANAGARI
    if diacritics > 0:
        return Scheme.IAST
    if latin * 2 > total:
        return Scheme.IAST
    return None