"""Punctuation checks for Nepali (Devanagari) text, after Academy Section 5."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from itertools import accumulate

__all__ = [
    "PunctuationMark",
    "LekhyaDiagnostic",
    "LekhyaError",
    "check_punctuation",
]


class PunctuationMark(Enum):
    """The fourteen Nepali punctuation marks described in Academy Section 5."""

    ALPA_VIRAM = "अल्पविराम"  # ,
    PURNA_VIRAM = "पूर्णविराम"  # ।
    PRASHNA_VACHAK = "प्रश्नवाचक"  # ?
    VISMAY_BODHAK = "विस्मयबोधक"  # !
    NIRDESHAK = "निर्देशक"  # : / - / :-
    EKAL_UDDHARAN = "एकल उद्धरण"  # ‘ ’
    DOHORO_UDDHARAN = "दोहोरो उद्धरण"  # “ ”
    KOSHTHAK = "कोष्ठक"  # ( )
    YOJAK = "योजक"  # -
    SANKSHEP = "संक्षेप"  # .
    AIJAN = "ऐजन"  # ,,
    TIRYAK_VIRAM = "तिर्यक विराम"  # /
    ARDHA_VIRAM = "अर्धविराम"  # ;
    AIJAN_BINDU = "ऐजन बिन्दु"  # …


@dataclass(frozen=True)
class LekhyaDiagnostic:
    """A punctuation finding; ``span`` is a (start, end) UTF-8 byte range."""

    span: tuple[int, int]
    found: str
    expected: str
    rule: str


class LekhyaError(Exception):
    """Raised for invalid input to punctuation operations."""

    def __init__(self, message: str = "empty input") -> None:
        super().__init__(message)


_RULE_PURNA_VIRAM = (
    "Section 5: पूर्णविराम (।) used as sentence-end in Nepali, not period (.)"
)
_RULE_ELLIPSIS = (
    "Section 5: ऐजन बिन्दु \u2014 use ellipsis character (\u2026) "
    "instead of multiple periods"
)
_RULE_DOUBLE_QUOTE = (
    "Section 5: दोहोरो उद्धरण \u2014 use smart quotes \u201c...\u201d instead of straight \""
)
_RULE_SINGLE_QUOTE = (
    "Section 5: एकल उद्धरण \u2014 use smart quotes \u2018...\u2019 instead of straight '"
)
_RULE_SPACING = "Section 5: punctuation should attach to the previous word"
_RULE_TIRYAK = "Section 5: तिर्यक् विराम (/) विकल्पमा शब्दसँगै लेखिन्छ"
_RULE_AIJAN = "Section 5: ऐजन चिह्नमा दुई अल्पविराम सँगै लेखिन्छ (,,)"
_RULE_KOSHTHAK = "Section 5: कोष्ठक चिह्न सन्तुलित रूपमा प्रयोग हुनुपर्छ"

_KNOWN_ABBREVIATIONS = frozenset({"डा", "श्री", "प्रा", "सं", "वि"})
_ASCII_WHITESPACE = frozenset(" \t\n\x0c\r")
_CONTEXT_WINDOW = 10
_ELLIPSIS_RE = re.compile(r"\.{3,}")

# (start, end, found, expected, rule) with character indices.
_Finding = tuple[int, int, str, str, str]


def check_punctuation(text: str) -> list[LekhyaDiagnostic]:
    """Return punctuation diagnostics for ``text``, ordered by span start."""
    findings: list[_Finding] = [
        *_check_period_as_sentence_end(text),
        *_check_ellipsis(text),
        *_check_quotes(text),
        *_check_tiryak_viram_spacing(text),
        *_check_aijan_pair_spacing(text),
        *_check_parentheses_balance(text),
        *_check_spacing(text),
    ]
    findings.sort(key=lambda f: f[0])

    offsets = list(
        accumulate(
            (len(c.encode("utf-8", "surrogatepass")) for c in text), initial=0
        )
    )
    return [
        LekhyaDiagnostic(
            span=(offsets[start], offsets[end]),
            found=found,
            expected=expected,
            rule=rule,
        )
        for start, end, found, expected, rule in findings
    ]


def _is_devanagari(c: str) -> bool:
    return "\u0900" <= c <= "\u097f"


def _is_whitespace(c: str) -> bool:
    return c.isspace() and c not in "\x1c\x1d\x1e\x1f"


def _devanagari_before(text: str, pos: int) -> bool:
    return any(map(_is_devanagari, text[max(0, pos - _CONTEXT_WINDOW) : pos]))


def _devanagari_after(text: str, pos: int) -> bool:
    return any(map(_is_devanagari, text[pos : pos + _CONTEXT_WINDOW]))


def _devanagari_near(text: str, before: int, after: int) -> bool:
    return _devanagari_before(text, before) or _devanagari_after(text, after)


def _word_start(text: str, end: int) -> int:
    """Index just past the last whitespace before ``end`` (0 if none)."""
    return next(
        (k + 1 for k in range(end - 1, -1, -1) if _is_whitespace(text[k])), 0
    )


def _is_short_devanagari_token(token: str) -> bool:
    return 0 < len(token) <= 4 and all(map(_is_devanagari, token))


def _check_period_as_sentence_end(text: str) -> Iterator[_Finding]:
    """Y1: a '.' ending a Devanagari sentence should be '।'."""
    n = len(text)
    for i, c in enumerate(text):
        if c != "." or not _devanagari_before(text, i):
            continue
        nxt = text[i + 1] if i + 1 < n else None
        if nxt is None or nxt in "\n\r":
            flagged = True
        elif nxt == " ":
            flagged = not _is_likely_abbreviation(text, i)
        else:
            continue
        part_of_ellipsis = (i >= 2 and text[i - 1] == "." and text[i - 2] == ".") or (
            nxt == "."
        )
        if flagged and not part_of_ellipsis:
            yield (i, i + 1, ".", "।", _RULE_PURNA_VIRAM)


def _is_likely_abbreviation(text: str, pos: int) -> bool:
    start = _word_start(text, pos)
    word = text[start:pos]
    if word in _KNOWN_ABBREVIATIONS:
        return True
    return _is_short_devanagari_token(word) and (
        _follows_abbreviation_chain(text, pos)
        or _preceded_by_abbreviation_chain(text, start)
    )


def _follows_abbreviation_chain(text: str, period_pos: int) -> bool:
    n = len(text)
    i = period_pos + 1
    while i < n and text[i] in _ASCII_WHITESPACE:
        i += 1
    if i >= n:
        return False
    j = i
    while j < n and _is_devanagari(text[j]):
        j += 1
    if j == i or not _is_short_devanagari_token(text[i:j]):
        return False
    return j < n and text[j] == "."


def _preceded_by_abbreviation_chain(text: str, word_start: int) -> bool:
    if word_start == 0:
        return False
    i = word_start
    while i > 0 and text[i - 1] in _ASCII_WHITESPACE:
        i -= 1
    if i == 0 or text[i - 1] != ".":
        return False
    prev_period = i - 1
    prev_start = _word_start(text, prev_period)
    return _is_short_devanagari_token(text[prev_start:prev_period])


def _check_ellipsis(text: str) -> Iterator[_Finding]:
    """Y3: three or more periods should be the ellipsis character."""
    for match in _ELLIPSIS_RE.finditer(text):
        start, end = match.span()
        if _devanagari_near(text, start, end):
            yield (start, end, match.group(), "\u2026", _RULE_ELLIPSIS)


def _check_quotes(text: str) -> Iterator[_Finding]:
    """Y6/Y7: straight quotes in Devanagari context should be smart quotes."""
    for i, c in enumerate(text):
        if c not in "\"'" or not _devanagari_near(text, i, i + 1):
            continue
        if i == 0:
            is_opening = True
        else:
            prev = text[i - 1]
            is_opening = _is_whitespace(prev) or prev in "([{-"
        if c == '"':
            expected = "\u201c" if is_opening else "\u201d"
            rule = _RULE_DOUBLE_QUOTE
        else:
            expected = "\u2018" if is_opening else "\u2019"
            rule = _RULE_SINGLE_QUOTE
        yield (i, i + 1, c, expected, rule)


def _check_spacing(text: str) -> Iterator[_Finding]:
    """Y2/Y4/Y13/Y14: ?, !, ; and , attach to the previous word."""
    for i, c in enumerate(text):
        if (
            c in "?!;,"
            and _devanagari_before(text, i)
            and i > 0
            and _is_whitespace(text[i - 1])
        ):
            yield (i - 1, i + 1, f" {c}", c, _RULE_SPACING)


def _check_tiryak_viram_spacing(text: str) -> Iterator[_Finding]:
    """Y12: no spaces around '/' joining alternatives."""
    n = len(text)
    for i, c in enumerate(text):
        if c != "/":
            continue
        space_before = i > 0 and _is_whitespace(text[i - 1])
        space_after = i + 1 < n and _is_whitespace(text[i + 1])
        if not (space_before or space_after):
            continue
        if not _devanagari_near(text, i, i + 1):
            continue
        start = i - 1 if space_before else i
        end = i + 2 if space_after else i + 1
        yield (start, end, text[start:end], "/", _RULE_TIRYAK)


def _check_aijan_pair_spacing(text: str) -> Iterator[_Finding]:
    """Y11: the ऐजन mark is two commas with no space between."""
    n = len(text)
    i = 0
    while i < n:
        if text[i] != ",":
            i += 1
            continue
        j = i + 1
        while j < n and text[j] in _ASCII_WHITESPACE:
            j += 1
        had_space = j > i + 1
        if had_space and j < n and text[j] == "," and _devanagari_near(text, i, j + 1):
            yield (i, j + 1, text[i : j + 1], ",,", _RULE_AIJAN)
            i = j + 1
            continue
        i += 1


def _check_parentheses_balance(text: str) -> Iterator[_Finding]:
    """Y8: unmatched '(' or ')' in Devanagari context."""
    open_positions: list[int] = []
    for i, c in enumerate(text):
        if c == "(":
            open_positions.append(i)
        elif c == ")":
            if open_positions:
                open_positions.pop()
            elif _devanagari_near(text, i, i + 1):
                yield (i, i + 1, ")", "()", _RULE_KOSHTHAK)
    for start in open_positions:
        if _devanagari_near(text, start, start + 1):
            yield (start, start + 1, "(", "()", _RULE_KOSHTHAK)