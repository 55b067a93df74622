"""Split Nepali text into word tokens carrying UTF-8 byte offsets."""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import accumulate

__all__ = ["Token", "tokenize"]

# Runs of non-whitespace. The information separators U+001C..U+001F count as
# whitespace for str.isspace but are kept inside words here.
_SEGMENT_RE = re.compile(r"(?:[^\s]|[\x1c-\x1f])+")

_PUNCTUATION = frozenset(".,!?;:-()[]{}\"'/।…")


@dataclass(frozen=True)
class Token:
    """A word with surrounding punctuation removed.

    ``start`` and ``end`` are UTF-8 byte offsets into the original text.
    """

    text: str
    start: int
    end: int


def _has_devanagari(s: str) -> bool:
    return any("\u0900" <= c <= "\u097f" for c in s)


def tokenize(text: str) -> list[Token]:
    """Return the Devanagari-bearing words of ``text``.

    The text is split on whitespace and leading and trailing punctuation is
    stripped from each piece. Pieces without a Devanagari character are
    dropped.
    """
    offsets = list(
        accumulate(
            (len(c.encode("utf-8", "surrogatepass")) for c in text), initial=0
        )
    )
    tokens: list[Token] = []
    for match in _SEGMENT_RE.finditer(text):
        seg_start, seg_end = match.span()
        start = seg_start
        while start < seg_end and text[start] in _PUNCTUATION:
            start += 1
        end = seg_end
        while end > start and text[end - 1] in _PUNCTUATION:
            end -= 1
        word = text[start:end]
        if word and _has_devanagari(word):
            tokens.append(Token(text=word, start=offsets[start], end=offsets[end]))
    return tokens