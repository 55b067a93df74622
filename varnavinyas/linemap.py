"""Conversion between UTF-8 byte offsets and editor line/UTF-16 positions."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

__all__ = ["Position", "Range", "LineIndex"]


@dataclass(frozen=True, order=True)
class Position:
    """A zero-based line and UTF-16 code-unit column."""

    line: int
    character: int


@dataclass(frozen=True)
class Range:
    """A start and end position; the end is exclusive."""

    start: Position
    end: Position


def _utf16_len(s: str) -> int:
    return len(s.encode("utf-16-le", "surrogatepass")) // 2


class LineIndex:
    """Line-start table for a text, converting byte offsets to positions and back."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._data = text.encode("utf-8", "surrogatepass")
        self._line_starts = [0]
        self._line_starts.extend(
            i + 1 for i, b in enumerate(self._data) if b == 0x0A
        )

    def _decode(self, start: int, end: int) -> str:
        try:
            return self._data[start:end].decode("utf-8", "surrogatepass")
        except UnicodeDecodeError:
            raise ValueError(
                f"byte range {start}..{end} does not fall on character boundaries"
            ) from None

    def byte_offset_to_position(self, offset: int) -> Position:
        """Convert a UTF-8 byte offset to a line and UTF-16 column."""
        if not 0 <= offset <= len(self._data):
            raise ValueError(
                f"byte offset {offset} is outside the text (length {len(self._data)})"
            )
        line = bisect_right(self._line_starts, offset) - 1
        line_start = self._line_starts[line]
        column = _utf16_len(self._decode(line_start, offset))
        return Position(line=line, character=column)

    def byte_span_to_range(self, span: tuple[int, int]) -> Range:
        """Convert a (start, end) byte span to a range."""
        start, end = span
        return Range(
            start=self.byte_offset_to_position(start),
            end=self.byte_offset_to_position(end),
        )

    def position_to_byte_offset(self, position: Position) -> int:
        """Convert a line and UTF-16 column back to a UTF-8 byte offset.

        A line past the end maps to the end of the text; a column past the
        end of its line maps to the end of that line (after its newline).
        """
        line = position.line
        if line >= len(self._line_starts):
            return len(self._data)
        line_start = self._line_starts[line]
        if line + 1 < len(self._line_starts):
            line_text = self._decode(line_start, self._line_starts[line + 1])
        else:
            line_text = self._decode(line_start, len(self._data))

        units = 0
        offset = line_start
        for ch in line_text:
            if units >= position.character:
                break
            units += _utf16_len(ch)
            offset += len(ch.encode("utf-8", "surrogatepass"))
        return offset