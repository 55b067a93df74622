"""Categories of spelling and punctuation diagnostics."""

from __future__ import annotations

from enum import Enum

__all__ = ["DiagnosticCategory"]


class DiagnosticCategory(Enum):
    """Category of a diagnostic; the value is its stable machine code."""

    HRASVA_DIRGHA = "HrasvaDirgha"
    CHANDRABINDU = "Chandrabindu"
    SHA_SHA_S = "ShaShaS"
    RI_KRI = "RiKri"
    HALANTA = "Halanta"
    YA_E = "YaE"
    KSHA_CHHYA = "KshaChhya"
    SANDHI = "Sandhi"
    PUNCTUATION = "Punctuation"
    SHUDDHA_TABLE = "ShuddhaTable"

    def as_code(self) -> str:
        """Stable machine-readable code used in serialized output."""
        return self.value

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS: dict[DiagnosticCategory, str] = {
    DiagnosticCategory.HRASVA_DIRGHA: "ह्रस्व/दीर्घ",
    DiagnosticCategory.CHANDRABINDU: "चन्द्रबिन्दु",
    DiagnosticCategory.SHA_SHA_S: "श/ष/स",
    DiagnosticCategory.RI_KRI: "ऋ/कृ",
    DiagnosticCategory.HALANTA: "हलन्त",
    DiagnosticCategory.YA_E: "य/ए",
    DiagnosticCategory.KSHA_CHHYA: "क्ष/छ्य",
    DiagnosticCategory.SANDHI: "सन्धि",
    DiagnosticCategory.PUNCTUATION: "चिह्न",
    DiagnosticCategory.SHUDDHA_TABLE: "शुद्ध-अशुद्ध",
}