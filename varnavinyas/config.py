"""Editor server configuration, read from client settings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

from .categories import DiagnosticCategory

__all__ = ["PunctuationModeSetting", "EnabledCategories", "Config"]


class PunctuationModeSetting(Enum):
    """How Section 5 punctuation diagnostics are classified."""

    STRICT = "strict"
    NORMALIZED_EDITORIAL = "normalized-editorial"


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _require_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"setting {key!r} must be a boolean, got {value!r}")
    return value


def _require_mapping(key: str, value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"setting {key!r} must be an object, got {value!r}")
    return value


@dataclass
class EnabledCategories:
    """Per-category toggles; every category is enabled by default."""

    hrasva_dirgha: bool = True
    chandrabindu: bool = True
    sha_sha_s: bool = True
    ri_kri: bool = True
    halanta: bool = True
    ya_e: bool = True
    ksha_chhya: bool = True
    sandhi: bool = True
    punctuation: bool = True
    shuddha_table: bool = True

    def is_enabled(self, category: DiagnosticCategory) -> bool:
        """Whether diagnostics of ``category`` should be reported."""
        return getattr(self, _CATEGORY_FIELDS[category])

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> EnabledCategories:
        """Build from camelCase keys; missing keys keep their defaults."""
        settings = _require_mapping("categories", settings)
        values = {}
        for f in fields(cls):
            key = _camel(f.name)
            if key in settings:
                values[f.name] = _require_bool(key, settings[key])
        return cls(**values)


_CATEGORY_FIELDS: dict[DiagnosticCategory, str] = {
    DiagnosticCategory.HRASVA_DIRGHA: "hrasva_dirgha",
    DiagnosticCategory.CHANDRABINDU: "chandrabindu",
    DiagnosticCategory.SHA_SHA_S: "sha_sha_s",
    DiagnosticCategory.RI_KRI: "ri_kri",
    DiagnosticCategory.HALANTA: "halanta",
    DiagnosticCategory.YA_E: "ya_e",
    DiagnosticCategory.KSHA_CHHYA: "ksha_chhya",
    DiagnosticCategory.SANDHI: "sandhi",
    DiagnosticCategory.PUNCTUATION: "punctuation",
    DiagnosticCategory.SHUDDHA_TABLE: "shuddha_table",
}


@dataclass
class Config:
    """Server configuration synced from the client."""

    categories: EnabledCategories = field(default_factory=EnabledCategories)
    punctuation_mode: PunctuationModeSetting = PunctuationModeSetting.STRICT
    debug_include_noop_heuristics: bool = False

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> Config:
        """Build a configuration from a settings object.

        Unknown keys are ignored and missing keys keep their defaults.
        Raises ValueError when a known key holds a value of the wrong kind.
        """
        settings = _require_mapping("settings", settings)
        config = cls()
        if "categories" in settings:
            config.categories = EnabledCategories.from_settings(
                settings["categories"]
            )
        if "punctuation_mode" in settings:
            raw = settings["punctuation_mode"]
            try:
                config.punctuation_mode = PunctuationModeSetting(raw)
            except ValueError:
                raise ValueError(
                    f"unknown punctuation_mode {raw!r}; expected one of "
                    + ", ".join(m.value for m in PunctuationModeSetting)
                ) from None
        if "debug_include_noop_heuristics" in settings:
            config.debug_include_noop_heuristics = _require_bool(
                "debug_include_noop_heuristics",
                settings["debug_include_noop_heuristics"],
            )
        return config