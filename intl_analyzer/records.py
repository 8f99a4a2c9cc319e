"""Record types shared by the extractors, the classifier and the reconciler."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Literal

Origin = Literal["declared", "translation_call", "hardcoded_text"]
SpanKind = Literal["tag_text", "expression", "string_literal", "attribute", "bare_text"]

DECLARED: Origin = "declared"
TRANSLATION_CALL: Origin = "translation_call"
HARDCODED_TEXT: Origin = "hardcoded_text"


@dataclass(slots=True)
class TranslationRecord:
    """One observation of a translation key.

    ``line`` is 1-based for source observations and 0 for catalog entries,
    which are not line-addressable.
    """

    key: str
    file: str
    line: int
    origin: Origin
    locale: str | None = None

    def with_locale(self, locale: str) -> "TranslationRecord":
        return replace(self, locale=locale)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "file": self.file,
            "line": self.line,
            "origin": self.origin,
            "locale": self.locale,
        }


@dataclass(frozen=True, slots=True)
class CandidateSpan:
    """A text fragment captured from a single source line."""

    text: str
    line: int
    kind: SpanKind = "tag_text"


@dataclass(slots=True)
class SourceScan:
    """Everything a single source file contributes to an analysis."""

    file: str
    used: dict[str, TranslationRecord] = field(default_factory=dict)
    hardcoded: list[TranslationRecord] = field(default_factory=list)


@dataclass(slots=True)
class LocaleAnalysisResult:
    locale: str
    unused: list[TranslationRecord] = field(default_factory=list)
    undeclared: list[TranslationRecord] = field(default_factory=list)
    total_translations: int = 0
    used_translations: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "locale": self.locale,
            "total_translations": self.total_translations,
            "used_translations": self.used_translations,
            "unused": [record.to_dict() for record in self.unused],
            "undeclared": [record.to_dict() for record in self.undeclared],
        }


@dataclass(slots=True)
class AnalysisResult:
    """Aggregated outcome of one analysis run."""

    locales: dict[str, LocaleAnalysisResult] = field(default_factory=dict)
    unused: list[TranslationRecord] = field(default_factory=list)
    undeclared: list[TranslationRecord] = field(default_factory=list)
    hardcoded: list[TranslationRecord] = field(default_factory=list)
    total_translations: int = 0
    used_translations: int = 0

    @property
    def has_findings(self) -> bool:
        return bool(self.unused or self.undeclared or self.hardcoded)

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": {
                "total_translations": self.total_translations,
                "used_translations": self.used_translations,
                "unused_translations": len(self.unused),
                "undeclared_translations": len(self.undeclared),
                "hardcoded_strings": len(self.hardcoded),
                "locales_analyzed": len(self.locales),
            },
            "locales": {
                name: result.to_dict() for name, result in sorted(self.locales.items())
            },
            "unused": [record.to_dict() for record in self.unused],
            "undeclared": [record.to_dict() for record in self.undeclared],
            "hardcoded": [record.to_dict() for record in self.hardcoded],
        }


__all__ = [
    "AnalysisResult",
    "CandidateSpan",
    "DECLARED",
    "HARDCODED_TEXT",
    "LocaleAnalysisResult",
    "Origin",
    "SourceScan",
    "SpanKind",
    "TRANSLATION_CALL",
    "TranslationRecord",
]
