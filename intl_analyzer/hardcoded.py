"""Heuristic detection of user-facing text that bypasses the translation system.

Classification is a layered pipeline over single source lines:

1. span extraction: text between tags, inside ``{...}`` expressions, inside
   selected quoted attributes, and bare text between ``>`` and ``<``;
2. structural rejection: cheap checks that each name the reason a span is
   code or markup noise;
3. acceptance: ordered heuristics, first match decides.

The tables and thresholds come from :class:`~intl_analyzer.config.ClassifierSettings`
and are never mutated, so one classifier can be shared between threads.
"""

from __future__ import annotations

import logging
import re
import string

from .config import ClassifierSettings
from .records import HARDCODED_TEXT, CandidateSpan, SpanKind, TranslationRecord

logger = logging.getLogger(__name__)

TAG_TEXT_RE = re.compile(r"<[^<>]+>([^<>{}\n]*[A-Za-z][^<>{}\n]*)</[^<>]+>")
EXPRESSION_RE = re.compile(r"\{([^{}]*[A-Za-z][^{}]*)\}")
BARE_TEXT_RE = re.compile(r">([^<>]*[A-Za-z][^<>]*)<")
STRING_LITERAL_RE = re.compile(r"""^(['"`])([^'"`]*)\1$""")

TRANSLATION_LIKE_RE = re.compile(r"(?<![\w$])t(?:\.\w+)?\(")
DECLARATION_RE = re.compile(r"\b(?:import|export|function|const)\b")
CAMEL_CASE_RE = re.compile(r"^[a-z][a-z0-9]*[A-Z][A-Za-z0-9]*$")
SNAKE_CASE_RE = re.compile(r"^[A-Za-z0-9]+(?:_[A-Za-z0-9]+)+$")
DOTTED_PATH_RE = re.compile(r"^[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)+$")
KEY_LITERAL_RE = re.compile(r"^[a-z][A-Za-z0-9_]*(?:\.[A-Za-z0-9_]+)*$")

QUOTES = ("'", '"', "`")
ACCESSOR_PREFIXES = ("use", "get")
OPERATORS = ("=", "+", "-")
COMMENT_PREFIXES = ("//", "/*", "*/", "<!--")
COMMENT_SUFFIXES = ("*/", "-->")
URL_MARKERS = ("http", "www.", ".com")
TERMINAL_PUNCTUATION = (".", "!", "?")


class HardcodedTextClassifier:
    """Decide whether text fragments in markup are user-facing prose."""

    def __init__(self, settings: ClassifierSettings | None = None) -> None:
        self.settings = settings or ClassifierSettings()
        names = "|".join(re.escape(name) for name in self.settings.attribute_names)
        self._attribute_re = re.compile(
            r"(?<![\w-])(?:" + names + r""")\s*=\s*(["'])(.*?)\1"""
        )
        self._short_words = frozenset(
            word.lower() for word in self.settings.short_ui_words
        )
        self._key_tokens = frozenset(
            token.lower() for token in self.settings.key_tokens
        )
        self._punctuation = frozenset(self.settings.punctuation) | frozenset(
            string.punctuation
        )

    # -- stage 1 -------------------------------------------------------------

    def extract_spans(self, line: str, line_number: int = 0) -> list[CandidateSpan]:
        """Return every candidate span on *line*, in pattern order."""

        spans: list[CandidateSpan] = []

        def _add(raw: str, kind: SpanKind) -> None:
            text = raw.strip()
            if text:
                spans.append(CandidateSpan(text=text, line=line_number, kind=kind))

        for match in TAG_TEXT_RE.finditer(line):
            _add(match.group(1), "tag_text")
        for match in EXPRESSION_RE.finditer(line):
            content = match.group(1).strip()
            literal = STRING_LITERAL_RE.match(content)
            if literal and not (literal.group(1) == "`" and "${" in literal.group(2)):
                _add(literal.group(2), "string_literal")
            else:
                _add(content, "expression")
        if self.settings.attribute_names:
            for match in self._attribute_re.finditer(line):
                _add(match.group(2), "attribute")
        for match in BARE_TEXT_RE.finditer(line):
            _add(match.group(1), "bare_text")
        return spans

    # -- stage 2 -------------------------------------------------------------

    def _is_key_literal(self, text: str) -> bool:
        if len(text) > self.settings.key_token_max_length or " " in text:
            return False
        if not KEY_LITERAL_RE.match(text):
            return False
        return any(segment.lower() in self._key_tokens for segment in text.split("."))

    def _is_identifier(self, text: str) -> bool:
        return bool(
            CAMEL_CASE_RE.match(text)
            or SNAKE_CASE_RE.match(text)
            or DOTTED_PATH_RE.match(text)
        )

    def rejection_reason(self, span: CandidateSpan) -> str | None:
        """Return why *span* is not user-facing, or ``None`` if no check fires."""

        text = span.text
        settings = self.settings

        if TRANSLATION_LIKE_RE.search(text):
            return "translation_call"
        if "<" in text or ">" in text:
            return "markup"
        if ("(" in text or ")" in text) and any(quote in text for quote in QUOTES):
            return "call_expression"
        if text.startswith(COMMENT_PREFIXES) or text.endswith(COMMENT_SUFFIXES):
            return "comment"
        if DECLARATION_RE.search(text) or (text.startswith("{") and text.endswith("}")):
            return "declaration"
        if text.startswith(ACCESSOR_PREFIXES):
            return "accessor"
        if text.startswith("/") or any(marker in text for marker in URL_MARKERS):
            return "url"
        if self._is_key_literal(text):
            return "key_literal"
        if self._is_identifier(text):
            return "identifier"
        if span.kind == "expression":
            # a non-literal expression is code even when it reads like a word
            return "expression"
        if any(pattern in text for pattern in settings.technical_patterns):
            return "technical"
        if not text.strip() or len(text) < settings.min_text_length:
            return "too_short"
        if any(operator in text for operator in OPERATORS):
            return "operator"
        digits = sum(char.isdigit() for char in text)
        if digits * 2 >= len(text):
            return "numeric"
        if len(text) == 1 and text not in settings.punctuation:
            return "single_char"
        return None

    # -- stage 3 -------------------------------------------------------------

    def alpha_ratio(self, text: str) -> float | None:
        """Share of ASCII letters in *text*; ``None`` when nothing is countable."""

        letters = sum(char in string.ascii_letters for char in text)
        if self.settings.ratio_ignores_punctuation:
            denominator = sum(
                1
                for char in text
                if not char.isspace() and char not in self._punctuation
            )
        else:
            denominator = len(text)
        if denominator == 0:
            return None
        return letters / denominator

    def ratio_threshold(self, length: int) -> float:
        settings = self.settings
        if length < settings.medium_text_threshold:
            return settings.short_text_ratio
        if length < settings.long_text_threshold:
            return settings.medium_text_ratio
        return settings.long_text_ratio

    def acceptance_reason(self, text: str) -> str | None:
        """Return the first acceptance rule *text* satisfies, if any."""

        settings = self.settings
        if 2 <= len(text) <= 4 and text.lower() in self._short_words:
            return "short_ui_word"
        if any(pattern in text for pattern in settings.ui_patterns):
            return "ui_pattern"
        if len(text.split()) >= settings.multiword_min_tokens:
            if not settings.strict_multiword:
                return "multiword"
            if text[0].isupper() or text.endswith(TERMINAL_PUNCTUATION):
                return "multiword"
        if len(text) > 3 and text[0].isupper() and text.endswith(TERMINAL_PUNCTUATION):
            return "sentence"
        ratio = self.alpha_ratio(text)
        if ratio is not None and ratio >= self.ratio_threshold(len(text)):
            return "alpha_ratio"
        return None

    # -- pipeline ------------------------------------------------------------

    def explain(self, span: CandidateSpan) -> tuple[bool, str]:
        """Return ``(accepted, reason)`` for *span*."""

        rejected = self.rejection_reason(span)
        if rejected is not None:
            return False, rejected
        accepted = self.acceptance_reason(span.text)
        if accepted is None:
            return False, "no_rule"
        return True, accepted

    def is_user_facing(self, text: str, kind: SpanKind = "tag_text") -> bool:
        accepted, _ = self.explain(CandidateSpan(text=text.strip(), line=0, kind=kind))
        return accepted

    def classify_line(
        self, line: str, line_number: int, file: str = ""
    ) -> list[TranslationRecord]:
        """Return one ``hardcoded_text`` record per distinct accepted span."""

        records: list[TranslationRecord] = []
        seen: set[str] = set()
        for span in self.extract_spans(line, line_number):
            if span.text in seen:
                continue
            accepted, reason = self.explain(span)
            if not accepted:
                logger.debug(
                    "%s:%d rejected %r (%s)", file, line_number, span.text, reason
                )
                continue
            seen.add(span.text)
            records.append(
                TranslationRecord(
                    key=span.text, file=file, line=line_number, origin=HARDCODED_TEXT
                )
            )
        return records


__all__ = ["HardcodedTextClassifier"]
