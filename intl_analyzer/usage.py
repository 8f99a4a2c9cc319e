"""Recognise translation calls in a source line and resolve their keys."""

from __future__ import annotations

import re
from typing import Iterable

from .namespaces import NamespaceTracker
from .records import TRANSLATION_CALL, TranslationRecord

EXTENDED_METHODS: tuple[str, ...] = ("rich", "markup", "raw", "has")

_IDENT = r"(?<![\w$.])(?P<ident>[A-Za-z_$][\w$]*)"
_KEY = r"""\(\s*(?P<quote>['"`])(?P<key>[^'"`]*)(?P=quote)"""

DIRECT_CALL_RE = re.compile(_IDENT + _KEY)


def resolve_key(key: str, namespace: str | None) -> str:
    """Qualify *key* with *namespace* unless it is already a dotted path."""

    if "." in key or not namespace:
        return key
    return f"{namespace}.{key}"


class UsageExtractor:
    """Emit ``translation_call`` records for the calls found on one line.

    Two call shapes are recognised: ``ident("key")`` and
    ``ident.<method>("key")`` for the extended API methods. Only identifiers
    the :class:`NamespaceTracker` knows about count as translation functions.
    """

    def __init__(self, methods: Iterable[str] = EXTENDED_METHODS) -> None:
        self.methods = tuple(methods)
        alternatives = "|".join(re.escape(method) for method in self.methods)
        self._extended_re = re.compile(
            _IDENT + r"\.(?P<method>" + alternatives + r")" + _KEY
        )

    def iter_calls(self, line: str) -> list[tuple[str, str]]:
        """Return ``(identifier, literal key)`` pairs in line order."""

        found: list[tuple[int, str, str]] = []
        patterns = [DIRECT_CALL_RE]
        if self.methods:
            patterns.append(self._extended_re)
        for pattern in patterns:
            for match in pattern.finditer(line):
                key = match.group("key")
                # template literals with interpolation are dynamic keys
                if match.group("quote") == "`" and "${" in key:
                    continue
                found.append((match.start(), match.group("ident"), key))
        found.sort(key=lambda item: item[0])
        return [(ident, key) for _, ident, key in found]

    def extract(
        self,
        line: str,
        line_number: int,
        tracker: NamespaceTracker,
        file: str = "",
    ) -> list[TranslationRecord]:
        records: list[TranslationRecord] = []
        for ident, key in self.iter_calls(line):
            if not key or not tracker.is_bound(ident):
                continue
            records.append(
                TranslationRecord(
                    key=resolve_key(key, tracker.resolve(ident)),
                    file=file,
                    line=line_number,
                    origin=TRANSLATION_CALL,
                )
            )
        return records


__all__ = ["EXTENDED_METHODS", "UsageExtractor", "resolve_key"]
