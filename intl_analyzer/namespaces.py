"""Running per-file table of translation-function bindings."""

from __future__ import annotations

import re
from typing import Literal

BindingForm = Literal["ambient", "assignment", "destructuring"]

DEFAULT_ACCESSOR = "t"

_ARGUMENT = (
    r"""(?:(['"`])(?P<literal>[^'"`]+)\1"""
    r"""|\{[^}]*?\bnamespace\s*:\s*(['"`])(?P<option>[^'"`]+)\3[^}]*\})"""
)
CALL_RE = re.compile(
    r"(?<![\w$.])(?:useTranslations|getTranslations)\(\s*" + _ARGUMENT + r"\s*\)"
)
ASSIGNED_PREFIX_RE = re.compile(r"=\s*(?:await\s+)?$")
ASSIGNMENT_RE = re.compile(
    r"(?:const|let|var)\s+(?P<name>[A-Za-z_$][\w$]*)\s*=\s*(?:await\s+)?$"
)
DESTRUCTURING_RE = re.compile(
    r"(?:const|let|var)\s*\{(?P<fields>[^}]*)\}\s*=\s*(?:await\s+)?$"
)
FIELD_RE = re.compile(r"^([A-Za-z_$][\w$]*)(?:\s*:\s*([A-Za-z_$][\w$]*))?$")


def _namespace_of(match: re.Match[str]) -> str:
    return match.group("literal") or match.group("option")


class NamespaceTracker:
    """Track which identifiers resolve to which namespace while scanning a file.

    Bindings are file-wide and overwritten in place; there is no block
    scoping. One tracker instance belongs to exactly one file scan.
    """

    def __init__(self, accessor: str = DEFAULT_ACCESSOR) -> None:
        self.accessor = accessor
        self.default_namespace: str | None = None
        self.bindings: dict[str, str] = {}

    def feed(self, line: str) -> BindingForm | None:
        """Update the table from *line* and report which binding form matched."""

        match = CALL_RE.search(line)
        if match is None:
            return None
        namespace = _namespace_of(match)
        head = line[: match.start()]

        if not ASSIGNED_PREFIX_RE.search(head):
            self.default_namespace = namespace
            self.bindings.pop(self.accessor, None)
            return "ambient"

        assignment = ASSIGNMENT_RE.search(head)
        if assignment:
            self.bindings[assignment.group("name")] = namespace
            return "assignment"

        destructuring = DESTRUCTURING_RE.search(head)
        if destructuring:
            bound = False
            for raw in destructuring.group("fields").split(","):
                field = FIELD_RE.match(raw.strip())
                if field and field.group(1) == self.accessor:
                    self.bindings[field.group(2) or field.group(1)] = namespace
                    bound = True
            if bound:
                return "destructuring"
        return None

    def is_bound(self, identifier: str) -> bool:
        return identifier == self.accessor or identifier in self.bindings

    def resolve(self, identifier: str) -> str | None:
        """Return the namespace for *identifier*, or ``None`` when unqualified."""

        if identifier in self.bindings:
            return self.bindings[identifier]
        if identifier == self.accessor:
            return self.default_namespace
        return None


__all__ = ["BindingForm", "DEFAULT_ACCESSOR", "NamespaceTracker"]
