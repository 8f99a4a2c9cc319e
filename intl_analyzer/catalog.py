"""Loading translation catalogues and flattening them into dotted key paths."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import yaml

from .records import DECLARED, TranslationRecord

YAML_SUFFIXES = {".yaml", ".yml"}


class CatalogParseError(ValueError):
    """Raised when a catalogue file is not a well-formed mapping document."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Could not parse catalog {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


def extract_keys(document: Any, prefix: str = "") -> list[str]:
    """Return every dotted key path reachable in *document*, depth first.

    Intermediate mapping keys are emitted alongside leaves so that a parent
    group counts as used once any descendant is. Mapping elements of a list
    continue under ``prefix[index]``; other list elements emit nothing.
    """

    keys: list[str] = []
    if isinstance(document, Mapping):
        for key, value in document.items():
            current = f"{prefix}.{key}" if prefix else str(key)
            keys.append(current)
            if isinstance(value, (Mapping, list)):
                keys.extend(extract_keys(value, current))
    elif isinstance(document, list):
        for index, item in enumerate(document):
            if isinstance(item, Mapping):
                keys.extend(extract_keys(item, f"{prefix}[{index}]"))
    return keys


def load_catalog(path: Path | str) -> dict[str, Any]:
    """Read a JSON or YAML catalogue and return its top-level mapping."""

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8-sig")
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(text)
            if data is None:
                return {}
        else:
            data = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise CatalogParseError(path, str(exc)) from exc
    if not isinstance(data, dict):
        raise CatalogParseError(path, "top-level value must be a mapping")
    return data


def parse_catalog_file(path: Path | str) -> dict[str, TranslationRecord]:
    """Return the declared keys of one catalogue file."""

    document = load_catalog(path)
    return {
        key: TranslationRecord(key=key, file=str(path), line=0, origin=DECLARED)
        for key in extract_keys(document)
    }


__all__ = ["CatalogParseError", "extract_keys", "load_catalog", "parse_catalog_file"]
