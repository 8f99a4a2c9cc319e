"""Locate catalogue and source files inside a project tree."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from .config import DiscoverySettings

logger = logging.getLogger(__name__)

LOCALE_RE = re.compile(r"^[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{2,4})?$")


def _walk(root: Path, settings: DiscoverySettings) -> Iterable[Path]:
    excluded = set(settings.excluded_dirs)
    for path in sorted(root.rglob("*")):
        if not path.is_file():
            continue
        relative = path.relative_to(root)
        if excluded.intersection(relative.parts[:-1]):
            continue
        yield path


def find_catalog_files(
    root: Path | str, settings: DiscoverySettings | None = None
) -> list[Path]:
    """Return catalogue files: known extension and a marker in the relative path."""

    root = Path(root)
    settings = settings or DiscoverySettings()
    extensions = {ext.lower() for ext in settings.catalog_extensions}
    found: list[Path] = []
    for path in _walk(root, settings):
        if path.suffix.lower() not in extensions:
            continue
        relative = path.relative_to(root).as_posix()
        if any(marker in relative for marker in settings.catalog_markers):
            found.append(path)
    return found


def find_source_files(
    root: Path | str, settings: DiscoverySettings | None = None
) -> list[Path]:
    root = Path(root)
    settings = settings or DiscoverySettings()
    extensions = {ext.lower() for ext in settings.source_extensions}
    return [path for path in _walk(root, settings) if path.suffix.lower() in extensions]


def extract_locale(path: Path | str) -> str | None:
    """Infer the locale of a catalogue from its file name or parent directory.

    ``messages/en.json`` and ``locales/pt-BR/common.json`` both resolve; a
    file whose name and directory both fail to look like a locale code
    resolves to ``None``.
    """

    path = Path(path)
    if LOCALE_RE.match(path.stem):
        return path.stem
    if LOCALE_RE.match(path.parent.name):
        return path.parent.name
    return None


def group_by_locale(files: Iterable[Path]) -> dict[str, list[Path]]:
    grouped: dict[str, list[Path]] = {}
    for path in files:
        locale = extract_locale(path)
        if locale is None:
            logger.debug("No locale inferred for %s; skipping", path)
            continue
        grouped.setdefault(locale, []).append(path)
    return grouped


__all__ = [
    "extract_locale",
    "find_catalog_files",
    "find_source_files",
    "group_by_locale",
]
