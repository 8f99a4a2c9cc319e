"""Reconcile declared catalogue keys with source usage across locales."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable, Mapping

from .catalog import CatalogParseError, parse_catalog_file
from .config import AnalyzerSettings
from .discovery import find_catalog_files, find_source_files, group_by_locale
from .hardcoded import HardcodedTextClassifier
from .records import (
    TRANSLATION_CALL,
    AnalysisResult,
    LocaleAnalysisResult,
    SourceScan,
    TranslationRecord,
)
from .scanner import scan_source_file
from .usage import UsageExtractor

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def used_prefixes(keys: Iterable[str]) -> set[str]:
    """Return *keys* plus every ancestor path a used key implies."""

    prefixes: set[str] = set()
    for key in keys:
        prefixes.add(key)
        for index, char in enumerate(key):
            if char in ".[" and index:
                prefixes.add(key[:index])
    return prefixes


def reconcile_locale(
    locale: str,
    declared: Mapping[str, TranslationRecord],
    used: Mapping[str, TranslationRecord],
) -> LocaleAnalysisResult:
    """Compute unused and undeclared keys for one locale.

    A declared key is used when a call references it or any key beneath it.
    Only ``translation_call`` records can be undeclared.
    """

    call_keys = {
        key for key, record in used.items() if record.origin == TRANSLATION_CALL
    }
    covered = used_prefixes(call_keys)

    result = LocaleAnalysisResult(locale=locale)
    for key, record in declared.items():
        if key not in covered:
            result.unused.append(record.with_locale(locale))
    for key in sorted(call_keys):
        if key not in declared:
            result.undeclared.append(used[key].with_locale(locale))
    result.total_translations = len(declared)
    result.used_translations = len(declared) - len(result.unused)
    return result


def merge_hardcoded(records: Iterable[TranslationRecord]) -> list[TranslationRecord]:
    """Deduplicate hardcoded findings on ``(text, file, line)``, keeping order."""

    seen: set[tuple[str, str, int]] = set()
    merged: list[TranslationRecord] = []
    for record in records:
        marker = (record.key, record.file, record.line)
        if marker in seen:
            continue
        seen.add(marker)
        merged.append(record)
    return merged


def validate_project_path(path: Path) -> None:
    if not path.exists():
        raise FileNotFoundError(f"Project path does not exist: {path}")
    if not path.is_dir():
        raise NotADirectoryError(f"Project path is not a directory: {path}")


class Analyzer:
    """Run a full analysis over a project directory.

    Parameters
    ----------
    project_path:
        Root of the project to analyse.
    settings:
        Discovery and classifier settings; defaults when omitted.
    progress:
        Optional ``(stage, completed, total)`` callback invoked inline.
    workers:
        Number of threads used to scan source files. Results are merged
        sequentially in file order, so the last file to mention a key wins.
    """

    def __init__(
        self,
        project_path: Path | str,
        settings: AnalyzerSettings | None = None,
        progress: ProgressCallback | None = None,
        workers: int = 1,
    ) -> None:
        self.project_path = Path(project_path)
        self.settings = settings or AnalyzerSettings()
        self.progress = progress
        self.workers = max(1, int(workers))
        self.classifier = HardcodedTextClassifier(self.settings.classifier)
        self.extractor = UsageExtractor()

    def _report(self, stage: str, completed: int, total: int) -> None:
        if self.progress is not None:
            self.progress(stage, completed, total)

    def _scan_one(self, path: Path) -> SourceScan | None:
        try:
            return scan_source_file(
                path, self.classifier, self.extractor, accessor=self.settings.accessor
            )
        except OSError as exc:
            logger.warning("Could not read source file %s: %s", path, exc)
            return None

    def scan_sources(
        self, files: list[Path]
    ) -> tuple[dict[str, TranslationRecord], list[TranslationRecord]]:
        """Scan *files* and merge their used keys and hardcoded findings."""

        used: dict[str, TranslationRecord] = {}
        hardcoded: list[TranslationRecord] = []
        total = len(files)
        self._report("Analyzing source files", 0, total)

        if self.workers > 1 and total > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                scans = list(pool.map(self._scan_one, files))
        else:
            scans = None

        for index, path in enumerate(files):
            scan = scans[index] if scans is not None else self._scan_one(path)
            self._report("Analyzing source files", index + 1, total)
            if scan is None:
                continue
            used.update(scan.used)
            hardcoded.extend(scan.hardcoded)
        return used, merge_hardcoded(hardcoded)

    def load_declared(self, files: Iterable[Path]) -> dict[str, TranslationRecord]:
        declared: dict[str, TranslationRecord] = {}
        for path in files:
            try:
                declared.update(parse_catalog_file(path))
            except (OSError, CatalogParseError) as exc:
                logger.warning("Could not parse translation file %s: %s", path, exc)
        return declared

    def analyze(self) -> AnalysisResult:
        validate_project_path(self.project_path)
        discovery = self.settings.discovery

        self._report("Finding translation files", 0, 1)
        catalog_files = find_catalog_files(self.project_path, discovery)
        self._report("Finding source files", 0, 1)
        source_files = find_source_files(self.project_path, discovery)
        self._report("Grouping files by locale", 0, 1)
        locale_files = group_by_locale(catalog_files)

        used, hardcoded = self.scan_sources(source_files)

        result = AnalysisResult(hardcoded=hardcoded)
        locale_count = len(locale_files)
        for index, (locale, files) in enumerate(sorted(locale_files.items())):
            self._report(f"Analyzing locale {locale}", index, locale_count)
            declared = self.load_declared(files)
            result.locales[locale] = reconcile_locale(locale, declared, used)

        self._report("Generating results", 0, 1)
        for locale_result in result.locales.values():
            result.unused.extend(locale_result.unused)
            result.undeclared.extend(locale_result.undeclared)
            result.total_translations += locale_result.total_translations
            result.used_translations += locale_result.used_translations
        self._report("Complete", 1, 1)
        return result


def analyze_project(
    project_path: Path | str,
    settings: AnalyzerSettings | None = None,
    progress: ProgressCallback | None = None,
    workers: int = 1,
) -> AnalysisResult:
    """Convenience wrapper around :class:`Analyzer`."""

    return Analyzer(project_path, settings, progress, workers).analyze()


__all__ = [
    "Analyzer",
    "ProgressCallback",
    "analyze_project",
    "merge_hardcoded",
    "reconcile_locale",
    "used_prefixes",
    "validate_project_path",
]
