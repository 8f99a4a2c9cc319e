"""Per-file scan: namespace tracking, call extraction and text classification."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .hardcoded import HardcodedTextClassifier
from .namespaces import DEFAULT_ACCESSOR, NamespaceTracker
from .records import SourceScan
from .usage import UsageExtractor


def scan_lines(
    lines: Iterable[str],
    file: str,
    classifier: HardcodedTextClassifier,
    extractor: UsageExtractor | None = None,
    *,
    accessor: str = DEFAULT_ACCESSOR,
) -> SourceScan:
    """Scan *lines* in order and collect used keys and hardcoded text.

    A fresh :class:`NamespaceTracker` is created for each call. On every line
    the tracker is updated before calls are extracted, so a binding made on a
    line already applies to calls later on that same line.
    """

    extractor = extractor or UsageExtractor()
    tracker = NamespaceTracker(accessor)
    scan = SourceScan(file=file)
    seen: set[tuple[str, int]] = set()
    for line_number, line in enumerate(lines, start=1):
        tracker.feed(line)
        for record in extractor.extract(line, line_number, tracker, file):
            scan.used[record.key] = record
        for record in classifier.classify_line(line, line_number, file):
            marker = (record.key, record.line)
            if marker in seen:
                continue
            seen.add(marker)
            scan.hardcoded.append(record)
    return scan


def scan_source_file(
    path: Path | str,
    classifier: HardcodedTextClassifier,
    extractor: UsageExtractor | None = None,
    *,
    accessor: str = DEFAULT_ACCESSOR,
) -> SourceScan:
    """Read *path* as UTF-8 and scan it; ``OSError`` is left to the caller."""

    path = Path(path)
    text = path.read_text(encoding="utf-8", errors="replace")
    return scan_lines(
        text.split("\n"), str(path), classifier, extractor, accessor=accessor
    )


__all__ = ["scan_lines", "scan_source_file"]
