"""Tests for reconciliation and the full project analysis."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from intl_analyzer.catalog import parse_catalog_file
from intl_analyzer.reconcile import (
    Analyzer,
    analyze_project,
    merge_hardcoded,
    reconcile_locale,
    used_prefixes,
    validate_project_path,
)
from intl_analyzer.records import TranslationRecord


def _call(key: str, line: int = 1) -> TranslationRecord:
    return TranslationRecord(
        key=key, file="Page.tsx", line=line, origin="translation_call"
    )


def _declared(tmp_path: Path, document: dict) -> dict[str, TranslationRecord]:
    path = tmp_path / "en.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return parse_catalog_file(path)


def test_used_prefixes_cover_ancestors() -> None:
    assert used_prefixes(["a.b[0].c"]) == {"a", "a.b", "a.b[0]", "a.b[0].c"}
    assert used_prefixes([]) == set()


def test_nothing_used_leaves_every_key_unused(tmp_path: Path) -> None:
    declared = _declared(tmp_path, {"A": {"b": "x"}})
    result = reconcile_locale("en", declared, {})
    assert sorted(record.key for record in result.unused) == ["A", "A.b"]
    assert all(record.locale == "en" for record in result.unused)
    assert result.total_translations == 2
    assert result.used_translations == 0


def test_leaf_usage_covers_its_group(tmp_path: Path) -> None:
    declared = _declared(tmp_path, {"A": {"b": "x", "c": "y"}})
    result = reconcile_locale("en", declared, {"A.b": _call("A.b")})
    assert [record.key for record in result.unused] == ["A.c"]
    assert result.used_translations == 2


def test_undeclared_calls_are_sorted(tmp_path: Path) -> None:
    declared = _declared(tmp_path, {"A": {"b": "x"}})
    used = {"Z.q": _call("Z.q", 4), "A.b": _call("A.b"), "B.a": _call("B.a", 9)}
    result = reconcile_locale("de", declared, used)
    assert [(r.key, r.line, r.locale) for r in result.undeclared] == [
        ("B.a", 9, "de"),
        ("Z.q", 4, "de"),
    ]


def test_non_call_records_do_not_count(tmp_path: Path) -> None:
    declared = _declared(tmp_path, {"A": "x"})
    used = {
        "A": TranslationRecord(key="A", file="f", line=1, origin="hardcoded_text"),
        "Other": TranslationRecord(key="Other", file="f", line=1, origin="declared"),
    }
    result = reconcile_locale("en", declared, used)
    assert [record.key for record in result.unused] == ["A"]
    assert result.undeclared == []


def test_merge_hardcoded_dedupes() -> None:
    def found(file: str) -> TranslationRecord:
        return TranslationRecord(
            key="Hi there", file=file, line=1, origin="hardcoded_text"
        )

    first, again, other = found("a"), found("a"), found("b")
    assert merge_hardcoded([first, again, other]) == [first, other]


def test_validate_project_path(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        validate_project_path(tmp_path / "missing")
    file_path = tmp_path / "file.txt"
    file_path.write_text("x", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        validate_project_path(file_path)


def test_analyze_fixture_project(next_project: Path) -> None:
    result = analyze_project(next_project)

    assert sorted(result.locales) == ["de", "en"]
    en = result.locales["en"]
    de = result.locales["de"]
    assert [record.key for record in en.unused] == ["Common.delete"]
    assert [record.key for record in en.undeclared] == ["About.undeclaredKey"]
    assert en.total_translations == 11
    assert en.used_translations == 10
    assert de.unused == []
    assert [record.key for record in de.undeclared] == [
        "About.undeclaredKey",
        "HomePage.about",
    ]

    undeclared = en.undeclared[0]
    assert undeclared.file.endswith("ServerComponent.tsx")
    assert undeclared.line == 11

    assert result.total_translations == 20
    assert result.used_translations == 19
    assert len(result.unused) == 1
    assert len(result.undeclared) == 3
    assert len(result.hardcoded) == 6
    assert all(r.file.endswith("UntranslatedComponent.tsx") for r in result.hardcoded)
    assert not any("dependency" in r.key for r in result.hardcoded)
    assert result.has_findings


def test_threaded_scan_matches_sequential(next_project: Path) -> None:
    sequential = analyze_project(next_project).to_dict()
    threaded = analyze_project(next_project, workers=4).to_dict()
    assert threaded == sequential


def test_progress_stages(next_project: Path) -> None:
    events: list[tuple[str, int, int]] = []
    Analyzer(next_project, progress=lambda *event: events.append(event)).analyze()
    stages = [stage for stage, _, _ in events]
    assert stages[0] == "Finding translation files"
    assert "Analyzing source files" in stages
    assert "Analyzing locale de" in stages
    assert stages[-1] == "Complete"
    assert ("Analyzing source files", 3, 3) in events


def test_broken_catalog_is_logged_and_skipped(
    next_project: Path, caplog: pytest.LogCaptureFixture
) -> None:
    (next_project / "messages" / "fr.json").write_text("{oops", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="intl_analyzer.reconcile"):
        result = analyze_project(next_project)
    assert result.locales["fr"].total_translations == 0
    assert "fr.json" in caplog.text


def test_project_without_findings(tmp_path: Path) -> None:
    (tmp_path / "messages").mkdir()
    (tmp_path / "messages" / "en.json").write_text(
        json.dumps({"Nav": {"home": "Home"}}), encoding="utf-8"
    )
    (tmp_path / "Nav.tsx").write_text(
        "const t = useTranslations('Nav');\n<a href=\"/\">{t('home')}</a>\n",
        encoding="utf-8",
    )
    result = analyze_project(tmp_path)
    assert not result.has_findings
    assert result.used_translations == 2


def test_undecodable_catalog_is_logged_and_skipped(
    next_project: Path, caplog: pytest.LogCaptureFixture
) -> None:
    (next_project / "messages" / "fr.json").write_bytes(b'{"A": "\xff\xfe bad"}')
    with caplog.at_level(logging.WARNING, logger="intl_analyzer.reconcile"):
        result = analyze_project(next_project)
    assert result.locales["fr"].total_translations == 0
    assert [record.key for record in result.locales["en"].unused] == ["Common.delete"]
    assert "fr.json" in caplog.text
