"""Tests for report rendering and export."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pandas as pd
import pytest
from intl_analyzer.reconcile import analyze_project
from intl_analyzer.records import AnalysisResult, TranslationRecord
from intl_analyzer.reporters import (
    DEFAULT_REPORT_FILE,
    export_findings_csv,
    findings_frame,
    render_console,
    render_markdown,
    write_html_report,
    write_json_summary,
    write_markdown_report,
)


@pytest.fixture()
def result(next_project: Path) -> AnalysisResult:
    return analyze_project(next_project)


def test_console_summary(result: AnalysisResult) -> None:
    text = render_console(result)
    assert text.startswith("=== Next-intl Translation Analysis ===")
    assert "   Total translations: 20" in text
    assert "   Hardcoded strings: 6" in text
    assert "   📍 EN:" in text
    assert "Common.delete" in text
    assert "(used in " in text


def test_console_clean_result() -> None:
    text = render_console(AnalysisResult())
    assert "✅ No unused translations found!" in text
    assert "✅ No undeclared translations found!" in text
    assert "✅ No hardcoded strings found!" in text


def test_markdown_sections(result: AnalysisResult, next_project: Path) -> None:
    stamp = datetime(2024, 5, 1, 12, 30, 0)
    text = render_markdown(result, next_project, generated_at=stamp)
    assert text.startswith("# Next-intl Translation Analysis Report")
    assert "**Generated:** 2024-05-01 12:30:00" in text
    assert "| Total Translations | 20 |" in text
    assert "### 📍 DE" in text
    assert "`Common.delete`" in text
    assert "## 🔤 Hardcoded Strings" in text
    assert "## 💡 Recommendations" in text


def test_markdown_escapes_pipes(next_project: Path) -> None:
    result = AnalysisResult(
        hardcoded=[
            TranslationRecord(
                key="Yes | No", file="a.tsx", line=3, origin="hardcoded_text"
            )
        ]
    )
    assert "`Yes \\| No`" in render_markdown(result, next_project)


def test_markdown_report_goes_to_reports_dir(
    result: AnalysisResult, next_project: Path
) -> None:
    path = write_markdown_report(result, next_project)
    assert path == next_project / "reports" / DEFAULT_REPORT_FILE
    assert path.read_text(encoding="utf-8").startswith("# Next-intl")


def test_html_report(
    result: AnalysisResult, next_project: Path, tmp_path: Path
) -> None:
    path = write_html_report(result, next_project, tmp_path / "out" / "report.html")
    html = path.read_text(encoding="utf-8")
    assert html.startswith("<!DOCTYPE html>")
    assert "<table>" in html
    assert "Common.delete" in html


def test_findings_frame_and_csv(result: AnalysisResult, tmp_path: Path) -> None:
    frame = findings_frame(result)
    assert list(frame.columns) == ["category", "key", "file", "line", "locale"]
    assert frame["category"].value_counts().to_dict() == {
        "hardcoded": 6,
        "undeclared": 3,
        "unused": 1,
    }
    path = export_findings_csv(result, tmp_path / "findings.csv")
    loaded = pd.read_csv(path)
    assert len(loaded) == 10


def test_empty_frame_keeps_columns() -> None:
    frame = findings_frame(AnalysisResult())
    assert frame.empty
    assert list(frame.columns) == ["category", "key", "file", "line", "locale"]


def test_json_summary(result: AnalysisResult, tmp_path: Path) -> None:
    path = write_json_summary(result, tmp_path / "summary.json")
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["summary"]["unused_translations"] == 1
    assert payload["summary"]["locales_analyzed"] == 2
    assert sorted(payload["locales"]) == ["de", "en"]
    assert payload["locales"]["de"]["unused"] == []
