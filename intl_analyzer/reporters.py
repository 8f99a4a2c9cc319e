"""Console, Markdown, HTML, CSV and JSON renderings of an analysis result."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import markdown2
import pandas as pd

from .records import AnalysisResult

REPORTS_DIRNAME = "reports"
DEFAULT_REPORT_FILE = "translations-report.md"
FINDING_COLUMNS = ["category", "key", "file", "line", "locale"]

RECOMMENDATIONS = """## 💡 Recommendations

### For Unused Translations:
- Review and remove unused translation keys from your translation files
- Consider if these translations might be used in the future

### For Undeclared Translations:
- Add missing translation keys to your translation files
- Ensure all user-facing text is properly internationalized

### For Hardcoded Strings:
- Replace hardcoded strings with translation keys
- Use the t() function or appropriate hooks to translate these strings

---

*Report generated by next-intl-analyzer*
"""


def _ensure_dir(path: Path) -> None:
    Path(path).mkdir(parents=True, exist_ok=True)


def render_console(result: AnalysisResult) -> str:
    """Return the plain-text summary printed by the CLI."""

    lines: list[str] = ["=== Next-intl Translation Analysis ===", ""]
    lines += [
        "📊 Overall Summary:",
        f"   Total translations: {result.total_translations}",
        f"   Used translations: {result.used_translations}",
        f"   Unused translations: {len(result.unused)}",
        f"   Undeclared translations: {len(result.undeclared)}",
        f"   Hardcoded strings: {len(result.hardcoded)}",
        f"   Locales analyzed: {len(result.locales)}",
        "",
    ]

    if result.locales:
        lines += ["🌍 Per-locale Analysis:", ""]
        for locale, data in sorted(result.locales.items()):
            name = locale.upper()
            lines += [
                f"   📍 {name}:",
                f"      Total translations: {data.total_translations}",
                f"      Used translations: {data.used_translations}",
                f"      Unused translations: {len(data.unused)}",
                f"      Undeclared translations: {len(data.undeclared)}",
            ]
            if data.unused:
                lines.append(f"      ❌ Unused in {name}:")
                lines += [f"         - {r.key} (in {r.file})" for r in data.unused]
            if data.undeclared:
                lines.append(f"      ⚠️  Undeclared in {name}:")
                lines += [
                    f"         - {r.key} (used in {r.file}:{r.line})"
                    for r in data.undeclared
                ]
            lines.append("")

    if result.unused:
        lines.append(f"❌ Overall unused translations ({len(result.unused)}):")
        lines += [
            f"   - {r.key} (in {r.file}, locale: {r.locale})" for r in result.unused
        ]
    else:
        lines.append("✅ No unused translations found!")
    lines.append("")

    if result.undeclared:
        count = len(result.undeclared)
        lines.append(f"⚠️  Overall undeclared translations ({count}):")
        lines += [
            f"   - {r.key} (used in {r.file}:{r.line}, locale: {r.locale})"
            for r in result.undeclared
        ]
    else:
        lines.append("✅ No undeclared translations found!")
    lines.append("")

    if result.hardcoded:
        lines.append(f"🔤 Hardcoded strings ({len(result.hardcoded)}):")
        lines += [
            f"   - {r.key} (used in {r.file}:{r.line})" for r in result.hardcoded
        ]
    else:
        lines.append("✅ No hardcoded strings found!")
    lines.append("")
    return "\n".join(lines)


def _table(header: list[str], rows: list[list[object]]) -> list[str]:
    out = ["| " + " | ".join(header) + " |"]
    out.append("|" + "|".join("-" * (len(name) + 2) for name in header) + "|")
    for row in rows:
        cells = (str(cell).replace("|", "\\|") for cell in row)
        out.append("| " + " | ".join(cells) + " |")
    out.append("")
    return out


def render_markdown(
    result: AnalysisResult,
    project_path: Path | str,
    generated_at: datetime | None = None,
) -> str:
    """Render the full Markdown report."""

    generated_at = generated_at or datetime.now()
    lines: list[str] = [
        "# Next-intl Translation Analysis Report",
        "",
        f"**Generated:** {generated_at:%Y-%m-%d %H:%M:%S}  ",
        f"**Project:** {project_path}",
        "",
        "## 📊 Summary",
        "",
    ]
    lines += _table(
        ["Metric", "Count"],
        [
            ["Total Translations", result.total_translations],
            ["Used Translations", result.used_translations],
            ["Unused Translations", len(result.unused)],
            ["Undeclared Translations", len(result.undeclared)],
            ["Hardcoded Strings", len(result.hardcoded)],
            ["Locales Analyzed", len(result.locales)],
        ],
    )

    lines += ["## 🌍 Per-locale Analysis", ""]
    for locale, data in sorted(result.locales.items()):
        name = locale.upper()
        lines += [f"### 📍 {name}", ""]
        lines += _table(
            ["Metric", "Count"],
            [
                ["Total Translations", data.total_translations],
                ["Used Translations", data.used_translations],
                ["Unused Translations", len(data.unused)],
                ["Undeclared Translations", len(data.undeclared)],
            ],
        )
        if data.unused:
            lines += [f"#### ❌ Unused Translations in {name}", ""]
            lines += _table(
                ["Key", "File"], [[f"`{r.key}`", f"`{r.file}`"] for r in data.unused]
            )
        if data.undeclared:
            lines += [f"#### ⚠️ Undeclared Translations in {name}", ""]
            lines += _table(
                ["Key", "File", "Line"],
                [[f"`{r.key}`", f"`{r.file}`", r.line] for r in data.undeclared],
            )

    if result.unused:
        lines += ["## ❌ Overall Unused Translations", ""]
        lines += _table(
            ["Key", "File", "Locale"],
            [[f"`{r.key}`", f"`{r.file}`", r.locale] for r in result.unused],
        )
    else:
        lines += ["## ✅ No Unused Translations Found", ""]

    if result.undeclared:
        lines += ["## ⚠️ Overall Undeclared Translations", ""]
        lines += _table(
            ["Key", "File", "Line", "Locale"],
            [
                [f"`{r.key}`", f"`{r.file}`", r.line, r.locale]
                for r in result.undeclared
            ],
        )
    else:
        lines += ["## ✅ No Undeclared Translations Found", ""]

    if result.hardcoded:
        lines += ["## 🔤 Hardcoded Strings", ""]
        lines += _table(
            ["Text", "File", "Line"],
            [[f"`{r.key}`", f"`{r.file}`", r.line] for r in result.hardcoded],
        )
    else:
        lines += ["## ✅ No Hardcoded Strings Found", ""]

    lines.append(RECOMMENDATIONS)
    return "\n".join(lines)


def write_markdown_report(
    result: AnalysisResult,
    project_path: Path | str,
    filename: str = DEFAULT_REPORT_FILE,
) -> Path:
    """Write the Markdown report into ``<project>/reports/<filename>``."""

    reports_dir = Path(project_path) / REPORTS_DIRNAME
    _ensure_dir(reports_dir)
    report_path = reports_dir / filename
    report_path.write_text(render_markdown(result, project_path), encoding="utf-8")
    return report_path


def write_html_report(
    result: AnalysisResult, project_path: Path | str, out_path: Path | str
) -> Path:
    """Convert the Markdown report to a standalone HTML page."""

    out_path = Path(out_path)
    _ensure_dir(out_path.parent)
    body = markdown2.markdown(
        render_markdown(result, project_path), extras=["tables", "fenced-code-blocks"]
    )
    html = (
        "<!DOCTYPE html>\n<html><head><meta charset='utf-8'>"
        "<title>Translation Analysis Report</title></head>\n"
        f"<body>\n{body}\n</body></html>\n"
    )
    out_path.write_text(html, encoding="utf-8")
    return out_path


def findings_frame(result: AnalysisResult) -> pd.DataFrame:
    """Return every finding as one row of a flat table."""

    rows: list[dict[str, object]] = []
    for category, records in (
        ("unused", result.unused),
        ("undeclared", result.undeclared),
        ("hardcoded", result.hardcoded),
    ):
        for record in records:
            rows.append(
                {
                    "category": category,
                    "key": record.key,
                    "file": record.file,
                    "line": record.line,
                    "locale": record.locale,
                }
            )
    return pd.DataFrame(rows, columns=FINDING_COLUMNS)


def export_findings_csv(result: AnalysisResult, out_path: Path | str) -> Path:
    out_path = Path(out_path)
    _ensure_dir(out_path.parent)
    findings_frame(result).to_csv(out_path, index=False)
    return out_path


def write_json_summary(result: AnalysisResult, out_path: Path | str) -> Path:
    out_path = Path(out_path)
    _ensure_dir(out_path.parent)
    out_path.write_text(
        json.dumps(result.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8"
    )
    return out_path


__all__ = [
    "DEFAULT_REPORT_FILE",
    "export_findings_csv",
    "findings_frame",
    "render_console",
    "render_markdown",
    "write_html_report",
    "write_json_summary",
    "write_markdown_report",
]
