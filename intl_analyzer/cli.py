"""Command line interface for next-intl-analyzer."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable

from .config import load_settings, with_classifier_overrides
from .reconcile import Analyzer
from .reporters import (
    DEFAULT_REPORT_FILE,
    export_findings_csv,
    render_console,
    write_html_report,
    write_json_summary,
    write_markdown_report,
)

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_FATAL = 2

SPINNER = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"


class ProgressPrinter:
    """Spinner-style progress lines written to stdout."""

    def __init__(self, stream=None) -> None:
        self.stream = stream or sys.stdout
        self.last_stage = ""
        self.ticks = 0

    def __call__(self, stage: str, completed: int, total: int) -> None:
        if stage != self.last_stage:
            if self.last_stage:
                self.stream.write("\n")
            self.last_stage = stage
        spin = SPINNER[self.ticks % len(SPINNER)]
        self.ticks += 1
        if total > 0:
            percent = int(completed / total * 100)
            self.stream.write(
                f"\r  {spin} {stage}... {completed}/{total} ({percent}%)   "
            )
        else:
            self.stream.write(f"\r  {spin} {stage}...   ")
        self.stream.flush()


def cmd_analyze(args: argparse.Namespace) -> int:
    project = Path(args.project_path)
    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FATAL
    settings = with_classifier_overrides(
        settings, strict_multiword=True if args.strict_multiword else None
    )

    progress = None
    if not args.quiet:
        print("🔍 Analyzing project...")
        print("  ↳ Scanning files...")
        progress = ProgressPrinter()

    analyzer = Analyzer(project, settings, progress=progress, workers=args.workers)
    try:
        result = analyzer.analyze()
    except (FileNotFoundError, NotADirectoryError) as exc:
        if not args.quiet:
            print()
        print(f"Error: analysis failed: invalid project path: {exc}", file=sys.stderr)
        return EXIT_FATAL

    if not args.quiet:
        print("\r  ↳ Analysis complete!                      ")
        print()

    written: list[Path] = []
    if args.report:
        written.append(write_markdown_report(result, project, args.report_file))
    if args.html:
        written.append(write_html_report(result, project, args.html))
    if args.csv:
        written.append(export_findings_csv(result, args.csv))
    if args.json:
        written.append(write_json_summary(result, args.json))

    if not args.quiet:
        for path in written:
            print(f"📄 Report generated: {path}")
        print(render_console(result))

    return EXIT_FINDINGS if result.has_findings else EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="next-intl-analyzer",
        description=(
            "Find unused and undeclared translations and hardcoded user-facing "
            "text in Next.js projects using next-intl."
        ),
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser(
        "analyze", help="Analyze next-intl translations in a project"
    )
    analyze.add_argument("project_path", help="Project directory to analyze")
    analyze.add_argument(
        "--report", action="store_true", help="Generate a markdown report file"
    )
    analyze.add_argument(
        "--report-file",
        default=DEFAULT_REPORT_FILE,
        help="File name for the markdown report (placed in <project>/reports/)",
    )
    analyze.add_argument("--html", help="Write an HTML version of the report")
    analyze.add_argument("--csv", help="Write all findings as CSV")
    analyze.add_argument("--json", help="Write a JSON summary of the analysis")
    analyze.add_argument(
        "--quiet", action="store_true", help="Suppress console output"
    )
    analyze.add_argument("--config", help="YAML settings file")
    analyze.add_argument(
        "--workers", type=int, default=1, help="Threads used to scan source files"
    )
    analyze.add_argument(
        "--strict-multiword",
        action="store_true",
        help="Require sentence casing or punctuation for multi-word text",
    )
    analyze.set_defaults(func=cmd_analyze)
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
