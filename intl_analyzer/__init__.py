"""Static analysis of next-intl translation usage in web projects."""

from .catalog import CatalogParseError, extract_keys, load_catalog, parse_catalog_file
from .config import (
    AnalyzerSettings,
    ClassifierSettings,
    DiscoverySettings,
    load_settings,
)
from .hardcoded import HardcodedTextClassifier
from .namespaces import NamespaceTracker
from .reconcile import Analyzer, analyze_project, reconcile_locale
from .records import (
    AnalysisResult,
    CandidateSpan,
    LocaleAnalysisResult,
    SourceScan,
    TranslationRecord,
)
from .scanner import scan_lines, scan_source_file
from .usage import UsageExtractor, resolve_key

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "Analyzer",
    "AnalyzerSettings",
    "CandidateSpan",
    "CatalogParseError",
    "ClassifierSettings",
    "DiscoverySettings",
    "HardcodedTextClassifier",
    "LocaleAnalysisResult",
    "NamespaceTracker",
    "SourceScan",
    "TranslationRecord",
    "UsageExtractor",
    "analyze_project",
    "extract_keys",
    "load_catalog",
    "load_settings",
    "parse_catalog_file",
    "reconcile_locale",
    "resolve_key",
    "scan_lines",
    "scan_source_file",
]
