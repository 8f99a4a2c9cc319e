"""Settings for discovery and hardcoded-text classification."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

CONFIG_ENV_VAR = "INTL_ANALYZER_CONFIG"

SHORT_UI_WORDS: tuple[str, ...] = (
    "OK", "No", "Yes", "Cancel", "Save", "Edit", "Delete", "Add", "New",
    "Back", "Next", "Prev", "Close", "Open", "Help", "Info", "Error",
    "Loading", "Done", "Submit", "Reset", "Clear", "Search", "Filter",
    "Sort", "View", "Hide", "Show", "More", "Less", "All", "None",
)  # fmt: skip

UI_PATTERNS: tuple[str, ...] = (
    "Welcome", "Hello", "Goodbye", "Thank you", "Please", "Sorry",
    "Success", "Error", "Warning", "Info", "Loading", "Processing",
    "Click", "Press", "Enter", "Select", "Choose", "Browse",
    "Download", "Upload", "Share", "Like", "Follow", "Subscribe",
    "Sign in", "Sign up", "Log in", "Log out", "Register", "Login",
    "Profile", "Settings", "Preferences", "Account", "Dashboard",
    "Home", "About", "Contact", "Help", "Support", "FAQ",
    "Terms", "Privacy", "Policy", "License", "Copyright",
)  # fmt: skip

# Case-sensitive substrings that mark a span as code rather than prose.
TECHNICAL_PATTERNS: tuple[str, ...] = (
    # markup attributes
    "className", "id=", "href=", "src=", "alt=", "title=", "type=", "value=",
    "placeholder=", "aria-", "data-", "role=", "tabindex=", "disabled=",
    "readonly=", "required=", "maxlength=", "minlength=", "pattern=",
    # event props and hooks
    "onClick", "onChange", "onSubmit", "onLoad", "onBlur", "onFocus", "onKey",
    "useState", "useEffect", "useCallback", "useMemo", "useRef", "useContext",
    "useTranslations", "getTranslations",
    # language keywords and literals
    "return ", "typeof ", "instanceof", "undefined", "null", "NaN",
    "Infinity", "console.", "debugger", "e.target", "preventDefault",
    "props.", "state.",
    # JSX punctuation
    "=>", "&&", "||", "??", "?.", "${", "();", "});", "/>", "</",
    # file extensions
    ".js", ".jsx", ".ts", ".tsx", ".css", ".scss", ".json",
)  # fmt: skip

KEY_TOKENS: tuple[str, ...] = (
    "button", "navigation", "title", "welcome", "about", "description",
    "undeclaredKey", "home", "save", "cancel", "delete", "submit", "label",
    "message", "error", "header", "footer", "menu", "link", "nav",
)  # fmt: skip

PUNCTUATION: tuple[str, ...] = ("!", "?", ".", ",", ":", ";", "-", "—", "–", "…")


class ClassifierSettings(BaseModel):
    """Tables and thresholds consumed by the hardcoded-text classifier."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_text_length: int = Field(default=2, ge=1)
    key_token_max_length: int = Field(default=40, ge=1)
    medium_text_threshold: int = Field(default=5, ge=1)
    long_text_threshold: int = Field(default=10, ge=1)
    short_text_ratio: float = 0.67
    medium_text_ratio: float = 0.5
    long_text_ratio: float = 0.75
    multiword_min_tokens: int = Field(default=3, ge=2)
    strict_multiword: bool = False
    ratio_ignores_punctuation: bool = True
    attribute_names: tuple[str, ...] = (
        "title",
        "alt",
        "placeholder",
        "aria-label",
        "label",
    )
    short_ui_words: tuple[str, ...] = SHORT_UI_WORDS
    ui_patterns: tuple[str, ...] = UI_PATTERNS
    technical_patterns: tuple[str, ...] = TECHNICAL_PATTERNS
    key_tokens: tuple[str, ...] = KEY_TOKENS
    punctuation: tuple[str, ...] = PUNCTUATION

    @field_validator("short_text_ratio", "medium_text_ratio", "long_text_ratio")
    @classmethod
    def _check_ratio(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("ratio thresholds must be between 0 and 1")
        return value

    @field_validator("long_text_threshold")
    @classmethod
    def _check_bands(cls, value: int, info: ValidationInfo) -> int:
        medium = info.data.get("medium_text_threshold")
        if medium is not None and value <= medium:
            raise ValueError("long_text_threshold must exceed medium_text_threshold")
        return value


class DiscoverySettings(BaseModel):
    """Which files the walker hands to the analysis core."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    catalog_markers: tuple[str, ...] = ("messages", "locales", "i18n")
    catalog_extensions: tuple[str, ...] = (".json", ".yaml", ".yml")
    source_extensions: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx")
    excluded_dirs: tuple[str, ...] = (
        "node_modules",
        ".next",
        ".git",
        "dist",
        "build",
        "coverage",
        "reports",
    )

    @field_validator("catalog_extensions", "source_extensions")
    @classmethod
    def _normalise_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("at least one extension is required")
        return tuple(ext if ext.startswith(".") else f".{ext}" for ext in value)


class AnalyzerSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    accessor: str = "t"
    discovery: DiscoverySettings = Field(default_factory=DiscoverySettings)
    classifier: ClassifierSettings = Field(default_factory=ClassifierSettings)


def load_settings(path: Path | str | None = None) -> AnalyzerSettings:
    """Load analyzer settings from YAML.

    The path falls back to the ``INTL_ANALYZER_CONFIG`` environment variable;
    without either the defaults are returned.
    """

    if path is None:
        path = os.getenv(CONFIG_ENV_VAR) or None
    if path is None:
        return AnalyzerSettings()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings file missing: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return AnalyzerSettings()
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a mapping: {path}")
    try:
        return AnalyzerSettings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid settings in {path}: {exc}") from exc


def with_classifier_overrides(
    settings: AnalyzerSettings, **overrides: Any
) -> AnalyzerSettings:
    """Return a copy of *settings* with classifier fields replaced."""

    overrides = {name: value for name, value in overrides.items() if value is not None}
    if not overrides:
        return settings
    classifier = settings.classifier.model_copy(update=overrides)
    return settings.model_copy(update={"classifier": classifier})


__all__ = [
    "AnalyzerSettings",
    "CONFIG_ENV_VAR",
    "ClassifierSettings",
    "DiscoverySettings",
    "KEY_TOKENS",
    "PUNCTUATION",
    "SHORT_UI_WORDS",
    "TECHNICAL_PATTERNS",
    "UI_PATTERNS",
    "load_settings",
    "with_classifier_overrides",
]
