"""Tests for the per-file namespace binding table."""

from __future__ import annotations

from intl_analyzer.namespaces import NamespaceTracker


def test_ambient_call_sets_default_namespace() -> None:
    tracker = NamespaceTracker()
    assert tracker.feed("  useTranslations('Dashboard');") == "ambient"
    assert tracker.default_namespace == "Dashboard"
    assert tracker.resolve("t") == "Dashboard"
    assert tracker.bindings == {}


def test_assignment_binds_named_variable() -> None:
    tracker = NamespaceTracker()
    assert tracker.feed("const adminT = useTranslations('Admin');") == "assignment"
    assert tracker.resolve("adminT") == "Admin"
    assert tracker.default_namespace is None
    assert tracker.resolve("t") is None


def test_awaited_server_call_binds() -> None:
    tracker = NamespaceTracker()
    assert tracker.feed("  const t = await getTranslations('About');") == "assignment"
    assert tracker.resolve("t") == "About"


def test_options_object_namespace() -> None:
    tracker = NamespaceTracker()
    line = "const t = await getTranslations({locale, namespace: 'Metadata'});"
    assert tracker.feed(line) == "assignment"
    assert tracker.resolve("t") == "Metadata"


def test_destructuring_alias_binds() -> None:
    tracker = NamespaceTracker()
    line = "const { t: settingsT } = useTranslations('Settings');"
    assert tracker.feed(line) == "destructuring"
    assert tracker.resolve("settingsT") == "Settings"
    assert "t" not in tracker.bindings


def test_destructuring_without_accessor_is_ignored() -> None:
    tracker = NamespaceTracker()
    assert tracker.feed("const { locale } = useTranslations('Settings');") is None
    assert tracker.bindings == {}


def test_unrelated_lines_leave_state_unchanged() -> None:
    tracker = NamespaceTracker()
    tracker.feed("const t = useTranslations('Common');")
    assert tracker.feed("return <p>{t('title')}</p>;") is None
    assert tracker.resolve("t") == "Common"


def test_later_bindings_overwrite() -> None:
    tracker = NamespaceTracker()
    tracker.feed("const t = useTranslations('First');")
    tracker.feed("useTranslations('Second');")
    assert tracker.resolve("t") == "Second"
    tracker.feed("const t = useTranslations('Third');")
    assert tracker.resolve("t") == "Third"
    assert tracker.default_namespace == "Second"


def test_unknown_identifier_is_unbound() -> None:
    tracker = NamespaceTracker()
    tracker.feed("useTranslations('Common');")
    assert not tracker.is_bound("format")
    assert tracker.is_bound("t")
    assert tracker.resolve("format") is None


def test_custom_accessor_name() -> None:
    tracker = NamespaceTracker(accessor="translate")
    tracker.feed("useTranslations('Common');")
    assert tracker.resolve("translate") == "Common"
    assert not tracker.is_bound("t")
