"""Shared fixtures: a small next-intl project laid out on disk."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

SIMPLE_COMPONENT = """import {useTranslations} from 'next-intl';

function SimpleComponent() {
  const t = useTranslations('HomePage');

  return (
    <div>
      <h1>{t('title')}</h1>
      <p>{t('welcome')}</p>
      <button>{t('about')}</button>
    </div>
  );
}

export default SimpleComponent;
"""

SERVER_COMPONENT = """import {getTranslations} from 'next-intl/server';

export default async function ServerComponent() {
  const t = await getTranslations('About');

  return (
    <div>
      <h1>{t('title')}</h1>
      <p>{t('description')}</p>
      {/* This key is not declared in the JSON file */}
      <p>{t('undeclaredKey')}</p>
    </div>
  );
}
"""

UNTRANSLATED_COMPONENT = """import { useTranslations } from 'next-intl';

function UntranslatedComponent() {
    const t = useTranslations('Common');

    return (
        <div>
            {/* These are properly translated */}
            <button>{t('save')}</button>
            <button>{t('cancel')}</button>

            {/* These are hardcoded untranslated strings */}
            <h1>Welcome to our application</h1>
            <p>This is a hardcoded string that should be translated</p>
            <button>Click here to continue</button>
            <span>Loading...</span>

            {/* More untranslated strings */}
            <div>
                <h2>About Us</h2>
                <p>This company was founded in 2020</p>
            </div>
        </div>
    );
}

export default UntranslatedComponent;
"""

EN_MESSAGES = {
    "HomePage": {"title": "Hello", "welcome": "Welcome", "about": "About"},
    "Common": {"save": "Save", "cancel": "Cancel", "delete": "Delete"},
    "About": {"title": "About us", "description": "Who we are"},
}

DE_MESSAGES = {
    "HomePage": {"title": "Hallo", "welcome": "Willkommen"},
    "Common": {"save": "Speichern", "cancel": "Abbrechen"},
    "About": {"title": "Über uns", "description": "Wer wir sind"},
}


@pytest.fixture()
def next_project(tmp_path: Path) -> Path:
    root = tmp_path / "app"
    components = root / "src" / "components"
    components.mkdir(parents=True)
    (components / "SimpleComponent.tsx").write_text(SIMPLE_COMPONENT, encoding="utf-8")
    (components / "ServerComponent.tsx").write_text(SERVER_COMPONENT, encoding="utf-8")
    (components / "UntranslatedComponent.tsx").write_text(
        UNTRANSLATED_COMPONENT, encoding="utf-8"
    )
    messages = root / "messages"
    messages.mkdir()
    (messages / "en.json").write_text(json.dumps(EN_MESSAGES), encoding="utf-8")
    (messages / "de.json").write_text(
        json.dumps(DE_MESSAGES, ensure_ascii=False), encoding="utf-8"
    )
    ignored = root / "node_modules" / "pkg"
    ignored.mkdir(parents=True)
    (ignored / "index.js").write_text("<p>Welcome to the dependency</p>\n")
    return root
