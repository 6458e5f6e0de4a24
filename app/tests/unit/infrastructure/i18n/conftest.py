"""Feature-level fixtures for i18n system tests.

Provides message files on disk, loaders over them, and renderers for
rich-text scenarios.
"""

import json

import pytest
import yaml

from infrastructure.i18n import JSONMessageLoader, YAMLMessageLoader
from tests.factories.i18n import make_message_data


@pytest.fixture
def temp_messages_dir(tmp_path):
    """Create temporary directory with sample JSON message files.

    Returns a directory structure like:
    - en.json
    - nl.json
    - README.json (not a locale, skipped by loaders)
    """
    for locale in ("en", "nl"):
        with open(tmp_path / f"{locale}.json", "w", encoding="utf-8") as f:
            json.dump(make_message_data(locale), f, ensure_ascii=False)

    with open(tmp_path / "README.json", "w", encoding="utf-8") as f:
        json.dump({"note": "not a locale"}, f)

    return tmp_path


@pytest.fixture
def temp_yaml_messages_dir(tmp_path):
    """Create temporary directory with sample YAML message files (en.yml, nl.yaml)."""
    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump(make_message_data("en"), f, allow_unicode=True)
    with open(tmp_path / "nl.yaml", "w", encoding="utf-8") as f:
        yaml.dump(make_message_data("nl"), f, allow_unicode=True)
    return tmp_path


@pytest.fixture
def json_loader(temp_messages_dir):
    """Create JSONMessageLoader for the temporary directory."""
    return JSONMessageLoader(temp_messages_dir, use_cache=False)


@pytest.fixture
def json_loader_with_cache(temp_messages_dir):
    """Create JSONMessageLoader with caching enabled."""
    return JSONMessageLoader(temp_messages_dir, use_cache=True)


@pytest.fixture
def yaml_loader(temp_yaml_messages_dir):
    """Create YAMLMessageLoader for the temporary directory."""
    return YAMLMessageLoader(temp_yaml_messages_dir, use_cache=False)


@pytest.fixture
def upper():
    """Renderer that upper-cases the tag content."""
    return lambda content: content.upper()


@pytest.fixture
def html_components():
    """Renderers producing HTML strings, as a page template would."""
    return {
        "b": lambda content: f"<strong>{content}</strong>",
        "link": lambda content: f'<a href="mailto:{content}">{content}</a>',
    }
