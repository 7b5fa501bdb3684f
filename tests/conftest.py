"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from cronify.locales import resolve
from cronify.models import LocaleBundle


@pytest.fixture
def en() -> LocaleBundle:
    """English locale bundle."""
    return resolve("en")


@pytest.fixture
def es() -> LocaleBundle:
    """Spanish locale bundle."""
    return resolve("es")


@pytest.fixture
def zh() -> LocaleBundle:
    """Chinese locale bundle."""
    return resolve("zh")


@pytest.fixture
def cronify_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config file at a temporary directory and clear the env override."""
    home = tmp_path / ".cronify"
    home.mkdir()
    monkeypatch.setattr("cronify.config.CRONIFY_DIR", home)
    monkeypatch.setattr("cronify.config.CONFIG_FILE", home / "config.yaml")
    monkeypatch.delenv("CRONIFY_LOCALE", raising=False)
    return home
