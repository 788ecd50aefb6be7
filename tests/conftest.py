"""Shared fixtures for autocopyright tests."""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep AUTOCOPYRIGHT_* variables from the host out of every test."""
    for name in list(os.environ):
        if name.startswith("AUTOCOPYRIGHT_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_html(tmp_path):
    """Write an HTML file under tmp_path and return its path."""

    def _write(relative: str, html: str):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
        return path

    return _write
