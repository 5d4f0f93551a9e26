"""Pytest configuration and shared fixtures for adc-core tests."""

import pytest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch, tmp_path):
    """Auto-cleanup: isolate credential-related environment variables.

    Clears GOOGLE_* variables and points HOME and APPDATA at empty
    directories so a developer's real gcloud credentials never leak in.
    """
    import os

    test_prefixes = ("TEST_", "GOOGLE_", "CLOUDSDK_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    empty_home = tmp_path / "isolated-home"
    empty_home.mkdir()
    monkeypatch.setenv("HOME", str(empty_home))
    monkeypatch.setenv("APPDATA", str(empty_home))

    yield


@pytest.fixture
def fake_root(tmp_path):
    """A directory standing in for $HOME or %APPDATA%."""
    root = tmp_path / "root"
    root.mkdir()
    return root
