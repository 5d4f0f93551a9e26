"""Testing utilities for code that consumes Application Default Credentials.

Example:
    ```python
    from adc_core.auth import Credentials
    from adc_core.testing import StaticTokenFetcher


    def test_request_is_authorized():
        credentials = Credentials(StaticTokenFetcher({"access_token": "abc"}))
        assert credentials.update_metadata({}) == {"Authorization": ["Bearer abc"]}
    ```
"""

import json
from pathlib import Path
from typing import Any

import httpx


class StaticTokenFetcher:
    """Token fetcher returning a fixed token record.

    Records every client it was called with in ``calls``.
    """

    def __init__(self, token: dict[str, Any] | None = None, cache_key: str | None = "static"):
        self.token = token if token is not None else {"access_token": "test-token"}
        self.cache_key = cache_key
        self.calls: list[httpx.Client | None] = []

    def fetch_auth_token(self, client: httpx.Client | None = None) -> dict[str, Any]:
        self.calls.append(client)
        return dict(self.token)

    def get_cache_key(self) -> str | None:
        return self.cache_key


def authorized_user_info(**overrides: Any) -> dict[str, Any]:
    """Return an ``authorized_user`` credential file body with test values."""
    info = {
        "type": "authorized_user",
        "client_id": "test-client-id.apps.googleusercontent.com",
        "client_secret": "test-client-secret",
        "refresh_token": "test-refresh-token",
    }
    info.update(overrides)
    return info


def write_credential_file(path: Path, info: dict[str, Any] | None = None) -> Path:
    """Write a credential file, creating parent directories.

    Args:
        path: Destination file.
        info: JSON body. Defaults to `authorized_user_info()`.

    Returns:
        The path written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(info if info is not None else authorized_user_info()))
    return path


__all__ = ["StaticTokenFetcher", "authorized_user_info", "write_credential_file"]
