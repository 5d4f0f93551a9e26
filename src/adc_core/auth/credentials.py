"""Credentials facade over a token fetcher.

`Credentials` presents the same contract whatever kind of credential file was
resolved: fetch a token, derive a cache key, and decorate request metadata
with an ``Authorization`` header.

Example:
    ```python
    from adc_core.auth import get_default_credentials

    credentials = get_default_credentials("https://www.googleapis.com/auth/cloud-platform")

    update_metadata = credentials.get_update_metadata_func()
    headers = update_metadata({"x-goog-user-project": ["my-project"]})
    # {"x-goog-user-project": ["my-project"], "Authorization": ["Bearer ya29...."]}
    ```
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

import httpx

from adc_core.auth.fetchers import TokenFetcher

logger = logging.getLogger(__name__)

AUTH_METADATA_KEY = "Authorization"

MetadataMap = Mapping[str, list[str]]
UpdateMetadataFunc = Callable[..., MetadataMap]


class Credentials:
    """Uniform token source wrapping a concrete token fetcher.

    The wrapped fetcher is fixed at construction. The facade keeps no other
    state, so one instance can be shared between threads as long as the
    fetcher's ``fetch_auth_token`` is itself thread-safe.

    Args:
        fetcher: The token fetcher built from a credential file.
    """

    def __init__(self, fetcher: TokenFetcher):
        self._fetcher = fetcher

    @property
    def fetcher(self) -> TokenFetcher:
        return self._fetcher

    def fetch_auth_token(self, client: httpx.Client | None = None) -> dict[str, Any]:
        """Fetch a token record from the wrapped fetcher.

        Failures are propagated unchanged; retrying is up to the caller.
        """
        return self._fetcher.fetch_auth_token(client)

    def get_cache_key(self) -> str | None:
        return self._fetcher.get_cache_key()

    def get_update_metadata_func(self) -> UpdateMetadataFunc:
        """Export `update_metadata` as a callback for HTTP client configuration."""
        return self.update_metadata

    def update_metadata(self, metadata: MetadataMap, client: httpx.Client | None = None) -> MetadataMap:
        """Return a copy of ``metadata`` carrying a bearer token.

        Args:
            metadata: Outgoing request metadata, header name to values.
                Never modified.
            client: Optional HTTP client used for the token request.

        Returns:
            A new mapping with ``Authorization`` set to ``["Bearer <token>"]``,
            replacing any previous value. If the fetcher returned no access
            token (missing or empty), the input is returned as is.
        """
        result = self.fetch_auth_token(client)
        access_token = result.get("access_token") if result else None
        if not access_token:
            logger.debug("Token fetch returned no access_token; metadata left unchanged")
            return metadata

        updated = dict(metadata)
        updated[AUTH_METADATA_KEY] = [f"Bearer {access_token}"]
        return updated

    def __repr__(self) -> str:
        return f"Credentials(fetcher={self._fetcher!r})"
