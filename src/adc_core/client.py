"""Base client for APIs authorized with Application Default Credentials."""

from typing import Any

import httpx

from adc_core.auth.credentials import Credentials
from adc_core.transport.auth import MetadataAuth


class AuthorizedClient:
    """Synchronous HTTP client whose requests carry a bearer token.

    Every request fetches a token through ``credentials``. Wrap the
    credentials' fetcher in a caching layer keyed on
    ``credentials.get_cache_key()`` to avoid one token request per call.

    Subclasses should implement service-specific helpers and methods.

    Args:
        credentials: Credentials used to authorize requests.
        base_url: Base URL for relative request paths.
        token_client: Client used for token requests. A short-lived client
            is created per token request when omitted.
        **client_kwargs: Passed to ``httpx.Client`` (timeout, transport, ...).

    Example:
        ```python
        with AuthorizedClient(get_default_credentials(), base_url="https://storage.googleapis.com") as client:
            response = client.http.get("/storage/v1/b", params={"project": "my-project"})
        ```
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        base_url: str = "",
        token_client: httpx.Client | None = None,
        **client_kwargs: Any,
    ):
        self.credentials = credentials
        self.http = httpx.Client(
            base_url=base_url,
            auth=MetadataAuth(credentials.get_update_metadata_func(), client=token_client),
            **client_kwargs,
        )

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "AuthorizedClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
