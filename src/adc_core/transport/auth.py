"""httpx authentication driven by an update-metadata function.

`MetadataAuth` accepts any callable with the signature
``(metadata, client=None) -> metadata`` and applies it to every outgoing
request, so HTTP call sites never depend on `Credentials` directly.

Example:
    ```python
    import httpx

    from adc_core.auth import get_default_credentials
    from adc_core.transport.auth import MetadataAuth

    credentials = get_default_credentials("https://www.googleapis.com/auth/cloud-platform")
    auth = MetadataAuth(credentials.get_update_metadata_func())

    with httpx.Client(auth=auth) as client:
        response = client.get("https://storage.googleapis.com/storage/v1/b?project=my-project")
    ```
"""

import logging
from collections.abc import Generator

import httpx

from adc_core.auth.credentials import UpdateMetadataFunc

logger = logging.getLogger(__name__)


class MetadataAuth(httpx.Auth):
    """Decorate request headers through an update-metadata function.

    The request headers are handed to the function as a header-name to
    values mapping. The request headers are then made to match the result:
    entries the function adds or changes are written back, entries it drops
    are removed, and entries it leaves alone are untouched.

    The function runs synchronously, also under ``httpx.AsyncClient``.

    Args:
        update_metadata: Callable returning decorated metadata.
        client: HTTP client passed on for token requests. Must not be the
            client this auth is installed on.
    """

    def __init__(self, update_metadata: UpdateMetadataFunc, client: httpx.Client | None = None):
        self._update_metadata = update_metadata
        self._client = client

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        metadata: dict[str, list[str]] = {}
        for name, value in request.headers.multi_items():
            metadata.setdefault(name, []).append(value)

        updated = self._update_metadata(metadata, self._client)

        for name in metadata:
            if name not in updated:
                del request.headers[name]
                logger.debug(f"Removed header '{name}' from {request.method} {request.url}")

        for name, values in updated.items():
            if metadata.get(name) == values:
                continue
            request.headers[name] = ", ".join(values)
            logger.debug(f"Set header '{name}' on {request.method} {request.url}")

        yield request
