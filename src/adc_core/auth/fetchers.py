"""Token fetchers and the factory that builds them from credential files.

A credential file is a JSON object whose ``type`` field selects the fetcher:

| ``type`` | Fetcher | Grant |
|----------|---------|-------|
| ``authorized_user`` | `UserRefreshCredentials` | ``refresh_token`` |

Other credential types are plugged in with `register_fetcher_type`:

```python
from adc_core.auth.fetchers import register_fetcher_type


def build_service_account(info: dict, scope: str | None) -> TokenFetcher:
    return MyServiceAccountFetcher(info["client_email"], info["private_key"], scope)


register_fetcher_type("service_account", build_service_account)
```
"""

import json
import logging
from collections.abc import Callable
from threading import Lock
from typing import IO, Any, Protocol, runtime_checkable

import httpx

from adc_core.auth.exceptions import CredentialFileError
from adc_core.errors.handler import raise_for_token_response

logger = logging.getLogger(__name__)

TOKEN_CREDENTIAL_URI = "https://www.googleapis.com/oauth2/v3/token"


@runtime_checkable
class TokenFetcher(Protocol):
    """Exchanges credential material for access tokens."""

    def fetch_auth_token(self, client: httpx.Client | None = None) -> dict[str, Any]:
        """Fetch a token record containing at least ``access_token``."""
        ...

    def get_cache_key(self) -> str | None:
        """Return a stable key identifying this credential and scope."""
        ...


FetcherConstructor = Callable[[dict[str, Any], str | None], TokenFetcher]


class UserRefreshCredentials:
    """Fetch access tokens with an OAuth2 refresh token.

    Built from the ``authorized_user`` file written by
    ``gcloud auth application-default login``. Every call performs a
    token request; caching is left to the caller.

    Args:
        client_id: OAuth client id
        client_secret: OAuth client secret
        refresh_token: Long-lived refresh token
        scope: Normalized scope string, or None
        token_uri: Token endpoint (default: TOKEN_CREDENTIAL_URI)
    """

    REQUIRED_FIELDS: tuple[str, ...] = ("client_id", "client_secret", "refresh_token")

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        refresh_token: str,
        scope: str | None = None,
        token_uri: str = TOKEN_CREDENTIAL_URI,
    ) -> None:
        self.client_id = client_id
        self._client_secret = client_secret
        self._refresh_token = refresh_token
        self.scope = scope
        self.token_uri = token_uri

    @classmethod
    def from_info(cls, info: dict[str, Any], scope: str | None = None) -> "UserRefreshCredentials":
        """Build from a decoded ``authorized_user`` credential file.

        Raises:
            CredentialFileError: If a required field is missing or empty.
        """
        missing = [name for name in cls.REQUIRED_FIELDS if not info.get(name)]
        if missing:
            raise CredentialFileError(
                f"authorized_user credentials are missing required field(s): {', '.join(missing)}"
            )
        return cls(
            client_id=info["client_id"],
            client_secret=info["client_secret"],
            refresh_token=info["refresh_token"],
            scope=scope,
            token_uri=info.get("token_uri") or TOKEN_CREDENTIAL_URI,
        )

    def _token_request_body(self) -> dict[str, str]:
        body = {
            "grant_type": "refresh_token",
            "client_id": self.client_id,
            "client_secret": self._client_secret,
            "refresh_token": self._refresh_token,
        }
        if self.scope:
            body["scope"] = self.scope
        return body

    def fetch_auth_token(self, client: httpx.Client | None = None) -> dict[str, Any]:
        """Exchange the refresh token for an access token.

        Args:
            client: HTTP client to send the request with. A short-lived client
                is created when omitted.

        Returns:
            Decoded token endpoint response (``access_token``, ``expires_in``, ...)

        Raises:
            TokenRequestError: If the token endpoint rejects the request.
            httpx.HTTPError: On transport failures.
        """
        if client is None:
            with httpx.Client() as owned_client:
                return self._request_token(owned_client)
        return self._request_token(client)

    def _request_token(self, client: httpx.Client) -> dict[str, Any]:
        logger.debug(f"Requesting access token from {self.token_uri} for client {self.client_id}")
        response = client.post(self.token_uri, data=self._token_request_body())
        raise_for_token_response(response)
        return response.json()

    def get_cache_key(self) -> str:
        """Key on client id and scope; secrets never appear in the key."""
        return f"{self.client_id}:{self.scope or ''}"

    def __repr__(self) -> str:
        return f"UserRefreshCredentials(client_id={self.client_id!r}, scope={self.scope!r})"


_FETCHER_TYPES: dict[str, FetcherConstructor] = {
    "authorized_user": UserRefreshCredentials.from_info,
}
_FETCHER_TYPES_LOCK = Lock()


def register_fetcher_type(type_name: str, constructor: FetcherConstructor) -> None:
    """Register a fetcher constructor for a credential file ``type``.

    The registry is shared by the whole process. Register types at import
    time, before credentials are resolved; registering an existing type
    replaces its constructor.
    """
    with _FETCHER_TYPES_LOCK:
        if type_name in _FETCHER_TYPES:
            logger.debug(f"Replacing fetcher constructor for credential type '{type_name}'")
        _FETCHER_TYPES[type_name] = constructor


def registered_fetcher_types() -> list[str]:
    """Return the credential types `make_credentials` can build, sorted."""
    with _FETCHER_TYPES_LOCK:
        return sorted(_FETCHER_TYPES)


def make_credentials(scope: str | None, stream: IO[bytes]) -> TokenFetcher:
    """Build a token fetcher from a credential file stream.

    Args:
        scope: Normalized scope string, or None for no restriction.
        stream: Readable binary stream with the credential JSON. It is read
            to the end.

    Returns:
        The fetcher registered for the file's ``type``.

    Raises:
        CredentialFileError: If the stream is not a JSON object, or its
            ``type`` is missing or has no registered fetcher.
    """
    try:
        info = json.loads(stream.read().decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CredentialFileError(f"Credential file is not valid JSON: {e}") from e

    if not isinstance(info, dict):
        raise CredentialFileError("Credential file must contain a JSON object")

    type_name = info.get("type")
    if not type_name:
        raise CredentialFileError("Credential file has no 'type' field")

    with _FETCHER_TYPES_LOCK:
        constructor = _FETCHER_TYPES.get(type_name)
    if constructor is None:
        raise CredentialFileError(
            f"Unsupported credential type '{type_name}' "
            f"(registered: {', '.join(registered_fetcher_types())})"
        )

    logger.debug(f"Building token fetcher for credential type '{type_name}'")
    return constructor(info, scope)
