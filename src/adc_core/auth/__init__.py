"""Application Default Credentials for outbound API calls.

This module provides:
- Credential file resolution (GOOGLE_APPLICATION_CREDENTIALS → well-known gcloud file)
- A uniform `Credentials` facade over token fetchers
- A metadata decorator that adds ``Authorization: Bearer <token>``

Example:
    ```python
    from adc_core.auth import get_default_credentials

    credentials = get_default_credentials("https://www.googleapis.com/auth/cloud-platform")
    headers = credentials.update_metadata({})
    ```
"""

from adc_core.auth.credentials import AUTH_METADATA_KEY, Credentials
from adc_core.auth.exceptions import (
    ConfigurationError,
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from adc_core.auth.fetchers import (
    TOKEN_CREDENTIAL_URI,
    TokenFetcher,
    UserRefreshCredentials,
    make_credentials,
    register_fetcher_type,
)
from adc_core.auth.platform import Platform
from adc_core.auth.resolver import (
    ENV_VAR,
    WELL_KNOWN_PATH,
    CredentialSourceResolver,
    from_env,
    from_well_known_file,
    get_default_credentials,
)
from adc_core.auth.scope import normalize_scope
from adc_core.auth.sources import CredentialSource, Found, Misconfigured, NotConfigured, SourceOrigin

__all__ = [
    "AUTH_METADATA_KEY",
    "ENV_VAR",
    "TOKEN_CREDENTIAL_URI",
    "WELL_KNOWN_PATH",
    "ConfigurationError",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialSource",
    "CredentialSourceResolver",
    "Credentials",
    "Found",
    "Misconfigured",
    "NotConfigured",
    "Platform",
    "SourceOrigin",
    "TokenFetcher",
    "UserRefreshCredentials",
    "from_env",
    "from_well_known_file",
    "get_default_credentials",
    "make_credentials",
    "normalize_scope",
    "register_fetcher_type",
]
