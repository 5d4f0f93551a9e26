"""Application Default Credentials resolution.

Locates a credential file from the environment and turns it into a
`Credentials` facade.

Resolution order used by `get_default_credentials`:
1. File named by the ``GOOGLE_APPLICATION_CREDENTIALS`` environment variable
2. Well-known file written by ``gcloud auth application-default login``:
   - Windows: ``%APPDATA%/gcloud/application_default_credentials.json``
   - others: ``$HOME/gcloud/application_default_credentials.json``

Each strategy can also be called on its own. A strategy that does not apply
returns None. An environment variable pointing at a missing file raises
`ConfigurationError` instead of falling through.

Example:
    ```python
    from adc_core.auth import CredentialSourceResolver, Platform

    resolver = CredentialSourceResolver(
        environ={"GOOGLE_APPLICATION_CREDENTIALS": "/secrets/adc.json"},
        platform=Platform.POSIX,
    )
    credentials = resolver.from_env(["email", "profile"])
    ```

Security Considerations:
    - Credential file contents are never logged
    - Only source information is logged (env var name, file path)
    - Thread-safe dotenv loading with lock
"""

import io
import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from threading import Lock
from typing import IO

from dotenv import load_dotenv

from adc_core.auth.credentials import Credentials
from adc_core.auth.exceptions import ConfigurationError, CredentialFileError, CredentialNotFoundError
from adc_core.auth.fetchers import TokenFetcher, make_credentials
from adc_core.auth.platform import Platform
from adc_core.auth.scope import Scope, normalize_scope
from adc_core.auth.sources import (
    CredentialSource,
    Found,
    Misconfigured,
    NotConfigured,
    ResolutionResult,
    SourceOrigin,
)

logger = logging.getLogger(__name__)

ENV_VAR = "GOOGLE_APPLICATION_CREDENTIALS"
WELL_KNOWN_PATH = "gcloud/application_default_credentials.json"

CredentialsFactory = Callable[[str | None, IO[bytes]], TokenFetcher]


def _unable_to_read_env(cause: str) -> str:
    return f"Unable to read the credential file specified by {ENV_VAR}: {cause}"


class CredentialSourceResolver:
    """Locate credential files and build `Credentials` from them.

    Args:
        environ: Environment to read. Defaults to ``os.environ``, in which
            case a .env file is loaded into it first (see ``load_dotenv``).
        platform: Platform family deciding the well-known root variable.
            Detected from the running interpreter when omitted.
        factory: Builds a token fetcher from a scope and a credential
            stream. Defaults to `make_credentials`.
        dotenv_path: Path to .env file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Whether to load a .env file into ``os.environ``.
            Ignored when ``environ`` is injected.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        platform: Platform | None = None,
        factory: CredentialsFactory = make_credentials,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
    ):
        self._environ = environ
        self.platform = platform if platform is not None else Platform.detect()
        self._factory = factory

        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv and environ is None

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Ensure .env file is loaded (thread-safe, at most once)."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            # Double-check pattern for thread safety
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    @property
    def environ(self) -> Mapping[str, str]:
        return self._environ if self._environ is not None else os.environ

    def well_known_file_path(self) -> str | None:
        """Return the platform's well-known credential path, or None if its root is unset."""
        root_env_var = self.platform.root_env_var
        root = self.environ.get(root_env_var)
        if not root:
            logger.debug(f"{root_env_var} is not set; no well-known credential path")
            return None
        return os.path.join(root, WELL_KNOWN_PATH)

    def locate_from_env(self) -> ResolutionResult:
        """Locate the credential file named by ``GOOGLE_APPLICATION_CREDENTIALS``."""
        path = self.environ.get(ENV_VAR)
        if not path:
            logger.debug(f"{ENV_VAR} is not set")
            return NotConfigured()

        path_obj = Path(path)
        if not path_obj.exists():
            return Misconfigured(env_var_name=ENV_VAR, cause=f"file {path} does not exist")
        if not path_obj.is_file():
            return Misconfigured(env_var_name=ENV_VAR, cause=f"file {path} is not a regular file")

        try:
            content = path_obj.read_bytes()
        except OSError as e:
            return Misconfigured(env_var_name=ENV_VAR, cause=f"file {path} could not be read: {e}")

        logger.debug(f"Resolved credential file from environment variable '{ENV_VAR}': {path}")
        return Found(CredentialSource(stream=io.BytesIO(content), origin=SourceOrigin.ENV_PATH, path=path))

    def locate_well_known_file(self) -> ResolutionResult:
        """Locate the gcloud application default credentials file."""
        path = self.well_known_file_path()
        if path is None:
            return NotConfigured()

        path_obj = Path(path)
        if not path_obj.is_file():
            logger.debug(f"No credential file at well-known path {path}")
            return NotConfigured()

        try:
            content = path_obj.read_bytes()
        except OSError as e:
            raise CredentialFileError(f"Error reading credential file {path}: {e}") from e

        logger.debug(f"Resolved credential file from well-known path: {path}")
        return Found(CredentialSource(stream=io.BytesIO(content), origin=SourceOrigin.WELL_KNOWN_PATH, path=path))

    def _build(self, result: ResolutionResult, scope: Scope) -> Credentials | None:
        if isinstance(result, NotConfigured):
            return None
        if isinstance(result, Misconfigured):
            logger.warning(f"{result.env_var_name} is set but unusable: {result.cause}")
            raise ConfigurationError(
                _unable_to_read_env(result.cause),
                env_var_name=result.env_var_name,
                cause=result.cause,
            )
        return Credentials(self._factory(normalize_scope(scope), result.source.stream))

    def from_env(self, scope: Scope = None) -> Credentials | None:
        """Create credentials from the file named in the environment.

        Args:
            scope: The scope of the access request, as a space-delimited
                string or a list of strings.

        Returns:
            Credentials, or None if ``GOOGLE_APPLICATION_CREDENTIALS`` is
            unset or empty.

        Raises:
            ConfigurationError: If the variable names a file that does not exist.
            CredentialFileError: If the file cannot be turned into a fetcher.
        """
        return self._build(self.locate_from_env(), scope)

    def from_well_known_file(self, scope: Scope = None) -> Credentials | None:
        """Create credentials from the platform's well-known file.

        Args:
            scope: The scope of the access request, as a space-delimited
                string or a list of strings.

        Returns:
            Credentials, or None if the file does not exist.

        Raises:
            CredentialFileError: If the file exists but cannot be read or
                turned into a fetcher.
        """
        return self._build(self.locate_well_known_file(), scope)

    def get_default_credentials(self, scope: Scope = None) -> Credentials:
        """Create credentials from the first configured source.

        Raises:
            CredentialNotFoundError: If neither the environment variable nor
                the well-known file provides credentials.
            ConfigurationError: If the environment variable names a missing file.
        """
        credentials = self.from_env(scope)
        if credentials is not None:
            return credentials

        credentials = self.from_well_known_file(scope)
        if credentials is not None:
            return credentials

        well_known = self.well_known_file_path() or f"${self.platform.root_env_var}/{WELL_KNOWN_PATH}"
        raise CredentialNotFoundError(
            f"Could not find default credentials (checked env var: {ENV_VAR}, well-known file: {well_known})",
            env_var_name=ENV_VAR,
        )


def from_env(scope: Scope = None) -> Credentials | None:
    """Shortcut for `CredentialSourceResolver.from_env` on the process environment."""
    return CredentialSourceResolver().from_env(scope)


def from_well_known_file(scope: Scope = None) -> Credentials | None:
    """Shortcut for `CredentialSourceResolver.from_well_known_file` on the process environment."""
    return CredentialSourceResolver().from_well_known_file(scope)


def get_default_credentials(scope: Scope = None) -> Credentials:
    """Shortcut for `CredentialSourceResolver.get_default_credentials` on the process environment."""
    return CredentialSourceResolver().get_default_credentials(scope)
