"""Custom exceptions for credential resolution.

This module defines exceptions raised while locating and loading
Application Default Credentials.

Example:
    ```python
    from adc_core.auth import from_env
    from adc_core.auth.exceptions import ConfigurationError

    try:
        credentials = from_env("https://www.googleapis.com/auth/cloud-platform")
    except ConfigurationError as e:
        print(f"Check {e.env_var_name}: {e.cause}")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class ConfigurationError(CredentialError):
    """Raised when an explicitly configured credential path cannot be read.

    An environment variable naming a credential file expresses intent, so a
    missing file is reported instead of falling through to the next source.

    Attributes:
        env_var_name: The environment variable that named the file.
        cause: Description of why the file could not be read.

    Example:
        ```python
        try:
            credentials = from_env()
        except ConfigurationError as e:
            print(f"{e.env_var_name} is misconfigured: {e.cause}")
        ```
    """

    def __init__(self, message: str, env_var_name: str | None = None, cause: str | None = None):
        """Initialize ConfigurationError.

        Args:
            message: Error message naming the variable and the cause.
            env_var_name: Environment variable holding the bad path.
            cause: The underlying reason, verbatim.
        """
        super().__init__(message)
        self.env_var_name = env_var_name
        self.cause = cause


class CredentialNotFoundError(CredentialError):
    """Raised when no credential source is configured at all.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).

    Example:
        ```python
        try:
            credentials = get_default_credentials()
        except CredentialNotFoundError as e:
            print(f"Set {e.env_var_name} or run `gcloud auth application-default login`")
        ```
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        """Initialize CredentialNotFoundError.

        Args:
            message: Error message describing where credentials were looked for.
            env_var_name: Optional environment variable name for reference.
        """
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when credential file contents cannot be turned into a token fetcher.

    Covers undecodable JSON, a missing or unknown ``type`` field, and
    missing required fields.
    """

    pass
