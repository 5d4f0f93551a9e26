"""ADC Core - Application Default Credentials for Python API clients.

This library resolves ambient OAuth2 credentials and turns them into
request authorization:
- Credential file resolution (GOOGLE_APPLICATION_CREDENTIALS, well-known gcloud file)
- A uniform credentials facade over pluggable token fetchers
- Metadata decoration and an httpx auth adapter
- Structured OAuth2 token endpoint errors
- Testing utilities

Example:
    ```python
    import httpx

    from adc_core.auth import get_default_credentials
    from adc_core.transport import MetadataAuth

    # Resolve credentials
    credentials = get_default_credentials("https://www.googleapis.com/auth/cloud-platform")

    # Authorize an httpx client
    with httpx.Client(auth=MetadataAuth(credentials.get_update_metadata_func())) as client:
        response = client.get("https://storage.googleapis.com/storage/v1/b", params={"project": "my-project"})
    ```
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
