"""Transport layer components for authorized HTTP clients.

Modules:
    auth: httpx authentication that applies an update-metadata function

Example:
    ```python
    import httpx

    from adc_core.transport import MetadataAuth

    with httpx.Client(auth=MetadataAuth(credentials.get_update_metadata_func())) as client:
        client.get("https://www.googleapis.com/oauth2/v3/userinfo")
    ```
"""

from adc_core.transport.auth import MetadataAuth

__all__ = ["MetadataAuth"]
