"""RFC 6749 error response models."""

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass
class OAuthErrorResponse:
    """OAuth2 token endpoint error body.

    See: https://datatracker.ietf.org/doc/html/rfc6749#section-5.2
    """

    error: str  # Error code, e.g. "invalid_grant"
    error_description: str | None = None  # Human-readable explanation
    error_uri: str | None = None  # Page describing the error

    # Additional fields sent by the endpoint
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "OAuthErrorResponse | None":
        """Parse an RFC 6749 error body from a token endpoint response.

        Args:
            response: HTTP response object

        Returns:
            OAuthErrorResponse or None if the body is not an OAuth error
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            # JSON decode errors, type errors, or missing .json() method
            return None

        if not isinstance(data, dict):
            return None

        error = data.get("error")
        # Some endpoints nest the error object ({"error": {"code": ..., "status": ...}})
        if isinstance(error, dict):
            error = error.get("status") or error.get("message")
        if not isinstance(error, str) or not error:
            return None

        standard_fields = {"error", "error_description", "error_uri"}
        extensions = {k: v for k, v in data.items() if k not in standard_fields}

        return cls(
            error=error,
            error_description=data.get("error_description"),
            error_uri=data.get("error_uri"),
            extensions=extensions if extensions else None,
        )

    def to_exception_message(self) -> str:
        """Convert the error body to an exception message."""
        message = self.error
        if self.error_description:
            message = f"{message}: {self.error_description}"
        if self.error_uri:
            message = f"{message} (see {self.error_uri})"
        return message
