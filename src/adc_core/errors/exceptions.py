"""Structured exceptions for OAuth2 token endpoint errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from adc_core.errors.models import OAuthErrorResponse


class TokenRequestError(Exception):
    """Base exception for failed token requests."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        error_response: "OAuthErrorResponse | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.error_response = error_response

    @property
    def error_code(self) -> str | None:
        """The RFC 6749 ``error`` code, if the endpoint sent one."""
        return self.error_response.error if self.error_response else None


class InvalidRequestError(TokenRequestError):
    """invalid_request: malformed token request."""

    pass


class InvalidClientError(TokenRequestError):
    """invalid_client: client authentication failed."""

    pass


class InvalidGrantError(TokenRequestError):
    """invalid_grant: refresh token expired, revoked or otherwise invalid."""

    pass


class UnauthorizedClientError(TokenRequestError):
    """unauthorized_client: client may not use this grant type."""

    pass


class UnsupportedGrantTypeError(TokenRequestError):
    """unsupported_grant_type."""

    pass


class InvalidScopeError(TokenRequestError):
    """invalid_scope: requested scope is invalid, unknown or exceeds the grant."""

    pass


class TokenServerError(TokenRequestError):
    """5xx from the token endpoint."""

    pass
