"""Error handling for OAuth2 token endpoint responses (RFC 6749 §5.2)."""

from adc_core.errors.exceptions import (
    InvalidClientError,
    InvalidGrantError,
    InvalidRequestError,
    InvalidScopeError,
    TokenRequestError,
    TokenServerError,
    UnauthorizedClientError,
    UnsupportedGrantTypeError,
)
from adc_core.errors.handler import raise_for_token_response
from adc_core.errors.models import OAuthErrorResponse

__all__ = [
    "InvalidClientError",
    "InvalidGrantError",
    "InvalidRequestError",
    "InvalidScopeError",
    "OAuthErrorResponse",
    "TokenRequestError",
    "TokenServerError",
    "UnauthorizedClientError",
    "UnsupportedGrantTypeError",
    "raise_for_token_response",
]
