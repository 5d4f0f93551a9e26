"""Error handling for token endpoint responses."""

import httpx

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
from adc_core.errors.models import OAuthErrorResponse

ERROR_CODE_MAP: dict[str, type[TokenRequestError]] = {
    "invalid_request": InvalidRequestError,
    "invalid_client": InvalidClientError,
    "invalid_grant": InvalidGrantError,
    "unauthorized_client": UnauthorizedClientError,
    "unsupported_grant_type": UnsupportedGrantTypeError,
    "invalid_scope": InvalidScopeError,
}


def raise_for_token_response(response: httpx.Response) -> None:
    """Raise the matching exception for a failed token endpoint response.

    Parses the RFC 6749 error body if present and maps its ``error`` code to
    an exception class. Without a recognised code, 5xx responses raise
    TokenServerError and everything else raises TokenRequestError.

    Args:
        response: HTTP response object

    Raises:
        TokenRequestError subclass based on error code or status
    """
    if response.is_success:
        return

    error_response = OAuthErrorResponse.from_response(response)
    status_code = response.status_code

    # Determine exception class
    if error_response and error_response.error in ERROR_CODE_MAP:
        exc_class = ERROR_CODE_MAP[error_response.error]
    elif 500 <= status_code < 600:
        exc_class = TokenServerError
    else:
        exc_class = TokenRequestError

    # Build error message
    if error_response:
        message = f"Token request failed with HTTP {status_code}: {error_response.to_exception_message()}"
    else:
        response_text = response.text[:200]
        message = f"Token request failed with HTTP {status_code}"
        if response_text:
            message += f": {response_text}"

    raise exc_class(
        message=message,
        status_code=status_code,
        response=response,
        error_response=error_response,
    )
