"""Scope normalization."""

from collections.abc import Iterable

Scope = str | Iterable[str] | None


def normalize_scope(scope: Scope) -> str | None:
    """Normalize a scope to a single space-delimited string.

    Args:
        scope: A space-delimited string, an ordered iterable of scope
            strings, or None.

    Returns:
        The scopes joined by single spaces in their original order, or None
        when no scope was requested.

    Example:
        ```python
        normalize_scope(["email", "profile"])  # "email profile"
        normalize_scope("email   profile")  # "email profile"
        normalize_scope([])  # None
        ```
    """
    if scope is None:
        return None

    if isinstance(scope, str):
        parts = scope.split()
    else:
        parts = []
        for item in scope:
            parts.extend(str(item).split())

    return " ".join(parts) if parts else None
