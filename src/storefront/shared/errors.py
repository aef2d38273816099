"""Errors the HTTP layer translates into 401, 403 and 409 responses.

Field-level validation failures use ``protean.exceptions.ValidationError`` and
missing records surface as ``protean.exceptions.ObjectNotFoundError``; these
cover the remaining failure modes.
"""


class StorefrontError(Exception):
    """Base class carrying a client-facing message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthenticationError(StorefrontError):
    """Missing, invalid or expired credentials."""


class ForbiddenError(StorefrontError):
    """The caller is authenticated but lacks the role or ownership required."""


class ConflictError(StorefrontError):
    """The request contradicts current state, e.g. a product with active orders."""
