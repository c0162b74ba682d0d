"""
Exceptions raised by the struct layer.

Unresolved lookups (channel, guild, user, emoji) are not errors: they surface
as ``None``. Only the mutating operations raise, and they do so before any
request reaches the network collaborator.
"""

from __future__ import annotations


class StructError(Exception):
    """Base class for struct layer failures."""

    pass


class UnsupportedOperationError(StructError):
    """Raised when an operation is not available for a message variant."""

    pass


class AuthorizationError(StructError):
    """Raised when the acting user may not perform an operation."""

    pass


class InsufficientPermissions(AuthorizationError):
    """Raised when the acting user lacks a channel permission."""

    def __init__(self, permission: str, message: str | None = None) -> None:
        self.permission = permission
        super().__init__(message or f"Missing permission: {permission}")


class HostNotInstalled(RuntimeError):
    """Raised when a struct needs a host collaborator before one is installed."""

    pass


__all__ = [
    "StructError",
    "UnsupportedOperationError",
    "AuthorizationError",
    "InsufficientPermissions",
    "HostNotInstalled",
]
