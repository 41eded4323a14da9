"""Exception hierarchy raised by :mod:`cipherkit`.

Every failure surfaces as a subclass of :class:`CipherkitError` so callers can
tell an authentication failure apart from malformed input.  Where it makes
sense the classes also derive from the matching builtin (``ValueError`` or
``OSError``) so generic handlers keep working.
"""

from __future__ import annotations

__all__ = [
    "CipherkitError",
    "InvalidEncoding",
    "InvalidKeyMaterial",
    "AuthenticationFailure",
    "CryptoEnvironmentError",
]


class CipherkitError(Exception):
    """Base class for all cipherkit errors."""

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation


class InvalidEncoding(CipherkitError, ValueError):
    """Raised when a value is not valid standard base-64 or UTF-8."""


class InvalidKeyMaterial(CipherkitError, ValueError):
    """Raised when text cannot be used as key material for derivation."""


class AuthenticationFailure(CipherkitError):
    """Raised when the AES-GCM authentication tag does not verify."""


class CryptoEnvironmentError(CipherkitError, OSError):
    """Raised when the random source or cryptography backend is unavailable."""
