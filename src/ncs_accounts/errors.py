"""Exception hierarchy for account registry loading and lookups."""

from __future__ import annotations


class AccountsError(Exception):
    """Base class for every error raised by ncs_accounts."""


class ReadError(AccountsError):
    """A backing registry file could not be opened or read."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ParseError(AccountsError, ValueError):
    """A registry line has too few fields or a non-numeric numeric field.

    ``field`` names the logical field that failed (``uid``, ``gid``,
    ``last_changed`` ...), or ``"fields"`` when the line is too short.
    """

    def __init__(self, message: str, field: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.line_number = line_number


class NotFoundError(AccountsError, LookupError):
    """Raised by ``current()`` when no account matches the effective identity."""
