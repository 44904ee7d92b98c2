"""Exception types raised by the POS core and session."""

from __future__ import annotations


class PosError(Exception):
    """Base class for recoverable POS errors shown to the operator."""


class ValidationError(PosError, ValueError):
    """A caller-supplied value is outside an operation's precondition."""


class SessionError(PosError):
    """The requested action does not fit the current session state."""


class ReportError(PosError):
    """The sales report could not be written."""
