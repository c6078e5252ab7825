"""Error types raised and handled by ledger sessions."""

SESSION_CLOSED_MESSAGE = "Cannot invoke method on a closed session."


class LedgerSessionError(Exception):
    """Base class for ledger session errors."""


class SessionClosedError(LedgerSessionError, RuntimeError):
    """Raised when a closed session is used. Signals caller misuse, never retried."""

    def __init__(self, message: str = SESSION_CLOSED_MESSAGE):
        super().__init__(message)


class TransportError(LedgerSessionError):
    """
    Client or communication failure reported by a session transport.

    Transports raise this (or wrap their own client exceptions in it) when a
    command could not be delivered to the ledger service.
    """
