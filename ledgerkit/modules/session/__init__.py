"""
Session Module - Black Box Interface

Purpose: Manage the lifecycle of a client-side ledger session handle
Interface: is_closed(), soft_close(), throw_if_closed(), abort_or_close()
Hidden: Closed-flag synchronization, transport error handling

The transport behind a session is any object satisfying SessionHandle.
"""

from .base import DEFAULT_RETRY_LIMIT, TABLE_NAME_QUERY, BaseSession
from .closed_state import ClosedState
from .errors import (
    SESSION_CLOSED_MESSAGE,
    LedgerSessionError,
    SessionClosedError,
    TransportError,
)
from .handle import SessionHandle

__all__ = [
    "BaseSession",
    "ClosedState",
    "DEFAULT_RETRY_LIMIT",
    "LedgerSessionError",
    "SESSION_CLOSED_MESSAGE",
    "SessionClosedError",
    "SessionHandle",
    "TABLE_NAME_QUERY",
    "TransportError",
]
