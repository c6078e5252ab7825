import logging
from typing import Tuple, Type

from ledgerkit.config.provider import SessionConfig
from ledgerkit.logging_config import SessionTokenFilter

from .closed_state import ClosedState
from .errors import SESSION_CLOSED_MESSAGE, SessionClosedError, TransportError
from .handle import SessionHandle

logger = logging.getLogger(__name__)

DEFAULT_RETRY_LIMIT = 4
TABLE_NAME_QUERY = "SELECT VALUE name FROM information_schema.user_tables WHERE status = 'ACTIVE'"


class BaseSession:
    """
    Base session to a specific ledger.

    Holds the state shared by the synchronous and asynchronous session
    implementations: the session handle, the retry limit, and the closed flag
    consulted before every unit of work.
    """

    # Exceptions from send_abort() that mark the session dead instead of propagating.
    transport_errors: Tuple[Type[BaseException], ...] = (TransportError,)

    def __init__(self, session: SessionHandle, retry_limit: int = DEFAULT_RETRY_LIMIT):
        """
        Initialize base session.

        Args:
            session: Established session handle from the transport layer
            retry_limit: Maximum retries for callers' retry loops (>= 0)

        Raises:
            ValueError: If retry_limit is negative
        """
        if retry_limit < 0:
            raise ValueError(f"retry_limit must be non-negative, got {retry_limit}")

        self.session = session
        self._retry_limit = retry_limit
        self._closed = ClosedState()
        SessionTokenFilter.track_session(self)

    @classmethod
    def from_config(cls, session: SessionHandle, config: SessionConfig) -> "BaseSession":
        """Create a session using the configured retry limit."""
        return cls(session, retry_limit=config.retry_limit)

    @property
    def retry_limit(self) -> int:
        return self._retry_limit

    @property
    def ledger_name(self) -> str:
        """Name of the ledger this session is for."""
        return self.session.ledger_name

    @property
    def session_token(self) -> str:
        """Token identifying this session to the service."""
        return self.session.token

    def is_closed(self) -> bool:
        """
        Determine if the session is closed.

        Returns:
            True if the session is closed
        """
        return self._closed.is_set()

    def soft_close(self) -> None:
        """Mark the session as closed without notifying the service."""
        if self._closed.set():
            logger.debug(f"Session on ledger {self.ledger_name} marked closed")

    def throw_if_closed(self) -> None:
        """
        Check and raise if the session is closed.

        Raises:
            SessionClosedError: If the session is closed
        """
        if self._closed.is_set():
            logger.error(SESSION_CLOSED_MESSAGE)
            raise SessionClosedError(SESSION_CLOSED_MESSAGE)

    def abort_or_close(self) -> bool:
        """
        Determine if the session is alive by sending an abort message.

        Closes the session if the abort is unsuccessful. Only call this when
        the session is known not to be in use, otherwise the in-flight state
        is abandoned.

        Returns:
            True if the session was aborted successfully, False if the
            session is closed
        """
        if self._closed.is_set():
            return False

        try:
            self.session.send_abort()
            return True
        except self.transport_errors as e:
            logger.warning(f"Abort failed on ledger {self.ledger_name}, closing session: {e}")
            self._closed.set()
            return False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(ledger_name={self.ledger_name!r}, "
            f"closed={self.is_closed()}, retry_limit={self._retry_limit})"
        )
