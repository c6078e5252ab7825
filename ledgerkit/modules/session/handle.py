"""Session handle interface following Black Box Design principles."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class SessionHandle(Protocol):
    """
    Protocol for an established session against a ledger.

    Implemented by the transport layer; ledgerkit never creates handles.
    """

    ledger_name: str
    token: str

    def send_abort(self) -> None:
        """
        Ask the service to discard in-progress work on this session.

        Raises:
            TransportError: If the abort could not be delivered
        """
        ...
