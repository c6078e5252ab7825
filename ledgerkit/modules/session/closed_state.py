import threading


class ClosedState:
    """
    One-way closed flag shared by every thread holding a session.

    The flag starts unset and can be set exactly once. There is no way to
    clear it again.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._closed = False

    def is_set(self) -> bool:
        """Return True if the flag has been set."""
        with self._lock:
            return self._closed

    def set(self) -> bool:
        """
        Set the flag.

        Returns:
            True if this call performed the transition, False if the flag
            was already set
        """
        with self._lock:
            if self._closed:
                return False
            self._closed = True
            return True

    def __bool__(self) -> bool:
        return self.is_set()

    def __repr__(self) -> str:
        return f"ClosedState(closed={self.is_set()})"
