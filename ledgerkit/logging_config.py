"""
Logging configuration that keeps session tokens out of log output
"""

import logging
import logging.config
import threading
import weakref
from typing import Any, Dict, Set

REDACTED = "***"


class SessionTokenFilter(logging.Filter):
    """Filter that masks the tokens of open sessions in log records."""

    # Held weakly so dropped sessions leave the registry with no close call.
    _sessions: weakref.WeakSet = weakref.WeakSet()
    _lock = threading.Lock()

    @classmethod
    def track_session(cls, session) -> None:
        """Mask the session's token for as long as it is open and referenced."""
        with cls._lock:
            cls._sessions.add(session)

    @classmethod
    def open_tokens(cls) -> Set[str]:
        """Tokens of tracked sessions that are not closed."""
        with cls._lock:
            sessions = list(cls._sessions)
        tokens = set()
        for session in sessions:
            if session.is_closed():
                continue
            token = session.session_token
            if isinstance(token, str) and token:
                tokens.add(token)
        return tokens

    def filter(self, record: logging.LogRecord) -> bool:
        """Rewrite the record message with tokens replaced. Never drops records."""
        tokens = self.open_tokens()
        if not tokens:
            return True

        message = record.getMessage()
        redacted = message
        for token in tokens:
            redacted = redacted.replace(token, REDACTED)

        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with session token redaction."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "session_token_filter": {
                "()": SessionTokenFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
                "filters": ["session_token_filter"]
            }
        },
        "loggers": {
            "ledgerkit": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            }
        },
        "root": {
            "level": "WARNING",
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the ledgerkit logging configuration."""
    logging.config.dictConfig(get_logging_config(level))
