"""
Ledgerkit - Ledger Session Lifecycle Core

The shared foundation beneath the synchronous and asynchronous
ledger sessions.

Architecture:
- Each module is self-contained with clear interfaces
- Transports are external collaborators behind a protocol
- No module knows the internals of another

Modules:
- session: Closed-state tracking and the abort-or-close protocol
- backoff: Exponential backoff with jitter between retries
"""

__version__ = "1.0.0"
