"""
Per-session storage of financial snapshots.

Each browser session gets its own FinancialSnapshot so the ratio calculator
only ever reads statement figures that the same user computed. Snapshots
live in memory and expire after a period of inactivity.
"""

import logging
import secrets
import threading
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Union

from app.calculations.statements import (
    BalanceSheetResult,
    FinancialSnapshot,
    IncomeStatementResult,
)
from app.config import get_settings

logger = logging.getLogger(__name__)

StatementResult = Union[IncomeStatementResult, BalanceSheetResult]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_session_id(length: int = 32) -> str:
    """
    Generate a cryptographically secure session id.

    Args:
        length: Number of bytes (id will be 2x this in hex chars)
    """
    return secrets.token_hex(length)


@dataclass
class _Entry:
    snapshot: FinancialSnapshot = field(default_factory=FinancialSnapshot)
    last_used: datetime = field(default_factory=_utcnow)


class SnapshotStore:
    """Thread-safe in-memory mapping of session id to FinancialSnapshot."""

    def __init__(self, ttl_minutes: int = 120):
        self.ttl = timedelta(minutes=ttl_minutes)
        self._entries: Dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _purge_expired(self, now: datetime) -> None:
        expired = [
            sid for sid, entry in self._entries.items() if now - entry.last_used > self.ttl
        ]
        for sid in expired:
            del self._entries[sid]
        if expired:
            logger.debug(f"Expired {len(expired)} idle session(s)")

    def open_session(
        self, session_id: Optional[str], now: Optional[datetime] = None
    ) -> str:
        """
        Return a live session id, starting a new session if needed.

        Unknown or expired ids are replaced by a fresh id, so a client can
        never choose the key of another session.
        """
        now = now or _utcnow()
        with self._lock:
            self._purge_expired(now)
            entry = self._entries.get(session_id) if session_id else None
            if entry is None:
                session_id = generate_session_id()
                entry = _Entry(last_used=now)
                self._entries[session_id] = entry
                logger.debug("Started new calculator session")
            entry.last_used = now
            return session_id

    def read(self, session_id: str) -> FinancialSnapshot:
        """Return a copy of the session's snapshot (empty if unknown)."""
        with self._lock:
            entry = self._entries.get(session_id)
            if entry is None:
                return FinancialSnapshot()
            return replace(entry.snapshot)

    def write(self, session_id: str, result: StatementResult) -> None:
        """Apply a statement result to the session's snapshot in one step."""
        with self._lock:
            entry = self._entries.get(session_id)
            if entry is None:
                entry = _Entry()
                self._entries[session_id] = entry
            result.apply_to(entry.snapshot)

    def reset(self, session_id: str) -> None:
        """Clear the snapshot of a session, if it exists."""
        with self._lock:
            entry = self._entries.get(session_id)
            if entry is not None:
                entry.snapshot.clear()

    def clear(self) -> None:
        """Drop every session."""
        with self._lock:
            self._entries.clear()


_store: Optional[SnapshotStore] = None


def get_snapshot_store() -> SnapshotStore:
    """Get the application-wide snapshot store."""
    global _store
    if _store is None:
        _store = SnapshotStore(ttl_minutes=get_settings().session_ttl_minutes)
    return _store
