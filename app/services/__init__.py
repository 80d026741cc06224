"""
Application services module.
"""

from app.services.snapshot_store import SnapshotStore, get_snapshot_store

__all__ = ["SnapshotStore", "get_snapshot_store"]
