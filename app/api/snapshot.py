"""
Session snapshot endpoints.

Expose the statement figures the ratios calculator will fall back on, and
allow the caller to discard them.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.api.dependencies import get_session_id
from app.calculations.statements import FinancialSnapshot
from app.services.snapshot_store import SnapshotStore, get_snapshot_store

router = APIRouter()


class SnapshotResponse(BaseModel):
    """Cached statement figures. Null means not yet calculated."""

    total_revenue: Optional[float] = None
    cogs: Optional[float] = None
    gross_profit: Optional[float] = None
    ebit: Optional[float] = None
    net_profit: Optional[float] = None
    interest_expense: Optional[float] = None
    total_assets: Optional[float] = None
    total_liabilities: Optional[float] = None
    equity: Optional[float] = None

    @classmethod
    def from_snapshot(cls, snapshot: FinancialSnapshot) -> "SnapshotResponse":
        return cls(**snapshot.to_dict())


@router.get("", response_model=SnapshotResponse)
async def get_snapshot(
    session_id: str = Depends(get_session_id),
    store: SnapshotStore = Depends(get_snapshot_store),
):
    """Get the current session's statement figures."""
    return SnapshotResponse.from_snapshot(store.read(session_id))


@router.delete("", response_model=SnapshotResponse)
async def reset_snapshot(
    session_id: str = Depends(get_session_id),
    store: SnapshotStore = Depends(get_snapshot_store),
):
    """Forget the current session's statement figures."""
    store.reset(session_id)
    return SnapshotResponse.from_snapshot(store.read(session_id))
