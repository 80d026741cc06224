"""
FastAPI dependencies for calculator sessions.
"""

import asyncio

from fastapi import Depends, Request, Response

from app.config import get_settings
from app.services.snapshot_store import SnapshotStore, get_snapshot_store


async def get_session_id(
    request: Request,
    response: Response,
    store: SnapshotStore = Depends(get_snapshot_store),
) -> str:
    """
    Resolve the caller's calculator session from its cookie.

    Issues a new session cookie when the request has none, or when the
    session it names has expired.
    """
    settings = get_settings()
    cookie_value = request.cookies.get(settings.session_cookie_name)
    session_id = store.open_session(cookie_value)

    if session_id != cookie_value:
        response.set_cookie(
            key=settings.session_cookie_name,
            value=session_id,
            httponly=True,
            secure=settings.app_env == "production",
            samesite="lax",
            max_age=settings.session_ttl_minutes * 60,
        )

    return session_id


async def calculation_delay() -> None:
    """Apply the configured artificial latency, if any."""
    delay_ms = get_settings().calculation_delay_ms
    if delay_ms > 0:
        await asyncio.sleep(delay_ms / 1000)
