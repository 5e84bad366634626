"""
Information endpoint for API v1.

Returns the service name and version together with the number of
records currently held in each collection.  Useful as a liveness
check since the dataset only exists in memory.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from event_board_api.app.core.config import settings
from event_board_api.app.core.deps import get_store
from event_board_api.app.core.store import InMemoryStore

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_info(store: InMemoryStore = Depends(get_store)) -> Dict[str, Any]:
    """Return service metadata and per‑collection record counts."""
    return {
        "status": "ok",
        "name": settings.project_name,
        "version": settings.api_version,
        "counts": store.counts(),
    }
