"""Leader Routes — create, read, list, update and delete leaders.

Invariants:
    - Handlers never catch store errors (translated in api/error_handlers.py)
    - Path identifiers reach the store as raw strings, so malformed ids surface as 404
    - Bodies reach the store as raw JSON, so a missing or empty body surfaces as 400
    - DELETE answers 204 with no body

Design Decisions:
    - Singular /leader for item routes, plural /leaders for the paged collection
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status

from leader_service.api.dependencies import get_leader_store
from leader_service.schemas.leader import LeaderResponse
from leader_service.services.leader_store import LeaderStore

router = APIRouter(prefix="/api", tags=["leaders"])


@router.post("/leader", response_model=LeaderResponse)
async def create_leader(
    payload: Any = Body(None),
    store: LeaderStore = Depends(get_leader_store),
):
    """Create a leader from {firstName, lastName}."""
    return await store.create(payload)


@router.get("/leader/{leader_id}", response_model=LeaderResponse)
async def get_leader(
    leader_id: str, store: LeaderStore = Depends(get_leader_store),
):
    return await store.get_by_id(leader_id)


@router.get("/leaders", response_model=list[LeaderResponse])
async def list_leaders(
    page: int = Query(1),
    store: LeaderStore = Depends(get_leader_store),
):
    """List leaders, ten per page. Pages past the end return []."""
    return await store.list(page)


@router.put("/leader/{leader_id}", response_model=LeaderResponse)
async def update_leader(
    leader_id: str,
    payload: Any = Body(None),
    store: LeaderStore = Depends(get_leader_store),
):
    """Apply a partial update; _id and submitted are never changed."""
    return await store.update_by_id(leader_id, payload)


@router.delete(
    "/leader/{leader_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_leader(
    leader_id: str, store: LeaderStore = Depends(get_leader_store),
):
    await store.delete_by_id(leader_id)
