"""Dependencies — hand the process-wide store and session manager to routes.

Invariants:
    - Both objects are built once in the lifespan (main.py) and read from app.state
    - Tests replace them through app.dependency_overrides, never by patching modules
"""

from fastapi import Request

from leader_service.infrastructure.database import DatabaseSessionManager
from leader_service.services.leader_store import LeaderStore


def get_leader_store(request: Request) -> LeaderStore:
    return request.app.state.leader_store


def get_db_manager(request: Request) -> DatabaseSessionManager | None:
    return getattr(request.app.state, "db", None)
