"""Leader Store — persistence operations for the leader resource.

Invariants:
    - Input is validated here (Pydantic schemas), so direct callers get the same
      ValidationError the HTTP surface does
    - Malformed identifiers and missing records both raise NotFoundError
    - update_by_id checks in order: identifier, payload, existence, uniqueness
    - _id and submitted are never written after insert
    - Every returned record is re-read from the database after commit

Design Decisions:
    - One LeaderStore per process, built in the lifespan and injected into routes
    - Each operation owns its session: no request-scoped transaction spans two calls
    - Listing ordered by (submitted, id): insertion order with a stable tie-break
"""

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ValidationError as PydanticValidationError
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from leader_service.core.errors import (
    DuplicateKeyError, NotFoundError, ValidationError,
)
from leader_service.core.pagination import page_limit, page_offset
from leader_service.infrastructure.database import DatabaseSessionManager
from leader_service.models.leader import Leader
from leader_service.schemas.leader import (
    LeaderCreate, LeaderResponse, LeaderUpdate,
)

logger = logging.getLogger(__name__)


class LeaderStore:
    """CRUD over the leaders table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def create(self, fields: Any) -> LeaderResponse:
        data = _validate(LeaderCreate, fields)
        async with self._db.session() as session:
            leader = Leader(first_name=data.first_name, last_name=data.last_name)
            session.add(leader)
            await _commit(session, leader.first_name, leader.last_name)
            await session.refresh(leader)
            logger.info("Leader created", extra={"leader_id": str(leader.id)})
            return LeaderResponse.model_validate(leader)

    async def get_by_id(self, leader_id: str | UUID) -> LeaderResponse:
        key = _parse_id(leader_id)
        async with self._db.session() as session:
            leader = await _load(session, key, leader_id)
            return LeaderResponse.model_validate(leader)

    async def list(self, page: int = 1) -> list[LeaderResponse]:
        """Return one page of leaders; empty past the last page."""
        query = (
            select(Leader)
            .order_by(Leader.submitted, Leader.id)
            .offset(page_offset(page))
            .limit(page_limit())
        )
        async with self._db.session() as session:
            result = await session.execute(query)
            return [
                LeaderResponse.model_validate(leader)
                for leader in result.scalars().all()
            ]

    async def update_by_id(
        self, leader_id: str | UUID, fields: Any,
    ) -> LeaderResponse:
        key = _parse_id(leader_id)
        changes = _validate(LeaderUpdate, fields).changes()
        async with self._db.session() as session:
            leader = await _load(session, key, leader_id)
            for column, value in changes.items():
                setattr(leader, column, value)
            await _commit(session, leader.first_name, leader.last_name)
            await session.refresh(leader)
            logger.info(
                f"Leader updated: {', '.join(sorted(changes))}",
                extra={"leader_id": str(key)},
            )
            return LeaderResponse.model_validate(leader)

    async def delete_by_id(self, leader_id: str | UUID) -> None:
        key = _parse_id(leader_id)
        async with self._db.session() as session:
            leader = await _load(session, key, leader_id)
            await session.delete(leader)
            await session.commit()
            logger.info("Leader deleted", extra={"leader_id": str(key)})

    async def clear(self) -> int:
        """Delete every leader. Returns the number of rows removed."""
        async with self._db.session() as session:
            result = await session.execute(delete(Leader))
            await session.commit()
            return result.rowcount or 0


def _parse_id(leader_id: str | UUID) -> UUID:
    if isinstance(leader_id, UUID):
        return leader_id
    try:
        return UUID(str(leader_id))
    except ValueError:
        raise NotFoundError(str(leader_id))


async def _load(
    session: AsyncSession, key: UUID, leader_id: str | UUID,
) -> Leader:
    leader = await session.get(Leader, key)
    if leader is None:
        raise NotFoundError(str(leader_id))
    return leader


async def _commit(
    session: AsyncSession, first_name: str, last_name: str,
) -> None:
    """Commit, translating the full-name unique constraint into DuplicateKeyError."""
    try:
        await session.commit()
    except IntegrityError as e:
        logger.warning(f"Leader unique constraint violated: {e.orig}")
        raise DuplicateKeyError(first_name, last_name) from e


def _validate(schema: type[BaseModel], fields: Any) -> Any:
    if not isinstance(fields, Mapping):
        raise ValidationError("request body must be a JSON object")
    try:
        return schema.model_validate(fields)
    except PydanticValidationError as e:
        raise ValidationError(_describe(e)) from e


def _describe(exc: PydanticValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc']) or 'body'}: {err['msg']}"
        for err in exc.errors()
    )
