"""Leader ORM — persists the leader resource.

Invariants:
    - id is UUID primary key generated on insert, never updated
    - first_name / last_name are non-nullable text
    - submitted set at insert (UTC), never updated
    - (first_name, last_name) unique: the constraint behind 409 responses
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from leader_service.db.base import Base


class Leader(Base):
    """Leader record."""
    __tablename__ = "leaders"
    __table_args__ = (
        UniqueConstraint("first_name", "last_name", name="uq_leaders_full_name"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    first_name: Mapped[str] = mapped_column(String(200), nullable=False)
    last_name: Mapped[str] = mapped_column(String(200), nullable=False)
    submitted: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
