"""ORM Models — SQLAlchemy declarative models.

Design Decisions:
    - All models imported here so Base.metadata is populated before
      create_all or alembic autogenerate runs
"""

from leader_service.models.leader import Leader  # noqa: F401
