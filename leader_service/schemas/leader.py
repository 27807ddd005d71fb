"""Leader Schemas — Pydantic models with field-level validation for the store boundary.

Invariants:
    - LeaderCreate: firstName and lastName required, stripped, 1-200 chars
    - LeaderUpdate: same constraints, both optional, at least one present
    - LeaderResponse serializes with the wire names _id / firstName / lastName / submitted
    - Unknown keys (including _id and submitted on update) are ignored

Design Decisions:
    - Wire names are aliases, Python names stay snake_case; populate_by_name lets
      callers of the store pass either form
    - str_strip_whitespace runs before min_length, so "   " counts as empty
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LeaderCreate(BaseModel):
    """Leader creation — both names required."""
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    first_name: str = Field(alias="firstName", min_length=1, max_length=200)
    last_name: str = Field(alias="lastName", min_length=1, max_length=200)


class LeaderUpdate(BaseModel):
    """Partial leader update — at least one name must be supplied."""
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    first_name: str | None = Field(
        None, alias="firstName", min_length=1, max_length=200,
    )
    last_name: str | None = Field(
        None, alias="lastName", min_length=1, max_length=200,
    )

    @model_validator(mode="after")
    def require_a_field(self):
        if self.first_name is None and self.last_name is None:
            raise ValueError("update requires firstName or lastName")
        return self

    def changes(self) -> dict[str, str]:
        """Column values to write, keyed by ORM attribute name."""
        return self.model_dump(exclude_none=True)


class LeaderResponse(BaseModel):
    """Leader as returned by the store and the API."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID = Field(alias="_id")
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    submitted: datetime
