"""SQLAlchemy model for Organization aggregate."""

from uuid import UUID

from sqlalchemy import JSON, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tenantry.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class OrganizationModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting Organization aggregates.

    Member ids are stored as a JSON list of UUID strings.
    """

    __tablename__ = "organizations"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    user_ids: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    def __repr__(self) -> str:
        return f"<OrganizationModel(id={self.id}, name={self.name})>"
