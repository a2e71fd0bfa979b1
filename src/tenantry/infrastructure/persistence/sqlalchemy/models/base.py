"""Declarative base and timestamp columns shared by the identity tables."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from tenantry.domain.shared.time import utc_now


class Base(DeclarativeBase):
    """Base class for organizations, users and sessions."""


class CreatedAtMixin:
    """Write-once creation timestamp for append-only rows."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )


class TimestampMixin(CreatedAtMixin):
    """Creation timestamp plus an ``updated_at`` bumped on every UPDATE."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )
