"""Country database schema.

Each row holds a whole country aggregate. Owned buildings, the construction
queue, national values and the flag are stored as JSON documents so a single
row update persists the aggregate atomically. ``version_id`` enables
SQLAlchemy optimistic concurrency: an update issued against a stale row fails
instead of silently overwriting a concurrent write.
"""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import (
    JSON,
    BigInteger,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.dialects.postgresql import UUID as PGUUID
from sqlalchemy.orm import Mapped, mapped_column

from nationforge_backend.database.base import BaseSchema
from nationforge_backend.shared import GovernmentType

DocumentType = JSON().with_variant(JSONB(), "postgresql")


class CountrySchema(BaseSchema):
    """SQLAlchemy model for player countries."""

    __tablename__ = "countries"

    id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True), primary_key=True, default=uuid4
    )
    owner_id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(
        String(64), unique=True, nullable=False, index=True
    )
    government: Mapped[GovernmentType] = mapped_column(
        Enum(
            GovernmentType,
            name="government_type",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )
    national_values: Mapped[list[str]] = mapped_column(
        "values", DocumentType, nullable=False
    )
    flag: Mapped[dict[str, Any]] = mapped_column(DocumentType, nullable=False)
    population: Mapped[int] = mapped_column(BigInteger, nullable=False)
    economy: Mapped[int] = mapped_column(BigInteger, nullable=False)
    environment: Mapped[int] = mapped_column(Integer, nullable=False)
    buildings: Mapped[list[dict[str, Any]]] = mapped_column(
        DocumentType, nullable=False
    )
    construction_queue: Mapped[list[dict[str, Any]]] = mapped_column(
        DocumentType, nullable=False
    )
    last_resource_update: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    version_id: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version_id}  # noqa: RUF012
