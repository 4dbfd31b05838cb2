"""SQLAlchemy model for the collectors table.

Collectors are the user-defined data-collection forms.
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dailyforms.infrastructure.persistence.database import Base
from dailyforms.infrastructure.persistence.models._columns import utcnow


class CollectorModel(Base):
    """SQLAlchemy model for the collectors table.

    Attributes:
        id: Primary key (UUID string).
        name: Form name.
        description: Optional description.
        max_occurrences_per_day: Daily entry quota, -1 for unlimited.
        created_at: Timestamp when the collector was created.
        updated_at: Timestamp when the collector was last updated.
        deleted_at: Soft-deletion timestamp.
    """

    __tablename__ = "collectors"
    __table_args__ = (
        CheckConstraint(
            "max_occurrences_per_day = -1 OR max_occurrences_per_day >= 1",
            name="ck_collectors_max_occurrences",
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, comment="Collector ID (UUID)")
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    max_occurrences_per_day: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=-1,
        comment="Daily entry quota, -1 means unlimited",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<Collector(id={self.id}, name={self.name})>"
