"""SQLAlchemy model for the entries table.

One row per dated submission against a collector.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from dailyforms.infrastructure.persistence.database import Base
from dailyforms.infrastructure.persistence.models._columns import utcnow


class EntryModel(Base):
    """SQLAlchemy model for the entries table.

    Attributes:
        id: Primary key (UUID string).
        collector_id: Collector the entry was submitted against.
        entry_date: Calendar date as YYYY-MM-DD text.
        created_at: Timestamp when the entry was created.
        updated_at: Timestamp when the entry was last updated.
        deleted_at: Soft-deletion timestamp.
    """

    __tablename__ = "entries"
    __table_args__ = (Index("ix_entries_collector_date", "collector_id", "entry_date"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, comment="Entry ID (UUID)")
    collector_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("collectors.id"),
        nullable=False,
    )
    entry_date: Mapped[str] = mapped_column(String(10), nullable=False, comment="YYYY-MM-DD")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<Entry(id={self.id}, collector_id={self.collector_id}, date={self.entry_date})>"
