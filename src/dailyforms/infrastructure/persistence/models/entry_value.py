"""SQLAlchemy model for the entry_values table.

Entity-attribute-value storage: one row per field per entry.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dailyforms.infrastructure.persistence.database import Base
from dailyforms.infrastructure.persistence.models._columns import utcnow


class EntryValueModel(Base):
    """SQLAlchemy model for the entry_values table.

    Attributes:
        id: Primary key (UUID string).
        entry_id: Owning entry.
        field_id: Referenced field.
        value_text: Canonical text form of the value; encoding depends on the field type.
        created_at: Timestamp when the value was created.
        updated_at: Timestamp when the value was last updated.
        deleted_at: Soft-deletion timestamp.
    """

    __tablename__ = "entry_values"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, comment="Entry value ID (UUID)")
    entry_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("entries.id"),
        nullable=False,
        index=True,
    )
    field_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("fields.id"),
        nullable=False,
        index=True,
    )
    value_text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<EntryValue(id={self.id}, entry_id={self.entry_id}, field_id={self.field_id})>"
