"""SQLAlchemy model for the fields table.

Fields are the typed inputs of a collector, in definition order.
"""

from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dailyforms.infrastructure.persistence.database import Base
from dailyforms.infrastructure.persistence.models._columns import utcnow


class FieldModel(Base):
    """SQLAlchemy model for the fields table.

    Attributes:
        id: Primary key (UUID string).
        collector_id: Owning collector.
        label: Display label.
        type: One of text, number, checkbox, textarea.
        required: Whether the form marks the field as required.
        settings: JSON object encoded as text.
        created_at: Timestamp when the field was created.
        updated_at: Timestamp when the field was last updated.
        deleted_at: Soft-deletion timestamp.
    """

    __tablename__ = "fields"
    __table_args__ = (
        CheckConstraint(
            "type IN ('text', 'number', 'checkbox', 'textarea')",
            name="ck_fields_type",
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, comment="Field ID (UUID)")
    collector_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("collectors.id"),
        nullable=False,
        index=True,
    )
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(16), nullable=False)
    required: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    settings: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="{}",
        comment="JSON object with field settings",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<Field(id={self.id}, label={self.label}, type={self.type})>"
