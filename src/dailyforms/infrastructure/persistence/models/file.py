"""SQLAlchemy model for the files table.

Reserved for attachments on entry values. Rows are only ever hard-deleted,
together with their collector.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from dailyforms.infrastructure.persistence.database import Base
from dailyforms.infrastructure.persistence.models._columns import utcnow


class FileModel(Base):
    """SQLAlchemy model for the files table."""

    __tablename__ = "files"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, comment="File ID (UUID)")
    entry_value_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("entry_values.id"),
        nullable=False,
        index=True,
    )
    storage_path: Mapped[str] = mapped_column(String(1024), nullable=False)
    original_filename: Mapped[str] = mapped_column(String(255), nullable=False)
    mime_type: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<File(id={self.id}, filename={self.original_filename})>"
