"""Repository for file attachment rows."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from dailyforms.infrastructure.persistence.models import (
    EntryModel,
    EntryValueModel,
    FileModel,
)


class FileRepository:
    """Repository for file database operations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, file: FileModel) -> FileModel:
        """Create a new file row."""
        self.session.add(file)
        await self.session.flush()
        return file

    async def delete_by_collector(self, collector_id: str) -> int:
        """Hard-delete files attached to values of a collector's entries."""
        value_ids = (
            select(EntryValueModel.id)
            .join(EntryModel, EntryValueModel.entry_id == EntryModel.id)
            .where(EntryModel.collector_id == collector_id)
        )
        result = await self.session.execute(
            delete(FileModel)
            .where(FileModel.entry_value_id.in_(value_ids))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
