# Note model for user content
from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class Note(BaseModel):
    """Note with content, filed under a folder."""

    __tablename__ = "notes"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    modified: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    # folder reference, no FK: notes may be filed before their folder exists
    folder_id: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (Index("idx_notes_folder_id", "folder_id"),)

    def __repr__(self) -> str:
        # long names are cut at 30 chars
        truncated = self.name if len(self.name) <= 30 else (self.name[:30] + "...")
        return f"<Note(name='{truncated}', folder_id={self.folder_id})>"
