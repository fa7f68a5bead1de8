# Folder model
from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class Folder(BaseModel):
    """Named folder that notes point at."""

    __tablename__ = "folders"

    name: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, name='{self.name}')>"
