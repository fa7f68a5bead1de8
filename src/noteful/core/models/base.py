# Base model for database stuff
from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Common base for all models."""

    __abstract__ = True

    # plain serial ids, the store hands them out
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
