"""
Database models for the Noteful API.

This package contains SQLAlchemy ORM models that define the database schema.
Two tables, one row per entity:
    - Folder: named container
    - Note: note content filed under a folder by id
"""

from .base import BaseModel
from .folder import Folder
from .note import Note

__all__ = [
    "BaseModel",
    "Folder",
    "Note",
]
