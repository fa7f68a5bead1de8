"""
Noteful API - notes and folders over REST

A small FastAPI backend storing notes filed into folders, guarded by a shared
bearer token.
"""

__version__ = "1.0.0"
