"""
Repository layer initialization.
Repositories handle all database operations and queries.
"""

from .base_repository import BaseRepository
from .activity_repository import ActivityRepository

__all__ = [
    "BaseRepository",
    "ActivityRepository",
]
