"""
Activity repository for data access operations.
"""

from typing import List
from sqlalchemy.orm import Session

from .base_repository import BaseRepository
from ..models.activity import Activity


class ActivityRepository(BaseRepository[Activity]):
    """Repository for the Activity entity."""

    def __init__(self, db: Session):
        super().__init__(Activity, db)

    def get_all(self) -> List[Activity]:
        """
        Retrieve every stored activity.

        Returns:
            Activities in ascending id order
        """
        return self.get_multi(order_by=Activity.id.asc())

