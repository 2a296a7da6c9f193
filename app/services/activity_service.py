"""
Activity service for business logic.
Validates activity input and orchestrates persistence through the repository.
"""

import logging
from typing import List, Optional, Dict, Any
from sqlalchemy.orm import Session

from ..repositories.activity_repository import ActivityRepository
from ..models.activity import Activity, DESCRIPTION_MAX_LENGTH
from ..schemas.activity import ActivityBase
from ..core.exceptions import ActivityValidationError, ActivityNotFoundError

logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip()


class ActivityService:
    """
    Service class for Activity business logic.

    Every activity that reaches the repository has a name, a category, a
    date and a positive duration.
    """

    def __init__(self, db: Session):
        """
        Initialize the activity service.

        Args:
            db: Database session
        """
        self.db = db
        self.repository = ActivityRepository(db)

    def get_all(self) -> List[Activity]:
        return self.repository.get_all()

    def get(self, activity_id: int) -> Activity:
        """
        Retrieve an activity by ID.

        Raises:
            ActivityNotFoundError: If no activity has this ID
        """
        activity = self.repository.get(activity_id)

        if not activity:
            raise ActivityNotFoundError(activity_id)

        return activity

    def create(self, activity_data: ActivityBase) -> Activity:
        """
        Validate and store a new activity.

        Args:
            activity_data: Activity creation data

        Returns:
            The stored activity with its generated ID

        Raises:
            ActivityValidationError: If a field is missing or invalid
        """
        activity_dict = self._validate(activity_data)

        db_activity = self.repository.create(obj_in=activity_dict)
        logger.info(f"Created activity {db_activity.id} ({db_activity.category})")

        return db_activity

    def update(self, activity_id: int, activity_data: ActivityBase) -> Activity:
        """
        Overwrite all fields of an existing activity.

        Args:
            activity_id: ID of the activity to update
            activity_data: The new field values

        Returns:
            The updated activity

        Raises:
            ActivityNotFoundError: If no activity has this ID
            ActivityValidationError: If a field is missing or invalid
        """
        db_activity = self.get(activity_id)

        activity_dict = self._validate(activity_data)

        db_activity = self.repository.update(
            db_obj=db_activity,
            obj_in=activity_dict
        )
        logger.info(f"Updated activity {activity_id}")

        return db_activity

    def delete(self, activity_id: int) -> None:
        """Delete an activity. Deleting an unknown ID is not an error."""
        if self.repository.delete(id=activity_id):
            logger.info(f"Deleted activity {activity_id}")
        else:
            logger.debug(f"Delete of unknown activity {activity_id} ignored")

    def _validate(self, activity_data: ActivityBase) -> Dict[str, Any]:
        """
        Check the required fields and return the trimmed column values.

        Raises:
            ActivityValidationError: With a message naming the offending field
        """
        name = _clean(activity_data.name)
        category = _clean(activity_data.category)
        description = _clean(activity_data.description)
        duration = activity_data.duration_minutes

        if not name:
            self._reject("Name is required")
        if duration is None or duration <= 0:
            self._reject("Duration must be positive")
        if not category:
            self._reject("Category is required")
        if activity_data.date is None:
            self._reject("Date is required")
        if description and len(description) > DESCRIPTION_MAX_LENGTH:
            self._reject(
                f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters"
            )

        return {
            "name": name,
            "description": description or None,
            "category": category,
            "date": activity_data.date,
            "duration_minutes": duration,
        }

    @staticmethod
    def _reject(message: str) -> None:
        logger.warning(f"Rejected activity: {message}")
        raise ActivityValidationError(message)
