"""
Activity controller for handling HTTP requests and responses.
Acts as the bridge between routes and business logic.
"""

from typing import List
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from ..services.activity_service import ActivityService
from ..models.activity import Activity
from ..schemas.activity import ActivityCreate, ActivityUpdate
from ..core.exceptions import ActivityValidationError, ActivityNotFoundError


class ActivityController:
    """
    Controller for Activity operations.

    Translates service errors into HTTP errors: validation failures become
    400 and unknown IDs become 404. Anything else propagates.
    """

    def __init__(self, db: Session):
        """
        Initialize the activity controller.

        Args:
            db: Database session
        """
        self.db = db
        self.service = ActivityService(db)

    async def get_activities(self) -> List[Activity]:
        return self.service.get_all()

    async def get_activity(self, activity_id: int) -> Activity:
        """
        Get a specific activity by ID.

        Raises:
            HTTPException: If activity not found
        """
        try:
            return self.service.get(activity_id)
        except ActivityNotFoundError as e:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=str(e)
            )

    async def create_activity(self, activity_data: ActivityCreate) -> Activity:
        """
        Create a new activity.

        Args:
            activity_data: Activity creation data

        Returns:
            The created activity

        Raises:
            HTTPException: If validation fails
        """
        try:
            return self.service.create(activity_data)
        except ActivityValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )

    async def update_activity(
        self,
        activity_id: int,
        activity_data: ActivityUpdate
    ) -> Activity:
        """
        Update an existing activity.

        Args:
            activity_id: ID of the activity to update
            activity_data: Activity update data

        Returns:
            The updated activity

        Raises:
            HTTPException: If activity not found or validation fails
        """
        try:
            return self.service.update(activity_id, activity_data)
        except ActivityNotFoundError as e:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=str(e)
            )
        except ActivityValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )

    async def delete_activity(self, activity_id: int) -> None:
        self.service.delete(activity_id)
