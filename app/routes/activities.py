"""
Activity routes - API endpoint definitions only.
Delegates all logic to the ActivityController.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from ..core.database import get_db
from ..schemas.activity import (
    ActivityCreate,
    ActivityUpdate,
    ActivityResponse
)
from ..controllers.activity_controller import ActivityController

router = APIRouter()


@router.get(
    "",
    response_model=List[ActivityResponse],
    summary="Get all activities",
    description="Retrieve every logged activity"
)
async def get_activities(db: Session = Depends(get_db)):
    controller = ActivityController(db)
    return await controller.get_activities()


@router.get(
    "/{activity_id}",
    response_model=ActivityResponse,
    summary="Get activity by ID",
    description="Retrieve a specific activity"
)
async def get_activity(
    activity_id: int,
    db: Session = Depends(get_db)
):
    """
    Retrieve a specific activity by its ID.

    - **activity_id**: ID of the activity to retrieve
    """
    controller = ActivityController(db)
    return await controller.get_activity(activity_id)


@router.post(
    "",
    response_model=ActivityResponse,
    status_code=status.HTTP_200_OK,
    summary="Create a new activity",
    description="Create a new activity; name, category, date and a positive duration are required"
)
async def create_activity(
    activity_data: ActivityCreate,
    db: Session = Depends(get_db)
):
    """
    Create a new activity.

    - **activity_data**: name, description, category, date and durationMinutes
    """
    controller = ActivityController(db)
    return await controller.create_activity(activity_data)


@router.put(
    "/{activity_id}",
    response_model=ActivityResponse,
    summary="Update an activity",
    description="Overwrite all fields of an existing activity"
)
async def update_activity(
    activity_id: int,
    activity_data: ActivityUpdate,
    db: Session = Depends(get_db)
):
    """
    Update an existing activity.

    - **activity_id**: ID of the activity to update
    - **activity_data**: Updated activity data
    """
    controller = ActivityController(db)
    return await controller.update_activity(activity_id, activity_data)


@router.delete(
    "/{activity_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an activity",
    description="Delete an activity by ID; unknown IDs are ignored"
)
async def delete_activity(
    activity_id: int,
    db: Session = Depends(get_db)
):
    controller = ActivityController(db)
    await controller.delete_activity(activity_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
