from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import date as date_type


class ActivityBase(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    date: Optional[date_type] = None
    duration_minutes: Optional[int] = Field(None, alias="durationMinutes")

    class Config:
        populate_by_name = True

    @field_validator("date", mode="before")
    @classmethod
    def date_from_iso_string(cls, value):
        # Numbers would otherwise be read as Unix timestamps
        if value is None or isinstance(value, (str, date_type)):
            return value
        raise ValueError("date must be an ISO-8601 string (YYYY-MM-DD)")

    @field_validator("duration_minutes", mode="before")
    @classmethod
    def duration_not_boolean(cls, value):
        if isinstance(value, bool):
            raise ValueError("durationMinutes must be an integer")
        return value


class ActivityCreate(ActivityBase):
    """Request body for creating an activity.

    Every field is optional at the schema level so that missing values are
    reported by the service with a field-specific message.
    """


class ActivityUpdate(ActivityBase):
    """Request body for a full update; all mutable fields are overwritten."""


class ActivityResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    category: str
    date: date_type
    duration_minutes: int = Field(..., alias="durationMinutes")

    class Config:
        from_attributes = True
        populate_by_name = True
