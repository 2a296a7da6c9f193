"""
Domain errors raised by the service layer.
Controllers translate them into HTTP responses.
"""


class ActivityValidationError(ValueError):
    """A required field is missing or a field value is invalid."""


class ActivityNotFoundError(LookupError):
    """No activity exists with the requested id."""

    def __init__(self, activity_id: int):
        self.activity_id = activity_id
        super().__init__("Activity not found")
