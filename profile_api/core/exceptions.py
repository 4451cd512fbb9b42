"""
Application errors and their HTTP status codes
"""
from fastapi import status


class APIError(Exception):
    """Base class for errors rendered as {"message": ...}"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Server error"):
        super().__init__(message)
        self.message = message


class ValidationError(APIError):
    """Missing or invalid field, file or header"""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(APIError):
    """No matching user"""
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(APIError):
    """Unique constraint violated, e.g. duplicate email"""
    status_code = status.HTTP_400_BAD_REQUEST
