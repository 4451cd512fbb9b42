"""
Core functionality for Profile API
"""
from profile_api.core.exceptions import APIError, ValidationError, NotFoundError, ConflictError

__all__ = ["APIError", "ValidationError", "NotFoundError", "ConflictError"]
