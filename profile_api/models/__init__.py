"""
Database models for Profile API
"""
from profile_api.models.user import User, ROLES
from profile_api.models.image import Image

__all__ = ["User", "ROLES", "Image"]
