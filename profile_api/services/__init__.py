"""
Services for Profile API
"""
from profile_api.services.user_service import UserService
from profile_api.services.image_service import ImageService

__all__ = ["UserService", "ImageService"]
