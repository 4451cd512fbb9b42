"""
Pydantic schemas for Profile API
"""
from profile_api.schemas.user import (
    Role, UserLogin, UserProfile, UserResponse,
    MessageResponse, LoginResponse, UserListResponse, PhotoUploadResponse
)
from profile_api.schemas.image import ImageResponse, ImageUploadResponse

__all__ = [
    # User schemas
    "Role", "UserLogin", "UserProfile", "UserResponse",
    "MessageResponse", "LoginResponse", "UserListResponse", "PhotoUploadResponse",
    # Image schemas
    "ImageResponse", "ImageUploadResponse"
]
