"""
Pydantic schemas for User model
"""
from pydantic import BaseModel, EmailStr
from datetime import datetime
from enum import Enum
from typing import List, Optional


class Role(str, Enum):
    """Roles a user can hold"""
    ADMIN = "admin"
    USER = "user"
    MANAGER = "manager"


class UserLogin(BaseModel):
    """Schema for user login"""
    email: EmailStr
    password: str


class UserProfile(BaseModel):
    """Public projection returned on login"""
    username: str
    email: str
    photo: Optional[str] = None
    uuid: str

    model_config = {
        "from_attributes": True
    }


class UserResponse(UserProfile):
    """Schema for user response (without password)"""
    id: int
    role: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MessageResponse(BaseModel):
    message: str


class LoginResponse(MessageResponse):
    """Schema for login response"""
    token: str
    role: str
    user: UserProfile


class UserListResponse(BaseModel):
    users: List[UserResponse]


class PhotoUploadResponse(MessageResponse):
    user: UserResponse
