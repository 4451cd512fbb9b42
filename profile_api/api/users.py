"""
User API endpoints
Listing users and updating profile photos
"""
from fastapi import APIRouter, Depends, UploadFile, File, Header
from sqlalchemy.orm import Session
from typing import Optional

from profile_api.core import NotFoundError, ValidationError
from profile_api.database import get_db
from profile_api.schemas import UserListResponse, UserResponse, PhotoUploadResponse
from profile_api.services import UserService
from profile_api.utils import save_upload_file

router = APIRouter(tags=["Users"])


@router.get("/users", response_model=UserListResponse)
def list_users(db: Session = Depends(get_db)):
    """Get all users, without password hashes"""
    users = UserService.list_users(db)
    return UserListResponse(users=[UserResponse.model_validate(u) for u in users])


@router.put("/upload-photo", response_model=PhotoUploadResponse)
def upload_photo(
    photo: Optional[UploadFile] = File(None),
    user_email: Optional[str] = Header(None),
    db: Session = Depends(get_db)
):
    """
    Replace the profile photo of the user named by the user-email header

    Args:
        photo: Uploaded photo
        user_email: Value of the 'user-email' request header
        db: Database session

    Returns:
        PhotoUploadResponse: The updated user (without password hash)

    Raises:
        ValidationError: If the photo or the header is missing
        NotFoundError: If no user has this email
    """
    if photo is None or not photo.filename:
        raise ValidationError("No photo uploaded.")

    if not user_email:
        raise ValidationError("User email is missing.")

    if not UserService.get_by_email(db, user_email):
        raise NotFoundError("User not found.")

    photo_path, _, _ = save_upload_file(photo)
    user = UserService.set_photo(db, user_email, photo_path)

    return PhotoUploadResponse(
        message="Profile photo uploaded successfully",
        user=UserResponse.model_validate(user)
    )
