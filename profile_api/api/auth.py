"""
Authentication API endpoints
Registration and login
"""
from fastapi import APIRouter, Depends, UploadFile, File, Form, status
from pydantic import EmailStr
from sqlalchemy.orm import Session
from typing import Optional

from profile_api.core import ConflictError
from profile_api.database import get_db
from profile_api.schemas import Role, UserLogin, UserProfile, MessageResponse, LoginResponse
from profile_api.services import UserService
from profile_api.services.user_service import EMAIL_IN_USE
from profile_api.utils import issue_token, save_upload_file, delete_file

router = APIRouter(tags=["Authentication"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    username: str = Form(...),
    email: EmailStr = Form(...),
    password: str = Form(...),
    role: Role = Form(Role.USER),
    photo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    """
    Register a new user

    Args:
        username: Display name
        email: Email address, must not be registered yet
        password: Plain text password, stored hashed
        role: Optional role, defaults to 'user'
        photo: Optional profile photo
        db: Database session

    Returns:
        MessageResponse: Creation confirmation (no token is issued)

    Raises:
        ConflictError: If the email is already in use
    """
    if UserService.get_by_email(db, email):
        raise ConflictError(EMAIL_IN_USE)

    photo_path = None
    if photo is not None and photo.filename:
        photo_path, photo_file, _ = save_upload_file(photo)

    try:
        UserService.create_user(
            db,
            username=username,
            email=email,
            password=password,
            role=role.value,
            photo=photo_path
        )
    except Exception:
        # Lost a race with a concurrent registration, or the insert failed
        if photo_path:
            delete_file(photo_file)
        raise

    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """
    Log in with email and password

    Args:
        credentials: Email and password
        db: Database session

    Returns:
        LoginResponse: Signed token, role and public user projection

    Raises:
        ValidationError: If the user does not exist or the password is wrong
    """
    user = UserService.authenticate(db, credentials.email, credentials.password)
    token = issue_token(user)

    return LoginResponse(
        message="Login successful",
        token=token,
        role=user.role,
        user=UserProfile.model_validate(user)
    )
