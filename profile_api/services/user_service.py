"""
User Service
Credential store: creating, authenticating, listing and updating users
"""
import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, defer

from profile_api.core import ConflictError, NotFoundError, ValidationError
from profile_api.models import User
from profile_api.utils import get_password_hash, verify_password

logger = logging.getLogger(__name__)

EMAIL_IN_USE = "Email already in use."


class UserService:
    """Persistence and credential checks for users"""

    @staticmethod
    def get_by_email(db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == User.normalize_email(email)).first()

    @staticmethod
    def get_by_uuid(db: Session, user_uuid: str) -> Optional[User]:
        return db.query(User).filter(User.uuid == user_uuid).first()

    @staticmethod
    def create_user(
        db: Session,
        username: str,
        email: str,
        password: str,
        role: str = "user",
        photo: Optional[str] = None
    ) -> User:
        """
        Create a new user with a hashed password

        Callers may check for an existing email first, but two concurrent
        registrations can both pass such a check. The unique index on email
        decides, and its violation is reported as a conflict.

        Args:
            db: Database session
            username: Display name
            email: Email address, normalized on assignment
            password: Plain text password
            role: 'admin', 'user' or 'manager'
            photo: Optional URL-relative path of the profile photo

        Returns:
            User: The persisted user

        Raises:
            ConflictError: If the email is already registered
        """
        try:
            user = User(
                username=username,
                email=email,
                password_hash=get_password_hash(password),
                role=role,
                photo=photo
            )
        except ValueError as e:
            raise ValidationError(str(e))

        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.warning(f"Unique constraint hit while registering {email}")
            raise ConflictError(EMAIL_IN_USE)
        db.refresh(user)

        logger.info(f"User registered: {user.email} ({user.uuid})")
        return user

    @staticmethod
    def authenticate(db: Session, email: str, password: str) -> User:
        """
        Check an email/password pair

        Raises:
            ValidationError: If the user does not exist or the password is wrong
        """
        user = UserService.get_by_email(db, email)
        if not user:
            logger.warning(f"Login for unknown email: {email}")
            raise ValidationError("User not found")

        if not verify_password(password, user.password_hash):
            logger.warning(f"Invalid credentials for {user.email}")
            raise ValidationError("Invalid credentials")

        return user

    @staticmethod
    def list_users(db: Session) -> List[User]:
        """All users, password hashes never loaded"""
        return db.query(User).options(defer(User.password_hash, raiseload=True)).all()

    @staticmethod
    def set_photo(db: Session, email: str, photo: str) -> User:
        """
        Point a user's profile photo at a new file

        The previous file is left on disk.

        Raises:
            NotFoundError: If no user has this email
        """
        user = UserService.get_by_email(db, email)
        if not user:
            raise NotFoundError("User not found.")

        user.photo = photo
        db.commit()
        db.refresh(user)

        logger.info(f"Profile photo updated for {user.email}: {photo}")
        return user
