"""
User model for authentication and user management
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import validates
from uuid import uuid4

from profile_api.database import Base

ROLES = ("admin", "user", "manager")


class User(Base):
    """User model for authentication"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    uuid = Column(String(36), unique=True, nullable=False, index=True, default=lambda: str(uuid4()))
    username = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default="user")  # 'admin', 'user' or 'manager'
    photo = Column(String(500), nullable=True)  # URL-relative path of the profile photo
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @staticmethod
    def normalize_email(email: str) -> str:
        return email.strip().lower()

    @validates("email")
    def _validate_email(self, key, value):
        return self.normalize_email(value)

    @validates("username")
    def _validate_username(self, key, value):
        value = value.strip()
        if not value:
            raise ValueError("Username is required")
        return value

    @validates("role")
    def _validate_role(self, key, value):
        if value not in ROLES:
            raise ValueError(f"Invalid role: {value}")
        return value

    def __repr__(self):
        return f"<User {self.email}>"
