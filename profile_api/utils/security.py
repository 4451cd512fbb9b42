"""
Security utilities for authentication
- Password hashing with bcrypt
- JWT token creation and validation
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from profile_api.config import settings

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS
)


def _truncate(password: str) -> str:
    # Bcrypt has a 72-byte limit
    if len(password.encode('utf-8')) > 72:
        password = password.encode('utf-8')[:72].decode('utf-8', errors='ignore')
    return password


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a login password against the stored bcrypt hash

    Comparison is done by bcrypt itself, in constant time.

    Args:
        plain_password: Password submitted to /login
        hashed_password: User.password_hash

    Returns:
        bool: Whether the password matches
    """
    return pwd_context.verify(_truncate(plain_password), hashed_password)


def get_password_hash(password: str) -> str:
    """
    Salted bcrypt hash for User.password_hash, cost BCRYPT_ROUNDS

    Args:
        password: Password submitted to /register

    Returns:
        str: Hash in modular crypt format ($2b$...)
    """
    return pwd_context.hash(_truncate(password))


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign session claims with SECRET_KEY

    Args:
        data: Claims such as uuid, username and role
        expires_delta: Lifetime, ACCESS_TOKEN_EXPIRE_MINUTES if omitted

    Returns:
        str: Signed token with an 'exp' claim added
    """
    claims = data.copy()
    lifetime = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims["exp"] = datetime.now(timezone.utc) + lifetime

    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def issue_token(user) -> str:
    """Session token carrying the user's uuid, username and role"""
    return create_access_token({
        "uuid": user.uuid,
        "username": user.username,
        "role": user.role
    })


def verify_token(token: str) -> Optional[dict]:
    """
    Claims of a session token issued by this service

    Args:
        token: Token returned by /login

    Returns:
        dict: Claims, or None if the signature is foreign or the token expired
    """
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
