"""
Security utilities for authentication and authorization
Verifies bearer JWTs and exposes the caller identity and admin capability
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Depends, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from quizapp.core.config import settings
from quizapp.core.exceptions import AuthenticationException, AuthorizationException

# HTTP Bearer scheme
security = HTTPBearer()

INVALID_CREDENTIALS = "Could not validate credentials"


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Create JWT access token

    Args:
        data: Claims to encode; ``sub`` must hold the user id
        expires_delta: Token expiration time

    Returns:
        Encoded JWT token
    """
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )

    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """Decode JWT token, raising AuthenticationException if invalid or expired"""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise AuthenticationException(INVALID_CREDENTIALS)


class TokenData:
    """Token data model"""

    def __init__(self, user_id: str, role: str, email: Optional[str] = None):
        self.user_id = user_id
        self.role = role
        self.email = email

    @property
    def is_admin(self) -> bool:
        return self.role == settings.ADMIN_ROLE


def get_current_user_token(
    credentials: HTTPAuthorizationCredentials = Security(security),
) -> TokenData:
    """
    Get current user from JWT token

    Args:
        credentials: HTTP Bearer credentials

    Returns:
        TokenData object with user information

    Raises:
        AuthenticationException: If token is invalid
    """
    payload = decode_token(credentials.credentials)

    user_id = payload.get("sub")
    if user_id is None:
        raise AuthenticationException("Invalid authentication credentials")

    return TokenData(
        user_id=str(user_id),
        role=payload.get("role", "user"),
        email=payload.get("email"),
    )


def require_admin(current_user: TokenData = Depends(get_current_user_token)) -> TokenData:
    """Dependency to require admin role"""
    if not current_user.is_admin:
        raise AuthorizationException("Admin access required")
    return current_user
