# app/api/v1/dependencies/auth.py
from typing import Optional
from fastapi import Cookie, Depends, HTTPException, status

from app.models.user import User
from app.services.auth_service import AuthService
from app.core.config import settings
from app.exceptions.auth_exceptions import (
    InvalidSessionError,
    SessionExpiredError,
    UserNotActiveError
)


async def get_session_token(
        session_id: Optional[str] = Cookie(None, alias=settings.SESSION_COOKIE_NAME)
) -> str:
    """
    Extract session token from cookie.

    Raises:
        HTTPException: If session token is missing
    """
    if not session_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )
    return session_id


async def get_current_user(
        session_token: str = Depends(get_session_token)
) -> User:
    """
    Get current authenticated user.

    Raises:
        HTTPException: If session is invalid or expired
    """
    try:
        return await AuthService.get_current_user(session_token)
    except (InvalidSessionError, SessionExpiredError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e)
        )
    except UserNotActiveError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e)
        )


async def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """
    Allow only users with the admin role.

    Raises:
        HTTPException: 403 if the user is not an admin
    """
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required"
        )
    return current_user
