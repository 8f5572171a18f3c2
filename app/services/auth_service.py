# app/services/auth_service.py
import logging
from typing import Optional
from fastapi import Request

from app.models.user import User, Session, UserRole
from app.core.security import (
    generate_session_id,
    hash_session_id,
    hash_password,
    verify_password,
    get_session_expiry,
    get_current_utc_time
)
from app.exceptions.auth_exceptions import (
    InvalidCredentialsError,
    InvalidSessionError,
    SessionExpiredError,
    UserNotActiveError
)

logger = logging.getLogger(__name__)


class AuthService:
    """Service for admin login and session management."""

    @staticmethod
    async def ensure_admin_user(username: Optional[str], password: Optional[str]) -> Optional[User]:
        """
        Create the bootstrap admin account if it doesn't exist yet.

        Args:
            username: Admin username from settings
            password: Admin password from settings

        Returns:
            Created user, or None if nothing was created
        """
        if not username or not password:
            return None

        if await User.exists(username=username):
            return None

        user = await User.create(
            username=username,
            password_hash=hash_password(password),
            role=UserRole.ADMIN
        )
        logger.info(f"Admin user created: {username}")
        return user

    @staticmethod
    async def login(
        username: str,
        password: str,
        request: Request
    ) -> tuple[str, Session, User]:
        """
        Verify admin credentials and create session.

        Args:
            username: Admin username
            password: Plain password
            request: FastAPI request object

        Returns:
            Tuple of (session_token, session, user)

        Raises:
            InvalidCredentialsError: If user is unknown, not an admin, inactive
                or the password doesn't match
        """
        user = await User.get_or_none(username=username, role=UserRole.ADMIN)

        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"Failed admin login for '{username}'")
            raise InvalidCredentialsError()

        if not user.is_active:
            raise InvalidCredentialsError()

        session_token, session = await AuthService.create_session(user, request)
        logger.info(f"Admin logged in: {user.username}")

        return session_token, session, user

    @staticmethod
    async def create_session(
        user: User,
        request: Request
    ) -> tuple[str, Session]:
        """
        Create a new session for user.

        Args:
            user: User to create session for
            request: FastAPI request object

        Returns:
            Tuple of (session_token, session_instance)
        """
        session_token = generate_session_id()
        session_token_hash = hash_session_id(session_token)

        user_agent = request.headers.get("user-agent")
        ip_address = request.client.host if request.client else None

        session = await Session.create(
            user=user,
            session_token_hash=session_token_hash,
            expires_at=get_session_expiry(),
            user_agent=user_agent,
            ip_address=ip_address
        )

        return session_token, session

    @staticmethod
    async def get_session_by_token(session_token: str) -> Session:
        """
        Get session by token.

        Args:
            session_token: Session token

        Returns:
            Session instance

        Raises:
            InvalidSessionError: If session doesn't exist
            SessionExpiredError: If session is expired
        """
        session_token_hash = hash_session_id(session_token)

        session = await Session.get_or_none(
            session_token_hash=session_token_hash
        ).prefetch_related("user")

        if not session:
            raise InvalidSessionError()

        if session.is_expired():
            await session.delete()
            raise SessionExpiredError()

        session.last_activity = get_current_utc_time()
        await session.save(update_fields=["last_activity"])

        return session

    @staticmethod
    async def get_current_user(session_token: Optional[str]) -> User:
        """
        Get current user from session token.

        Args:
            session_token: Session token from cookie

        Returns:
            Current user instance

        Raises:
            InvalidSessionError: If session is invalid
            UserNotActiveError: If user is not active
        """
        if not session_token:
            raise InvalidSessionError("No session token provided")

        session = await AuthService.get_session_by_token(session_token)

        if not session.user.is_active:
            raise UserNotActiveError()

        return session.user

    @staticmethod
    async def logout(session_token: str) -> None:
        """
        Logout user by deleting session.

        Args:
            session_token: Session token to invalidate
        """
        session_token_hash = hash_session_id(session_token)
        await Session.filter(session_token_hash=session_token_hash).delete()
