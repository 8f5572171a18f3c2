# app/api/v1/endpoints/auth.py
from typing import Optional
from fastapi import APIRouter, Cookie, Request, Response, status
from fastapi.responses import JSONResponse

from app.schemas.user import AdminLoginSchema, AdminLoginResponseSchema, UserResponseSchema
from app.services.auth_service import AuthService
from app.core.config import settings
from app.exceptions.auth_exceptions import InvalidCredentialsError

router = APIRouter(prefix="/admin", tags=["authentication"])


def set_session_cookie(response: Response, session_token: str) -> None:
    """Set session cookie in response."""
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session_token,
        max_age=settings.SESSION_MAX_AGE,
        httponly=settings.SESSION_COOKIE_HTTPONLY,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite=settings.SESSION_COOKIE_SAMESITE,
        domain=settings.SESSION_COOKIE_DOMAIN
    )


def clear_session_cookie(response: Response) -> None:
    """Clear session cookie from response."""
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        domain=settings.SESSION_COOKIE_DOMAIN
    )


@router.post("/login", response_model=AdminLoginResponseSchema, operation_id="adminLogin")
async def login(
    data: AdminLoginSchema,
    request: Request,
    response: Response
):
    """Verify admin credentials and start a session."""
    try:
        session_token, _, user = await AuthService.login(data.username, data.password, request)
    except InvalidCredentialsError as e:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": str(e)}
        )

    set_session_cookie(response, session_token)
    return AdminLoginResponseSchema(user=UserResponseSchema.from_orm_user(user))


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT, operation_id="adminLogout")
async def logout(
    response: Response,
    session_id: Optional[str] = Cookie(None, alias=settings.SESSION_COOKIE_NAME)
) -> None:
    """End the current admin session."""
    if session_id:
        await AuthService.logout(session_id)
    clear_session_cookie(response)
