# app/api/v1/errors.py
from typing import Optional
from fastapi.responses import JSONResponse


def error_response(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    """
    Build the {"error": ..., "details": ...} body used by the order and menu routes.

    Args:
        status_code: HTTP status code
        error: Short error message
        details: Optional underlying error text

    Returns:
        JSONResponse
    """
    content = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)
