"""
Standardized API response utilities.

Every JSON endpoint returns either ``{"success": true, "data": ...}`` or
``{"success": false, "error": {"message": ..., "code": ...}}``.
"""

from typing import Any, Dict, Optional
from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_response(
    data: Any = None,
    message: Optional[str] = None
) -> Dict[str, Any]:
    """
    Create a standardized success response.

    Args:
        data: The response data; pydantic models and datetimes are encoded
        message: Optional success message

    Returns:
        Dict with standardized success response format
    """
    response: Dict[str, Any] = {"success": True}

    if data is not None:
        response["data"] = jsonable_encoder(data)

    if message:
        response["message"] = message

    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Create a standardized error response.

    Args:
        message: Error message
        code: Optional error code
        details: Optional additional error details

    Returns:
        Dict with standardized error response format
    """
    error: Dict[str, Any] = {"message": message}

    if code:
        error["code"] = code

    if details:
        error["details"] = details

    return {
        "success": False,
        "error": error
    }


def create_response(
    data: Any = None,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK
) -> JSONResponse:
    """Wrap ``success_response`` in a JSONResponse with the given status."""
    return JSONResponse(
        content=success_response(data, message),
        status_code=status_code
    )
