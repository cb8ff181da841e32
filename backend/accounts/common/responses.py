"""JSON envelope helpers: {"success": bool, "data": ... | "message": str}"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from accounts.common.config import settings
from accounts.common.exceptions import ServiceError, Unauthorized, ValidationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def success_response(
    data: Any = None,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    content: Dict[str, Any] = {"success": True}
    if message is not None:
        content["message"] = message
    else:
        content["data"] = jsonable_encoder(data)
    return JSONResponse(status_code=status_code, content=content)


def error_response(
    message: str,
    status_code: int,
    errors: Optional[Dict[str, List[str]]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    content: Dict[str, Any] = {"success": False, "message": message}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def service_error_response(exc: ServiceError) -> JSONResponse:
    """Envelope for a known service error"""
    errors = exc.errors if isinstance(exc, ValidationError) else None
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return error_response(exc.message, exc.status_code, errors=errors, headers=headers)


def internal_error_response(exc: Exception) -> JSONResponse:
    """500 envelope; carries the raw exception text unless disabled in settings"""
    message = str(exc) if settings.expose_error_details else INTERNAL_ERROR_MESSAGE
    return error_response(message or INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
