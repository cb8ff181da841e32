"""Service-level errors, each mapped to an HTTP status."""

from typing import Dict, List, Optional

from fastapi import status


class ServiceError(Exception):
    """Base error carrying a client-facing message and status code"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ServiceError):
    """Malformed, missing or non-unique input"""

    status_code = 422

    def __init__(self, errors: Dict[str, List[str]], message: Optional[str] = None):
        if message is None:
            first = next(iter(errors.values()), ["The given data was invalid."])
            message = first[0]
        super().__init__(message)
        self.errors = errors


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class Unauthorized(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class DeleteFailed(ServiceError):
    """The store reported a failed delete without raising"""

    status_code = status.HTTP_400_BAD_REQUEST
