"""
Auth Dependencies - bearer token authentication for protected routes
"""
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import logging

from accounts.common.database import get_session
from accounts.common.exceptions import Unauthorized
from accounts.domains.user.models import User
from .service import token_service

logger = logging.getLogger(__name__)

UNAUTHENTICATED_MESSAGE = "Unauthenticated."

# Missing or non-bearer headers yield None instead of FastAPI's own 403
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    session: AsyncSession = Depends(get_session),
) -> User:
    """
    Resolve the bearer token to its user.

    Raises:
        Unauthorized: no token, or the token is unknown or expired
    """
    if credentials is None:
        raise Unauthorized(UNAUTHENTICATED_MESSAGE)

    user = await token_service.authenticate(session, credentials.credentials)
    if user is None:
        logger.warning("Bearer token rejected")
        raise Unauthorized(UNAUTHENTICATED_MESSAGE)

    return user
