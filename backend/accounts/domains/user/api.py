"""User API endpoints."""

import logging
from typing import Awaitable, Callable

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.common.database import get_session
from accounts.common.exceptions import ServiceError
from accounts.common.responses import (
    internal_error_response,
    service_error_response,
    success_response,
)
from accounts.domains.auth.deps import get_current_user
from accounts.domains.user.models import User
from accounts.domains.user.schemas import (
    UserAuthenticate,
    UserCreate,
    UserResponse,
    UserUpdate,
)
from accounts.domains.user.service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


def user_payload(user: User) -> dict:
    return UserResponse.model_validate(user).to_payload()


async def _respond(
    session: AsyncSession,
    operation: str,
    action: Callable[[], Awaitable[JSONResponse]],
) -> JSONResponse:
    """Run action, converting every failure into the JSON envelope."""
    try:
        return await action()
    except ServiceError as e:
        await session.rollback()
        return service_error_response(e)
    except Exception as e:
        await session.rollback()
        logger.error(f"{operation} failed: {e}", exc_info=True)
        return internal_error_response(e)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    session: AsyncSession = Depends(get_session)
):
    """Create a new user. address is optional."""
    async def action():
        user = await user_service.create_user(session, data)
        await session.commit()
        return success_response(user_payload(user), status_code=status.HTTP_201_CREATED)

    return await _respond(session, "Create user", action)


@router.get("")
async def list_users(session: AsyncSession = Depends(get_session)):
    """List all users with their address when one is stored."""
    async def action():
        users = await user_service.list_users(session)
        return success_response([user_payload(user) for user in users])

    return await _respond(session, "List users", action)


@router.post("/auth")
async def authenticate(
    data: UserAuthenticate,
    session: AsyncSession = Depends(get_session)
):
    """Issue a bearer token named token_name for the given credentials."""
    async def action():
        token = await user_service.authenticate_user(session, data)
        await session.commit()
        return success_response(token)

    return await _respond(session, "Authenticate", action)


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    data: UserUpdate,
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session)
):
    """Replace a user's fields. Omitting address removes the stored one."""
    async def action():
        user = await user_service.update_user(session, user_id, data)
        await session.commit()
        return success_response(user_payload(user))

    return await _respond(session, "Update user", action)


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session)
):
    """Delete a user together with its details and tokens."""
    async def action():
        await user_service.delete_user(session, user_id)
        await session.commit()
        return success_response(message=f"User with id {user_id} deleted successfully")

    return await _respond(session, "Delete user", action)
