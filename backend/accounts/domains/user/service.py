"""User service with business logic."""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.common.exceptions import DeleteFailed, NotFound, Unauthorized, ValidationError
from accounts.domains.auth.passwords import get_password_hash, verify_password
from accounts.domains.auth.service import token_service
from accounts.domains.user.models import User
from accounts.domains.user.repository import user_repository
from accounts.domains.user.schemas import UserAuthenticate, UserCreate, UserUpdate
from accounts.domains.user.validation import (
    EMAIL_TAKEN,
    FieldError,
    errors_to_dict,
    validate_create,
    validate_update,
)

logger = logging.getLogger(__name__)


class UserService:
    """Service for user management and authentication."""

    def __init__(self):
        self.repository = user_repository

    async def create_user(self, session: AsyncSession, data: UserCreate) -> User:
        """Create a new user, with a details row when an address is given."""
        errors = await validate_create(session, data)
        if errors:
            raise ValidationError(errors_to_dict(errors))

        user = User(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            hashed_password=get_password_hash(data.password),
        )
        if data.address is not None:
            self.repository.set_address(user, data.address)

        try:
            user = await self.repository.create(session, user)
        except IntegrityError as e:
            # Lost a race against a concurrent insert with the same email
            raise self._email_taken() from e

        logger.info(f"Created user {user.id}")
        return user

    async def update_user(self, session: AsyncSession, user_id: str, data: UserUpdate) -> User:
        """Replace all core fields; upsert or drop the address."""
        user = await self.repository.get_by_id(session, user_id)
        if not user:
            raise NotFound("User not found")

        errors = await validate_update(session, user_id, data)
        if errors:
            raise ValidationError(errors_to_dict(errors))

        user.first_name = data.first_name
        user.last_name = data.last_name
        user.email = data.email
        user.hashed_password = get_password_hash(data.password)
        self.repository.set_address(user, data.address)

        try:
            user = await self.repository.update(session, user)
        except IntegrityError as e:
            raise self._email_taken() from e

        logger.info(f"Updated user {user.id}")
        return user

    async def delete_user(self, session: AsyncSession, user_id: str) -> None:
        user = await self.repository.get_by_id(session, user_id)
        if user is None:
            raise NotFound(f"User with id {user_id} not found")

        if not await self.repository.delete(session, user_id):
            raise DeleteFailed(f"Couldn't delete the user with id {user_id}")

        logger.info(f"Deleted user {user_id}")

    async def list_users(self, session: AsyncSession) -> List[User]:
        return await self.repository.list_all(session)

    async def authenticate_user(self, session: AsyncSession, data: UserAuthenticate) -> str:
        """Verify credentials and mint a new bearer token."""
        user = await self.repository.get_by_email(session, data.email)
        if not user:
            raise NotFound("User not found")

        if not verify_password(data.password, user.hashed_password):
            logger.warning(f"Incorrect password for user {user.id}")
            raise Unauthorized("Incorrect password")

        return await token_service.create_token(session, user, data.token_name)

    @staticmethod
    def _email_taken() -> ValidationError:
        return ValidationError(errors_to_dict([FieldError("email", EMAIL_TAKEN)]))


# Singleton instance
user_service = UserService()
