"""User repository for database operations."""

from typing import List, Optional
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from accounts.domains.auth.models import PersonalAccessToken
from accounts.domains.user.models import User, UserDetails


class UserRepository:
    """Repository for user and user-details rows."""

    async def get_by_id(self, session: AsyncSession, user_id: str) -> Optional[User]:
        """Get user by ID."""
        return await session.get(User, user_id)

    async def get_by_email(self, session: AsyncSession, email: str) -> Optional[User]:
        """Get user by email."""
        stmt = select(User).where(User.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def email_exists(
        self,
        session: AsyncSession,
        email: str,
        exclude_user_id: Optional[str] = None
    ) -> bool:
        """Check if email is used, optionally ignoring one user."""
        stmt = select(User.id).where(User.email == email)
        if exclude_user_id is not None:
            stmt = stmt.where(User.id != exclude_user_id)
        result = await session.execute(stmt.limit(1))
        return result.first() is not None

    async def list_all(self, session: AsyncSession) -> List[User]:
        """All users with details eagerly loaded."""
        result = await session.execute(select(User))
        return list(result.scalars().all())

    async def create(self, session: AsyncSession, user: User) -> User:
        session.add(user)
        await session.flush()
        await session.refresh(user)
        return user

    async def update(self, session: AsyncSession, user: User) -> User:
        await session.flush()
        await session.refresh(user)
        return user

    def set_address(self, user: User, address: Optional[str]) -> None:
        """Upsert the details row, or drop it when address is None."""
        if address is None:
            # delete-orphan cascade removes the row on flush
            user.details = None
        elif user.details is None:
            user.details = UserDetails(address=address)
        else:
            user.details.address = address

    async def delete(self, session: AsyncSession, user_id: str) -> bool:
        """
        Hard delete a user and its dependent rows.

        Returns False when no user row was removed.
        """
        # SQLite only honours ON DELETE CASCADE with the foreign_keys pragma on
        await session.execute(delete(UserDetails).where(UserDetails.user_id == user_id))
        await session.execute(
            delete(PersonalAccessToken).where(PersonalAccessToken.user_id == user_id)
        )
        result = await session.execute(delete(User).where(User.id == user_id))
        return result.rowcount > 0


# Singleton instance
user_repository = UserRepository()
