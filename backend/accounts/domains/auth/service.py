"""
Auth Service - personal access token issuance and lookup
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import hashlib
import hmac
import logging
import secrets

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.common.base import utcnow
from accounts.common.config import settings
from accounts.domains.auth.models import PersonalAccessToken
from accounts.domains.user.models import User

logger = logging.getLogger(__name__)


class TokenService:
    """
    Opaque bearer tokens.

    The client receives "{token_id}|{secret}"; the store keeps only
    sha256(secret). Tokens without the id prefix are looked up by digest.
    """

    SECRET_BYTES = 30  # 40 url-safe characters

    @staticmethod
    def hash_secret(secret: str) -> str:
        return hashlib.sha256(secret.encode("utf-8")).hexdigest()

    @staticmethod
    def is_expired(token: PersonalAccessToken, now: Optional[datetime] = None) -> bool:
        if token.expires_at is None:
            return False
        expires_at = token.expires_at
        # SQLite hands back naive datetimes
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at <= (now or utcnow())

    async def create_token(self, session: AsyncSession, user: User, name: str) -> str:
        """Mint a new token for user, labelled with name; returns the plaintext"""
        secret = secrets.token_urlsafe(self.SECRET_BYTES)

        expires_at = None
        if settings.token_expire_minutes:
            expires_at = utcnow() + timedelta(minutes=settings.token_expire_minutes)

        token = PersonalAccessToken(
            user_id=user.id,
            name=name,
            token=self.hash_secret(secret),
            expires_at=expires_at,
        )
        session.add(token)
        await session.flush()

        logger.info(f"Issued token '{name}' ({token.id}) for user {user.id}")
        return f"{token.id}|{secret}"

    async def find_token(self, session: AsyncSession, plain_text: str) -> Optional[PersonalAccessToken]:
        """Resolve a plaintext token to its row, or None"""
        if "|" not in plain_text:
            stmt = select(PersonalAccessToken).where(
                PersonalAccessToken.token == self.hash_secret(plain_text)
            )
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

        token_id, secret = plain_text.split("|", 1)
        if not token_id or not secret:
            return None

        token = await session.get(PersonalAccessToken, token_id)
        if token is None:
            return None
        if not hmac.compare_digest(token.token, self.hash_secret(secret)):
            return None
        return token

    async def authenticate(self, session: AsyncSession, plain_text: str) -> Optional[User]:
        """Return the token's user when the token is valid and unexpired"""
        token = await self.find_token(session, plain_text)
        if token is None:
            return None

        if self.is_expired(token):
            logger.info(f"Rejected expired token {token.id}")
            return None

        token.last_used_at = utcnow()
        await session.flush()
        return token.user


# Singleton instance
token_service = TokenService()
