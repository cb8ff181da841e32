"""Personal access tokens issued at authentication."""

from datetime import datetime
from typing import Optional
from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from accounts.common.base import Base, UUIDMixin, TimestampMixin, get_table_args, get_table_ref
from accounts.common.config import settings
from accounts.domains.user.models import User


class PersonalAccessToken(Base, UUIDMixin, TimestampMixin):
    """
    Opaque bearer token bound to one user.

    Only the SHA-256 digest of the secret is stored; clients hold "{id}|{secret}".
    """

    __tablename__ = "personal_access_tokens"
    __table_args__ = get_table_args(
        Index("idx_personal_access_tokens_user", "user_id"),
        schema=settings.db_schema,
    )

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey(f"{get_table_ref('users', settings.db_schema)}.id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    token: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)

    last_used_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    expires_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    user: Mapped[User] = relationship(lazy="joined")

    def __repr__(self) -> str:
        return f"<PersonalAccessToken id={self.id} name={self.name} user_id={self.user_id}>"
