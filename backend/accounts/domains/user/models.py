"""User domain models"""

from typing import Optional
from sqlalchemy import String, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from accounts.common.base import Base, UUIDMixin, TimestampMixin, get_table_args, get_table_ref
from accounts.common.config import settings


class User(Base, UUIDMixin, TimestampMixin):
    """Account identity: name, unique email, password hash."""

    __tablename__ = "users"
    __table_args__ = get_table_args(
        Index("idx_users_email", "email", unique=True),
        schema=settings.db_schema,
    )

    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    # bcrypt hash, never the plaintext
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)

    details: Mapped[Optional["UserDetails"]] = relationship(
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )

    @property
    def address(self) -> Optional[str]:
        return self.details.address if self.details is not None else None

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email}>"


class UserDetails(Base, UUIDMixin, TimestampMixin):
    """Optional one-to-one extension of a user (address)."""

    __tablename__ = "user_details"
    __table_args__ = get_table_args(schema=settings.db_schema)

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey(f"{get_table_ref('users', settings.db_schema)}.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    address: Mapped[str] = mapped_column(String(500), nullable=False)

    user: Mapped["User"] = relationship(back_populates="details")

    def __repr__(self) -> str:
        return f"<UserDetails user_id={self.user_id}>"
