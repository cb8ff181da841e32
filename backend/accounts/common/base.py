"""
SQLAlchemy base classes
"""

from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import DateTime, String, func
from datetime import datetime, timezone
from typing import Optional, Tuple, Any
import uuid


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def get_table_args(*args, schema: Optional[str] = None) -> Tuple[Any, ...]:
    """
    Build __table_args__ for the configured database.

    SQLite has no schemas, PostgreSQL does.

    Args:
        *args: indexes, constraints, ...
        schema: PostgreSQL schema name (ignored on SQLite)

    Returns:
        table_args suitable for the current database
    """
    from accounts.common.config import settings

    if settings.database_type == "sqlite":
        return args if args else ()
    else:
        return (*args, {"schema": schema}) if schema else args


def get_table_ref(table_name: str, schema: Optional[str] = None) -> str:
    """
    Table reference for ForeignKey targets, schema-qualified on PostgreSQL.

    Args:
        table_name: table name
        schema: PostgreSQL schema name (ignored on SQLite)
    """
    from accounts.common.config import settings

    if settings.database_type == "sqlite":
        return table_name
    else:
        return f"{schema}.{table_name}" if schema else table_name


class Base(DeclarativeBase):
    """Base class for all models"""
    pass


class TimestampMixin:
    """created_at / updated_at maintained on insert and update"""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
        nullable=False
    )


class UUIDMixin:
    """UUID string primary key"""

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
        nullable=False
    )
