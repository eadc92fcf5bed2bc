"""Shared column helpers for models"""

import enum
from datetime import datetime, timezone
from typing import Optional, Type

from sqlalchemy import Column, DateTime, Enum as SQLEnum


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes (SQLite returns them without tzinfo)"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def enum_column(enum_cls: Type[enum.Enum]) -> SQLEnum:
    """Enum type persisted by value rather than by member name"""
    return SQLEnum(
        enum_cls,
        values_callable=lambda members: [member.value for member in members],
        native_enum=False,
        validate_strings=True,
        length=50,
    )


class TimestampMixin:
    """Mixin adding created_at/updated_at columns, always UTC"""

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
