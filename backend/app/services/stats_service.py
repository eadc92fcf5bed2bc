"""Aggregate counts for dashboards and per-resource overviews"""

import asyncio
import enum
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from backend.app.core.database import Base
from backend.app.core.logging import get_logger

logger = get_logger(__name__)

Filters = Iterable[ColumnElement[bool]]


def month_start(year: int, month: int) -> datetime:
    return datetime(year, month, 1, tzinfo=timezone.utc)


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_windows(months_back: int, now: datetime) -> List[Tuple[datetime, datetime]]:
    """
    Calendar month boundaries, oldest first, ending with the month of `now`

    Each window is [first instant of the month, first instant of the next
    month) in UTC.
    """
    now = now.astimezone(timezone.utc)
    windows = []
    for offset in range(months_back - 1, -1, -1):
        year, month = shift_month(now.year, now.month, -offset)
        next_year, next_month = shift_month(year, month, 1)
        windows.append((month_start(year, month), month_start(next_year, next_month)))
    return windows


def bucket_key(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    return value


class StatsService:
    """
    Read-only aggregation over any model

    Every query runs on its own session from the factory so independent
    counts can be awaited together. Statistics are best effort: a failing
    query is logged and reported as 0 (or an empty list) instead of failing
    the request.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def _scalar(self, stmt: Select) -> Any:
        async with self.session_factory() as session:
            return await session.scalar(stmt)

    async def _rows(self, stmt: Select) -> List[Any]:
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return list(result.all())

    async def count(self, model: Type[Base], filters: Optional[Filters] = None) -> int:
        """Count rows matching filters, 0 on failure"""
        stmt = select(func.count()).select_from(model).where(*(filters or ()))
        try:
            return await self._scalar(stmt) or 0
        except Exception as e:
            logger.warning(f"Count on {model.__tablename__} failed: {str(e)}")
            return 0

    async def latest(self, model: Type[Base], limit: int, *options: Any) -> List[Any]:
        """Newest rows of a model with optional loader options, [] on failure"""
        stmt = select(model).options(*options).order_by(model.created_at.desc(), model.id).limit(limit)
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return list(result.scalars().all())
        except Exception as e:
            logger.warning(f"Loading latest {model.__tablename__} failed: {str(e)}")
            return []

    async def overview_counts(
        self,
        model: Type[Base],
        predicates: Dict[str, Filters]
    ) -> Dict[str, int]:
        """
        Count rows for several named predicates concurrently

        Args:
            model: Model to count
            predicates: Mapping of result name to WHERE criteria

        Returns:
            Mapping of result name to count; a failed predicate counts as 0
        """
        names = list(predicates)
        counts = await asyncio.gather(
            *[self.count(model, predicates[name]) for name in names]
        )
        return dict(zip(names, counts))

    async def count_by_field(
        self,
        model: Type[Base],
        field: str,
        filters: Optional[Filters] = None
    ) -> List[Dict[str, Any]]:
        """
        Group rows by one column

        Returns:
            [{key, count}] sorted by count descending; NULL is its own bucket
        """
        column = getattr(model, field)
        count = func.count().label("count")
        stmt = (
            select(column, count)
            .where(*(filters or ()))
            .group_by(column)
            .order_by(count.desc())
        )
        try:
            rows = await self._rows(stmt)
        except Exception as e:
            logger.warning(f"Grouping {model.__tablename__} by {field} failed: {str(e)}")
            return []
        return [{"key": bucket_key(key), "count": total} for key, total in rows]

    async def monthly_counts(
        self,
        model: Type[Base],
        date_field: str = "created_at",
        months_back: int = 6,
        filters: Optional[Filters] = None,
        now: Optional[datetime] = None
    ) -> List[Dict[str, int]]:
        """
        Rows created per calendar month for the last `months_back` months

        Months without rows are reported with a count of 0.
        """
        column = getattr(model, date_field)
        windows = month_windows(months_back, now or datetime.now(timezone.utc))
        base = list(filters or ())

        counts = await asyncio.gather(*[
            self.count(model, base + [column >= start, column < end])
            for start, end in windows
        ])
        return [
            {"year": start.year, "month": start.month, "count": total}
            for (start, _), total in zip(windows, counts)
        ]

    async def daily_counts(
        self,
        model: Type[Base],
        date_field: str = "created_at",
        days: int = 30,
        filters: Optional[Filters] = None,
        now: Optional[datetime] = None
    ) -> List[Dict[str, Any]]:
        """Rows created per UTC day for the last `days` days, zero-filled"""
        now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
        first_day = now.date() - timedelta(days=days - 1)
        start = datetime(first_day.year, first_day.month, first_day.day, tzinfo=timezone.utc)

        column = getattr(model, date_field)
        day = func.date(column).label("day")
        stmt = (
            select(day, func.count().label("count"))
            .where(column >= start, *(filters or ()))
            .group_by(day)
        )
        try:
            rows = await self._rows(stmt)
        except Exception as e:
            logger.warning(f"Daily counts on {model.__tablename__} failed: {str(e)}")
            rows = []

        by_day = {str(key): total for key, total in rows}
        series = []
        for offset in range(days):
            current: date = first_day + timedelta(days=offset)
            series.append({"date": current.isoformat(), "count": by_day.get(current.isoformat(), 0)})
        return series
