# api/v1/filters.py
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Select

from services.db import Activity


def naive_utc(dt: datetime) -> datetime:
    """Columns are TIMESTAMP WITHOUT TIME ZONE holding UTC."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def in_window(
    stmt: Select,
    start_date: datetime | None,
    end_date: datetime | None,
) -> Select:
    if start_date is not None:
        stmt = stmt.where(Activity.start_time >= naive_utc(start_date))
    if end_date is not None:
        stmt = stmt.where(Activity.start_time <= naive_utc(end_date))
    return stmt
