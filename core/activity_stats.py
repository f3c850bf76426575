"""
core/activity_stats.py
────────────────────────────────────────────────────────────────────────
Roll-ups for the statistics screen:

• per period (day or month) – calories, minutes, count, item list
• per activity type         – calories, minutes, count

Input rows are plain mappings so routers and scripts can feed either ORM
objects (via `activity_row`) or test fixtures.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

import pandas as pd

Logger = logging.getLogger(__name__)

_PERIOD_FORMAT = {"day": "%Y-%m-%d", "month": "%Y-%m"}

_COLUMNS = ["type", "start_time", "calories_burned", "duration"]


def period_format(group_by: str) -> str:
    # anything that is not "day" groups by month
    return _PERIOD_FORMAT["day"] if group_by == "day" else _PERIOD_FORMAT["month"]


def activity_row(activity: Any) -> dict[str, Any]:
    return {
        "type": activity.type,
        "start_time": activity.start_time,
        "calories_burned": activity.calories_burned,
        "duration": activity.duration,
    }


def summarize(
    activities: Iterable[Mapping[str, Any]],
    group_by: str = "day",
) -> dict[str, list[dict[str, Any]]]:
    df = pd.DataFrame(list(activities), columns=_COLUMNS)
    if df.empty:
        return {"stats": [], "activity_breakdown": []}

    # stored times are UTC; naive values are taken as UTC as well
    df["period"] = pd.to_datetime(df["start_time"], utc=True).dt.strftime(
        period_format(group_by)
    )

    stats: list[dict[str, Any]] = []
    for period, grp in df.groupby("period", sort=True):
        stats.append({
            "period": period,
            "total_calories": float(grp["calories_burned"].sum()),
            "total_duration": float(grp["duration"].sum()),
            "activity_count": int(len(grp)),
            "activities": [
                {
                    "type": r.type,
                    "calories": float(r.calories_burned),
                    "duration": float(r.duration),
                }
                for r in grp.itertuples(index=False)
            ],
        })

    by_type = (
        df.groupby("type", sort=True)
        .agg(
            total_calories=("calories_burned", "sum"),
            total_duration=("duration", "sum"),
            count=("type", "size"),
        )
        .reset_index()
    )
    breakdown = [
        {
            "type": row["type"],
            "total_calories": float(row["total_calories"]),
            "total_duration": float(row["total_duration"]),
            "count": int(row["count"]),
        }
        for row in by_type.to_dict(orient="records")
    ]

    Logger.debug("summarized %d activities into %d %s buckets", len(df), len(stats), group_by)
    return {"stats": stats, "activity_breakdown": breakdown}
