"""
core/calorie_calc.py
────────────────────────────────────────────────────────────────────────
MET-based calorie engine:

1. MET lookup (fixed table, speed buckets for running)
2. Calories = (MET × 3.5 × weight_kg / 200) × minutes, 2 decimals
3. Composite helper returning both numbers for persistence
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

Logger = logging.getLogger(__name__)

KMH_TO_MPH = 0.621371


class ActivityType(str, Enum):
    sitting = "sitting"
    standing = "standing"
    walking = "walking"
    running = "running"


# ──────────────────────────────────────────────────────────────────────
#  MET reference table (Compendium of Physical Activities)
# ──────────────────────────────────────────────────────────────────────
MET_VALUES: Mapping[str, float] = MappingProxyType({
    "sitting": 1.3,
    "standing": 1.8,
    "walking": 3.5,            # ~3 mph
    "running-slow": 8.0,       # ~5 mph
    "running-medium": 9.8,     # ~6 mph
    "running-fast": 11.0,      # ~7 mph
    "running-very-fast": 12.5, # ~8 mph
})

# (upper bound in mph, exclusive) → bucket; anything faster is very-fast
_RUNNING_BUCKETS: tuple[tuple[float, str], ...] = (
    (5.5, "running-slow"),
    (6.5, "running-medium"),
    (7.5, "running-fast"),
)
_RUNNING_TOP = "running-very-fast"


@dataclass(frozen=True)
class ActivityInput:
    activity_type: str
    weight_kg: float
    duration_minutes: float
    distance_km: float | None = None   # running only


@dataclass(frozen=True)
class CalorieResult:
    calories_burned: float
    met_value: float


def _round_half_up(value: float, places: int = 2) -> float:
    scale = 10 ** places
    return math.floor(value * scale + 0.5) / scale


def _type_key(activity_type: ActivityType | str) -> str:
    if isinstance(activity_type, ActivityType):
        return activity_type.value
    return str(activity_type)


# ──────────────────────────────────────────────────────────────────────
#  Calculator
# ──────────────────────────────────────────────────────────────────────
class CalorieCalculator:
    """Pure MET resolver + calorie estimator over an injected table."""

    def __init__(self, table: Mapping[str, float] = MET_VALUES) -> None:
        self._table = MappingProxyType(dict(table))

    @property
    def table(self) -> Mapping[str, float]:
        return self._table

    # --------------- MET lookup -------------------------------------
    def resolve_met(
        self,
        activity_type: ActivityType | str,
        distance_km: float | None = None,
        duration_minutes: float | None = None,
    ) -> float:
        key = _type_key(activity_type)

        is_running = key == ActivityType.running.value
        if is_running and (distance_km or 0) > 0 and (duration_minutes or 0) > 0:
            return self.met_for_speed(self.speed_mph(distance_km, duration_minutes))

        # running without pace data lands here too and gets the sitting value
        if is_running or key not in self._table:
            Logger.debug("no MET entry for %r, using sitting", key)
            return self._table[ActivityType.sitting.value]
        return self._table[key]

    @staticmethod
    def speed_mph(distance_km: float, duration_minutes: float) -> float:
        speed_kmh = (distance_km / duration_minutes) * 60
        return speed_kmh * KMH_TO_MPH

    def met_for_speed(self, speed_mph: float) -> float:
        """Running MET for an average pace; thresholds are exclusive upper bounds."""
        for upper, bucket in _RUNNING_BUCKETS:
            if speed_mph < upper:
                return self._table[bucket]
        return self._table[_RUNNING_TOP]

    # --------------- Calories ---------------------------------------
    def estimate_calories(
        self, met_value: float, weight_kg: float, duration_minutes: float
    ) -> float:
        per_minute = (met_value * 3.5 * weight_kg) / 200
        return _round_half_up(per_minute * duration_minutes)

    # --------------- public entrypoint --------------------------------
    def estimate_activity_calories(
        self,
        activity_type: ActivityType | str,
        weight_kg: float,
        duration_minutes: float,
        distance_km: float | None = None,
    ) -> CalorieResult:
        met = self.resolve_met(activity_type, distance_km, duration_minutes)
        kcal = self.estimate_calories(met, weight_kg, duration_minutes)
        return CalorieResult(calories_burned=kcal, met_value=met)

    def estimate(self, activity: ActivityInput) -> CalorieResult:
        return self.estimate_activity_calories(
            activity.activity_type,
            activity.weight_kg,
            activity.duration_minutes,
            activity.distance_km,
        )


_default = CalorieCalculator()


def resolve_met(
    activity_type: ActivityType | str,
    distance_km: float | None = None,
    duration_minutes: float | None = None,
) -> float:
    return _default.resolve_met(activity_type, distance_km, duration_minutes)


def estimate_calories(met_value: float, weight_kg: float, duration_minutes: float) -> float:
    return _default.estimate_calories(met_value, weight_kg, duration_minutes)


def estimate_activity_calories(
    activity_type: ActivityType | str,
    weight_kg: float,
    duration_minutes: float,
    distance_km: float | None = None,
) -> CalorieResult:
    return _default.estimate_activity_calories(
        activity_type, weight_kg, duration_minutes, distance_km
    )
