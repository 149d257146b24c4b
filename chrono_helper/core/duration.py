# chrono_helper/core/duration.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DurationUnit(str, Enum):
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"

    @property
    def nanos(self) -> Optional[int]:
        """Fixed length in nanoseconds; months have none."""
        return _UNIT_NANOS.get(self)


_UNIT_NANOS = {
    DurationUnit.WEEKS: 7 * 86_400 * 10**9,
    DurationUnit.DAYS: 86_400 * 10**9,
    DurationUnit.HOURS: 3_600 * 10**9,
    DurationUnit.MINUTES: 60 * 10**9,
    DurationUnit.SECONDS: 10**9,
    DurationUnit.MILLISECONDS: 10**6,
    DurationUnit.MICROSECONDS: 10**3,
    DurationUnit.NANOSECONDS: 1,
}


@dataclass(frozen=True, slots=True)
class Duration:
    amount: int
    unit: DurationUnit

    @property
    def calendar_relative(self) -> bool:
        return self.unit is DurationUnit.MONTHS

    @property
    def nanos(self) -> Optional[int]:
        per_unit = self.unit.nanos
        if per_unit is None:
            return None
        return self.amount * per_unit
