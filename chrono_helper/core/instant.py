# chrono_helper/core/instant.py
from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

NANOS_PER_SECOND = 1_000_000_000
SECONDS_PER_DAY = 86_400

EPOCH = datetime(1970, 1, 1)
_ONE_SECOND = timedelta(seconds=1)

# 日历协作方（datetime）可表示的范围：0001-01-01 .. 9999-12-31
MIN_EPOCH_SECONDS = (datetime(1, 1, 1) - EPOCH) // _ONE_SECOND
MAX_EPOCH_SECONDS = (datetime(9999, 12, 31, 23, 59, 59) - EPOCH) // _ONE_SECOND


@dataclass(frozen=True, slots=True)
class Instant:
    """
    Instant = 绝对时间点（纳秒精度）+ 展示用 UTC offset

    - epoch_nanos    : 1970-01-01T00:00:00Z 起的纳秒数
    - offset_seconds : 展示 offset，只影响 wall / 字段读写，不改变绝对时间

    Use ``Instant.create`` for range-checked construction; every transform
    returns a new Instant.
    """

    epoch_nanos: int
    offset_seconds: int = 0

    # --------------------------------------------------
    # construction
    # --------------------------------------------------
    @classmethod
    def create(cls, epoch_nanos: int, offset_seconds: int = 0) -> "Instant":
        if not -SECONDS_PER_DAY < offset_seconds < SECONDS_PER_DAY:
            raise OverflowError(f"offset of {offset_seconds}s is out of range")

        utc_seconds = epoch_nanos // NANOS_PER_SECOND
        for seconds in (utc_seconds, utc_seconds + offset_seconds):
            if not MIN_EPOCH_SECONDS <= seconds <= MAX_EPOCH_SECONDS:
                raise OverflowError("instant is out of the representable range")

        return cls(epoch_nanos, offset_seconds)

    @classmethod
    def from_datetime(cls, dt: datetime, nanosecond: Optional[int] = None) -> "Instant":
        """Naive datetimes are read as UTC."""
        offset = dt.utcoffset()
        offset_seconds = int(offset.total_seconds()) if offset is not None else 0
        wall = dt.replace(tzinfo=None, microsecond=0)

        if nanosecond is None:
            nanosecond = dt.microsecond * 1000

        seconds = (wall - EPOCH) // _ONE_SECOND - offset_seconds
        return cls.create(seconds * NANOS_PER_SECOND + nanosecond, offset_seconds)

    @classmethod
    def now(cls) -> "Instant":
        return cls.create(time.time_ns())

    # --------------------------------------------------
    # views
    # --------------------------------------------------
    @property
    def epoch_seconds(self) -> int:
        return self.epoch_nanos // NANOS_PER_SECOND

    @property
    def nanosecond(self) -> int:
        return self.epoch_nanos % NANOS_PER_SECOND

    @property
    def wall(self) -> datetime:
        """Naive local wall time in the display offset, whole seconds."""
        return EPOCH + timedelta(seconds=self.epoch_seconds + self.offset_seconds)

    @property
    def tzinfo(self) -> timezone:
        return timezone(timedelta(seconds=self.offset_seconds))

    def to_datetime(self) -> datetime:
        """Aware datetime in the display offset (sub-microsecond digits dropped)."""
        return self.wall.replace(
            microsecond=self.nanosecond // 1000,
            tzinfo=self.tzinfo,
        )

    def to_utc(self) -> datetime:
        return self.with_offset(0).to_datetime()

    # --------------------------------------------------
    # transforms
    # --------------------------------------------------
    def with_offset(self, offset_seconds: int) -> "Instant":
        return Instant.create(self.epoch_nanos, offset_seconds)

    def with_wall(self, wall: datetime, nanosecond: Optional[int] = None) -> "Instant":
        if nanosecond is None:
            nanosecond = self.nanosecond
        seconds = (wall.replace(microsecond=0) - EPOCH) // _ONE_SECOND - self.offset_seconds
        return Instant.create(seconds * NANOS_PER_SECOND + nanosecond, self.offset_seconds)

    def shift(self, nanos: int) -> "Instant":
        return Instant.create(self.epoch_nanos + nanos, self.offset_seconds)
