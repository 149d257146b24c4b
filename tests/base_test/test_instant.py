from datetime import datetime, timedelta, timezone

import pytest

from chrono_helper.core import Duration, DurationUnit, Instant


def test_instant_views():
    inst = Instant.create(618658211_123456789)

    assert inst.epoch_seconds == 618658211
    assert inst.nanosecond == 123456789
    assert inst.wall == datetime(1989, 8, 9, 9, 30, 11)
    assert inst.to_datetime() == datetime(1989, 8, 9, 9, 30, 11, 123456, tzinfo=timezone.utc)


def test_instant_negative_epoch_keeps_positive_subsecond():
    inst = Instant.create(-1)
    assert inst.epoch_seconds == -1
    assert inst.nanosecond == 999_999_999
    assert inst.wall == datetime(1969, 12, 31, 23, 59, 59)


def test_with_offset_changes_wall_not_instant():
    inst = Instant.create(618658211 * 10**9)
    shifted = inst.with_offset(-6 * 3600)

    assert shifted.epoch_nanos == inst.epoch_nanos
    assert shifted.wall == datetime(1989, 8, 9, 3, 30, 11)
    assert shifted.to_utc() == inst.to_utc()


def test_with_wall_and_from_datetime_roundtrip():
    tz = timezone(timedelta(hours=2))
    dt = datetime(1989, 8, 9, 9, 30, 11, tzinfo=tz)
    inst = Instant.from_datetime(dt, nanosecond=5)

    assert inst.offset_seconds == 7200
    assert inst.epoch_seconds == 618658211 - 7200
    assert inst.nanosecond == 5
    assert inst.with_wall(inst.wall).epoch_nanos == inst.epoch_nanos


@pytest.mark.parametrize(
    "epoch_nanos, offset",
    [
        ((253402300800) * 10**9, 0),          # 10000-01-01T00:00:00Z
        (-62135596801 * 10**9, 0),            # 0000-12-31T23:59:59Z
        (-62135596800 * 10**9, -3600),        # 0001-01-01 UTC，但本地时间落在 year 0
        (0, 86400),
    ],
)
def test_create_rejects_out_of_range(epoch_nanos, offset):
    with pytest.raises(OverflowError):
        Instant.create(epoch_nanos, offset)


def test_duration_nanos():
    assert Duration(2, DurationUnit.DAYS).nanos == 2 * 86400 * 10**9
    assert Duration(-3, DurationUnit.MILLISECONDS).nanos == -3_000_000
    assert Duration(1, DurationUnit.MONTHS).nanos is None
    assert Duration(1, DurationUnit.MONTHS).calendar_relative
