#!filepath: tests/base_test/test_datetime_utils.py

from zoneinfo import ZoneInfo

import pytest

from chrono_helper import datetime_utils as dt
from chrono_helper.core import Instant


def test_from_epoch_units():
    assert dt.from_epoch(618658211, "seconds").epoch_nanos == 618658211 * 10**9
    assert dt.from_epoch(618658211123, "millis").nanosecond == 123_000_000
    assert dt.from_epoch(618658211123456, "micros").nanosecond == 123_456_000
    assert dt.from_epoch(618658211123456789, "nanos").nanosecond == 123_456_789


def test_from_epoch_out_of_range():
    with pytest.raises(OverflowError):
        dt.from_epoch(10**14, "seconds")


def test_timestamp_floors():
    inst = Instant.create(-1)
    assert dt.timestamp(inst, "seconds") == -1
    assert dt.timestamp(inst, "millis") == -1
    assert dt.timestamp(inst, "nanos") == -1


@pytest.mark.parametrize(
    "text, epoch_nanos, offset",
    [
        ("1989-08-09T09:30:11+02:00", 618651011 * 10**9, 7200),
        ("1989-08-09t09:30:11z", 618658211 * 10**9, 0),
        ("1989-08-09 09:30:11Z", 618658211 * 10**9, 0),
        ("1989-08-09T09:30:11.5Z", 618658211 * 10**9 + 500_000_000, 0),
        ("1989-08-09T09:30:11.1234567891Z", 618658211 * 10**9 + 123_456_789, 0),
        ("1989-08-09T03:30:11-06:00", 618658211 * 10**9, -21600),
    ],
)
def test_parse_rfc3339(text, epoch_nanos, offset):
    inst = dt.parse_rfc3339(text)
    assert inst.epoch_nanos == epoch_nanos
    assert inst.offset_seconds == offset


@pytest.mark.parametrize(
    "text",
    [
        "1985_06_16T12_00_00Z",
        "1985-06-16 12:00:00",
        "1985-13-16T12:00:00Z",
        "1985-02-30T12:00:00Z",
        "1985-06-16T12:00:60Z",
        "1985-06-16T12:00:00+25:00",
        "1985-06-16T12:00:00.Z",
        "\u0661\u0669\u0668\u0669-08-09T09:30:11Z",
    ],
)
def test_parse_rfc3339_rejects(text):
    with pytest.raises(ValueError):
        dt.parse_rfc3339(text)


@pytest.mark.parametrize(
    "epoch_nanos, offset, expected",
    [
        (618658211 * 10**9, 0, "1989-08-09T09:30:11+00:00"),
        (618658211 * 10**9 + 123_000_000, 0, "1989-08-09T09:30:11.123+00:00"),
        (618658211 * 10**9 + 123_456_000, 0, "1989-08-09T09:30:11.123456+00:00"),
        (618658211 * 10**9 + 123_456_789, 0, "1989-08-09T09:30:11.123456789+00:00"),
        (618658211 * 10**9, -21600, "1989-08-09T03:30:11-06:00"),
        (618658211 * 10**9, 19800, "1989-08-09T15:00:11+05:30"),
    ],
)
def test_format_rfc3339(epoch_nanos, offset, expected):
    assert dt.format_rfc3339(Instant.create(epoch_nanos, offset)) == expected


def test_rfc3339_roundtrip_is_nanosecond_exact():
    text = "2001-02-03T04:05:06.000000007+00:00"
    assert dt.format_rfc3339(dt.parse_rfc3339(text)) == text


def test_rfc2822():
    inst = dt.parse_rfc2822("Wed, 09 Aug 1989 09:30:11 +0200")
    assert inst.epoch_seconds == 618651011
    assert dt.format_rfc2822(inst.with_offset(0)) == "Wed, 9 Aug 1989 07:30:11 +0000"

    with pytest.raises(ValueError):
        dt.parse_rfc2822("Wed, 09 AAA 1989 09:30:11 +0200")


@pytest.mark.parametrize(
    "text, epoch_seconds",
    [
        ("Wed, 9 Aug 1989 09:30:11 +0000", 618658211),
        ("wed, 09 Aug 1989 09:30:11 +0000", 618658211),
        ("09 Aug 1989 09:30:11 +0000", 618658211),
    ],
)
def test_parse_rfc2822_weekday_optional_and_checked(text, epoch_seconds):
    assert dt.parse_rfc2822(text).epoch_seconds == epoch_seconds


@pytest.mark.parametrize(
    "text",
    [
        "Thu, 09 Aug 1989 09:30:11 +0000",
        "Xyz, 09 Aug 1989 09:30:11 +0000",
    ],
)
def test_parse_rfc2822_rejects_wrong_weekday(text):
    with pytest.raises(ValueError):
        dt.parse_rfc2822(text)


def test_format_rfc2822_unpadded_day():
    inst = dt.parse_rfc3339("2024-03-01T00:05:00-06:00")
    assert dt.format_rfc2822(inst) == "Fri, 1 Mar 2024 00:05:00 -0600"


def test_parse_with_format():
    inst = dt.parse_with_format("1989-08-09 09:30:11", "%Y-%m-%d %H:%M:%S")
    assert inst.epoch_seconds == 618658211
    assert inst.offset_seconds == 0

    aware = dt.parse_with_format("1989-08-09 11:30:11 +0200", "%Y-%m-%d %H:%M:%S %z")
    assert aware.epoch_seconds == 618658211
    assert aware.offset_seconds == 0

    with pytest.raises(ValueError):
        dt.parse_with_format("1985-06-16T12:00:00", "%Y-%m-%d %H:%M:%S")


@pytest.mark.parametrize(
    "text, expected",
    [("+02:00", 7200), ("-0600", -21600), ("+05:30", 19800), ("-23:59", -86340)],
)
def test_parse_fixed_offset(text, expected):
    assert dt.parse_fixed_offset(text) == expected


@pytest.mark.parametrize("text", ["-2500", "+24:00", "+02:60", "+2", "02:00", "+02:00:00", "+\u0660\u0662:00"])
def test_parse_fixed_offset_rejects(text):
    with pytest.raises(ValueError):
        dt.parse_fixed_offset(text)


def test_offset_in_zone_follows_dst():
    edmonton = ZoneInfo("America/Edmonton")
    summer = dt.parse_rfc3339("1989-08-09T09:30:11Z")
    winter = dt.parse_rfc3339("1989-01-09T09:30:11Z")

    assert dt.offset_in_zone(summer, edmonton) == -6 * 3600
    assert dt.offset_in_zone(winter, edmonton) == -7 * 3600


def test_add_months_clamps_to_month_end():
    jan31 = dt.parse_rfc3339("2021-01-31T10:00:00Z")
    assert dt.format_rfc3339(dt.add_months(jan31, 1)) == "2021-02-28T10:00:00+00:00"

    leap = dt.parse_rfc3339("2024-01-31T10:00:00Z")
    assert dt.format_rfc3339(dt.add_months(leap, 1)) == "2024-02-29T10:00:00+00:00"

    mar31 = dt.parse_rfc3339("2021-03-31T10:00:00.5Z")
    assert dt.format_rfc3339(dt.add_months(mar31, -1)) == "2021-02-28T10:00:00.500+00:00"


def test_add_months_overflow():
    with pytest.raises(OverflowError):
        dt.add_months(dt.parse_rfc3339("9999-06-01T00:00:00Z"), 12)


def test_years_since():
    subject = dt.parse_rfc3339("1989-08-09T09:30:11Z")

    assert dt.years_since(subject, dt.parse_rfc3339("1985-06-16T12:00:00Z")) == 4
    assert dt.years_since(subject, dt.parse_rfc3339("1985-08-09T09:30:12Z")) == 3
    assert dt.years_since(subject, dt.parse_rfc3339("1989-08-09T09:30:11Z")) == 0
    assert dt.years_since(subject, dt.parse_rfc3339("1989-08-10T00:00:00Z")) is None
    # subject ç¨èªèº«å±ç¤º offset çæ¥åå­æ®µï¼1989-08-08T23:30:11-10:00
    assert dt.years_since(subject.with_offset(-36000), dt.parse_rfc3339("1985-08-09T09:30:11Z")) == 3
    # base ä¸å¾å UTC å­æ®µ
    assert dt.years_since(subject, dt.parse_rfc3339("1985-08-09T19:30:11+10:00")) == 4


def test_years_since_uses_subject_offset_near_anniversary():
    subject = dt.parse_rfc3339("2020-06-16T01:00:00Z").with_offset(-5 * 3600)
    base = dt.parse_rfc3339("2000-06-16T00:00:00Z")

    assert dt.years_since(subject, base) == 19
    assert dt.years_since(subject.with_offset(0), base) == 20




def test_parse_rfc3339_very_long_fraction_truncates():
    inst = dt.parse_rfc3339("1989-08-09T09:30:11." + "1" * 5000 + "Z")
    assert inst.epoch_seconds == 618658211
    assert inst.nanosecond == 111111111
