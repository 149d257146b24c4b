#!filepath: chrono_helper/utils/datetime_utils.py
from __future__ import annotations

import re
from datetime import datetime, timezone, tzinfo
from email.utils import parsedate_to_datetime
from typing import Dict, Optional

from dateutil.relativedelta import relativedelta

from chrono_helper.core.instant import Instant, NANOS_PER_SECOND


class DateTimeUtils:
    UTC = timezone.utc

    # 每个 epoch 单位对应的纳秒数
    EPOCH_UNITS: Dict[str, int] = {
        "seconds": NANOS_PER_SECOND,
        "millis": 1_000_000,
        "micros": 1_000,
        "nanos": 1,
    }

    I64_MIN = -(2**63)
    I64_MAX = 2**63 - 1

    _RFC3339_RE = re.compile(
        r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
        r"[Tt ]"
        r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
        r"(?:\.(?P<fraction>[0-9]+))?"
        r"(?P<offset>[Zz]|[+-][0-9]{2}:[0-9]{2})"
    )
    _OFFSET_RE = re.compile(r"(?P<sign>[+-])(?P<hours>[0-9]{2}):?(?P<minutes>[0-9]{2})")
    _RFC2822_WEEKDAY_RE = re.compile(r"\s*([A-Za-z]+)\s*,")

    WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
    MONTH_NAMES = (
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    )

    # ================================================================
    # epoch timestamp <-> Instant
    # ================================================================
    @classmethod
    def from_epoch(cls, value: int, unit: str) -> Instant:
        """
        value 个 unit（seconds / millis / micros / nanos）→ UTC Instant
        超出可表示范围时抛 OverflowError
        """
        return Instant.create(value * cls.EPOCH_UNITS[unit])

    @classmethod
    def timestamp(cls, instant: Instant, unit: str) -> int:
        """向下取整（与 sub-second 部分恒为非负一致）"""
        return instant.epoch_nanos // cls.EPOCH_UNITS[unit]

    @classmethod
    def fits_i64(cls, value: int) -> bool:
        return cls.I64_MIN <= value <= cls.I64_MAX

    # ================================================================
    # RFC 3339
    # ================================================================
    @classmethod
    def parse_rfc3339(cls, text: str) -> Instant:
        """
        YYYY-MM-DD(T|t| )HH:MM:SS[.fraction](Z|±HH:MM)

        fraction 任意长度，截断到纳秒；leap second(60) 不支持
        """
        m = cls._RFC3339_RE.fullmatch(text)
        if m is None:
            raise ValueError("input does not match YYYY-MM-DDTHH:MM:SS[.f](Z|+HH:MM)")

        offset = m.group("offset")
        offset_seconds = 0 if offset in ("Z", "z") else cls.parse_fixed_offset(offset)

        wall = datetime(
            int(m.group("year")),
            int(m.group("month")),
            int(m.group("day")),
            int(m.group("hour")),
            int(m.group("minute")),
            int(m.group("second")),
        )
        fraction = (m.group("fraction") or "")[:9].ljust(9, "0")

        try:
            return Instant.create(0, offset_seconds).with_wall(wall, int(fraction))
        except OverflowError as e:
            raise ValueError(str(e)) from e

    @classmethod
    def format_rfc3339(cls, instant: Instant) -> str:
        wall = instant.wall
        ns = instant.nanosecond
        if ns == 0:
            fraction = ""
        elif ns % 1_000_000 == 0:
            fraction = f".{ns // 1_000_000:03d}"
        elif ns % 1_000 == 0:
            fraction = f".{ns // 1_000:06d}"
        else:
            fraction = f".{ns:09d}"

        return (
            f"{wall.year:04d}-{wall.month:02d}-{wall.day:02d}"
            f"T{wall.hour:02d}:{wall.minute:02d}:{wall.second:02d}"
            f"{fraction}{cls.format_offset(instant.offset_seconds)}"
        )

    @classmethod
    def format_offset(cls, offset_seconds: int, colon: bool = True) -> str:
        sign = "+" if offset_seconds >= 0 else "-"
        hours, minutes = divmod(abs(offset_seconds) // 60, 60)
        sep = ":" if colon else ""
        return f"{sign}{hours:02d}{sep}{minutes:02d}"

    # ================================================================
    # RFC 2822（解析用 email.utils）
    # ================================================================
    @classmethod
    def parse_rfc2822(cls, text: str) -> Instant:
        try:
            dt = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError) as e:
            raise ValueError(f"input is not an RFC 2822 date-time: {e}") from e
        if dt is None:
            raise ValueError("input is not an RFC 2822 date-time")

        # email.utils 不校验星期；与日期不符视为 impossible
        m = cls._RFC2822_WEEKDAY_RE.match(text)
        if m is not None:
            name = m.group(1).title()
            if name not in cls.WEEKDAY_NAMES or cls.WEEKDAY_NAMES.index(name) != dt.weekday():
                raise ValueError(f"weekday {m.group(1)!r} does not match the date")

        try:
            return Instant.from_datetime(dt)
        except OverflowError as e:
            raise ValueError(str(e)) from e

    @classmethod
    def format_rfc2822(cls, instant: Instant) -> str:
        """Wed, 9 Aug 1989 09:30:11 +0000（日不补零）"""
        wall = instant.wall
        return (
            f"{cls.WEEKDAY_NAMES[wall.weekday()]}, {wall.day} {cls.MONTH_NAMES[wall.month - 1]} "
            f"{wall.year:04d} {wall.hour:02d}:{wall.minute:02d}:{wall.second:02d} "
            f"{cls.format_offset(instant.offset_seconds, colon=False)}"
        )

    # ================================================================
    # custom strftime / strptime patterns
    # ================================================================
    @classmethod
    def parse_with_format(cls, text: str, pattern: str) -> Instant:
        """无 offset 的输入按 UTC 解释；带 %z 的输入归一化到 UTC"""
        dt = datetime.strptime(text, pattern)
        try:
            return Instant.from_datetime(dt).with_offset(0)
        except OverflowError as e:
            raise ValueError(str(e)) from e

    @classmethod
    def format_with_pattern(cls, instant: Instant, pattern: str) -> str:
        return instant.to_datetime().strftime(pattern)

    # ================================================================
    # 偏移 / 时区
    # ================================================================
    @classmethod
    def parse_fixed_offset(cls, text: str) -> int:
        """±HH:MM / ±HHMM → 秒；小时 0..23，分钟 0..59"""
        m = cls._OFFSET_RE.fullmatch(text)
        if m is None:
            raise ValueError(f"invalid UTC offset: {text!r}")
        hours = int(m.group("hours"))
        minutes = int(m.group("minutes"))
        if hours > 23 or minutes > 59:
            raise ValueError(f"UTC offset out of range: {text!r}")
        seconds = hours * 3600 + minutes * 60
        return -seconds if m.group("sign") == "-" else seconds

    @classmethod
    def local_offset_seconds(cls) -> int:
        """进程本地时区在调用时刻的 offset"""
        return int(datetime.now().astimezone().utcoffset().total_seconds())

    @classmethod
    def offset_in_zone(cls, instant: Instant, zone: tzinfo) -> int:
        """命名时区在该 instant 时刻的 offset（受夏令时规则影响）"""
        offset = instant.to_utc().astimezone(zone).utcoffset()
        return int(offset.total_seconds()) if offset is not None else 0

    # ================================================================
    # 日历运算
    # ================================================================
    @classmethod
    def add_months(cls, instant: Instant, months: int) -> Instant:
        """
        日历月加减；月末溢出时 clamp 到目标月最后一天
        （Jan 31 + 1 month = Feb 28/29）
        """
        try:
            wall = instant.wall + relativedelta(months=months)
        except (ValueError, OverflowError) as e:
            raise OverflowError(f"adding {months} months leaves the representable range") from e
        return instant.with_wall(wall)

    @classmethod
    def years_since(cls, subject: Instant, base: Instant) -> Optional[int]:
        """
        base → subject 之间的整年数
        subject 取其展示 offset 下的日历字段，base 取 UTC 日历字段
        base 晚于 subject 时返回 None
        """
        b = base.with_offset(0)
        sw, bw = subject.wall, b.wall

        years = sw.year - bw.year
        earlier = (sw.month, sw.day, sw.hour, sw.minute, sw.second, subject.nanosecond) < (
            bw.month, bw.day, bw.hour, bw.minute, bw.second, b.nanosecond
        )
        if earlier:
            years -= 1
        return years if years >= 0 else None
