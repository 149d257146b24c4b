#!filepath: chrono_helper/engines/modifier_engine.py
from __future__ import annotations

import calendar
from datetime import timedelta
from typing import List, Optional

from chrono_helper.adapters.zone_resolver import ZoneInfoResolver, ZoneResolver
from chrono_helper.core.choices import Modifier, SetField, SetTimezone, Shift
from chrono_helper.core.duration import Duration, DurationUnit
from chrono_helper.core.instant import NANOS_PER_SECOND, Instant
from chrono_helper.engines.base import BaseEngine
from chrono_helper.utils.datetime_utils import DateTimeUtils
from chrono_helper.utils.errors import FieldOutOfRange, InvalidTimezone, OutOfRange
from chrono_helper.utils.params import IntWidth, ParameterSet, parse_integer

# (param, field, width, label) —— 顺序即执行顺序
FIELD_SETTERS = (
    ("with_ordinal", "ordinal", IntWidth.U32, "ordinal"),
    ("with_ordinal0", "ordinal0", IntWidth.U32, "ordinal"),
    ("with_year", "year", IntWidth.I32, "year"),
    ("with_month", "month", IntWidth.U32, "month"),
    ("with_month0", "month0", IntWidth.U32, "month"),
    ("with_day", "day", IntWidth.U32, "day"),
    ("with_day0", "day0", IntWidth.U32, "day"),
    ("with_hour", "hour", IntWidth.U32, "hour"),
    ("with_minute", "minute", IntWidth.U32, "minute"),
    ("with_second", "second", IntWidth.U32, "second"),
    ("with_nanosecond", "nanosecond", IntWidth.U32, "nano-second"),
)

# (unit, width, label)；add_* 全部执行完之后再执行 sub_*
SHIFT_UNITS = (
    (DurationUnit.MONTHS, IntWidth.U32, "months"),
    (DurationUnit.WEEKS, IntWidth.I64, "weeks"),
    (DurationUnit.DAYS, IntWidth.U64, "days"),
    (DurationUnit.HOURS, IntWidth.I64, "hours"),
    (DurationUnit.MINUTES, IntWidth.I64, "minutes"),
    (DurationUnit.SECONDS, IntWidth.I64, "seconds"),
    (DurationUnit.MILLISECONDS, IntWidth.I64, "milli-seconds"),
    (DurationUnit.MICROSECONDS, IntWidth.I64, "micro-seconds"),
    (DurationUnit.NANOSECONDS, IntWidth.I64, "nano-seconds"),
)

_TIMEZONE_HINT = "Supported values are IANA timezones, local or valid fixed offset"


class ModifierEngine(BaseEngine[List[Modifier]]):
    """
    ModifierEngine（字段设置 + 时长运算）

    固定顺序：
      1. with_timezone
      2. with_ordinal .. with_nanosecond
      3. add_months .. add_nanoseconds
      4. sub_months .. sub_nanoseconds

    左到右作用在同一个 Instant 上，首个失败即中止（无回滚）。
    """

    def __init__(self, zone_resolver: Optional[ZoneResolver] = None):
        self.zone_resolver = zone_resolver if zone_resolver is not None else ZoneInfoResolver()

    # ==================================================
    # resolve
    # ==================================================
    def resolve(self, params: ParameterSet) -> List[Modifier]:
        modifiers: List[Modifier] = []

        if params.has("with_timezone"):
            modifiers.append(self._resolve_timezone(params.text("with_timezone")))

        for name, field, width, label in FIELD_SETTERS:
            if params.has(name):
                value = parse_integer(name, params.text(name), width, label=label)
                modifiers.append(SetField(param=name, field=field, value=value, label=label))

        for prefix, sign in (("add", 1), ("sub", -1)):
            for unit, width, label in SHIFT_UNITS:
                name = f"{prefix}_{unit.value}"
                if params.has(name):
                    amount = parse_integer(name, params.text(name), width, label=label)
                    modifiers.append(
                        Shift(param=name, duration=Duration(sign * amount, unit), label=label)
                    )

        return modifiers

    def _resolve_timezone(self, text: str) -> SetTimezone:
        if text.lower() == "local":
            return SetTimezone(param="with_timezone", kind="local")

        if text.startswith(("+", "-")):
            try:
                offset = DateTimeUtils.parse_fixed_offset(text)
            except ValueError as e:
                raise InvalidTimezone(
                    f"Failed to parse timezone offset. {_TIMEZONE_HINT}: {text!r}",
                    param="with_timezone",
                ) from e
            return SetTimezone(param="with_timezone", kind="fixed", offset_seconds=offset)

        zone = self.zone_resolver.resolve(text)
        return SetTimezone(param="with_timezone", kind="zone", zone=zone)

    # ==================================================
    # execute
    # ==================================================
    def execute(self, instant: Instant, modifiers: List[Modifier]) -> Instant:
        for modifier in modifiers:
            instant = self.apply(instant, modifier)
        return instant

    def apply(self, instant: Instant, modifier: Modifier) -> Instant:
        if isinstance(modifier, SetTimezone):
            return self._apply_timezone(instant, modifier)
        if isinstance(modifier, SetField):
            return self._apply_field(instant, modifier)
        if isinstance(modifier, Shift):
            return self._apply_shift(instant, modifier)
        raise TypeError(f"unknown modifier: {modifier!r}")

    # --------------------------------------------------
    def _apply_timezone(self, instant: Instant, modifier: SetTimezone) -> Instant:
        try:
            if modifier.kind == "local":
                offset = DateTimeUtils.local_offset_seconds()
            elif modifier.kind == "fixed":
                offset = modifier.offset_seconds
            else:
                offset = DateTimeUtils.offset_in_zone(instant, modifier.zone)
            return instant.with_offset(offset)
        except OverflowError as e:
            raise OutOfRange(
                "Timezone offset moves the datetime out of the representable range",
                param=modifier.param,
            ) from e

    def _apply_field(self, instant: Instant, modifier: SetField) -> Instant:
        field, value = modifier.field, modifier.value
        wall = instant.wall

        try:
            if field in ("ordinal", "ordinal0"):
                day_of_year = value if field == "ordinal" else value + 1
                days_in_year = 366 if calendar.isleap(wall.year) else 365
                if not 1 <= day_of_year <= days_in_year:
                    raise ValueError(f"day of year must be in 1..{days_in_year}")
                start = wall.replace(month=1, day=1)
                return instant.with_wall(start + timedelta(days=day_of_year - 1))

            if field == "nanosecond":
                if not 0 <= value < NANOS_PER_SECOND:
                    raise ValueError("nanosecond must be in 0..999999999")
                return instant.with_wall(wall, nanosecond=value)

            if field == "month0":
                return instant.with_wall(wall.replace(month=value + 1))
            if field == "day0":
                return instant.with_wall(wall.replace(day=value + 1))

            return instant.with_wall(wall.replace(**{field: value}))
        except (ValueError, OverflowError) as e:
            if field in ("ordinal", "ordinal0"):
                message = "Ordinal parameter out of range"
            else:
                message = f"{modifier.label.capitalize()} parameter out of range or produces invalid date"
            raise FieldOutOfRange(message, param=modifier.param) from e

    def _apply_shift(self, instant: Instant, modifier: Shift) -> Instant:
        duration = modifier.duration
        try:
            if duration.calendar_relative:
                return DateTimeUtils.add_months(instant, duration.amount)
            return instant.shift(duration.nanos)
        except OverflowError as e:
            raise OutOfRange(
                f"{modifier.label.capitalize()} parameter out of range or produces invalid date",
                param=modifier.param,
            ) from e
